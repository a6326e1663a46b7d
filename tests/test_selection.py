"""Tests for prefix/substring history filtering."""

from hstr.selection import make_selection, match_offset

HISTORY = [
    "git status",
    "ls -la",
    "git commit -m wip",
    "git status",
    "cat .gitignore",
    "make test",
    "ls -la",
    "vim gitconfig",
]


class TestPhaseOrdering:
    def test_prefix_matches_before_substring_matches(self):
        result = make_selection(["abcd", "xabc", "abce"], "ab", 10)
        assert result == ["abcd", "abce", "xabc"]

    def test_prefix_matches_keep_history_order(self):
        result = make_selection(HISTORY, "git", 10)
        assert result[:2] == ["git status", "git commit -m wip"]

    def test_substring_matches_keep_history_order(self):
        result = make_selection(HISTORY, "git", 10)
        assert result[2:] == ["cat .gitignore", "vim gitconfig"]

    def test_prefix_only_when_no_substring_match(self):
        assert make_selection(HISTORY, "make", 10) == ["make test"]

    def test_substring_only(self):
        assert make_selection(HISTORY, "commit", 10) == ["git commit -m wip"]

    def test_no_match(self):
        assert make_selection(HISTORY, "docker", 10) == []

    def test_case_sensitive(self):
        assert make_selection(HISTORY, "GIT", 10) == []

    def test_line_equal_to_fragment_is_prefix_match(self):
        assert make_selection(["xls", "ls"], "ls", 10) == ["ls", "xls"]


class TestDedup:
    def test_duplicates_removed_without_fragment(self):
        result = make_selection(HISTORY, None, 100)
        assert len(result) == len(set(result))
        assert result.count("git status") == 1

    def test_first_occurrence_wins(self):
        result = make_selection(["b", "a", "b", "c"], None, 10)
        assert result == ["b", "a", "c"]

    def test_duplicates_removed_across_phases(self):
        history = ["xab", "ab", "xab", "ab1"]
        result = make_selection(history, "ab", 10)
        assert result == ["ab", "ab1", "xab"]

    def test_no_duplicates_for_any_fragment(self):
        history = ["aa", "a", "aa", "ba", "a", "ab", "ba"]
        for fragment in (None, "", "a", "b", "aa", "ab"):
            result = make_selection(history, fragment, 50)
            assert len(result) == len(set(result))


class TestLimit:
    def test_zero_limit_is_empty(self):
        assert make_selection(HISTORY, None, 0) == []
        assert make_selection(HISTORY, "git", 0) == []

    def test_negative_limit_is_empty(self):
        assert make_selection(HISTORY, None, -3) == []

    def test_limit_bounds_prefix_phase(self):
        assert make_selection(HISTORY, None, 2) == ["git status", "ls -la"]

    def test_limit_stops_substring_phase(self):
        result = make_selection(HISTORY, "git", 3)
        assert result == ["git status", "git commit -m wip", "cat .gitignore"]

    def test_limit_reached_in_prefix_phase_skips_substrings(self):
        result = make_selection(["ab1", "xab", "ab2"], "ab", 2)
        assert result == ["ab1", "ab2"]

    def test_never_exceeds_limit(self):
        for limit in range(0, 10):
            for fragment in (None, "git", "s", "l"):
                assert len(make_selection(HISTORY, fragment, limit)) <= limit


class TestEmptyInputs:
    def test_empty_history(self):
        assert make_selection([], None, 10) == []
        assert make_selection([], "x", 10) == []

    def test_empty_fragment_same_as_none(self):
        assert make_selection(HISTORY, "", 10) == make_selection(HISTORY, None, 10)

    def test_no_fragment_gives_first_unique_entries(self):
        unique = []
        for line in HISTORY:
            if line not in unique:
                unique.append(line)
        for limit in (1, 3, 6, 20):
            assert make_selection(HISTORY, None, limit) == unique[: min(limit, len(unique))]

    def test_input_not_modified(self):
        history = list(HISTORY)
        make_selection(history, "git", 3)
        assert history == HISTORY


class TestMatchOffset:
    def test_prefix_offset(self):
        assert match_offset("git status", "git") == 0

    def test_substring_offset(self):
        assert match_offset("cat .gitignore", "git") == 5

    def test_missing(self):
        assert match_offset("ls", "git") == -1

    def test_no_fragment(self):
        assert match_offset("ls", None) == -1
        assert match_offset("ls", "") == -1
