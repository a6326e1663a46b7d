"""Configuration loading with a minimal YAML reader.

Config files are small, so only a YAML subset is understood (no external
dependencies):
- Nested mappings (key: value, indented children)
- Scalars (strings, integers, floats, booleans, null)
- Comments (# ...), whole-line or inline after a space
- Quoted strings (single and double)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CONFIG_NAME = "config"
OUTPUT_MODES = ("inject", "print")

# --- Minimal YAML reader ---


def parse_simple_yaml(text: str) -> dict:
    """Parse a mapping-only YAML document into a dict."""
    root: dict = {}
    # Stack of (indent, mapping); the root sits below any real indent
    stack: list[tuple[int, dict]] = [(-1, root)]
    pending: tuple[int, dict, str] | None = None

    for raw in text.split("\n"):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue
        indent = len(raw) - len(raw.lstrip())

        colon = _find_unquoted_colon(stripped)
        if colon <= 0:
            continue
        key = stripped[:colon].strip()
        value = _strip_comment(stripped[colon + 1 :].strip())

        if pending is not None:
            parent_indent, parent, parent_key = pending
            pending = None
            if indent > parent_indent:
                child: dict = {}
                parent[parent_key] = child
                stack.append((indent, child))

        while indent < stack[-1][0]:
            stack.pop()
        current = stack[-1][1]

        if value:
            current[key] = _parse_scalar(value)
        else:
            # Either a nested block follows or the key is null
            current[key] = None
            pending = (indent, current, key)

    return root


def _find_unquoted_colon(s: str) -> int:
    quote = ""
    for i, c in enumerate(s):
        if quote:
            if c == quote:
                quote = ""
        elif c in ("'", '"'):
            quote = c
        elif c == ":":
            return i
    return -1


def _strip_comment(s: str) -> str:
    quote = ""
    for i, c in enumerate(s):
        if quote:
            if c == quote:
                quote = ""
        elif c in ("'", '"'):
            quote = c
        elif c == "#" and (i == 0 or s[i - 1] == " "):
            return s[:i].rstrip()
    return s


def _parse_scalar(s: str) -> str | int | float | bool | None:
    low = s.lower()
    if low in ("null", "~", "none"):
        return None
    if low in ("true", "yes", "on"):
        return True
    if low in ("false", "no", "off"):
        return False
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        inner = s[1:-1]
        if s[0] == "'":
            return inner.replace("''", "'")
        return inner.replace('\\"', '"').replace("\\\\", "\\")
    try:
        if "." in s:
            return float(s)
        return int(s)
    except ValueError:
        return s


# --- Configuration dataclasses ---


@dataclass
class HistoryConfig:
    """Where history comes from and how it is cleaned up."""

    path: str | None = None  # None: $HISTFILE or ~/.bash_history
    skip_timestamps: bool = True


@dataclass
class UIConfig:
    color: bool = True


@dataclass
class Config:
    history: HistoryConfig = field(default_factory=HistoryConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    output: str = "inject"


def get_default_config() -> Config:
    """Return a Config with all default values."""
    return Config()


def _get_user_data_dir() -> Path:
    return Path.home() / ".hstr"


def _looks_like_path(name_or_path: str) -> bool:
    return "/" in name_or_path or "\\" in name_or_path or name_or_path.endswith(".yml")


def _config_search_paths(name: str) -> list[Path]:
    filename = f"{name}.yml"
    return [_get_user_data_dir() / filename, Path.cwd() / filename]


def find_config_file(name_or_path: str) -> Path | None:
    """Find a config by name or path.

    Search order for a name: ~/.hstr/<name>.yml, then ./<name>.yml.
    """
    if _looks_like_path(name_or_path):
        path = Path(name_or_path).expanduser()
        return path if path.is_file() else None
    for candidate in _config_search_paths(name_or_path):
        if candidate.is_file():
            return candidate
    return None


def load_config(name_or_path: str | None = None) -> Config:
    """Load configuration, falling back to defaults.

    Args:
        name_or_path: Config name (without .yml) or path. None looks for the
            default config and quietly uses defaults if there is none.

    Raises:
        FileNotFoundError: If an explicitly requested config does not exist.
    """
    requested = name_or_path is not None
    name_or_path = name_or_path or DEFAULT_CONFIG_NAME
    path = find_config_file(name_or_path)

    if path is None:
        if not requested:
            return get_default_config()
        if _looks_like_path(name_or_path):
            raise FileNotFoundError(f"Config file not found: {name_or_path}")
        paths_str = "\n  - ".join(str(p) for p in _config_search_paths(name_or_path))
        raise FileNotFoundError(f"Config '{name_or_path}' not found. Searched:\n  - {paths_str}")

    with open(path, encoding="utf-8") as f:
        data = parse_simple_yaml(f.read())

    config = get_default_config()
    _apply_config_data(config, data)
    return config


def _apply_config_data(config: Config, data: dict):
    if "history" in data and isinstance(data["history"], dict):
        hist = data["history"]
        if hist.get("path") is not None:
            config.history.path = str(hist["path"])
        if "skip_timestamps" in hist:
            config.history.skip_timestamps = bool(hist["skip_timestamps"])

    if "ui" in data and isinstance(data["ui"], dict):
        ui = data["ui"]
        if "color" in ui:
            config.ui.color = bool(ui["color"])

    if data.get("output") in OUTPUT_MODES:
        config.output = data["output"]
