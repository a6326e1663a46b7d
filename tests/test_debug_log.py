from hstr.debug_log import DebugLogger
from hstr.session import SelectionSession
from hstr.types import InputEvent


class TestDebugLogger:
    def test_disabled_by_default(self, tmp_path):
        logger = DebugLogger()
        assert not logger.enabled
        logger.log_key(65)
        logger.log_message("nothing")
        assert list(tmp_path.iterdir()) == []

    def test_start_creates_files(self, tmp_path):
        logger = DebugLogger()
        logger.start(str(tmp_path))
        assert logger.enabled
        logger.stop()
        assert not logger.enabled
        assert (tmp_path / "hstr_keys.log").exists()
        assert "Session started" in (tmp_path / "hstr_session.log").read_text()

    def test_log_key(self, tmp_path):
        logger = DebugLogger()
        logger.start(str(tmp_path))
        logger.log_key(65)
        logger.log_key("é")
        logger.log_key(-1)
        logger.stop()
        text = (tmp_path / "hstr_keys.log").read_text(encoding="utf-8")
        assert "Key number: ' 65' / Char: 'A'" in text
        assert "Char: 'é'" in text
        assert "Key number: ' -1' / Char: ''" in text

    def test_log_event(self, tmp_path):
        logger = DebugLogger()
        logger.start(str(tmp_path))
        session = SelectionSession(["git status", "ls"], 5)
        event = InputEvent.char_typed("g")
        session.handle(event)
        logger.log_event(event, session)
        event = InputEvent.down()
        session.handle(event)
        logger.log_event(event, session)
        logger.stop()
        lines = (tmp_path / "hstr_session.log").read_text(encoding="utf-8").splitlines()
        assert lines[-2].endswith("CHAR 'g' -> EDITING cursor=-1 fragment='g' matches=1")
        assert lines[-1].endswith("DOWN -> BROWSING cursor=0 fragment='g' matches=1")

    def test_log_message(self, tmp_path):
        logger = DebugLogger()
        logger.start(str(tmp_path))
        logger.log_message("Result: 'ls'")
        logger.stop()
        assert "-- Result: 'ls' --" in (tmp_path / "hstr_session.log").read_text()

    def test_stop_twice(self, tmp_path):
        logger = DebugLogger()
        logger.start(str(tmp_path))
        logger.stop()
        logger.stop()
        assert not logger.enabled
