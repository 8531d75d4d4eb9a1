"""Tests for the crash log excepthook."""
import sys

from crash_log import install_crash_handler, write_crash_log


def _raise_and_capture(exc):
    try:
        raise exc
    except BaseException:
        return sys.exc_info()


class TestCrashLog:
    def test_write_crash_log(self, tmp_path):
        path = write_crash_log(tmp_path / "error_log.txt", *_raise_and_capture(ValueError("broken sprite")))
        text = path.read_text(encoding="utf-8")
        assert "ValueError" in text
        assert "broken sprite" in text
        assert "Traceback" in text

    def test_handler_writes_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", sys.excepthook)
        seen = []
        monkeypatch.setattr(sys, "__excepthook__", lambda *info: seen.append(info[0]))
        target = tmp_path / "error_log.txt"
        handler = install_crash_handler(target)
        assert sys.excepthook is handler

        handler(*_raise_and_capture(RuntimeError("boom")))
        assert "boom" in target.read_text(encoding="utf-8")
        assert seen == [RuntimeError]

    def test_keyboard_interrupt_goes_to_default_hook(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", sys.excepthook)
        seen = []
        monkeypatch.setattr(sys, "__excepthook__", lambda *info: seen.append(info[0]))
        target = tmp_path / "error_log.txt"
        handler = install_crash_handler(target)

        handler(*_raise_and_capture(KeyboardInterrupt()))
        assert seen == [KeyboardInterrupt]
        assert not target.exists()

    def test_unwritable_log_path_still_reaches_default_hook(self, tmp_path, monkeypatch):
        """A crash log that cannot be written must not break the hook itself."""
        monkeypatch.setattr(sys, "excepthook", sys.excepthook)
        seen = []
        monkeypatch.setattr(sys, "__excepthook__", lambda *info: seen.append(info[0]))
        target = tmp_path / "missing" / "error_log.txt"
        handler = install_crash_handler(target)

        handler(*_raise_and_capture(RuntimeError("boom")))
        assert seen == [RuntimeError]
        assert not target.exists()
