# test_logger.py

import io
import logging

import pytest

from termattrs import Logger, Terminal
from termattrs import capability

from conftest import FakeConsole


@pytest.fixture(autouse=True)
def reset_package_logger():
    package_logger = logging.getLogger("termattrs")
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


def read_log(path):
    for h in logging.getLogger("termattrs").handlers:
        h.flush()
    return path.read_text()


class TestLogger:
    """Tests for the logging wrapper."""

    def test_disabled_uses_null_handler(self):
        logger = Logger("termattrs.test.disabled")
        inner = logging.getLogger("termattrs.test.disabled")
        assert any(isinstance(h, logging.NullHandler) for h in inner.handlers)
        logger.debug("nothing to see")

    def test_enabled_writes_file(self, tmp_path):
        path = tmp_path / "debug.log"
        logger = Logger("termattrs.test.file", logging_enabled=True, log_file=str(path))
        logger.info("interface selected")
        assert "INFO - interface selected" in read_log(path)

    def test_handler_not_duplicated(self, tmp_path):
        path = str(tmp_path / "dup.log")
        Logger("termattrs.test.dup", logging_enabled=True, log_file=path)
        Logger("termattrs.test.dup", logging_enabled=True, log_file=path)
        assert len(logging.getLogger("termattrs").handlers) == 1

    def test_new_target_replaces_handler(self, tmp_path):
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"
        Logger("termattrs.test.a", logging_enabled=True, log_file=str(first))
        logger = Logger("termattrs.test.b", logging_enabled=True, log_file=str(second))
        logger.debug("goes to second")
        assert len(logging.getLogger("termattrs").handlers) == 1
        assert "goes to second" in read_log(second)
        assert "goes to second" not in first.read_text()

    def test_dash_logs_to_stdout(self, capsys):
        logger = Logger("termattrs.test.stdout", logging_enabled=True, log_file="-")
        logger.warning("console output")
        assert "WARNING - console output" in capsys.readouterr().out

    def test_other_modules_inherit_configuration(self, tmp_path):
        path = tmp_path / "shared.log"
        Logger("termattrs.terminal", logging_enabled=True, log_file=str(path))
        Logger("termattrs.test.sibling").debug("sibling message")
        assert "DEBUG - sibling message" in read_log(path)

    def test_promotion_failure_is_logged(self, tmp_path, windows):
        path = tmp_path / "terminal.log"
        stdin, stdout = io.StringIO(), io.StringIO()
        console = FakeConsole(stdin, stdout, fail={"SetConsoleMode"})
        term = Terminal(stdin, stdout, console=console,
                        logging_enabled=True, log_file=str(path))
        assert term.interface is capability.WinInterface.WINCONSOLE
        text = read_log(path)
        assert "Virtual terminal promotion failed: SetConsoleMode failed" in text
        assert "interface=winconsole" in text
