# conftest.py

import io
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termattrs import capability
from termattrs.errors import PlatformCallFailed


class FakeConsole:
    """In-memory stand-in for the kernel32 console API."""

    def __init__(self, stdin, stdout, stdin_mode=0, stdout_mode=0,
                 cursor=(0, 0), cygwin=False, fail=()):
        self.stdin = stdin
        self.stdout = stdout
        self.modes = {"stdin": stdin_mode, "stdout": stdout_mode}
        self.cursor = cursor
        self.cygwin = cygwin
        self.fail = set(fail)
        self.attributes = []
        self.set_mode_calls = []

    def _maybe_fail(self, call):
        if call in self.fail:
            raise PlatformCallFailed(call, 6)

    def handle_for(self, stream):
        return "stdin" if stream is self.stdin else "stdout"

    def is_cygwin_pty(self, handle):
        self._maybe_fail("GetFileInformationByHandleEx")
        return self.cygwin

    def get_console_mode(self, handle):
        self._maybe_fail("GetConsoleMode")
        return self.modes[handle]

    def set_console_mode(self, handle, mode):
        self._maybe_fail("SetConsoleMode")
        self.set_mode_calls.append((handle, mode))
        self.modes[handle] = mode

    def set_text_attribute(self, handle, word):
        self._maybe_fail("SetConsoleTextAttribute")
        self.attributes.append(word)

    def get_cursor_position(self, handle):
        self._maybe_fail("GetConsoleScreenBufferInfo")
        return self.cursor

    def set_cursor_position(self, handle, x, y):
        self._maybe_fail("SetConsoleCursorPosition")
        self.cursor = (x, y)


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


@pytest.fixture
def windows(monkeypatch):
    """Pretend to run on Windows."""
    monkeypatch.setattr(capability, "IS_WINDOWS", True)
    monkeypatch.setattr(capability, "Interface", capability.WinInterface)


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
