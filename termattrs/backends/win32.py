# backends/win32.py
"""
Thin ctypes binding to the kernel32 console functions.

Only instantiable on Windows. Every call that reports failure raises
PlatformCallFailed with the thread's last error code.
"""

import ctypes
from ctypes import wintypes
from typing import Optional, TextIO, Tuple

from ..errors import PlatformCallFailed

FILE_NAME_INFO_CLASS = 2
MAX_PATH = 260


class COORD(ctypes.Structure):
    _fields_ = [("X", wintypes.SHORT), ("Y", wintypes.SHORT)]


class SMALL_RECT(ctypes.Structure):
    _fields_ = [
        ("Left", wintypes.SHORT),
        ("Top", wintypes.SHORT),
        ("Right", wintypes.SHORT),
        ("Bottom", wintypes.SHORT),
    ]


class CONSOLE_SCREEN_BUFFER_INFO(ctypes.Structure):
    _fields_ = [
        ("dwSize", COORD),
        ("dwCursorPosition", COORD),
        ("wAttributes", wintypes.WORD),
        ("srWindow", SMALL_RECT),
        ("dwMaximumWindowSize", COORD),
    ]


class FILE_NAME_INFO(ctypes.Structure):
    _fields_ = [
        ("FileNameLength", wintypes.DWORD),
        ("FileName", wintypes.WCHAR * MAX_PATH),
    ]


class ConsoleApi:
    """The native console primitives used by the capability probe and the native renderer."""

    def __init__(self):
        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)

        kernel32.GetConsoleMode.argtypes = [wintypes.HANDLE, ctypes.POINTER(wintypes.DWORD)]
        kernel32.GetConsoleMode.restype = wintypes.BOOL
        kernel32.SetConsoleMode.argtypes = [wintypes.HANDLE, wintypes.DWORD]
        kernel32.SetConsoleMode.restype = wintypes.BOOL
        kernel32.GetConsoleScreenBufferInfo.argtypes = [
            wintypes.HANDLE, ctypes.POINTER(CONSOLE_SCREEN_BUFFER_INFO)
        ]
        kernel32.GetConsoleScreenBufferInfo.restype = wintypes.BOOL
        kernel32.SetConsoleTextAttribute.argtypes = [wintypes.HANDLE, wintypes.WORD]
        kernel32.SetConsoleTextAttribute.restype = wintypes.BOOL
        kernel32.SetConsoleCursorPosition.argtypes = [wintypes.HANDLE, COORD]
        kernel32.SetConsoleCursorPosition.restype = wintypes.BOOL
        kernel32.GetFileInformationByHandleEx.argtypes = [
            wintypes.HANDLE, ctypes.c_int, wintypes.LPVOID, wintypes.DWORD
        ]
        kernel32.GetFileInformationByHandleEx.restype = wintypes.BOOL

        self._kernel32 = kernel32

    @staticmethod
    def _check(result, call: str) -> None:
        if not result:
            raise PlatformCallFailed(call, ctypes.get_last_error())

    def handle_for(self, stream: TextIO) -> Optional[int]:
        """Return the OS handle behind a Python stream, or None if it has none."""
        import msvcrt

        try:
            return msvcrt.get_osfhandle(stream.fileno())
        except (AttributeError, OSError, ValueError):
            return None

    def get_console_mode(self, handle) -> int:
        mode = wintypes.DWORD()
        self._check(self._kernel32.GetConsoleMode(handle, ctypes.byref(mode)), "GetConsoleMode")
        return mode.value

    def set_console_mode(self, handle, mode: int) -> None:
        self._check(self._kernel32.SetConsoleMode(handle, mode), "SetConsoleMode")

    def set_text_attribute(self, handle, word: int) -> None:
        self._check(self._kernel32.SetConsoleTextAttribute(handle, word), "SetConsoleTextAttribute")

    def get_cursor_position(self, handle) -> Tuple[int, int]:
        """Return the zero-based (x, y) cursor position."""
        info = CONSOLE_SCREEN_BUFFER_INFO()
        self._check(
            self._kernel32.GetConsoleScreenBufferInfo(handle, ctypes.byref(info)),
            "GetConsoleScreenBufferInfo",
        )
        return info.dwCursorPosition.X, info.dwCursorPosition.Y

    def set_cursor_position(self, handle, x: int, y: int) -> None:
        self._check(
            self._kernel32.SetConsoleCursorPosition(handle, COORD(x, y)),
            "SetConsoleCursorPosition",
        )

    def is_cygwin_pty(self, handle) -> bool:
        """True if the handle is a Cygwin/MSYS pseudo terminal pipe."""
        info = FILE_NAME_INFO()
        ok = self._kernel32.GetFileInformationByHandleEx(
            handle, FILE_NAME_INFO_CLASS, ctypes.byref(info), ctypes.sizeof(info)
        )
        if not ok:
            return False
        name = info.FileName[: info.FileNameLength // ctypes.sizeof(wintypes.WCHAR)]
        return ("msys-" in name or "cygwin-" in name) and "-pty" in name
