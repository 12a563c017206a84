# capability.py
"""
Backend selection.

The set of selectable interfaces depends on the platform: Windows can fall
back to the native console, everything else only speaks escape sequences.
`Interface` is bound to the right enumeration at import time, so a native
console interface cannot even be named on POSIX.
"""

import os
import sys
from enum import Enum
from typing import Optional, TextIO, Union

from .errors import PlatformCallFailed
from .logger import Logger

IS_WINDOWS = sys.platform == "win32"

ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
DISABLE_NEWLINE_AUTO_RETURN = 0x0008
ENABLE_VIRTUAL_TERMINAL_INPUT = 0x0200

STDOUT_MODE_REQUEST = ENABLE_VIRTUAL_TERMINAL_PROCESSING | DISABLE_NEWLINE_AUTO_RETURN
STDIN_MODE_REQUEST = ENABLE_VIRTUAL_TERMINAL_INPUT


class WinInterface(Enum):
    ANSI = "ansi"
    WINCONSOLE = "winconsole"


class OtherInterface(Enum):
    ANSI = "ansi"


Interface = WinInterface if IS_WINDOWS else OtherInterface

_logger = Logger(__name__)


def try_promote_virtual(console, stdin_handle, stdout_handle) -> bool:
    """
    Switch both console handles into virtual terminal mode.

    Returns True if both already were, or both mode changes succeeded.
    Failing calls are not errors here, they just mean no promotion.
    """
    try:
        stdout_mode = console.get_console_mode(stdout_handle)
        stdin_mode = console.get_console_mode(stdin_handle)

        if (stdout_mode & STDOUT_MODE_REQUEST == STDOUT_MODE_REQUEST
                and stdin_mode & STDIN_MODE_REQUEST == STDIN_MODE_REQUEST):
            return True

        console.set_console_mode(stdout_handle, stdout_mode | STDOUT_MODE_REQUEST)
        console.set_console_mode(stdin_handle, stdin_mode | STDIN_MODE_REQUEST)
    except (PlatformCallFailed, OSError) as e:
        _logger.debug(f"Virtual terminal promotion failed: {e}")
        return False
    return True


def _is_cygwin_pty(console, handle) -> bool:
    try:
        return bool(console.is_cygwin_pty(handle))
    except (PlatformCallFailed, OSError) as e:
        _logger.debug(f"Cygwin pty check failed: {e}")
        return False


def select_interface(stdin: TextIO, stdout: TextIO,
                     console=None) -> Union[WinInterface, OtherInterface]:
    """
    Pick the interface a terminal session will use for its whole lifetime.

    Args:
        stdin: Input stream
        stdout: Output stream
        console: ConsoleApi-compatible object; required on Windows

    Returns:
        A member of the platform's Interface enumeration
    """
    if not IS_WINDOWS:
        return Interface.ANSI

    if console is None:
        _logger.debug("No console API available; using native console interface")
        return Interface.WINCONSOLE

    stdin_handle = console.handle_for(stdin)
    stdout_handle = console.handle_for(stdout)

    if _is_cygwin_pty(console, stdin_handle):
        return Interface.ANSI
    if try_promote_virtual(console, stdin_handle, stdout_handle):
        return Interface.ANSI
    return Interface.WINCONSOLE


def supports_styling(stdout: TextIO, override: Optional[bool] = None) -> bool:
    """
    Decide whether attribute output should be emitted at all.

    An explicit override wins, then NO_COLOR / FORCE_COLOR, then whether
    the stream is a terminal. If the stream cannot tell, assume it is.
    """
    if override is not None:
        return override
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    try:
        return bool(stdout.isatty())
    except (AttributeError, OSError, ValueError):
        return True
