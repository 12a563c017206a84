# terminal.py

import sys
from typing import Any, Optional, TextIO

from . import capability
from .attributes import TextAttributes
from .backends import RendererProtocol
from .backends.ansi import AnsiRenderer
from .backends.winconsole import WinConsoleRenderer
from .interpreter import print_with_attributes
from .logger import Logger


class Terminal:
    """
    A styled output session over a pair of standard streams.

    The interface (escape sequences or native console) is chosen once, at
    construction. Attribute calls are suppressed while styling is disabled;
    cursor and buffer calls always go through.
    """

    def __init__(self, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 *,
                 console=None,
                 interface: Optional[Any] = None,
                 enable_attributes: Optional[bool] = None,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        """
        Probe the streams and set up the renderer.

        Args:
            stdin: Input stream. Defaults to sys.stdin.
            stdout: Output stream. Defaults to sys.stdout.
            console: Native console API. Created automatically on Windows.
            interface: Force a member of capability.Interface instead of probing.
            enable_attributes: Force styling on or off instead of probing.
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
        """
        self.logger = Logger(__name__, logging_enabled, log_file)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

        if console is None and capability.IS_WINDOWS:
            from .backends.win32 import ConsoleApi
            console = ConsoleApi()
        self.console = console

        if interface is None:
            interface = capability.select_interface(self.stdin, self.stdout, console)
        elif not isinstance(interface, capability.Interface):
            raise ValueError(f"Interface {interface!r} is not available on this platform")
        self.interface = interface

        self.attributes_enabled = capability.supports_styling(self.stdout, enable_attributes)
        self.current_attribute = TextAttributes()
        self._renderer = self._create_renderer()

        self.logger.debug(
            f"Terminal initialized: interface={self.interface.value}, "
            f"attributes_enabled={self.attributes_enabled}"
        )

    def _create_renderer(self) -> RendererProtocol:
        if capability.IS_WINDOWS and self.interface is capability.WinInterface.WINCONSOLE:
            return WinConsoleRenderer(
                self.console, self.console.handle_for(self.stdout), logger=self.logger
            )
        return AnsiRenderer(self.stdout)

    @property
    def renderer(self) -> RendererProtocol:
        return self._renderer

    def enable_attributes(self) -> None:
        self.attributes_enabled = True

    def disable_attributes(self) -> None:
        self.attributes_enabled = False

    def apply_attribute(self, attr: TextAttributes) -> None:
        """Remember attr as current, then render it if styling is enabled."""
        self.current_attribute = attr
        if not self.attributes_enabled:
            return
        self._renderer.apply_attribute(attr)

    def reset_attributes(self) -> None:
        self.current_attribute = TextAttributes()
        if not self.attributes_enabled:
            return
        self._renderer.reset_attributes()

    def print_with_attributes(self, *directives: Any) -> None:
        """Write a mix of text and style directives. See termattrs.directives."""
        print_with_attributes(self, *directives)

    def write(self, text: str) -> None:
        """Write text verbatim."""
        self.stdout.write(text)
        self.stdout.flush()

    def reader(self) -> TextIO:
        return self.stdin

    def writer(self) -> TextIO:
        return self.stdout

    def switch_to_alt_buffer(self) -> None:
        self._renderer.switch_to_alt_buffer()

    def switch_to_main_buffer(self) -> None:
        self._renderer.switch_to_main_buffer()

    def cursor_move_up(self, n: int = 1) -> None:
        self._renderer.cursor_move_up(n)

    def cursor_move_down(self, n: int = 1) -> None:
        self._renderer.cursor_move_down(n)

    def cursor_move_left(self, n: int = 1) -> None:
        self._renderer.cursor_move_left(n)

    def cursor_move_right(self, n: int = 1) -> None:
        self._renderer.cursor_move_right(n)

    def set_cursor_column(self, col: int) -> None:
        self._renderer.set_cursor_column(col)

    def set_cursor_row(self, row: int) -> None:
        self._renderer.set_cursor_row(row)

    def set_cursor_position(self, x: int, y: int) -> None:
        self._renderer.set_cursor_position(x, y)
