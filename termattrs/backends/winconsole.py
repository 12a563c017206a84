# backends/winconsole.py

from typing import Dict, Optional

from ..attributes import Color, TextAttributes
from ..logger import Logger

FOREGROUND_BLUE = 0x0001
FOREGROUND_GREEN = 0x0002
FOREGROUND_RED = 0x0004
FOREGROUND_INTENSITY = 0x0008
# Fixed by the console API (COMMON_LVB_REVERSE_VIDEO / COMMON_LVB_UNDERSCORE)
TXT_REVERSE = 0x4000
TXT_UNDERSCORE = 0x8000

COLOR_BITS: Dict[Color, int] = {
    Color.BLACK: 0,
    Color.RED: FOREGROUND_RED,
    Color.GREEN: FOREGROUND_GREEN,
    Color.YELLOW: FOREGROUND_RED | FOREGROUND_GREEN,
    Color.BLUE: FOREGROUND_BLUE,
    Color.MAGENTA: FOREGROUND_RED | FOREGROUND_BLUE,
    Color.CYAN: FOREGROUND_GREEN | FOREGROUND_BLUE,
    Color.WHITE: FOREGROUND_RED | FOREGROUND_GREEN | FOREGROUND_BLUE,
}


def attribute_word(attr: TextAttributes) -> int:
    """
    Encode an attribute set as a console text attribute word.

    Bright and bold both map to the intensity bit; the console has no
    separate bold.
    """
    word = FOREGROUND_INTENSITY if (attr.bright or attr.bold) else 0
    if attr.reverse:
        word |= TXT_REVERSE
    if attr.underline:
        word |= TXT_UNDERSCORE
    return word | COLOR_BITS[attr.foreground]


class WinConsoleRenderer:
    """
    Renders attributes through SetConsoleTextAttribute and moves the cursor
    through the console cursor API.

    Relative moves read the cursor, adjust one axis and write it back. This
    is not atomic against other writers to the same console.
    Absolute positions take the same 1-based coordinates as the escape
    sequences and are converted to the console's 0-based ones.
    """

    def __init__(self, console, handle, logger: Optional[Logger] = None):
        """
        Args:
            console: ConsoleApi (or compatible) providing the native calls
            handle: Output console handle
            logger: Optional Logger for debug output
        """
        self.console = console
        self.handle = handle
        self.logger = logger or Logger(__name__)
        self.last_attribute: Optional[int] = None

    def apply_attribute(self, attr: TextAttributes) -> None:
        word = attribute_word(attr)
        self.console.set_text_attribute(self.handle, word)
        self.last_attribute = word

    def reset_attributes(self) -> None:
        self.apply_attribute(TextAttributes())

    def switch_to_alt_buffer(self) -> None:
        self.logger.debug("Alternate buffer not available on the native console; ignoring")

    def switch_to_main_buffer(self) -> None:
        self.logger.debug("Alternate buffer not available on the native console; ignoring")

    def _move(self, dx: int, dy: int) -> None:
        x, y = self.console.get_cursor_position(self.handle)
        self.console.set_cursor_position(self.handle, x + dx, y + dy)

    def cursor_move_up(self, n: int) -> None:
        self._move(0, -n)

    def cursor_move_down(self, n: int) -> None:
        self._move(0, n)

    def cursor_move_left(self, n: int) -> None:
        self._move(-n, 0)

    def cursor_move_right(self, n: int) -> None:
        self._move(n, 0)

    def set_cursor_column(self, col: int) -> None:
        _, y = self.console.get_cursor_position(self.handle)
        self.console.set_cursor_position(self.handle, col - 1, y)

    def set_cursor_row(self, row: int) -> None:
        x, _ = self.console.get_cursor_position(self.handle)
        self.console.set_cursor_position(self.handle, x, row - 1)

    def set_cursor_position(self, x: int, y: int) -> None:
        self.console.set_cursor_position(self.handle, x - 1, y - 1)
