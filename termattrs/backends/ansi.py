# backends/ansi.py

from typing import TextIO

from ..attributes import TextAttributes

CSI = "\033["
RESET = f"{CSI}0m"
ALT_BUFFER_ON = f"{CSI}?1049h"
ALT_BUFFER_OFF = f"{CSI}?1049l"


def foreground_code(attr: TextAttributes) -> int:
    """Return the numeric SGR foreground code (30-37, or 90-97 when bright)."""
    base = 90 if attr.bright else 30
    return base + attr.foreground.value


def attribute_sgr(attr: TextAttributes) -> str:
    """
    Build the SGR sequence for a complete attribute set.

    The sequence always starts by resetting, so consecutive calls never
    stack. Modifiers come in the fixed order reverse, underline, bold.

    Args:
        attr: Attribute set to encode

    Returns:
        Escape sequence such as '\\033[0;1;31m'
    """
    parts = [f"{CSI}0;"]
    if attr.reverse:
        parts.append("7;")
    if attr.underline:
        parts.append("4;")
    if attr.bold:
        parts.append("1;")
    parts.append(f"{foreground_code(attr)}m")
    return "".join(parts)


class AnsiRenderer:
    """Renders attributes and cursor control as ANSI escape sequences."""

    def __init__(self, stdout: TextIO):
        self.stdout = stdout

    def _write(self, data: str) -> None:
        self.stdout.write(data)
        self.stdout.flush()

    def apply_attribute(self, attr: TextAttributes) -> None:
        self._write(attribute_sgr(attr))

    def reset_attributes(self) -> None:
        self._write(RESET)

    def switch_to_alt_buffer(self) -> None:
        self._write(ALT_BUFFER_ON)

    def switch_to_main_buffer(self) -> None:
        self._write(ALT_BUFFER_OFF)

    def cursor_move_up(self, n: int) -> None:
        self._write(f"{CSI}{n}A")

    def cursor_move_down(self, n: int) -> None:
        self._write(f"{CSI}{n}B")

    def cursor_move_right(self, n: int) -> None:
        self._write(f"{CSI}{n}C")

    def cursor_move_left(self, n: int) -> None:
        self._write(f"{CSI}{n}D")

    def set_cursor_column(self, col: int) -> None:
        self._write(f"{CSI}{col}G")

    def set_cursor_row(self, row: int) -> None:
        self._write(f"{CSI}{row}f")

    def set_cursor_position(self, x: int, y: int) -> None:
        # Row comes first on the wire
        self._write(f"{CSI}{y};{x}H")
