# backends/__init__.py

from typing import Protocol

from ..attributes import TextAttributes


class RendererProtocol(Protocol):
    """Protocol shared by the escape-sequence and native console renderers."""
    def apply_attribute(self, attr: TextAttributes) -> None: ...
    def reset_attributes(self) -> None: ...
    def switch_to_alt_buffer(self) -> None: ...
    def switch_to_main_buffer(self) -> None: ...
    def cursor_move_up(self, n: int) -> None: ...
    def cursor_move_down(self, n: int) -> None: ...
    def cursor_move_left(self, n: int) -> None: ...
    def cursor_move_right(self, n: int) -> None: ...
    def set_cursor_column(self, col: int) -> None: ...
    def set_cursor_row(self, row: int) -> None: ...
    def set_cursor_position(self, x: int, y: int) -> None: ...


__all__ = ['RendererProtocol']
