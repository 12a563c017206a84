# test_ansi.py

import io
import itertools
import re

import pytest

from termattrs import Color, TextAttributes
from termattrs.backends.ansi import AnsiRenderer, attribute_sgr, foreground_code

SGR_RE = re.compile(r"^\x1b\[0;(7;)?(4;)?(1;)?(\d+)m$")


class TestAttributeSgr:
    """Tests for the SGR encoding."""

    @pytest.mark.parametrize(
        "color,bright,bold,underline,reverse",
        list(itertools.product(Color, *([[False, True]] * 4))),
    )
    def test_every_combination(self, color, bright, bold, underline, reverse):
        attr = TextAttributes(color, bright=bright, bold=bold,
                              underline=underline, reverse=reverse)
        match = SGR_RE.match(attribute_sgr(attr))
        assert match is not None
        assert bool(match.group(1)) == reverse
        assert bool(match.group(2)) == underline
        assert bool(match.group(3)) == bold
        assert int(match.group(4)) == (90 if bright else 30) + color.value

    def test_red_bold(self):
        assert attribute_sgr(TextAttributes(Color.RED, bold=True)) == "\x1b[0;1;31m"

    def test_all_modifiers_order(self):
        attr = TextAttributes(Color.BLUE, bright=True, bold=True, underline=True, reverse=True)
        assert attribute_sgr(attr) == "\x1b[0;7;4;1;94m"

    def test_foreground_code(self):
        assert foreground_code(TextAttributes(Color.BLACK)) == 30
        assert foreground_code(TextAttributes(Color.WHITE, bright=True)) == 97


class TestAnsiRenderer:
    """Tests for the escape-sequence renderer output."""

    def setup_method(self):
        self.out = io.StringIO()
        self.renderer = AnsiRenderer(self.out)

    def test_reset_independent_of_state(self):
        self.renderer.apply_attribute(TextAttributes(Color.GREEN, underline=True))
        self.out.truncate(0)
        self.out.seek(0)
        self.renderer.reset_attributes()
        assert self.out.getvalue() == "\x1b[0m"

    def test_buffers(self):
        self.renderer.switch_to_alt_buffer()
        self.renderer.switch_to_main_buffer()
        assert self.out.getvalue() == "\x1b[?1049h\x1b[?1049l"

    def test_relative_cursor_moves(self):
        self.renderer.cursor_move_up(3)
        self.renderer.cursor_move_down(1)
        self.renderer.cursor_move_right(12)
        self.renderer.cursor_move_left(2)
        assert self.out.getvalue() == "\x1b[3A\x1b[1B\x1b[12C\x1b[2D"

    def test_absolute_cursor(self):
        self.renderer.set_cursor_column(5)
        self.renderer.set_cursor_row(7)
        self.renderer.set_cursor_position(10, 4)
        assert self.out.getvalue() == "\x1b[5G\x1b[7f\x1b[4;10H"
