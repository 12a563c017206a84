# test_main.py

from termattrs import Color
from termattrs.__main__ import build_table, main


class TestMain:
    """Tests for the demo entry point."""

    def test_demo_output(self, capsys, monkeypatch):
        monkeypatch.setenv("FORCE_COLOR", "1")
        main([])
        out = capsys.readouterr().out
        assert out.startswith("\x1b[0;1;31mHello, World!\n\x1b[0;32m")
        assert "\x1b[0;35mHello, Haze!\n\x1b[0mHello, World!\n" in out

    def test_demo_no_color(self, capsys):
        main(["--no-color"])
        out = capsys.readouterr().out
        assert "\x1b" not in out
        assert out.count("Hello, World!\n") == 5

    def test_table_rows(self):
        table = build_table()
        assert table.row_count == len(Color)
        assert len(table.columns) == 5
