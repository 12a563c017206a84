# __main__.py

import argparse
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from . import Color, Format, RESET, Terminal, TextAttributes
from .backends.ansi import attribute_sgr
from .backends.winconsole import attribute_word


def demo(term: Terminal) -> None:
    """Print one line per style, ending with a reset."""
    term.print_with_attributes(
        TextAttributes(foreground=Color.RED, bold=True),
        "Hello, World!\n",
        Color.GREEN,
        "Hello, World!\n",
        Color.YELLOW,
        "Hello, World!\n",
        TextAttributes(foreground=Color.BLUE, bright=True, bold=True, underline=True),
        "Hello, World!\n",
        Color.MAGENTA,
        Format("Hello, {}!\n", ("Haze",)),
        RESET,
        "Hello, World!\n",
    )


def build_table() -> Table:
    """Table of the escape sequence and console word for every color."""
    table = Table(title="termattrs encodings")
    table.add_column("Color", style="bold")
    table.add_column("SGR")
    table.add_column("SGR (bright)")
    table.add_column("Console word", justify="right")
    table.add_column("Console word (bright)", justify="right")

    for color in Color:
        normal = TextAttributes(foreground=color)
        bright = TextAttributes(foreground=color, bright=True)
        table.add_row(
            color.name.lower(),
            repr(attribute_sgr(normal)),
            repr(attribute_sgr(bright)),
            f"0x{attribute_word(normal):04x}",
            f"0x{attribute_word(bright):04x}",
        )
    return table


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='termattrs demo')
    parser.add_argument('--table',
        action='store_true',
        help='Print the attribute encoding table instead of the demo')
    parser.add_argument('--no-color',
        action='store_true',
        help='Disable attribute output')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')

    args = parser.parse_args(argv)

    if args.table:
        Console(no_color=args.no_color).print(build_table())
        return

    term = Terminal(
        enable_attributes=False if args.no_color else None,
        logging_enabled=args.enable_logging,
        log_file=args.log_file,
    )
    demo(term)


if __name__ == "__main__":
    main()
