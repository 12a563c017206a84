# interpreter.py

from typing import Any, Union

from .attributes import Color, TextAttributes
from .directives import DirectiveSequence, Format, Reset
from .errors import UnsupportedDirectiveShape


def print_with_attributes(terminal, *directives: Union[DirectiveSequence, Any]) -> None:
    """
    Run directives against a terminal, left to right.

    The whole sequence is validated first. Each directive then takes effect
    immediately; an error stops the run without undoing earlier output.

    Args:
        terminal: Terminal session to write through
        *directives: Directives, or a single prebuilt DirectiveSequence
    """
    if len(directives) == 1 and isinstance(directives[0], DirectiveSequence):
        sequence = directives[0]
    else:
        sequence = DirectiveSequence(directives)

    for index, directive in enumerate(sequence):
        if isinstance(directive, TextAttributes):
            terminal.apply_attribute(directive)
        elif isinstance(directive, Color):
            terminal.apply_attribute(TextAttributes(foreground=directive))
        elif isinstance(directive, Reset):
            terminal.reset_attributes()
        elif isinstance(directive, str):
            terminal.write(directive)
        elif isinstance(directive, Format):
            terminal.write(directive.render())
        else:
            raise UnsupportedDirectiveShape(index, directive)
