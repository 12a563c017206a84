# __init__.py

from .attributes import Color, TextAttributes
from .directives import RESET, Directive, DirectiveSequence, Format
from .errors import PlatformCallFailed, TerminalError, UnsupportedDirectiveShape
from .logger import Logger
from .terminal import Terminal

__all__ = [
    "Color",
    "Directive",
    "DirectiveSequence",
    "Format",
    "Logger",
    "PlatformCallFailed",
    "RESET",
    "Terminal",
    "TerminalError",
    "TextAttributes",
    "UnsupportedDirectiveShape",
]
