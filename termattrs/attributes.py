# attributes.py

from enum import Enum
from dataclasses import dataclass


class Color(Enum):
    """The eight base colors, in SGR ordinal order."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    @classmethod
    def parse(cls, value) -> "Color":
        """Accept a Color or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown color: {value!r}")


@dataclass(frozen=True)
class TextAttributes:
    """
    A complete text style. Never partially updated: a new style is a new
    instance.
    """

    foreground: Color = Color.WHITE
    bright: bool = False
    bold: bool = False
    underline: bool = False
    reverse: bool = False

    def __post_init__(self):
        # Frozen dataclass, so go through object.__setattr__
        object.__setattr__(self, "foreground", Color.parse(self.foreground))
        for name in ("bright", "bold", "underline", "reverse"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a bool, got {getattr(self, name)!r}")
