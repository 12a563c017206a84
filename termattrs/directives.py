# directives.py
"""
Directives accepted by Terminal.print_with_attributes.

A directive is exactly one of:

    TextAttributes   apply a complete style
    Color            apply TextAttributes(foreground=color)
    RESET            reset to the default style
    str              write literally
    Format           write template.format(*args)

Mappings of attribute fields and (template, args) tuples are accepted as
shorthand and normalized when a DirectiveSequence is built. Anything else
is rejected there, before any output happens.
"""

from enum import Enum
from dataclasses import dataclass, fields
from typing import Any, Iterable, Iterator, Mapping, Tuple, Union

from .attributes import Color, TextAttributes
from .errors import UnsupportedDirectiveShape


class Reset(Enum):
    RESET = "reset"


RESET = Reset.RESET


@dataclass(frozen=True)
class Format:
    """A template plus positional arguments, interpolated with str.format."""

    template: str
    args: Tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))

    def render(self) -> str:
        return self.template.format(*self.args)


Directive = Union[TextAttributes, Color, Reset, str, Format]

_ATTRIBUTE_FIELDS = {f.name for f in fields(TextAttributes)}


def _from_mapping(index: int, value: Mapping) -> TextAttributes:
    unknown = set(value) - _ATTRIBUTE_FIELDS
    if unknown:
        raise UnsupportedDirectiveShape(index, value)
    try:
        return TextAttributes(**value)
    except ValueError:
        raise UnsupportedDirectiveShape(index, value)


def normalize(index: int, value: Any) -> Directive:
    """Return the directive for one element, or raise UnsupportedDirectiveShape."""
    if isinstance(value, (TextAttributes, Color, Reset, str, Format)):
        return value
    if isinstance(value, Mapping):
        return _from_mapping(index, value)
    if (isinstance(value, tuple) and len(value) == 2
            and isinstance(value[0], str) and isinstance(value[1], tuple)):
        return Format(value[0], value[1])
    raise UnsupportedDirectiveShape(index, value)


class DirectiveSequence:
    """An immutable, validated, ordered run of directives."""

    def __init__(self, directives: Iterable[Any]):
        self._items: Tuple[Directive, ...] = tuple(
            normalize(i, d) for i, d in enumerate(directives)
        )

    def __iter__(self) -> Iterator[Directive]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Directive:
        return self._items[index]

    def __repr__(self) -> str:
        return f"DirectiveSequence({list(self._items)!r})"
