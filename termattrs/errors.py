# errors.py

from typing import Any, Optional


class TerminalError(Exception):
    """Base class for every error raised by termattrs."""


class PlatformCallFailed(TerminalError):
    """A native console call reported failure."""

    def __init__(self, call: str, code: Optional[int] = None):
        self.call = call
        self.code = code
        detail = f" (error {code})" if code else ""
        super().__init__(f"{call} failed{detail}")


class UnsupportedDirectiveShape(TerminalError, TypeError):
    """A directive did not match any of the recognized kinds."""

    def __init__(self, index: int, directive: Any):
        self.index = index
        self.directive = directive
        super().__init__(
            f"Directive #{index} has unsupported shape {type(directive).__name__}: {directive!r}"
        )
