# /shostspec/domain/errors.py
from __future__ import annotations


class HostSpecError(ValueError):
    """Base for every rejected host expression."""

    def __init__(self, reason: str, expression: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.expression = expression


class MalformedExpression(HostSpecError):
    """Bracket structure is broken (unbalanced, empty body)."""


class InvalidToken(HostSpecError):
    """A specifier element is neither a digit value nor a digit range."""


class ReversedRange(HostSpecError):
    """Low bound of a range is greater than its high bound."""


class TooManyHosts(HostSpecError):
    """Expansion would exceed the configured host cap."""
