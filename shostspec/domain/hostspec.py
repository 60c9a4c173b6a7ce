# /shostspec/domain/hostspec.py
"""
Host-range expressions as printed by batch schedulers.

    node[008-011,020]-ib  ->  node008-ib node009-ib node010-ib node011-ib node020-ib

One bracket group per expression. Text before '[' is the prefix, text after ']'
is copied verbatim onto every host. Inside the brackets: comma separated digit
values or ascending 'lo-hi' ranges; generated numbers keep the width of 'lo'.
"""
from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from shostspec.domain.errors import (
    HostSpecError,
    InvalidToken,
    MalformedExpression,
    ReversedRange,
    TooManyHosts,
)

_DIGITS = re.compile(r"[0-9]+")
_TRAILING_DIGITS = re.compile(r"[0-9]$")

# ==== Types ====


@dataclass(frozen=True, slots=True)
class ParsedExpression:
    prefix: str
    specifier: str | None = None
    suffix: str = ""


@dataclass(frozen=True, slots=True)
class Single:
    value: str

    @property
    def size(self) -> int:
        return 1

    def values(self) -> Iterator[str]:
        yield self.value


@dataclass(frozen=True, slots=True)
class Range:
    lo: str
    hi: str

    @property
    def width(self) -> int:
        return len(self.lo)

    @property
    def size(self) -> int:
        return int(self.hi) - int(self.lo) + 1

    def values(self) -> Iterator[str]:
        for n in range(int(self.lo), int(self.hi) + 1):
            yield str(n).zfill(self.width)


SpecifierToken = Single | Range

# ==== Parser ====


def _balanced(text: str) -> bool:
    depth = 0
    for ch in text:
        if ch == "[":
            depth += 1
        elif ch == "]":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def parse(raw: str) -> ParsedExpression:
    """Split ``raw`` into prefix, bracket specifier and literal suffix."""
    open_at = raw.find("[")
    close_at = raw.find("]")

    if open_at < 0:
        if close_at >= 0:
            raise MalformedExpression("']' without a preceding '['", raw)
        return ParsedExpression(prefix=raw)

    if close_at < 0:
        raise MalformedExpression("'[' is never closed", raw)
    if close_at < open_at:
        raise MalformedExpression("']' without a preceding '['", raw)

    specifier = raw[open_at + 1 : close_at]
    if not specifier:
        raise MalformedExpression("empty range '[]'", raw)
    if "[" in specifier:
        raise MalformedExpression("nested '[' inside range", raw)

    suffix = raw[close_at + 1 :]
    if not _balanced(suffix):
        raise MalformedExpression("unmatched bracket after the closing ']'", raw)

    return ParsedExpression(prefix=raw[:open_at], specifier=specifier, suffix=suffix)


# ==== Expander ====


def _parse_token(piece: str) -> SpecifierToken:
    if piece.count("-") > 1:
        raise InvalidToken(f"token {piece!r} has more than one '-'")

    lo, sep, hi = piece.partition("-")
    if not sep:
        if not _DIGITS.fullmatch(piece):
            raise InvalidToken(f"token {piece!r} is not a number")
        return Single(piece)

    if not (_DIGITS.fullmatch(lo) and _DIGITS.fullmatch(hi)):
        raise InvalidToken(f"range {piece!r} needs digits on both sides of '-'")
    if int(lo) > int(hi):
        raise ReversedRange(f"range {piece!r} runs backwards ({int(lo)} > {int(hi)})")
    return Range(lo, hi)


def tokenize(specifier: str) -> list[SpecifierToken]:
    return [_parse_token(piece) for piece in specifier.split(",")]


def expand(specifier: str, *, limit: int | None = None) -> list[str]:
    """
    Expand the content of a bracket group into number strings, in token order.
    Every token is validated before anything is generated.
    """
    tokens = tokenize(specifier)
    if limit is not None:
        total = sum(t.size for t in tokens)
        if total > limit:
            raise TooManyHosts(f"range yields {total} hosts, limit is {limit}")
    return [value for token in tokens for value in token.values()]


# ==== Composition ====


def expand_host(
    raw: str, *, require_number: bool = False, limit: int | None = None
) -> list[str]:
    try:
        parsed = parse(raw)
        if parsed.specifier is None:
            # literal host; strict mode keeps the "every host has a number" rule
            if require_number and not _TRAILING_DIGITS.search(raw):
                raise MalformedExpression("host does not end in a number", raw)
            return [raw]
        return [
            f"{parsed.prefix}{number}{parsed.suffix}"
            for number in expand(parsed.specifier, limit=limit)
        ]
    except HostSpecError as e:
        e.expression = raw
        raise
