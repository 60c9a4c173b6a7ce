# /tests/test_hostspec.py
from __future__ import annotations

import pytest

from shostspec.domain.errors import (
    HostSpecError,
    InvalidToken,
    MalformedExpression,
    ReversedRange,
    TooManyHosts,
)
from shostspec.domain.hostspec import (
    ParsedExpression,
    Range,
    Single,
    expand,
    expand_host,
    parse,
    tokenize,
)


# --- parser ---


def test_parse_splits_prefix_specifier_suffix() -> None:
    assert parse("node[1-3]-ib") == ParsedExpression(prefix="node", specifier="1-3", suffix="-ib")


def test_parse_literal_has_no_specifier() -> None:
    p = parse("login7")
    assert p.prefix == "login7" and p.specifier is None and p.suffix == ""


@pytest.mark.parametrize(
    "raw",
    ["host[120-150", "host]1", "ho]st[1]", "host[]", "host[1]x]", "host[1]x[", "host[[1]]"],
)
def test_parse_rejects_broken_brackets(raw: str) -> None:
    with pytest.raises(MalformedExpression):
        parse(raw)


# --- tokenizer / expander ---


def test_tokenize_keeps_order_and_kinds() -> None:
    assert tokenize("5,008-011,2") == [Single("5"), Range("008", "011"), Single("2")]


def test_range_size_and_width() -> None:
    r = Range("008", "011")
    assert r.size == 4 and r.width == 3


@pytest.mark.parametrize("spec", ["a-b", "a", "1,,2", "1-2-3", "-3", "3-", " 1", "1 ", "0x1", "1.5"])
def test_expand_rejects_invalid_tokens(spec: str) -> None:
    with pytest.raises(InvalidToken):
        expand(spec)


def test_expand_rejects_reversed_range() -> None:
    with pytest.raises(ReversedRange) as exc:
        expand("10-5")
    assert "10 > 5" in str(exc.value)


def test_expand_validates_all_tokens_before_generating() -> None:
    with pytest.raises(InvalidToken):
        expand("1-1000000000,x")


def test_expand_single_keeps_its_own_padding() -> None:
    assert expand("007,8") == ["007", "8"]


def test_expand_padding_follows_low_bound() -> None:
    out = expand("08-100")
    assert out[0] == "08" and out[1] == "09" and out[-2] == "99" and out[-1] == "100"
    assert len(out) == 93


def test_expand_unpadded_range_grows_naturally() -> None:
    assert expand("8-11") == ["8", "9", "10", "11"]


def test_expand_limit() -> None:
    with pytest.raises(TooManyHosts):
        expand("1-10", limit=5)
    assert len(expand("1-10", limit=10)) == 10


# --- composition ---


@pytest.mark.parametrize("lo,hi", [(1, 1), (0, 9), (120, 150), (7, 12)])
def test_range_expansion_matches_arithmetic(lo: int, hi: int) -> None:
    width = 3
    raw = f"host[{lo:0{width}d}-{hi}]"
    out = expand_host(raw)
    assert len(out) == hi - lo + 1
    for i, host in enumerate(out):
        assert host == "host" + str(lo + i).zfill(width)


def test_single_value() -> None:
    assert expand_host("host[999]") == ["host999"]


def test_comma_list_keeps_order() -> None:
    assert expand_host("host[5,3,9]") == ["host5", "host3", "host9"]


def test_literal_expands_to_itself() -> None:
    assert expand_host("login") == ["login"]


def test_zero_padding_preserved() -> None:
    assert expand_host("host[008-011]") == ["host008", "host009", "host010", "host011"]


def test_mixed_list() -> None:
    out = expand_host("host[1234-5678,8100]")
    assert len(out) == (5678 - 1234 + 1) + 1 == 4446
    assert out[0] == "host1234" and out[-2] == "host5678" and out[-1] == "host8100"


def test_trailing_text_is_literal() -> None:
    assert expand_host("a[1-2]b") == ["a1b", "a2b"]
    assert expand_host("a[1-2]b[3-4]") == ["a1b[3-4]", "a2b[3-4]"]


@pytest.mark.parametrize(
    "raw,error",
    [
        ("host[10-5]", ReversedRange),
        ("host[120-150", MalformedExpression),
        ("host[a-b]", InvalidToken),
    ],
)
def test_errors_are_tagged_with_expression(raw: str, error: type[HostSpecError]) -> None:
    with pytest.raises(error) as exc:
        expand_host(raw)
    assert exc.value.expression == raw
    assert isinstance(exc.value, ValueError)


def test_strict_mode_requires_trailing_number() -> None:
    with pytest.raises(MalformedExpression):
        expand_host("login", require_number=True)
    assert expand_host("node7", require_number=True) == ["node7"]
    assert expand_host("node[1-2]", require_number=True) == ["node1", "node2"]
