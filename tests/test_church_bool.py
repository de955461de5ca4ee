from __future__ import annotations

import pytest

from lambda_pong.decoding import decode_church_bool
from lambda_pong.errors import BodyMismatchError, MissingSeparatorError, ProtocolError


@pytest.mark.parametrize(
    ("term", "expected"),
    [
        (r"(\x y. x)", True),
        (r"(\apple orange. apple)", True),
        (r"(\x1 y1. x1)", True),
        (r"(\x y. y)", False),
        (r"(\blue green. green)", False),
        (r"(\x2 y2. y2)", False),
    ],
)
def test_variable_names_do_not_matter(term: str, expected: bool) -> None:
    assert decode_church_bool(term) is expected


def test_over_closed_term_is_accepted() -> None:
    assert decode_church_bool(r"(\a b. b)))") is False


def test_single_variable_term_is_rejected() -> None:
    with pytest.raises(MissingSeparatorError):
        decode_church_bool(r"\y. y")


def test_three_variable_term_is_rejected() -> None:
    with pytest.raises(ProtocolError):
        decode_church_bool(r"\x y z. y")


def test_body_matching_neither_variable_is_rejected() -> None:
    with pytest.raises(BodyMismatchError) as excinfo:
        decode_church_bool(r"\a b. c")
    assert "`c`" in str(excinfo.value)


def test_term_without_binder_is_rejected() -> None:
    with pytest.raises(ProtocolError):
        decode_church_bool("nil")
