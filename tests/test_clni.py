from __future__ import annotations

import pytest

from lambda_pong.decoding import clni_to_int, decode_clni
from lambda_pong.errors import (
    EmptyNegativeError,
    EmptyTermError,
    MissingOpenParenError,
    NoLambdaSymbolError,
    UnterminatedBinderListError,
    UnterminatedTermError,
)


def encode_clni(value: int) -> str:
    if value == 0:
        return "(\\x. x)"
    if value < 0:
        return "(\\x. x" + " (\\u. u)" * -value + ")"
    body = "x"
    for layer in range(value - 1, 0, -1):
        body = f"(\\u{layer}. u{layer} {body})"
    return f"(\\x u. u {body})"


@pytest.mark.parametrize("value", range(-5, 6))
def test_encoded_integers_decode_to_their_value(value: int) -> None:
    assert clni_to_int(encode_clni(value)) == value


def test_positive_with_nested_continuations() -> None:
    assert decode_clni(r"(\x u. u (\u1. u1 (\u2. u2 x)))") == (3, "")
    assert clni_to_int(r"(\x u. u x)") == 1


def test_zero_and_negative_shapes() -> None:
    assert clni_to_int(r"(\x. x)") == 0
    assert clni_to_int(r"(\x1. x1)") == 0
    assert clni_to_int(r"(\x. x (\u. u))") == -1
    assert clni_to_int(r"(\x. x (\u. u) (\u. u))") == -2


def test_remainder_is_kept_for_chained_decoding() -> None:
    value, rest = decode_clni(r"(\x u. u x) (\x. x) (\x. x (\u. u)))")
    assert value == 1
    assert rest == r" (\x. x) (\x. x (\u. u)))"

    value, rest = decode_clni(rest.strip())
    assert value == 0

    value, rest = decode_clni(rest.strip())
    assert value == -1
    assert rest == ")"


@pytest.mark.parametrize(
    ("term", "error"),
    [
        ("", EmptyTermError),
        ("x", MissingOpenParenError),
        ("(x)", NoLambdaSymbolError),
        ("(\\x u", UnterminatedBinderListError),
        ("(\\x u. u x", UnterminatedTermError),
        ("(\\x. x (y))", EmptyNegativeError),
    ],
)
def test_malformed_terms_are_rejected(term: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        decode_clni(term)
