"""CLNI: the structural lambda encoding of signed integers used by lambda-pong programs.

Positive numbers bind an extra continuation variable and nest one abstraction per unit::

    (\\x u. u x)                     1
    (\\x u. u (\\u1. u1 (\\u2. u2 x)))  3

Zero is the identity ``(\\x. x)``. Negative numbers apply the identity to ``n`` no-op
abstractions::

    (\\x. x (\\u. u) (\\u. u))         -2

Decoding never builds a syntax tree: the sign comes from the binder list and the trailing
shape, the magnitude from counting backslashes up to the balanced closing paren.
"""

from __future__ import annotations

from enum import Enum

from lambda_pong.errors import (
    EmptyNegativeError,
    EmptyTermError,
    MissingOpenParenError,
    NoLambdaSymbolError,
    UnterminatedBinderListError,
    UnterminatedTermError,
)


class _Sign(Enum):
    POSITIVE = "positive"
    ZERO = "zero"
    NEGATIVE = "negative"


def decode_clni(text: str) -> tuple[int, str]:
    """Decode the CLNI integer at the start of ``text``.

    Returns the value and everything after the term's balanced closing paren, so several
    integers can be decoded back to back from one line.
    """
    if not text:
        raise EmptyTermError("CLNI integer is empty")
    if text[0] != "(":
        raise MissingOpenParenError(f"CLNI integer at `{text}` doesn't begin with open paren, but `{text[0]}`")

    sign = _clni_sign(text)

    backslashes = 0
    depth = 0
    for index, char in enumerate(text):
        if char == "\\":
            backslashes += 1
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if depth == 0:
            return _resolve(sign, backslashes, text), text[index + 1 :]

    raise UnterminatedTermError(f"unfinished CLNI integer `{text}`")


def clni_to_int(text: str) -> int:
    """Decode a CLNI integer, ignoring anything after it."""
    value, _ = decode_clni(text)
    return value


def _resolve(sign: _Sign, backslashes: int, text: str) -> int:
    if sign is _Sign.POSITIVE:
        return backslashes
    if sign is _Sign.ZERO:
        return 0
    if backslashes < 2:
        raise EmptyNegativeError(f"negative CLNI integer `{text}` has no wrapped application")
    return -(backslashes - 1)


def _clni_sign(text: str) -> _Sign:
    # Spaces between the first backslash and the dot mean a second bound variable,
    # which only positive numbers have.
    start = text.find("\\")
    if start == -1:
        raise NoLambdaSymbolError(f"CLNI integer `{text}` has no lambda symbol in it")
    dot = text.find(".", start)
    if dot == -1:
        raise UnterminatedBinderListError(f"CLNI integer `{text}` has an unfinished lambda binder list")
    if " " in text[start:dot]:
        return _Sign.POSITIVE

    for char in text[dot + 1 :]:
        if char == "(":
            return _Sign.NEGATIVE
        if char == ")":
            return _Sign.ZERO
    return _Sign.ZERO
