"""Rectangle and rectangle-list decoding.

A rectangle list is a right-nested chain of Church pairs ending in ``nil``/``false``::

    (\\z. z (\\f. f X Y W H) (\\z1. z1 (\\f1. f1 X Y W H) nil))

Both the pair and the 4-tuple are selector applications, so the element always starts
at the second open paren of the term. That fixed shape is relied on instead of parsing
the full grammar.

The decoded list is in reverse textual order: the last rectangle in the term comes first.
"""

from __future__ import annotations

from lambda_pong.decoding.church import decode_church_bool
from lambda_pong.decoding.clni import decode_clni
from lambda_pong.errors import EmptyTermError, MissingOpenParenError, ProtocolError
from lambda_pong.models import Rect

LIST_END_TOKENS = ("nil", "false")

_U32_MASK = 0xFFFFFFFF


def is_list_end(text: str) -> bool:
    if text.startswith(LIST_END_TOKENS):
        return True
    try:
        return not decode_church_bool(text)
    except ProtocolError:
        return False


def decode_rect_list(text: str, scaling_factor: int, x_offset: int, y_offset: int) -> list[Rect]:
    """Decode a Church list of CLNI 4-tuples into scaled and offset rectangles."""
    rects: list[Rect] = []
    remaining = text
    try:
        while not is_list_end(remaining):
            if not remaining.startswith("("):
                raise MissingOpenParenError(f"list of rectangles should begin with open paren: `{remaining}`")
            head = remaining.find("(", 1)
            if head == -1:
                raise MissingOpenParenError(f"list of rectangles doesn't have a second open paren: `{remaining}`")
            rect, remaining = decode_rect(remaining[head:], scaling_factor, x_offset, y_offset)
            rects.append(rect)
            remaining = remaining.strip()
    except ProtocolError as exc:
        exc.within(f"rectangle list element {len(rects)}")
        raise

    rects.reverse()
    return rects


def decode_rect(text: str, scaling_factor: int, x_offset: int, y_offset: int) -> tuple[Rect, str]:
    """Decode one ``(\\f. f X Y W H)`` tuple, returning the rectangle and the unconsumed text."""
    try:
        if not text:
            raise EmptyTermError("empty rectangle expression")
        if text[0] != "(":
            raise MissingOpenParenError(
                f"rectangle expression doesn't start with open paren, but with `{text[0]}`"
            )
        first = text.find("(", 1)
        if first == -1:
            raise MissingOpenParenError("rectangle expression doesn't have a second open paren")

        remaining = text[first:]
        fields: list[int] = []
        for _ in range(4):
            value, remaining = decode_clni(remaining.strip())
            fields.append(value)
    except ProtocolError as exc:
        exc.within("rectangle")
        raise

    if remaining.startswith(")"):
        remaining = remaining[1:]

    x, y, width, height = fields
    rect = Rect(
        x=x * scaling_factor + x_offset,
        y=y * scaling_factor + y_offset,
        width=(width * scaling_factor) & _U32_MASK,
        height=(height * scaling_factor) & _U32_MASK,
    )
    return rect, remaining
