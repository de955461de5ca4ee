"""Church boolean decoding: ``(\\x y. x)`` is true and ``(\\x y. y)`` is false."""

from __future__ import annotations

from lambda_pong.errors import (
    BodyMismatchError,
    MissingSeparatorError,
    NoLambdaSymbolError,
    UnterminatedBinderListError,
    UnterminatedTermError,
)


def decode_church_bool(text: str) -> bool:
    """Convert a two-variable selector term into a native boolean.

    Variable names are arbitrary alphanumeric runs; the body is compared verbatim to them.
    Trailing close parens are ignored because the term may be over-closed by its context.
    """
    start = text.find("\\")
    if start == -1:
        raise NoLambdaSymbolError(f"no backslash (lambda symbol) found in `{text}`")
    first_end = _var_end(text, start + 1)
    first_var = text[start + 1 : first_end]
    rest = text[first_end:]

    second_start = len(rest) - len(rest.lstrip(" "))
    if second_start == 0:
        found = f"'{rest[0]}'" if rest else "no character"
        raise MissingSeparatorError(f"expected space after first variable `{first_var}`, found {found}")
    second_end = _var_end(rest, second_start)
    second_var = rest[second_start:second_end]
    rest = rest[second_end:]

    if not rest.startswith("."):
        found = f"'{rest[0]}'" if rest else "no character"
        raise UnterminatedBinderListError(f"expected dot after second variable `{second_var}`, found {found}")

    body = rest[1:].strip().rstrip(")")
    if body == first_var:
        return True
    if body == second_var:
        return False
    raise BodyMismatchError(
        f"lambda body `{body}` is not equal to either first `{first_var}` or second `{second_var}` variable"
    )


def _var_end(text: str, start: int) -> int:
    for index in range(start, len(text)):
        if not text[index].isalnum():
            return index
    raise UnterminatedTermError(f"unfinished lambda term `{text}`")
