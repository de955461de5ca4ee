"""Headless host loop for anything implementing the ``GameState`` capability set."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol

from lambda_pong.models import Rect, UserInput

_INPUT_ALIASES = {
    "up": UserInput.UP,
    "k": UserInput.UP,
    "down": UserInput.DOWN,
    "j": UserInput.DOWN,
    "none": UserInput.NEUTRAL,
    "-": UserInput.NEUTRAL,
}
_SPLIT_RE = re.compile(r"[\s,]+")


class GameState(Protocol):
    def game_over(self) -> bool:
        ...

    def update(self, user_input: UserInput) -> None:
        ...

    def get_rects(self) -> list[Rect]:
        ...


@dataclass(slots=True)
class FrameRecord:
    index: int
    user_input: UserInput
    rects: list[Rect]
    game_over: bool = False


def parse_user_inputs(script: str) -> list[UserInput]:
    """Parse ``"up, k down - none"``-style input scripts; key aliases follow vim (k/j)."""
    inputs: list[UserInput] = []
    for token in _SPLIT_RE.split(script.strip()):
        if not token:
            continue
        try:
            inputs.append(_INPUT_ALIASES[token.lower()])
        except KeyError:
            raise ValueError(f"Unknown input `{token}`; expected one of {', '.join(_INPUT_ALIASES)}") from None
    return inputs


def run_frames(
    state: GameState,
    inputs: Iterable[UserInput],
    *,
    max_frames: int | None = None,
) -> Iterator[FrameRecord]:
    """Play one frame per input: update, check for game over, then collect the rectangles.

    When the game ends the last record has ``game_over`` set and no rectangles.
    """
    for index, user_input in enumerate(inputs):
        if max_frames is not None and index >= max_frames:
            return
        state.update(user_input)
        if state.game_over():
            yield FrameRecord(index=index, user_input=user_input, rects=[], game_over=True)
            return
        yield FrameRecord(index=index, user_input=user_input, rects=state.get_rects())
