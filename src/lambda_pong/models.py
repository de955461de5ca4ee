from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UserInput(str, Enum):
    """Per-frame player input; the value is the token passed to ``nextState``."""

    UP = "up"
    DOWN = "down"
    NEUTRAL = "none"


class SessionPhase(str, Enum):
    """Lifecycle of a lambda game session."""

    INITIALIZING = "initializing"
    READY = "ready"
    TERMINATED = "terminated"


@dataclass(slots=True, frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int


@dataclass(slots=True, frozen=True)
class BootstrapInfo:
    scaling_factor: int
    x_offset: int
    y_offset: int
    initial_state: str
