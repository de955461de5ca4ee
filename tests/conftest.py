from __future__ import annotations

import sys
from pathlib import Path

import pytest

FAKE_INTERPRETER = Path(__file__).parent / "fixtures" / "fake_interpreter.py"

# scalingFactor = 2, xOffset = 0, yOffset = -1; one rectangle with raw (1, 0, 2, 3).
PONG_SOURCE = "\n".join(
    [
        "-- minimal program understood by the fake interpreter",
        r"scalingFactor = (\x u. u (\u1. u1 x))",
        r"xOffset = (\x. x)",
        r"yOffset = (\x. x (\u. u))",
        "initState = state0",
        r"getScreenRects = (\z. z (\f. f (\x u. u x) (\x1. x1) (\x2 u1. u1 (\u2. u2 x2)) (\x3 u3. u3 (\u4. u4 (\u5. u5 x3)))) nil)",
        "framesUntilOver = 2",
        "",
    ]
)


@pytest.fixture
def fake_interpreter_cmd() -> tuple[str, list[str]]:
    return sys.executable, [str(FAKE_INTERPRETER)]


@pytest.fixture
def pong_source(tmp_path: Path) -> Path:
    path = tmp_path / "pong.lc"
    path.write_text(PONG_SOURCE, encoding="utf-8")
    return path
