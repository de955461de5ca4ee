"""Game state backed by a lambda calculus program running in an external interpreter.

The program must define ``scalingFactor``, ``xOffset``, ``yOffset`` and ``initState``
plus the functions ``gameOver``, ``nextState`` and ``getScreenRects``. The state term
itself is never decoded; it is handed back to the interpreter on every frame.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import TextIO, TypeVar

from lambda_pong.adapters import InterpreterChannel, SubprocessInterpreter
from lambda_pong.config import Settings, settings as default_settings
from lambda_pong.decoding import clni_to_int, decode_church_bool, decode_rect_list
from lambda_pong.errors import (
    BootstrapError,
    ConfigError,
    LambdaPongError,
    ProtocolError,
    SessionAbortedError,
)
from lambda_pong.models import BootstrapInfo, Rect, SessionPhase, UserInput

SCALING_FACTOR_NAME = "scalingFactor"
X_OFFSET_NAME = "xOffset"
Y_OFFSET_NAME = "yOffset"
INITIAL_STATE = "initState"
GAME_OVER = "gameOver"
UPDATE_STATE = "nextState"
GET_RECTS = "getScreenRects"

T = TypeVar("T")


class LambdaGameState:
    """Drives ``gameOver``/``nextState``/``getScreenRects`` over an interpreter channel.

    Any failure during a frame moves the session to ``TERMINATED``; from then on every
    call raises ``SessionAbortedError``.
    """

    def __init__(
        self,
        channel: InterpreterChannel,
        info: BootstrapInfo,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._channel = channel
        self._info = info
        self._state = info.initial_state
        self._phase = SessionPhase.READY
        self._logger = logger or logging.getLogger("lambda_pong.game_state")

    @classmethod
    def bootstrap(
        cls,
        channel: InterpreterChannel,
        source_lines: Iterable[str],
        *,
        logger: logging.Logger | None = None,
    ) -> LambdaGameState:
        """Load program lines into the interpreter and query the bootstrap symbols."""
        logger = logger or logging.getLogger("lambda_pong.game_state")

        line_count = 0
        for line in source_lines:
            channel.send_line(line)
            line_count += 1
        logger.info("source_streamed", extra={"line_count": line_count})

        scaling_factor = _bootstrap_int(channel, SCALING_FACTOR_NAME)
        x_offset = _bootstrap_int(channel, X_OFFSET_NAME)
        y_offset = _bootstrap_int(channel, Y_OFFSET_NAME)
        initial_state = channel.request(INITIAL_STATE)

        info = BootstrapInfo(
            scaling_factor=scaling_factor,
            x_offset=x_offset,
            y_offset=y_offset,
            initial_state=initial_state,
        )
        logger.info(
            "bootstrap_completed",
            extra={"scaling_factor": scaling_factor, "x_offset": x_offset, "y_offset": y_offset},
        )
        return cls(channel, info, logger=logger)

    @property
    def info(self) -> BootstrapInfo:
        return self._info

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def state_term(self) -> str:
        return self._state

    def game_over(self) -> bool:
        return self._frame_request(GAME_OVER, f"{GAME_OVER} {self._state}", decode_church_bool)

    def update(self, user_input: UserInput) -> None:
        token = UserInput(user_input).value
        self._state = self._frame_request(UPDATE_STATE, f"{UPDATE_STATE} {self._state} {token}", str)

    def get_rects(self) -> list[Rect]:
        info = self._info
        return self._frame_request(
            GET_RECTS,
            f"{GET_RECTS} {self._state}",
            lambda answer: decode_rect_list(answer, info.scaling_factor, info.x_offset, info.y_offset),
        )

    def close(self) -> None:
        self._channel.close()

    def __enter__(self) -> LambdaGameState:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _frame_request(self, operation: str, request: str, decode: Callable[[str], T]) -> T:
        if self._phase is SessionPhase.TERMINATED:
            raise SessionAbortedError(operation, None, "session already terminated")

        try:
            return decode(self._channel.request(request))
        except LambdaPongError as exc:
            self._phase = SessionPhase.TERMINATED
            self._logger.error(
                "session_aborted",
                extra={"operation": operation, "request": request, "reason": str(exc)},
            )
            raise SessionAbortedError(operation, request, str(exc)) from exc


def open_lambda_game(
    source_path: str | Path,
    *,
    settings: Settings | None = None,
    logger: logging.Logger | None = None,
) -> LambdaGameState:
    """Spawn the configured interpreter and bootstrap the program in ``source_path``.

    The interpreter is shut down again if any step of the bootstrap fails.
    """
    settings = settings or default_settings
    path = Path(source_path)
    try:
        handle = path.open("r", encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to open file '{path}': {exc}") from exc

    with handle:
        channel = SubprocessInterpreter.spawn(
            settings.interpreter_bin,
            settings.interpreter_args,
            poll_interval_seconds=settings.poll_interval_seconds,
        )
        try:
            return LambdaGameState.bootstrap(channel, _source_lines(handle, path), logger=logger)
        except BaseException:
            channel.close()
            raise


def _bootstrap_int(channel: InterpreterChannel, symbol: str) -> int:
    response = channel.request(symbol)
    try:
        return clni_to_int(response)
    except ProtocolError as exc:
        raise BootstrapError(symbol, response, str(exc)) from exc


def _source_lines(handle: TextIO, path: Path) -> Iterator[str]:
    try:
        for line in handle:
            yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"failed to read line from file '{path}': {exc}") from exc
