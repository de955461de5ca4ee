"""CLI entrypoint for lambda-pong."""

from __future__ import annotations

import logging
from dataclasses import asdict
from enum import Enum
from pathlib import Path

import typer
from rich import print

from lambda_pong.config import Settings, settings
from lambda_pong.decoding import clni_to_int, decode_church_bool, decode_rect_list
from lambda_pong.errors import LambdaPongError, ProtocolError, SessionAbortedError
from lambda_pong.game_loop import parse_user_inputs, run_frames
from lambda_pong.game_state import LambdaGameState, open_lambda_game
from lambda_pong.telemetry import configure_logging

app = typer.Typer(help="Run pong games written in lambda calculus")

logger = logging.getLogger("lambda_pong.cli")


class DecodeKind(str, Enum):
    clni = "clni"
    church_bool = "bool"
    rects = "rects"


@app.callback()
def main(log_level: str = typer.Option(None, help="Logging level, e.g. DEBUG or INFO")) -> None:
    configure_logging(log_level or settings.log_level)


def _effective_settings(interpreter: str | None) -> Settings:
    if interpreter is None:
        return settings
    return settings.model_copy(update={"interpreter_bin": interpreter})


def _open_game(source: Path, interpreter: str | None) -> LambdaGameState:
    try:
        return open_lambda_game(source, settings=_effective_settings(interpreter))
    except LambdaPongError as exc:
        logger.error("bootstrap_failed", extra={"source": str(source), "reason": str(exc)})
        print({"error": f"failed to create lambda state: {exc}"})
        raise typer.Exit(code=1)


@app.command()
def start() -> None:
    """Show runtime interpreter configuration."""
    print(
        {
            "app_name": settings.app_name,
            "interpreter_bin": settings.interpreter_bin,
            "interpreter_args": settings.interpreter_args,
            "poll_interval_seconds": settings.poll_interval_seconds,
            "max_frames": settings.max_frames,
        }
    )


@app.command()
def probe(
    source: Path = typer.Argument(..., help="Lambda calculus source file"),
    interpreter: str = typer.Option(None, help="Interpreter binary overriding LAMBDA_PONG_INTERPRETER_BIN"),
) -> None:
    """Load a program and show its scaling, offsets and initial state."""
    with _open_game(source, interpreter) as game:
        print({"bootstrap": asdict(game.info)})


@app.command()
def play(
    source: Path = typer.Argument(..., help="Lambda calculus source file"),
    inputs: str = typer.Option("none", help="Comma separated frame inputs: up/k, down/j, none/-"),
    max_frames: int = typer.Option(None, help="Stop after this many frames"),
    interpreter: str = typer.Option(None, help="Interpreter binary overriding LAMBDA_PONG_INTERPRETER_BIN"),
) -> None:
    """Play a program headlessly, printing the rectangles of each frame."""
    try:
        frame_inputs = parse_user_inputs(inputs)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--inputs")

    limit = max_frames if max_frames is not None else settings.max_frames
    game_over = False
    with _open_game(source, interpreter) as game:
        try:
            for frame in run_frames(game, frame_inputs, max_frames=limit):
                if frame.game_over:
                    game_over = True
                    break
                print(
                    {
                        "frame": frame.index,
                        "input": frame.user_input.value,
                        "rects": [asdict(rect) for rect in frame.rects],
                    }
                )
        except SessionAbortedError as exc:
            print({"aborted": str(exc)})
            raise typer.Exit(code=2)

    print({"game_over": game_over})


@app.command()
def decode(
    kind: DecodeKind = typer.Argument(..., help="What the term encodes"),
    term: str = typer.Argument(..., help="Interpreter output line"),
    scale: int = typer.Option(1, help="Scaling factor for rectangles"),
    x_offset: int = typer.Option(0, help="X offset for rectangles"),
    y_offset: int = typer.Option(0, help="Y offset for rectangles"),
) -> None:
    """Decode one interpreter output line without running a program."""
    try:
        if kind is DecodeKind.clni:
            print({"clni": clni_to_int(term)})
        elif kind is DecodeKind.church_bool:
            print({"bool": decode_church_bool(term)})
        else:
            rects = decode_rect_list(term, scale, x_offset, y_offset)
            print({"rects": [asdict(rect) for rect in rects]})
    except ProtocolError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
