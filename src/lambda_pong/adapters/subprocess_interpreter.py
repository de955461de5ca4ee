"""Interpreter transport over the stdin/stdout pipes of a child process.

Each request is one newline-terminated expression and each answer is one line holding
its normal form. An empty read cannot tell "not answered yet" from "exited", so the
process is probed for liveness and the read retried after a fixed interval until one
of the two is confirmed. There is no timeout: a non-terminating evaluation blocks.
"""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Sequence

from lambda_pong.errors import InterpreterIOError, ProcessTerminatedError, SpawnError


class SubprocessInterpreter:
    """Owns one interpreter process and serves it as an ``InterpreterChannel``."""

    def __init__(
        self,
        process: subprocess.Popen[str],
        *,
        poll_interval_seconds: float = 0.001,
        close_timeout_seconds: float = 1.0,
        logger: logging.Logger | None = None,
    ) -> None:
        self._process = process
        self._poll_interval_seconds = poll_interval_seconds
        self._close_timeout_seconds = close_timeout_seconds
        self._logger = logger or logging.getLogger("lambda_pong.interpreter")
        self._closed = False

    @classmethod
    def spawn(
        cls,
        binary: str,
        args: Sequence[str] = (),
        *,
        poll_interval_seconds: float = 0.001,
        logger: logging.Logger | None = None,
    ) -> SubprocessInterpreter:
        """Start ``binary`` with piped stdin/stdout."""
        cmd = [binary, *args]
        try:
            process = subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                bufsize=1,
            )
        except OSError as exc:
            raise SpawnError(
                f"failed to spawn lambda interpreter process `{' '.join(cmd)}`: {exc}. "
                f"Make sure the '{binary}' binary is installed in a directory included in your PATH."
            ) from exc

        interpreter = cls(process, poll_interval_seconds=poll_interval_seconds, logger=logger)
        interpreter._logger.info("interpreter_spawned", extra={"cmd": cmd, "pid": process.pid})
        return interpreter

    @property
    def returncode(self) -> int | None:
        return self._process.poll()

    @property
    def alive(self) -> bool:
        return self.returncode is None

    def send_line(self, text: str) -> None:
        stdin = self._process.stdin
        if stdin is None or stdin.closed:
            raise InterpreterIOError("no input stream in lambda interpreter")
        try:
            stdin.write(f"{text}\n")
            stdin.flush()
        except (ValueError, OSError) as exc:
            raise InterpreterIOError(f"failed to write to process's input stream: {exc}") from exc

    def read_response_line(self, pending_request: str) -> str:
        """Read one line, waiting until it arrives or the process is confirmed dead."""
        stdout = self._process.stdout
        if stdout is None or stdout.closed:
            raise InterpreterIOError("no output stream in lambda interpreter")

        while True:
            try:
                line = stdout.readline()
            except (ValueError, OSError) as exc:
                raise InterpreterIOError(f"failed to read from process's output stream: {exc}") from exc
            if line:
                return line

            returncode = self._process.poll()
            if returncode is not None:
                self._logger.warning(
                    "interpreter_terminated",
                    extra={"returncode": returncode, "pending_request": pending_request},
                )
                raise ProcessTerminatedError(pending_request, returncode)
            time.sleep(self._poll_interval_seconds)

    def request(self, text: str) -> str:
        self._logger.debug("interpreter_request", extra={"request": text})
        try:
            self.send_line(text)
        except InterpreterIOError as exc:
            returncode = self._process.poll()
            if returncode is not None:
                raise ProcessTerminatedError(text, returncode) from exc
            raise
        return self.read_response_line(text).replace("\n", "")

    def close(self) -> None:
        """Terminate the interpreter and close both pipes. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True

        process = self._process
        if process.stdin is not None:
            try:
                process.stdin.close()
            except OSError:
                self._logger.debug("interpreter_stdin_close_failed", exc_info=True)

        if process.poll() is None:
            process.terminate()
            try:
                process.wait(timeout=self._close_timeout_seconds)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()

        if process.stdout is not None:
            process.stdout.close()
        self._logger.info("interpreter_closed", extra={"returncode": process.returncode})

    def __enter__(self) -> SubprocessInterpreter:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
