"""Boundary for lambda interpreter transports."""

from typing import Protocol


class InterpreterChannel(Protocol):
    """Ordered, synchronous line channel to a lambda calculus interpreter.

    Responses are matched to requests purely by order, so a channel must never be used
    by two callers at once.
    """

    def send_line(self, text: str) -> None:
        """Write one line without waiting for an answer."""

    def request(self, text: str) -> str:
        """Send one expression and return the interpreter's one-line answer."""

    def close(self) -> None:
        """Release the interpreter and its pipes."""
