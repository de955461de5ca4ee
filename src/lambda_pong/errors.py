"""Exception hierarchy shared by the interpreter transport, decoders and game adapter."""

from __future__ import annotations


class LambdaPongError(Exception):
    """Base class for every failure raised by lambda-pong."""


class ConfigError(LambdaPongError):
    """Raised when the lambda source file cannot be opened or read."""


class SpawnError(LambdaPongError):
    """Raised when the interpreter process cannot be started."""


class InterpreterIOError(LambdaPongError):
    """Raised when a pipe to the interpreter is closed or broken."""


class ProcessTerminatedError(LambdaPongError):
    """Raised when the interpreter exits while a request is awaiting its response."""

    def __init__(self, pending_request: str, returncode: int | None = None) -> None:
        self.pending_request = pending_request
        self.returncode = returncode
        super().__init__(
            f"lambda interpreter already terminated (exit code {returncode}); input was `{pending_request}`"
        )


class ProtocolError(LambdaPongError, ValueError):
    """Malformed lambda term in interpreter output.

    ``within`` prepends a context label and returns the same instance, so a decoder can
    re-raise the original error type with the outer structure it was decoding.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        self.context: list[str] = []
        super().__init__(message)

    def within(self, label: str) -> ProtocolError:
        self.context.insert(0, label)
        return self

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{' > '.join(self.context)}: {self.message}"


class MissingOpenParenError(ProtocolError):
    pass


class EmptyTermError(ProtocolError):
    pass


class NoLambdaSymbolError(ProtocolError):
    pass


class UnterminatedTermError(ProtocolError):
    pass


class UnterminatedBinderListError(ProtocolError):
    pass


class MissingSeparatorError(ProtocolError):
    pass


class BodyMismatchError(ProtocolError):
    pass


class EmptyNegativeError(ProtocolError):
    """Negative-shaped CLNI term without any wrapped application."""


class BootstrapError(LambdaPongError):
    """Raised when a bootstrap symbol does not evaluate to a decodable term."""

    def __init__(self, symbol: str, response: str, reason: str) -> None:
        self.symbol = symbol
        self.response = response
        super().__init__(f"failed to decode `{symbol}` (interpreter answered `{response}`): {reason}")


class SessionAbortedError(LambdaPongError):
    """Raised for any failure during the per-frame cycle; the session cannot continue."""

    def __init__(self, operation: str, request: str | None, reason: str) -> None:
        self.operation = operation
        self.request = request
        message = f"{operation} failed: {reason}"
        if request is not None:
            message += f"; request was `{request}`"
        super().__init__(message)
