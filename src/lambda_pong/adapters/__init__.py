"""Lambda interpreter transports."""

from .channel import InterpreterChannel
from .subprocess_interpreter import SubprocessInterpreter

__all__ = ["InterpreterChannel", "SubprocessInterpreter"]
