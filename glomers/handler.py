from __future__ import annotations
from typing import Any, Callable, Protocol as TypingProtocol, Tuple

from .message import Payload

class Handler(TypingProtocol):
    """
    Node logic: maps one decoded input payload to one output payload.

    accepts: payload classes this handler decodes (the input variants)
    reply(runtime, payload): called once per served message; `runtime` gives
    read-only node_id / node_ids. State kept on the handler lives as long as
    the process.
    """
    accepts: Tuple[type, ...]
    def reply(self, runtime: Any, payload: Payload) -> Payload: ...

class FunctionHandler:
    """Wrap a plain function fn(runtime, payload) -> Payload as a Handler."""

    def __init__(self, fn: Callable[[Any, Payload], Payload], *accepts: type):
        self._fn = fn
        self.accepts = tuple(accepts)

    def reply(self, runtime: Any, payload: Payload) -> Payload:
        return self._fn(runtime, payload)

    def __repr__(self) -> str:
        names = ", ".join(c.__name__ for c in self.accepts)
        return f"FunctionHandler({getattr(self._fn, '__name__', self._fn)!s}, {names})"

def handler(*accepts: type) -> Callable[[Callable[[Any, Payload], Payload]], FunctionHandler]:
    """
    Decorator form:

        @handler(Echo)
        def echo(runtime, msg):
            return EchoOk(echo=msg.echo)
    """
    def wrap(fn: Callable[[Any, Payload], Payload]) -> FunctionHandler:
        return FunctionHandler(fn, *accepts)
    return wrap
