from __future__ import annotations
from typing import Optional, Union

from .codecs import Codec, Codecs
from .handler import Handler
from .runtime import NodeRuntime
from .transport import Transport

class RuntimeBuilder:
    """
    Unconfigured builder. The only step is with_handler(), which returns a
    ConfiguredBuilder; there is no way to build or run without a handler.

      RuntimeBuilder().with_handler(EchoHandler()).build().run()
    """
    def __init__(self, *, transport: Optional[Transport] = None,
                 codec: Union[str, Codec] = "json"):
        self._transport = transport
        self._codec = Codecs.get(codec) if isinstance(codec, str) else codec
        self._consumed = False

    def with_handler(self, handler: Handler) -> "ConfiguredBuilder":
        if self._consumed:
            raise RuntimeError("Builder already has a handler; a runtime takes exactly one")
        if handler is None:
            raise ValueError("A handler is required")
        if not callable(getattr(handler, "reply", None)):
            raise TypeError(f"{handler!r} has no reply(runtime, payload) method")
        if not tuple(getattr(handler, "accepts", ()) or ()):
            raise ValueError(f"{handler!r} declares no accepted payload types")
        self._consumed = True
        return ConfiguredBuilder(handler, self._transport, self._codec)

class ConfiguredBuilder:
    """Builder with a handler attached; build() is its only step."""

    def __init__(self, handler: Handler, transport: Optional[Transport], codec: Codec):
        self._handler = handler
        self._transport = transport
        self._codec = codec
        self._consumed = False

    @property
    def handler(self) -> Handler:
        return self._handler

    def build(self) -> NodeRuntime:
        if self._consumed:
            raise RuntimeError("Builder already produced a runtime")
        self._consumed = True
        return NodeRuntime(self._handler, transport=self._transport, codec=self._codec)
