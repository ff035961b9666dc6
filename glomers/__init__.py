"""
Public API:
- RuntimeBuilder, ConfiguredBuilder: two-step construction (handler first, then build)
- NodeRuntime, RuntimeState: the stdin/stdout message loop
- Handler, FunctionHandler, handler: the node logic contract and adapters
- Envelope, Body, Payload, Init, InitOk, variants: wire-level types
- pack_line, unpack_line: one message per JSON line
- Transport, StdioTransport: line transports
- NodeError, TransportError, DecodeError: fatal failures raised by run()
- run_node, main: process entry points with logging and exit status
"""

# Core runtime
from .runtime import NodeRuntime, RuntimeState

# Builder
from .builder import RuntimeBuilder, ConfiguredBuilder

# Handler contract
from .handler import Handler, FunctionHandler, handler

# Wire types
from .message import (
    Envelope,
    Body,
    Payload,
    Init,
    InitOk,
    variants,
)

# Framing helpers
from .wire import pack_line, unpack_line
from .codecs import Codec, Codecs, JSONCodec

# Transport contract
from .transport import Transport, StdioTransport

# Errors & entry points
from .errors import NodeError, TransportError, DecodeError
from .factory import run_node, main
from .log import configure_logging

__all__ = [
    "NodeRuntime",
    "RuntimeState",
    "RuntimeBuilder",
    "ConfiguredBuilder",
    "Handler",
    "FunctionHandler",
    "handler",
    "Envelope",
    "Body",
    "Payload",
    "Init",
    "InitOk",
    "variants",
    "pack_line",
    "unpack_line",
    "Codec",
    "Codecs",
    "JSONCodec",
    "Transport",
    "StdioTransport",
    "NodeError",
    "TransportError",
    "DecodeError",
    "run_node",
    "main",
    "configure_logging",
]

__version__ = "0.1.0"
