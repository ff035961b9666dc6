from __future__ import annotations

class NodeError(Exception):
    """Fatal runtime failure; the node cannot keep serving."""

class TransportError(NodeError):
    """Input or output stream could not be read from or written to."""

class DecodeError(NodeError):
    """A line is not a well-formed message for the current protocol stage."""
