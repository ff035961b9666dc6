
from __future__ import annotations
from enum import StrEnum
from typing import Dict, Optional, Tuple
import logging

from .codecs import Codec, JSONCodec
from .errors import DecodeError, TransportError
from .handler import Handler
from .message import Envelope, Init, InitOk, variants
from .transport import StdioTransport, Transport
from .wire import pack_line, unpack_line

logger = logging.getLogger(__name__)

class RuntimeState(StrEnum):
    AWAITING_INIT = "awaiting_init"
    SERVING       = "serving"
    TERMINATED    = "terminated"

_HANDSHAKE = variants(Init)

class NodeRuntime:
    # Notes:
    # - Built by RuntimeBuilder only once a handler is attached
    # - One line in -> one line out, strictly in order, single threaded
    # - msg_id 0 answers init; the k-th served reply carries msg_id k
    # - Decode and stream failures are fatal and propagate out of run()

    def __init__(self, handler: Handler, *, transport: Optional[Transport] = None,
                 codec: Codec = JSONCodec()):
        self._handler = handler
        self._accepted: Dict[str, type] = variants(*handler.accepts)
        self._transport = transport or StdioTransport()
        self._codec = codec  # controls wire format
        self._next_id = 0
        self._node_id: Optional[str] = None
        self._node_ids: Tuple[str, ...] = ()
        self._state = RuntimeState.AWAITING_INIT
        self._started = False

    # ---- read-only context for handlers ----
    @property
    def node_id(self) -> Optional[str]:
        return self._node_id

    @property
    def node_ids(self) -> Tuple[str, ...]:
        return self._node_ids

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def state(self) -> RuntimeState:
        return self._state

    def run(self) -> None:
        """Handshake, then serve until input closes."""
        if self._started:
            raise RuntimeError("NodeRuntime.run() may only be called once")
        self._started = True
        self._handshake()
        self._serve()

    # ---- stages ----
    def _handshake(self) -> None:
        line = self._transport.read_line()
        if line is None:
            raise TransportError("Input closed before init message")
        try:
            msg = unpack_line(line, self._codec, _HANDSHAKE)
        except DecodeError as ex:
            raise DecodeError(f"Bad init message: {ex}") from ex

        init: Init = msg.body.payload
        self._node_id = init.node_id
        self._node_ids = tuple(init.node_ids)
        self._send(msg.reply(self._next_id, InitOk()))
        self._state = RuntimeState.SERVING
        logger.info("Initialized as %s (%d nodes in cluster)", self._node_id, len(self._node_ids))

    def _serve(self) -> None:
        while True:
            line = self._transport.read_line()
            if line is None:
                break
            msg = unpack_line(line, self._codec, self._accepted)
            self._next_id += 1
            logger.debug("%s <- %s: %s msg_id=%s", self._node_id, msg.src,
                         msg.body.payload.TYPE, msg.body.msg_id)
            out = self._handler.reply(self, msg.body.payload)
            self._send(msg.reply(self._next_id, out))
        self._state = RuntimeState.TERMINATED
        logger.info("Input closed after %d messages; %s stopping", self._next_id, self._node_id)

    def _send(self, env: Envelope) -> None:
        self._transport.write_line(pack_line(env, self._codec))
