from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, ClassVar, Dict, List, Optional

@dataclass(frozen=True)
class Payload:
    """
    Base for payload variants. Subclasses are frozen dataclasses that set
    TYPE, the wire 'type' discriminator; their fields sit beside it in the body.
    """
    TYPE: ClassVar[str] = ""

    def to_fields(self) -> Dict[str, Any]:
        return {"type": self.TYPE, **asdict(self)}

# Handshake payloads, fixed by the protocol
@dataclass(frozen=True)
class Init(Payload):
    TYPE = "init"
    node_id: str
    node_ids: List[str]

@dataclass(frozen=True)
class InitOk(Payload):
    TYPE = "init_ok"

@dataclass(frozen=True)
class Body:
    payload: Payload
    msg_id: Optional[int] = None        # sender-assigned sequence number
    in_reply_to: Optional[int] = None   # msg_id of the message being answered

@dataclass(frozen=True)
class Envelope:
    src: str     # sending node, opaque
    dest: str    # intended recipient, opaque
    body: Body

    def reply(self, msg_id: int, payload: Payload) -> "Envelope":
        """Answer this message: addresses swapped, in_reply_to set to our msg_id."""
        return Envelope(
            src=self.dest,
            dest=self.src,
            body=Body(payload=payload, msg_id=msg_id, in_reply_to=self.body.msg_id),
        )

def variants(*classes: type) -> Dict[str, type]:
    """Lookup table from discriminator to payload class."""
    table: Dict[str, type] = {}
    for cls in classes:
        tag = getattr(cls, "TYPE", "")
        if not tag:
            raise ValueError(f"{cls!r} has no TYPE discriminator")
        if tag in table:
            raise ValueError(f"Duplicate payload type {tag!r}: {table[tag].__name__} and {cls.__name__}")
        table[tag] = cls
    return table
