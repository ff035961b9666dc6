from __future__ import annotations
import dataclasses
import functools
import types
import typing
from typing import Any, Dict, Mapping

from .codecs import Codec
from .errors import DecodeError
from .message import Body, Envelope, Payload

def pack_line(env: Envelope, codec: Codec) -> str:
    """Encode one envelope as one line (no trailing newline)."""
    payload = env.body.payload
    if not isinstance(payload, Payload):
        raise TypeError(f"Reply payload must be a Payload, got {type(payload).__name__}")
    body: Dict[str, Any] = {}
    if env.body.msg_id is not None:
        body["msg_id"] = env.body.msg_id
    if env.body.in_reply_to is not None:
        body["in_reply_to"] = env.body.in_reply_to
    body.update(payload.to_fields())
    return codec.dumps({"src": env.src, "dest": env.dest, "body": body})

def unpack_line(line: str, codec: Codec, accepted: Mapping[str, type]) -> Envelope:
    """
    Decode one line into an Envelope whose payload is one of `accepted`
    (discriminator -> payload class). Extra body fields are ignored.
    """
    try:
        obj = codec.loads(line.rstrip("\r\n"))
    except (ValueError, RecursionError) as ex:
        raise DecodeError(f"Not valid JSON: {ex}") from ex

    if not isinstance(obj, dict):
        raise DecodeError("Message must be a JSON object")
    for name in ("src", "dest", "body"):
        if name not in obj:
            raise DecodeError(f"Missing required field {name!r}")
    src, dest, body = obj["src"], obj["dest"], obj["body"]
    if not isinstance(src, str) or not isinstance(dest, str):
        raise DecodeError("'src' and 'dest' must be strings")
    if not isinstance(body, dict):
        raise DecodeError("'body' must be a JSON object")

    tag = body.get("type")
    if tag is None:
        raise DecodeError("Body has no 'type'")
    cls = accepted.get(tag) if isinstance(tag, str) else None
    if cls is None:
        raise DecodeError(f"Unexpected message type {tag!r}; expected one of {sorted(accepted)}")

    return Envelope(
        src=src,
        dest=dest,
        body=Body(
            payload=_payload(cls, body),
            msg_id=_seq(body, "msg_id"),
            in_reply_to=_seq(body, "in_reply_to"),
        ),
    )

def _seq(body: Dict[str, Any], name: str):
    value = body.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise DecodeError(f"{name!r} must be an unsigned integer, got {value!r}")
    return value

@functools.lru_cache(maxsize=None)
def _hints(cls: type) -> Dict[str, Any]:
    return typing.get_type_hints(cls)

def _payload(cls: type, body: Dict[str, Any]) -> Payload:
    hints = _hints(cls)
    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name in body:
            value = body[f.name]
            if not _matches(value, hints.get(f.name, Any)):
                raise DecodeError(f"Field {f.name!r} of {cls.TYPE!r} has wrong type: {value!r}")
            kwargs[f.name] = value
        elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
            raise DecodeError(f"Missing field {f.name!r} for {cls.TYPE!r}")
    return cls(**kwargs)

def _matches(value: Any, hint: Any) -> bool:
    # Shallow structural check of a JSON value against a field annotation
    if hint is Any:
        return True
    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        return any(_matches(value, arg) for arg in typing.get_args(hint))
    if hint is type(None):
        return value is None
    if hint is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if origin in (list, tuple):
        args = typing.get_args(hint)
        return isinstance(value, list) and (not args or all(_matches(v, args[0]) for v in value))
    if origin is dict:
        return isinstance(value, dict)
    if isinstance(hint, type):
        return isinstance(value, hint)
    return True
