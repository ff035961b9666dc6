
from __future__ import annotations
from typing import Any, Dict, Protocol as TypingProtocol

import json

class Codec(TypingProtocol):
    name: str
    def dumps(self, obj: Any) -> str: ...
    def loads(self, text: str) -> Any: ...

class JSONCodec:
    # json.dumps escapes control characters, so output is always a single line
    name = "json"
    def dumps(self, obj: Any) -> str:
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    def loads(self, text: str) -> Any:
        return json.loads(text)

class Codecs:
    _registry: Dict[str, Codec] = {"json": JSONCodec()}

    @classmethod
    def get(cls, name: str) -> 'Codec':
        if name not in cls._registry:
            raise ValueError(f"Unknown codec: {name}")
        return cls._registry[name]
