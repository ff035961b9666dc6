from __future__ import annotations
from dataclasses import dataclass

from ..factory import main as run
from ..message import Payload

@dataclass(frozen=True)
class Echo(Payload):
    TYPE = "echo"
    echo: str

@dataclass(frozen=True)
class EchoOk(Payload):
    TYPE = "echo_ok"
    echo: str

class EchoHandler:
    accepts = (Echo,)

    def reply(self, runtime, msg: Echo) -> EchoOk:
        return EchoOk(echo=msg.echo)

def main() -> None:
    run(EchoHandler())

if __name__ == "__main__":
    main()
