from __future__ import annotations
from dataclasses import dataclass

from ..factory import main as run
from ..message import Payload

@dataclass(frozen=True)
class Generate(Payload):
    TYPE = "generate"

@dataclass(frozen=True)
class GenerateOk(Payload):
    TYPE = "generate_ok"
    id: str

class UniqueIdsHandler:
    """
    Cluster-unique ids without coordination: "<node_id>-<n>" where n counts
    up per node. The separator keeps "n1"+"11" and "n11"+"1" apart.
    """
    accepts = (Generate,)

    def __init__(self):
        self._count = 0

    def reply(self, runtime, msg: Generate) -> GenerateOk:
        self._count += 1
        return GenerateOk(id=f"{runtime.node_id}-{self._count}")

def main() -> None:
    run(UniqueIdsHandler())

if __name__ == "__main__":
    main()
