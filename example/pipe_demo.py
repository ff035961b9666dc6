
import io

from glomers import FunctionHandler, RuntimeBuilder, StdioTransport
from glomers.nodes.echo import Echo, EchoOk

def main():
    # Feeds a scripted session through the runtime instead of a real harness
    lines = [
        '{"src":"c1","dest":"n1","body":{"msg_id":1,"type":"init","node_id":"n1","node_ids":["n1","n2"]}}',
        '{"src":"c1","dest":"n1","body":{"msg_id":2,"type":"echo","echo":"hello"}}',
        '{"src":"c2","dest":"n1","body":{"msg_id":7,"type":"echo","echo":"again"}}',
    ]
    out = io.StringIO()
    shout = FunctionHandler(lambda rt, msg: EchoOk(echo=f"{rt.node_id} says {msg.echo}"), Echo)

    runtime = (RuntimeBuilder(transport=StdioTransport(io.StringIO("\n".join(lines) + "\n"), out))
               .with_handler(shout)
               .build())
    runtime.run()
    print(out.getvalue(), end="")

if __name__ == "__main__":
    main()
