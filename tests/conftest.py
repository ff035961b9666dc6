import io
import json

import pytest

from glomers import RuntimeBuilder, StdioTransport
from glomers.nodes.echo import EchoHandler

INIT = '{"src":"c1","dest":"n1","body":{"msg_id":1,"type":"init","node_id":"n1","node_ids":["n1"]}}'


def make_runtime(handler, lines):
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    runtime = (RuntimeBuilder(transport=StdioTransport(stdin, stdout))
               .with_handler(handler)
               .build())
    return runtime, stdout


def replies(stdout):
    return [json.loads(line) for line in stdout.getvalue().splitlines()]


def echo_line(msg_id, text, src="c1", dest="n1"):
    return json.dumps({"src": src, "dest": dest,
                       "body": {"msg_id": msg_id, "type": "echo", "echo": text}})


@pytest.fixture
def echo_session():
    def _run(*lines):
        runtime, stdout = make_runtime(EchoHandler(), [INIT, *lines])
        runtime.run()
        return runtime, replies(stdout)
    return _run
