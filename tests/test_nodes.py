import io
import json
import os
import pathlib
import subprocess
import sys

import pytest

from glomers import StdioTransport, run_node
from glomers.nodes import echo, unique_ids
from glomers.nodes.unique_ids import UniqueIdsHandler

from conftest import INIT, make_runtime, replies


def _generate(msg_id, src="c1"):
    return json.dumps({"src": src, "dest": "n1", "body": {"msg_id": msg_id, "type": "generate"}})


def test_unique_ids_never_repeat():
    runtime, stdout = make_runtime(UniqueIdsHandler(), [INIT, _generate(1), _generate(2), _generate(3, "c2")])
    runtime.run()
    out = replies(stdout)[1:]
    ids = [r["body"]["id"] for r in out]
    assert len(set(ids)) == 3
    assert all(i.startswith("n1-") for i in ids)
    assert [r["body"]["type"] for r in out] == ["generate_ok"] * 3
    assert [r["body"]["in_reply_to"] for r in out] == [1, 2, 3]


def test_unique_ids_distinct_across_nodes():
    def ids_for(node, count):
        init = json.dumps({"src": "c1", "dest": node,
                           "body": {"msg_id": 1, "type": "init", "node_id": node, "node_ids": ["n1", "n11"]}})
        runtime, stdout = make_runtime(UniqueIdsHandler(), [init] + [_generate(i) for i in range(count)])
        runtime.run()
        return {r["body"]["id"] for r in replies(stdout)[1:]}

    assert not ids_for("n1", 12) & ids_for("n11", 12)


@pytest.mark.parametrize("module, request_body, expected", [
    (echo, {"type": "echo", "echo": "hi"}, {"type": "echo_ok", "echo": "hi"}),
    (unique_ids, {"type": "generate"}, {"type": "generate_ok", "id": "n1-1"}),
])
def test_main_runs_node_and_exits_cleanly(monkeypatch, module, request_body, expected):
    line = json.dumps({"src": "c1", "dest": "n1", "body": {"msg_id": 2, **request_body}})
    out = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO(INIT + "\n" + line + "\n"))
    monkeypatch.setattr("sys.stdout", out)
    with pytest.raises(SystemExit) as exit_info:
        module.main()
    assert exit_info.value.code == 0
    assert replies(out)[1]["body"] == {"msg_id": 1, "in_reply_to": 2, **expected}


def test_run_node_reports_failure_status():
    stdin = io.StringIO('{"src":"c1","dest":"n1","body":{"msg_id":1,"type":"init","node_ids":["n1"]}}\n')
    stdout = io.StringIO()
    status = run_node(echo.EchoHandler(), transport=StdioTransport(stdin, stdout), log_level="CRITICAL")
    assert status == 1
    assert stdout.getvalue() == ""


def test_run_node_success_status():
    stdout = io.StringIO()
    status = run_node(echo.EchoHandler(), transport=StdioTransport(io.StringIO(INIT + "\n"), stdout),
                      log_level="CRITICAL")
    assert status == 0
    assert replies(stdout)[0]["body"]["type"] == "init_ok"


def test_echo_process_writes_utf8_regardless_of_locale():
    root = pathlib.Path(__file__).resolve().parent.parent
    env = dict(os.environ, PYTHONIOENCODING="ascii", GLOMERS_LOG_LEVEL="CRITICAL",
               PYTHONPATH=os.pathsep.join(filter(None, [str(root), os.environ.get("PYTHONPATH")])))
    request = '{"src":"c1","dest":"n1","body":{"msg_id":2,"type":"echo","echo":"h\\u00e9"}}'
    proc = subprocess.run([sys.executable, "-m", "glomers.nodes.echo"],
                          input=(INIT + "\n" + request + "\n").encode("ascii"),
                          capture_output=True, env=env, timeout=30)
    assert proc.returncode == 0, proc.stderr.decode("utf-8", "replace")
    lines = proc.stdout.decode("utf-8").splitlines()
    assert json.loads(lines[1])["body"] == {"msg_id": 1, "in_reply_to": 2, "type": "echo_ok", "echo": "hé"}
