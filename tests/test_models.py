import os

import pytest
from pydantic import ValidationError

from prerelease.models import ExecutionContext, RetryPolicy, ToolSpec, CommandResult


def test_tool_spec_resolve_url():
    spec = ToolSpec(name="demo", version="1.2.3", url_template="https://x/v{version}/{os}-{arch}/demo")
    assert spec.resolve_url("linux", "arm64") == "https://x/v1.2.3/linux-arm64/demo"


def test_context_from_environ_splits_path():
    env = {"PATH": os.pathsep.join(["/a", "", "/b"]), "HOME": "/root"}
    ctx = ExecutionContext.from_environ(env)
    assert ctx.search_path == ["/a", "/b"]
    assert ctx.inherited == {"HOME": "/root"}
    assert ctx.variables == {}


def test_context_prepend_and_render():
    ctx = ExecutionContext(search_path=["/usr/bin"], inherited={"HOME": "/h", "CHANNEL": "old"})
    ctx.prepend_path("/tmp/tool")
    ctx.set_variable("CHANNEL", "fast-1.9")

    env = ctx.to_environ()
    assert env["PATH"] == os.pathsep.join(["/tmp/tool", "/usr/bin"])
    assert env["CHANNEL"] == "fast-1.9"
    assert env["HOME"] == "/h"


def test_context_does_not_touch_process_environment(monkeypatch):
    monkeypatch.setenv("PATH", "/only/here")
    ctx = ExecutionContext.from_environ()
    ctx.prepend_path("/new")
    ctx.set_variable("SUBSCRIPTION", "developerHub")
    assert os.environ["PATH"] == "/only/here"
    assert "SUBSCRIPTION" not in os.environ


@pytest.mark.parametrize("kwargs", [{"max_attempts": 0}, {"wait_seconds": -1}])
def test_retry_policy_bounds(kwargs):
    with pytest.raises(ValidationError):
        RetryPolicy(**kwargs)


def test_command_result_succeeded():
    assert CommandResult(command=["true"], returncode=0).succeeded
    assert not CommandResult(command=["false"], returncode=1).succeeded
