import tempfile
from pathlib import Path

import pytest

from prerelease.core.errors import DownloadFailed
from prerelease.integrations.subscription import SubscriptionConfigurator
from prerelease.models.execution import CommandResult, ExecutionContext


class FakeRunner:
    """Returns scripted exit codes and records every call."""

    def __init__(self, returncodes=None, events=None):
        self.returncodes = list(returncodes or [])
        self.calls = []
        self.events = events

    def run(self, command, context, cwd=None, capture=False):
        self.calls.append({
            "command": list(command),
            "cwd": cwd,
            "variables": dict(context.variables),
            "path": list(context.search_path),
        })
        if self.events is not None:
            self.events.append(("run", command[0]))
        code = self.returncodes.pop(0) if self.returncodes else 0
        return CommandResult(command=list(command), returncode=code)


class FakeDownloader:
    """Writes a stub file instead of going to the network."""

    def __init__(self, fail_urls=(), content=b"#!/bin/sh\nexit 0\n", events=None):
        self.fail_urls = set(fail_urls)
        self.content = content
        self.calls = []
        self.events = events

    def fetch(self, url, destination):
        self.calls.append((url, Path(destination)))
        if self.events is not None:
            self.events.append(("fetch", url))
        if url in self.fail_urls or "*" in self.fail_urls:
            raise DownloadFailed(url, "HTTP 404")
        Path(destination).write_bytes(self.content)
        return Path(destination)


class RecordingConfigurator(SubscriptionConfigurator):
    """Captures the variables visible when configure is called."""

    def __init__(self, events=None):
        self.seen = []
        self.events = events

    def configure(self, context):
        self.seen.append(dict(context.variables))
        if self.events is not None:
            self.events.append(("configure", None))


@pytest.fixture
def context():
    return ExecutionContext(
        search_path=["/usr/local/bin", "/usr/bin"],
        inherited={"HOME": "/home/ci"}
    )


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def download_dirs(tmp_path, monkeypatch):
    """Redirect tempfile.mkdtemp under tmp_path and record created dirs."""
    created = []

    def fake_mkdtemp(prefix="tmp", **kwargs):
        path = tmp_path / f"{prefix}{len(created)}"
        path.mkdir()
        created.append(path)
        return str(path)

    monkeypatch.setattr(tempfile, "mkdtemp", fake_mkdtemp)
    return created
