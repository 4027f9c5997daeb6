import logging

import pytest

from prerelease.core.errors import InstallerFailed
from prerelease.core.retry import RetryingInvoker
from prerelease.models.execution import RetryPolicy

from conftest import FakeRunner


COMMAND = ["./install-rhdh-catalog-source.sh", "--latest"]


def failure_records(caplog):
    return [r for r in caplog.records if r.name == "prerelease.core.retry" and r.levelno >= logging.WARNING]


def test_success_first_try(context, sleeps, caplog):
    runner = FakeRunner([0])
    invoker = RetryingInvoker(runner, sleeper=sleeps.append)

    assert invoker.run_with_retry(COMMAND, RetryPolicy(max_attempts=3, wait_seconds=120), context) == 1
    assert sleeps == []
    assert failure_records(caplog) == []
    assert len(runner.calls) == 1


@pytest.mark.parametrize("failures", [1, 2, 4])
def test_recovers_after_transient_failures(failures, context, sleeps, caplog):
    caplog.set_level(logging.INFO)
    runner = FakeRunner([1] * failures + [0])
    invoker = RetryingInvoker(runner, sleeper=sleeps.append)
    policy = RetryPolicy(max_attempts=5, wait_seconds=7)

    assert invoker.run_with_retry(COMMAND, policy, context) == failures + 1

    warnings = [r for r in failure_records(caplog) if r.levelno == logging.WARNING]
    assert len(warnings) == failures
    assert sleeps == [7] * failures
    assert len(runner.calls) == failures + 1
    assert "attempt 1/5" in warnings[0].getMessage()


@pytest.mark.parametrize("max_attempts", [1, 3])
def test_exhausted_attempts_raise(max_attempts, context, sleeps, caplog):
    caplog.set_level(logging.INFO)
    runner = FakeRunner([2] * max_attempts)
    invoker = RetryingInvoker(runner, sleeper=sleeps.append, description="RHDH install script")
    policy = RetryPolicy(max_attempts=max_attempts, wait_seconds=120)

    with pytest.raises(InstallerFailed) as exc:
        invoker.run_with_retry(COMMAND, policy, context)

    assert exc.value.attempts == max_attempts
    assert f"failed after {max_attempts} attempts" in str(exc.value)
    assert sleeps == [120] * (max_attempts - 1)
    assert len(failure_records(caplog)) == max_attempts
    assert failure_records(caplog)[-1].levelno == logging.ERROR
    assert len(runner.calls) == max_attempts


def test_runs_command_in_work_dir(context, sleeps, tmp_path):
    runner = FakeRunner([0])
    RetryingInvoker(runner, sleeper=sleeps.append).run_with_retry(
        COMMAND, RetryPolicy(), context, cwd=tmp_path
    )
    assert runner.calls[0]["command"] == COMMAND
    assert runner.calls[0]["cwd"] == tmp_path


def test_zero_wait_still_calls_sleeper(context, sleeps):
    runner = FakeRunner([1, 0])
    RetryingInvoker(runner, sleeper=sleeps.append).run_with_retry(
        COMMAND, RetryPolicy(max_attempts=2, wait_seconds=0), context
    )
    assert sleeps == [0]
