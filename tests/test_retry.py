import asyncio

import pytest

from content_toolkit.services.errors import BillingRequiredError, ConfigurationError, GenerationFailedError
from content_toolkit.services.retry import backoff_delay_ms, retry_request


class Recorder:
    def __init__(self):
        self.sleeps = []

    async def __call__(self, seconds):
        self.sleeps.append(seconds)


def failing(*errors, result="ok"):
    calls = {"n": 0}
    queue = list(errors)

    async def operation():
        calls["n"] += 1
        if queue:
            raise queue.pop(0)
        return result

    return operation, calls


def test_backoff_doubles():
    assert [backoff_delay_ms(i, 2000) for i in range(3)] == [2000, 4000, 8000]


def test_success_after_transient_failures():
    sleep = Recorder()
    operation, calls = failing(RuntimeError("503"), RuntimeError("503"))
    assert asyncio.run(retry_request(operation, retries=3, delay_ms=2000, sleep=sleep)) == "ok"
    assert calls["n"] == 3
    assert sleep.sleeps == [2.0, 4.0]


def test_exhaustion_raises_generation_failed():
    sleep = Recorder()
    operation, calls = failing(*(RuntimeError("server overloaded") for _ in range(3)))
    with pytest.raises(GenerationFailedError) as exc:
        asyncio.run(retry_request(operation, retries=3, delay_ms=2000, sleep=sleep))
    assert calls["n"] == 3
    assert sleep.sleeps == [2.0, 4.0]
    assert exc.value.attempts == 3
    assert "after 3 attempts" in str(exc.value)
    assert "server overloaded" in str(exc.value)


def test_billing_short_circuits(billing_failure):
    sleep = Recorder()
    operation, calls = failing(billing_failure)
    with pytest.raises(BillingRequiredError) as exc:
        asyncio.run(retry_request(operation, retries=3, delay_ms=2000, sleep=sleep))
    assert calls["n"] == 1
    assert sleep.sleeps == []
    assert exc.value.is_billing_error is True


def test_configuration_error_is_not_retried():
    sleep = Recorder()
    operation, calls = failing(ConfigurationError("no key"))
    with pytest.raises(ConfigurationError):
        asyncio.run(retry_request(operation, retries=3, delay_ms=2000, sleep=sleep))
    assert calls["n"] == 1
    assert sleep.sleeps == []
