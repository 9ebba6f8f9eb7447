"""
Unit tests for the bounded retry gateway.
No real sleeping: delays are recorded instead.
"""

import pytest

from starknet_checker.core.errors import GatewayError, PipelineError
from starknet_checker.core.retry import MAX_RETRIES, call_with_retry, with_retry


class Flaky:
    """Fails `failures` times, then returns `value`."""

    def __init__(self, failures, value="ok"):
        self.failures = failures
        self.value = value
        self.attempts = 0

    def __call__(self):
        self.attempts += 1
        if self.attempts <= self.failures:
            raise ConnectionError(f"boom {self.attempts}")
        return self.value


def test_success_first_try_has_no_delay(sleeps):
    op = Flaky(0)
    assert call_with_retry(op, 3, sleep=sleeps.append) == "ok"
    assert op.attempts == 1
    assert sleeps == []


def test_fails_twice_then_succeeds(sleeps):
    op = Flaky(2, value=42)
    assert call_with_retry(op, 3, sleep=sleeps.append) == 42
    assert op.attempts == 3
    assert sleeps == [1.0, 2.0]


def test_always_failing_gives_up_after_four_attempts(sleeps):
    op = Flaky(100)
    with pytest.raises(GatewayError, match="Max retries reached: boom 4") as exc_info:
        call_with_retry(op, 3, sleep=sleeps.append)
    assert op.attempts == 4
    assert sleeps == [1.0, 2.0, 3.0]
    assert exc_info.value.attempts == 4
    assert isinstance(exc_info.value.last_error, ConnectionError)
    assert exc_info.value.__cause__ is exc_info.value.last_error


def test_gateway_error_is_pipeline_error(sleeps):
    with pytest.raises(PipelineError):
        call_with_retry(Flaky(100), 0, sleep=sleeps.append)


def test_zero_retries_means_single_attempt(sleeps):
    op = Flaky(100)
    with pytest.raises(GatewayError):
        call_with_retry(op, 0, sleep=sleeps.append)
    assert op.attempts == 1
    assert sleeps == []


def test_backoff_unit_scales_delays(sleeps):
    op = Flaky(3)
    call_with_retry(op, 3, backoff_unit=0.5, sleep=sleeps.append)
    assert sleeps == [0.5, 1.0, 1.5]


def test_default_budget_is_three():
    assert MAX_RETRIES == 3


def test_decorator_form(sleeps):
    calls = []

    @with_retry(max_retries=2, sleep=sleeps.append)
    def fetch(x, y=0):
        calls.append((x, y))
        if len(calls) < 2:
            raise TimeoutError("slow node")
        return x + y

    assert fetch(1, y=2) == 3
    assert calls == [(1, 2), (1, 2)]
    assert sleeps == [1.0]
    assert fetch.__name__ == "fetch"


def test_retries_are_logged(sleeps, caplog):
    with caplog.at_level("WARNING", logger="starknet_checker.retry"):
        call_with_retry(Flaky(1), 3, sleep=sleeps.append, description="get_thing")
    assert "get_thing failed (attempt 1/4)" in caplog.text


def test_retry_on_limits_retried_errors(sleeps):
    op = Flaky(1)
    assert call_with_retry(op, 3, sleep=sleeps.append, retry_on=(ConnectionError,)) == "ok"
    assert op.attempts == 2


def test_other_errors_propagate_without_retry(sleeps):
    calls = []

    def broken():
        calls.append(1)
        raise KeyError("selector")

    with pytest.raises(KeyError):
        call_with_retry(broken, 3, sleep=sleeps.append, retry_on=(ConnectionError,))
    assert calls == [1]
    assert sleeps == []


def test_decorator_passes_retry_on(sleeps):
    @with_retry(max_retries=2, sleep=sleeps.append, retry_on=(TimeoutError,))
    def fetch():
        raise ValueError("bad payload")

    with pytest.raises(ValueError):
        fetch()
    assert sleeps == []
