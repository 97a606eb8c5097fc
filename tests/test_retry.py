"""Unit tests for the retry decorator."""

import functools
import logging

import pytest

from careerpilot.retry import backoff_delay, retry


class Flaky:
    def __init__(self, failures: int, exc: type = ConnectionError):
        self.failures = failures
        self.exc = exc
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.exc("transient")
        return "ok"


class TestRetry:

    def test_succeeds_after_transient_failures(self):
        delays: list[float] = []
        fn = Flaky(failures=2)
        wrapped = retry(max_attempts=3, base_delay=1.0, jitter=False, sleep=delays.append)(fn)

        assert wrapped() == "ok"
        assert fn.calls == 3
        assert delays == [1.0, 2.0]

    def test_reraises_after_max_attempts(self):
        fn = Flaky(failures=5)
        wrapped = retry(max_attempts=2, jitter=False, sleep=lambda s: None)(fn)

        with pytest.raises(ConnectionError):
            wrapped()
        assert fn.calls == 2

    def test_non_retryable_propagates_immediately(self):
        fn = Flaky(failures=1, exc=KeyError)
        wrapped = retry(max_attempts=3, retryable=(ConnectionError,), sleep=lambda s: None)(fn)

        with pytest.raises(KeyError):
            wrapped()
        assert fn.calls == 1

    def test_wraps_partials(self):
        calls: list[int] = []

        def fetch(page: int) -> int:
            calls.append(page)
            if len(calls) < 2:
                raise ConnectionError("reset")
            return page

        wrapped = retry(max_attempts=3, jitter=False, sleep=lambda s: None)(functools.partial(fetch, 4))

        assert wrapped() == 4
        assert calls == [4, 4]

    def test_logs_callable_object_by_repr(self, caplog):
        fn = Flaky(failures=1)
        wrapped = retry(max_attempts=2, jitter=False, sleep=lambda s: None)(fn)

        with caplog.at_level(logging.WARNING, logger="careerpilot.retry"):
            assert wrapped() == "ok"

        assert repr(fn) in caplog.text


class TestBackoffDelay:

    def test_exponential_and_capped(self):
        delays = [
            backoff_delay(n, base_delay=1.0, max_delay=5.0, backoff_factor=2.0, jitter=False)
            for n in range(1, 6)
        ]
        assert delays == [1.0, 2.0, 4.0, 5.0, 5.0]

    def test_jitter_bounds(self):
        for _ in range(50):
            delay = backoff_delay(2, base_delay=1.0, max_delay=30.0, backoff_factor=2.0, jitter=True)
            assert 1.0 <= delay <= 3.0
