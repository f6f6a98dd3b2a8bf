"""Unit tests for RetryConfig validation and backoff."""

import pytest

from infrastructure.resilience.retry import RetryConfig


@pytest.mark.unit
class TestRetryConfigBackoff:
    def test_default_schedule(self):
        config = RetryConfig()

        delays = [config.calculate_retry_delay(attempt) for attempt in range(1, 6)]

        assert delays == [30, 60, 120, 300, 300]

    def test_delay_capped_by_max(self):
        config = RetryConfig(base_delay_seconds=100, max_delay_seconds=150)

        assert config.calculate_retry_delay(1) == 100
        assert config.calculate_retry_delay(2) == 150

    def test_no_exponential_attempts_always_waits_max(self):
        config = RetryConfig(exponential_attempts=0)

        assert config.calculate_retry_delay(1) == 300

    def test_attempt_must_be_positive(self):
        with pytest.raises(ValueError, match="attempt"):
            RetryConfig().calculate_retry_delay(0)


@pytest.mark.unit
class TestRetryConfigValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_attempts": 0},
            {"base_delay_seconds": -1},
            {"base_delay_seconds": 60, "max_delay_seconds": 30},
            {"max_delay_seconds": 901},
            {"attempt_timeout_seconds": 0},
            {"batch_size": 11},
            {"batch_size": 0},
            {"batch_concurrency": 0},
        ],
    )
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            RetryConfig(**kwargs)

    def test_defaults(self):
        config = RetryConfig()

        assert config.max_attempts == 3
        assert config.attempt_timeout_seconds == 5.0
        assert config.batch_size == 10
