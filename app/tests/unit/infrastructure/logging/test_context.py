"""Unit tests for infrastructure.logging.context module."""

import uuid

import pytest
import structlog

from infrastructure.logging.context import (
    bind_invocation_context,
    clear_invocation_context,
    get_correlation_id,
)


@pytest.mark.unit
class TestBindInvocationContext:
    """Test suite for bind_invocation_context context manager."""

    def test_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_invocation_context():
            correlation_id = get_correlation_id()
            assert correlation_id is not None
            uuid.UUID(correlation_id)

    def test_uses_provided_correlation_id(self):
        with bind_invocation_context(correlation_id="req-123"):
            assert get_correlation_id() == "req-123"

    def test_binds_extra_context_and_skips_none(self):
        with bind_invocation_context(
            trigger_source="PostConfirmation_ConfirmSignUp", user_pool_id=None
        ):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["trigger_source"] == "PostConfirmation_ConfirmSignUp"
            assert "user_pool_id" not in ctx

    def test_context_removed_after_block(self):
        with bind_invocation_context(correlation_id="req-1", receive_count=2):
            pass

        ctx = structlog.contextvars.get_contextvars()
        assert "correlation_id" not in ctx
        assert "receive_count" not in ctx

    def test_context_removed_after_exception(self):
        with pytest.raises(RuntimeError):
            with bind_invocation_context(correlation_id="req-2"):
                raise RuntimeError("boom")

        assert get_correlation_id() is None


@pytest.mark.unit
class TestClearInvocationContext:
    def test_clears_all_bound_values(self):
        structlog.contextvars.bind_contextvars(correlation_id="stale", user_id="usr_1")

        clear_invocation_context()

        assert structlog.contextvars.get_contextvars() == {}
