"""Tests for cancel module."""

import asyncio

import pytest

from openai_lite.client import CancelReason, CancelToken


class TestCancelToken:
    """Tests for CancelToken."""

    def test_initial_state(self) -> None:
        """Test initial token state."""
        token = CancelToken()
        assert token.is_cancelled is False
        assert token.reason is None

    def test_cancel(self) -> None:
        """Test cancellation."""
        token = CancelToken()
        assert token.cancel(CancelReason.USER_REQUEST) is True
        assert token.is_cancelled is True
        assert token.reason == CancelReason.USER_REQUEST

    def test_cancel_twice(self) -> None:
        """Test cancelling twice keeps the first reason."""
        token = CancelToken()
        assert token.cancel() is True
        assert token.cancel(CancelReason.TIMEOUT) is False
        assert token.reason == CancelReason.USER_REQUEST

    @pytest.mark.asyncio
    async def test_wait(self) -> None:
        """Test waiting for cancellation."""
        token = CancelToken()
        asyncio.get_running_loop().call_later(0.01, token.cancel, CancelReason.USER_REQUEST)
        assert await asyncio.wait_for(token.wait(), 1) == CancelReason.USER_REQUEST

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        """Test the token fires by itself after its timeout."""
        token = CancelToken(timeout=0.01)
        assert await asyncio.wait_for(token.wait(), 1) == CancelReason.TIMEOUT

    @pytest.mark.asyncio
    async def test_manual_cancel_disarms_timeout(self) -> None:
        """Test an explicit cancel keeps its reason after the deadline passes."""
        token = CancelToken(timeout=0.01)
        token.cancel()
        await asyncio.sleep(0.03)
        assert token.reason == CancelReason.USER_REQUEST

    def test_timeout_without_loop(self) -> None:
        """Test a timeout outside an event loop is not armed."""
        token = CancelToken(timeout=0.01)
        assert token.is_cancelled is False
