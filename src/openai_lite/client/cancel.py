"""
Request cancellation control.

Provides the cancellation token that aborts an in-flight call.
"""

from __future__ import annotations

import asyncio
from enum import Enum


class CancelReason(str, Enum):
    """Reasons for cancellation."""

    USER_REQUEST = "user_request"
    TIMEOUT = "timeout"


class CancelToken:
    """Cancellation token passed to a client call.

    When the token fires while the call is waiting on the network, the
    request is aborted and ``RequestCancelledError`` is raised.

    Example:
        >>> token = CancelToken()
        >>> task = asyncio.create_task(
        ...     client.create_transcription(params, cancel_token=token)
        ... )
        >>> token.cancel(CancelReason.USER_REQUEST)
    """

    def __init__(self, timeout: float | None = None) -> None:
        """Initialize cancellation token.

        Args:
            timeout: Cancel automatically after this many seconds
                (needs a running event loop)
        """
        self._reason: CancelReason | None = None
        self._event = asyncio.Event()
        self._timeout_handle: asyncio.TimerHandle | None = None

        if timeout:
            self._start_timeout(timeout)

    def _start_timeout(self, timeout: float) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running loop; the deadline cannot be armed
            return
        self._timeout_handle = loop.call_later(timeout, self.cancel, CancelReason.TIMEOUT)

    def cancel(self, reason: CancelReason = CancelReason.USER_REQUEST) -> bool:
        """Request cancellation.

        Returns:
            True if cancellation was newly requested, False if already cancelled
        """
        if self._reason is not None:
            return False

        self._reason = reason
        self._event.set()

        if self._timeout_handle is not None:
            self._timeout_handle.cancel()

        return True

    @property
    def is_cancelled(self) -> bool:
        """Check if cancellation was requested."""
        return self._reason is not None

    @property
    def reason(self) -> CancelReason | None:
        return self._reason

    async def wait(self) -> CancelReason:
        """Wait until cancellation is requested."""
        await self._event.wait()
        return self._reason or CancelReason.USER_REQUEST
