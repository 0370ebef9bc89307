"""
Auto-dismissing notifications.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger("catalog_admin.notifications")

SUCCESS = "success"
ERROR = "error"


class Toast:
    """
    A single notification slot.

    Showing a new message replaces the current one and restarts the timer.
    """

    def __init__(self, duration_ms: int = 3000, on_change: Optional[Callable[[], None]] = None):
        self.duration_ms = duration_ms
        self.message: Optional[str] = None
        self.kind: Optional[str] = None
        self._on_change = on_change
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def visible(self) -> bool:
        return self.message is not None

    def show(self, message: str, kind: str = SUCCESS) -> None:
        """Display a message; it is dismissed after duration_ms."""
        self._cancel_timer()
        self.message = message
        self.kind = kind
        logger.debug(f"Toast ({kind}): {message}")

        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.duration_ms / 1000, self.dismiss)
        self._notify()

    def dismiss(self) -> None:
        self._cancel_timer()
        if self.message is None:
            return
        self.message = None
        self.kind = None
        self._notify()

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _notify(self) -> None:
        if self._on_change:
            self._on_change()
