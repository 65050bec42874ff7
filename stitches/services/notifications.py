"""
Toast notifications.

notify(message) appends a toast that becomes visible after a short delay
and is removed after a longer one. Each toast runs on its own timers, so
overlapping toasts never affect each other. Timers cannot be cancelled.
"""
import itertools
import time
from dataclasses import dataclass
from typing import Callable, List

from stitches import config
from stitches.logging import get_logger, log_text

logger = get_logger(__name__)


@dataclass(frozen=True)
class Toast:
    id: int
    message: str
    show_at: float
    hide_at: float

    def is_shown(self, now: float) -> bool:
        return self.show_at <= now < self.hide_at

    def is_expired(self, now: float) -> bool:
        return now >= self.hide_at


class ToastTray:
    """FIFO stack of toasts driven by an injectable clock (seconds)."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        show_delay_ms: int = config.TOAST_SHOW_DELAY_MS,
        dismiss_delay_ms: int = config.TOAST_DISMISS_DELAY_MS,
    ):
        self._clock = clock
        self._show_delay = show_delay_ms / 1000
        self._dismiss_delay = dismiss_delay_ms / 1000
        self._ids = itertools.count(1)
        self._toasts: List[Toast] = []

    def notify(self, message: str) -> Toast:
        now = self._clock()
        toast = Toast(
            id=next(self._ids),
            message=message,
            show_at=now + self._show_delay,
            hide_at=now + self._dismiss_delay,
        )
        self._toasts.append(toast)
        logger.debug(f"Toast #{toast.id}: {log_text(message)}")
        return toast

    def active(self) -> List[Toast]:
        """Toasts still attached (pending or shown), oldest first."""
        now = self._clock()
        self._toasts = [t for t in self._toasts if not t.is_expired(now)]
        return list(self._toasts)

    def shown(self) -> List[Toast]:
        now = self._clock()
        return [t for t in self.active() if t.is_shown(now)]
