# scheduler.py
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Restartable repeating timer driven by the host loop.

    The host calls poll(now_ms) every frame; the callback fires at most once
    per poll, once delay_ms has elapsed since the timer was armed or last
    fired. Only one timer exists at a time: reschedule() drops the old one
    before arming the new one, and cancel() guarantees nothing fires until
    the next reschedule().
    """

    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self.delay_ms: Optional[int] = None
        self._next_due: Optional[int] = None
        self._firing = False

    @property
    def active(self) -> bool:
        return self._next_due is not None

    def reschedule(self, delay_ms: int, now_ms: int) -> None:
        if delay_ms <= 0:
            raise ValueError(f"delay_ms must be positive, got {delay_ms}")
        self.cancel()
        self.delay_ms = delay_ms
        self._next_due = now_ms + delay_ms
        logger.debug(f"Timer armed: every {delay_ms} ms from t={now_ms}")

    def cancel(self) -> None:
        if self._next_due is not None:
            logger.debug("Timer cancelled")
        self._next_due = None
        self.delay_ms = None

    def poll(self, now_ms: int) -> bool:
        """Fire the callback if a tick is due. Returns True if it fired."""
        if self._next_due is None or self._firing or now_ms < self._next_due:
            return False

        delay = self.delay_ms
        due = self._next_due
        # Keep the cadence; if the host fell behind by more than one
        # interval, resync instead of firing a burst of catch-up ticks.
        next_due = due + delay
        if next_due <= now_ms:
            next_due = now_ms + delay
        self._next_due = next_due

        self._firing = True
        try:
            self.callback()
        finally:
            self._firing = False
        return True
