"""
Periodic "log your activity" reminder, run as a background asyncio task next to the menu loop.
Shares no state with the workout log; its only output is the console.
"""
from __future__ import annotations

import asyncio
import contextlib
import logging

from fitlog.config import settings

logger = logging.getLogger(__name__)

STOPPED_MESSAGE = "Daily reminder stopped."


async def daily_reminder(interval: float, message: str) -> None:
    """Print message every interval seconds until cancelled; announce the stop, then re-raise."""
    try:
        while True:
            await asyncio.sleep(interval)
            print(message)
    except asyncio.CancelledError:
        print(STOPPED_MESSAGE)
        raise


class ReminderTicker:
    """Owns the reminder task: start() schedules it, stop() cancels and waits for it to finish."""

    def __init__(self, interval: float | None = None, message: str | None = None):
        self.interval = interval if interval is not None else settings.reminder_interval_seconds
        self.message = message if message is not None else settings.reminder_message
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Schedule the reminder and let it enter its loop, so a later stop() always gets the notice."""
        if self.running:
            return
        self._task = asyncio.create_task(daily_reminder(self.interval, self.message), name="daily-reminder")
        await asyncio.sleep(0)
        logger.debug("Reminder started: every %ss", self.interval)

    async def stop(self) -> None:
        """Cancel the reminder and wait until it has printed its stop notice. Safe to call twice."""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.debug("Reminder stopped")
