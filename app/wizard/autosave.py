"""Periodic, unconditional persistence of wizard answers."""
import asyncio
import logging
from datetime import datetime
from typing import Awaitable, Callable, Optional

from app.core.config import settings

logger = logging.getLogger(__name__)


class AutoSaver:
    """Call ``save`` every ``interval`` seconds and on demand.

    Saving does not track dirty state: every tick saves. A failed save is
    logged and the next tick tries again; nothing is retried in between.
    """

    def __init__(
        self,
        save: Callable[[], Awaitable[None]],
        interval: Optional[float] = None,
    ):
        self._save = save
        self.interval = settings.AUTOSAVE_INTERVAL_SECONDS if interval is None else interval
        self.last_saved: Optional[datetime] = None
        self.failures = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def save_now(self) -> bool:
        try:
            await self._save()
        except Exception as e:
            self.failures += 1
            logger.error(f"Auto-save failed: {e}", exc_info=True)
            return False
        self.last_saved = datetime.now()
        return True

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            await self.save_now()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def __aenter__(self) -> "AutoSaver":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
