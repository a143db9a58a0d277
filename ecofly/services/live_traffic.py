"""Periodic polling of live traffic with a wholesale-replaced latest snapshot."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Optional, Protocol

from ecofly.config import settings
from ecofly.models.air_traffic import LiveTrafficSnapshot

logger = logging.getLogger("ecofly.live_traffic")


class LiveTrafficSource(Protocol):
    """Anything that can produce a live traffic snapshot."""

    async def fetch_live_flights(self) -> LiveTrafficSnapshot:
        """Fetch the current flight set."""


class LiveTrafficPoller:
    """Keep the latest live traffic snapshot fresh on a fixed interval.

    Fetches are not serialized. When two overlap, whichever settles last
    replaces the snapshot; the snapshot is never patched in place.
    """

    def __init__(
        self,
        source: LiveTrafficSource,
        *,
        interval_seconds: float | None = None,
    ) -> None:
        self.source = source
        self.interval_seconds = interval_seconds or settings.live_traffic_poll_seconds
        self.snapshot: Optional[LiveTrafficSnapshot] = None
        self._task: Optional[asyncio.Task] = None
        self._inflight: set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def in_flight(self) -> int:
        """Number of fetches started by the timer that have not settled yet."""

        return len(self._inflight)

    async def refresh(self) -> LiveTrafficSnapshot:
        """Fetch once and store the result as the latest snapshot."""

        snapshot = await self.source.fetch_live_flights()
        self.snapshot = snapshot
        logger.info(
            "Live traffic refreshed: status=%s flights=%s",
            snapshot.status,
            len(snapshot.flights),
        )
        return snapshot

    def _spawn_refresh(self) -> asyncio.Task:
        fetch = asyncio.create_task(self.refresh())
        self._inflight.add(fetch)
        fetch.add_done_callback(self._on_refresh_done)
        return fetch

    def _on_refresh_done(self, fetch: asyncio.Task) -> None:
        self._inflight.discard(fetch)
        if fetch.cancelled():
            return
        exc = fetch.exception()
        if exc is not None:
            logger.warning("Live traffic poll failed: %s", exc)

    async def run(self) -> None:
        """Start a fetch immediately, then one every ``interval_seconds``.

        Ticks follow a fixed schedule and do not wait for the previous fetch,
        so a slow upstream can leave several fetches in flight at once.
        """

        loop = asyncio.get_running_loop()
        next_tick = loop.time()
        try:
            while True:
                self._spawn_refresh()
                next_tick += self.interval_seconds
                await asyncio.sleep(max(0.0, next_tick - loop.time()))
        except asyncio.CancelledError:
            logger.info("Live traffic poller cancelled")
            raise

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self.run())
        logger.info("Live traffic poller started (every %ss)", self.interval_seconds)

    async def stop(self) -> None:
        """Cancel the repeating timer; safe to call more than once.

        Fetches already in flight are left to settle.
        """

        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Live traffic poller stopped")


__all__ = ["LiveTrafficPoller", "LiveTrafficSource"]
