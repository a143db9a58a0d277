import asyncio
from datetime import datetime, timezone

import pytest

from ecofly.models import FlightState, LiveTrafficSnapshot
from ecofly.services.live_traffic import LiveTrafficPoller


def _snapshot(*callsigns: str, status: str = "ok") -> LiveTrafficSnapshot:
    return LiveTrafficSnapshot(
        status=status,
        flights=[
            FlightState(
                icao24=f"id{idx}",
                callsign=callsign,
                origin_country="Nepal",
                latitude=27.7,
                longitude=85.3,
            )
            for idx, callsign in enumerate(callsigns)
        ],
        fetched_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


class SlowSource:
    def __init__(self, delay: float):
        self.delay = delay
        self.started: list[float] = []
        self.active = 0
        self.max_active = 0

    async def fetch_live_flights(self) -> LiveTrafficSnapshot:
        self.started.append(asyncio.get_running_loop().time())
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.active -= 1
        return _snapshot(f"S{len(self.started)}")


class FailingSource:
    def __init__(self):
        self.call_count = 0

    async def fetch_live_flights(self) -> LiveTrafficSnapshot:
        self.call_count += 1
        raise RuntimeError("upstream exploded")


class FakeSource:
    def __init__(self, snapshots: list[LiveTrafficSnapshot]):
        self.snapshots = list(snapshots)
        self.call_count = 0

    async def fetch_live_flights(self) -> LiveTrafficSnapshot:
        self.call_count += 1
        if len(self.snapshots) > 1:
            return self.snapshots.pop(0)
        return self.snapshots[0]


@pytest.mark.anyio
async def test_refresh_replaces_snapshot_wholesale():
    first = _snapshot("AAA", "BBB")
    second = _snapshot("CCC")
    poller = LiveTrafficPoller(FakeSource([first, second]), interval_seconds=60)

    assert poller.snapshot is None
    assert await poller.refresh() is first
    assert await poller.refresh() is second
    assert [f.callsign for f in poller.snapshot.flights] == ["CCC"]


@pytest.mark.anyio
async def test_refresh_stores_unavailable_snapshot():
    poller = LiveTrafficPoller(FakeSource([_snapshot(status="unavailable")]), interval_seconds=60)

    snapshot = await poller.refresh()

    assert snapshot.status == "unavailable"
    assert poller.snapshot.flights == []


@pytest.mark.anyio
async def test_start_fetches_immediately_and_repeats():
    source = FakeSource([_snapshot("AAA")])
    poller = LiveTrafficPoller(source, interval_seconds=0.01)

    poller.start()
    try:
        for _ in range(100):
            if source.call_count >= 3:
                break
            await asyncio.sleep(0.01)
    finally:
        await poller.stop()

    assert source.call_count >= 3
    assert poller.snapshot is not None
    assert not poller.running


@pytest.mark.anyio
async def test_stop_cancels_timer_once_and_is_idempotent():
    source = FakeSource([_snapshot("AAA")])
    poller = LiveTrafficPoller(source, interval_seconds=60)

    poller.start()
    await asyncio.sleep(0.01)
    assert poller.running

    await poller.stop()
    await poller.stop()

    calls_after_stop = source.call_count
    await asyncio.sleep(0.02)
    assert source.call_count == calls_after_stop
    assert not poller.running


@pytest.mark.anyio
async def test_start_twice_keeps_single_task():
    poller = LiveTrafficPoller(FakeSource([_snapshot()]), interval_seconds=60)

    poller.start()
    task = poller._task
    poller.start()

    assert poller._task is task
    await poller.stop()


@pytest.mark.anyio
async def test_ticks_keep_fixed_period_while_slow_fetches_overlap():
    source = SlowSource(delay=0.15)
    poller = LiveTrafficPoller(source, interval_seconds=0.1)

    poller.start()
    try:
        for _ in range(200):
            if len(source.started) >= 4:
                break
            await asyncio.sleep(0.01)
    finally:
        await poller.stop()

    starts = source.started[:4]
    gaps = [later - earlier for earlier, later in zip(starts, starts[1:])]
    assert len(gaps) == 3
    assert all(abs(gap - 0.1) < 0.05 for gap in gaps)
    assert source.max_active >= 2

    # in-flight fetches are not cancelled by stop and still land
    await asyncio.sleep(0.2)
    assert poller.in_flight == 0
    assert poller.snapshot is not None


@pytest.mark.anyio
async def test_failed_tick_is_logged_and_polling_continues(caplog):
    source = FailingSource()
    poller = LiveTrafficPoller(source, interval_seconds=0.01)

    with caplog.at_level("WARNING", logger="ecofly.live_traffic"):
        poller.start()
        try:
            for _ in range(100):
                if source.call_count >= 2:
                    break
                await asyncio.sleep(0.01)
        finally:
            await poller.stop()
        await asyncio.sleep(0.01)

    assert source.call_count >= 2
    assert "Live traffic poll failed: upstream exploded" in caplog.text
    assert poller.snapshot is None
