#!/usr/bin/env python
"""
Run this to exercise the live OpenSky ingestor and flight query layer without calling OpenAI.

Usage (from repo root):
    python scripts/tests/run_live_traffic_test.py [filter] [sort_key]
"""

import asyncio
import sys
from datetime import datetime, timezone

from ecofly.ingestors import NEPAL_BOUNDS, OpenSkyIngestor
from ecofly.services.flight_query import SortConfig, SortKey, query_flights
from ecofly.services.presentation import format_altitude, format_speed


async def main() -> None:
    query = sys.argv[1] if len(sys.argv) > 1 else ""
    sort_key = SortKey(sys.argv[2]) if len(sys.argv) > 2 else SortKey.VELOCITY

    now = datetime.now(timezone.utc)
    print(f"=== Live traffic test for {NEPAL_BOUNDS} (UTC now: {now.isoformat()}) ===\n")

    snapshot = await OpenSkyIngestor().fetch_live_flights()
    print(f"Status: {snapshot.status} error={snapshot.error!r}")

    if not snapshot.flights:
        print("\nNo live flights returned.")
        return

    flights = query_flights(snapshot.flights, query, SortConfig(key=sort_key))
    print(
        f"\nReceived {len(snapshot.flights)} flights; {len(flights)} match {query!r}, "
        f"sorted by {sort_key.value}:"
    )
    for idx, f in enumerate(flights[:10], start=1):
        print(
            f"{idx}. callsign={f.callsign!r}, icao24={f.icao24!r}, origin={f.origin_country!r}, "
            f"lat={f.latitude:.4f}, lon={f.longitude:.4f}, "
            f"speed={format_speed(f.velocity)}, alt={format_altitude(f.baro_altitude)}, "
            f"hdg={f.true_track}"
        )


if __name__ == "__main__":
    asyncio.run(main())
