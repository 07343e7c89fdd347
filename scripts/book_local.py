#!/usr/bin/env python3
"""
Local booking harness (no HTTP).

Usage:
  python3 scripts/book_local.py OSC-001 2025-01-10 10:00

Prints availability for the asset, books the slot through the same use case the
API uses, then prints availability again.
"""

import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from labbook.application.exceptions import BookingError
from labbook.application.use_cases.check_availability import CheckAvailabilityUseCase
from labbook.application.use_cases.create_booking import CreateBookingUseCase
from labbook.infrastructure.store.memory_store import MemoryStorage
from labbook.infrastructure.store.seed_data import SEED_ASSETS


def main(argv: list[str]) -> int:
    if len(argv) != 3:
        print(__doc__)
        return 2
    code, day, slot = argv[0], date.fromisoformat(argv[1]), argv[2]

    store = MemoryStorage(seed_assets=SEED_ASSETS)
    asset = store.get_asset_by_code(code)
    if asset is None:
        print(f"Unknown asset {code}")
        return 1

    availability = CheckAvailabilityUseCase(store)
    print(f"before: {availability.execute(asset.id, day).available_slots}")
    try:
        booking = CreateBookingUseCase(store).execute(
            asset_id=asset.id,
            user_email="local@physics-lab.org",
            purpose="Local harness reservation",
            booking_date=day,
            time_slot=slot,
            duration=1,
        )
    except BookingError as e:
        print(f"rejected: {e.message}")
        return 1
    print(f"booked #{booking.id} {booking.time_slot} status={booking.status}")
    print(f"after:  {availability.execute(asset.id, day).available_slots}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
