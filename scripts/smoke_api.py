#!/usr/bin/env python3
"""Smoke test against a running server: uvicorn labbook.main:app --port 8001"""

import sys
from datetime import date, timedelta

import httpx


BASE_URL = "http://127.0.0.1:8001"


def check_assets() -> int | None:
    print("=" * 60)
    print("GET /api/assets")
    print("=" * 60)
    try:
        response = httpx.get(f"{BASE_URL}/api/assets", timeout=10.0)
        response.raise_for_status()
        assets = response.json()
        for a in assets:
            print(f"  {a['id']:>3} {a['assetId']:<8} available={a['isAvailable']} {a['name']}")
        bookable = next((a for a in assets if a["isAvailable"]), None)
        return bookable["id"] if bookable else None
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None


def check_booking(asset_id: int) -> bool:
    print("\n" + "=" * 60)
    print(f"Booking flow for asset {asset_id}")
    print("=" * 60)
    day = (date.today() + timedelta(days=7)).isoformat()
    availability = httpx.get(f"{BASE_URL}/api/assets/{asset_id}/availability/{day}", timeout=10.0).json()
    print(f"  available on {day}: {availability['availableSlots']}")
    if not availability["availableSlots"]:
        print("⚠️  No free slot, skipping booking")
        return True

    slot = availability["availableSlots"][0]
    payload = {
        "assetId": asset_id,
        "userEmail": "smoke@physics-lab.org",
        "purpose": "Smoke test reservation",
        "bookingDate": day,
        "timeSlot": slot,
        "duration": 1,
    }
    created = httpx.post(f"{BASE_URL}/api/bookings", json=payload, timeout=10.0)
    print(f"  first POST -> {created.status_code} {created.json()}")
    repeat = httpx.post(f"{BASE_URL}/api/bookings", json=payload, timeout=10.0)
    print(f"  second POST -> {repeat.status_code} {repeat.json()}")
    return created.status_code == 201 and repeat.status_code == 400


def main():
    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0)
        print("✅ Server is running\n")
    except Exception:
        print("❌ Server is not running!")
        print("   Please start it with: uvicorn labbook.main:app --reload --port 8001")
        sys.exit(1)

    asset_id = check_assets()
    if asset_id is None:
        print("❌ No bookable asset")
        sys.exit(1)
    ok = check_booking(asset_id)
    stats = httpx.get(f"{BASE_URL}/api/stats", timeout=10.0).json()
    print(f"\nstats: {stats}")
    print("\n✅ Smoke test complete!" if ok else "\n❌ Smoke test failed")
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
