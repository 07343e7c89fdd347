from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import fields as dataclass_fields, replace
from datetime import date, datetime
from typing import Any

from labbook.application.ports.storage import StoragePort
from labbook.application.utils.time_slots import to_date, to_datetime
from labbook.domain.entities.asset import Asset
from labbook.domain.entities.booking import Booking

_ASSET_FIELDS = {f.name for f in dataclass_fields(Asset)} - {"id"}
_BOOKING_FIELDS = {f.name for f in dataclass_fields(Booking)} - {"id", "created_at"}
_ASSET_DATETIME_FIELDS = ("last_calibrated", "next_due", "estimated_return")


class MemoryStorage(StoragePort):
    def __init__(self, seed_assets: list[dict[str, Any]] | None = None) -> None:
        self._assets: dict[int, Asset] = {}
        self._bookings: dict[int, Booking] = {}
        self._next_asset_id = 1
        self._next_booking_id = 1
        self._lock = threading.RLock()
        for asset_fields in seed_assets or []:
            self.create_asset(asset_fields)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            yield

    def list_assets(self) -> list[Asset]:
        with self._lock:
            return list(self._assets.values())

    def get_asset(self, asset_id: int) -> Asset | None:
        with self._lock:
            return self._assets.get(asset_id)

    def get_asset_by_code(self, asset_code: str) -> Asset | None:
        with self._lock:
            return next((a for a in self._assets.values() if a.asset_id == asset_code), None)

    def create_asset(self, fields: dict[str, Any]) -> Asset:
        with self._lock:
            asset = Asset(id=self._next_asset_id, **_normalize_asset_fields(fields))
            self._next_asset_id += 1
            self._assets[asset.id] = asset
            return asset

    def update_asset(self, asset_id: int, fields: dict[str, Any]) -> Asset | None:
        with self._lock:
            asset = self._assets.get(asset_id)
            if asset is None:
                return None
            updated = replace(asset, **_normalize_asset_fields(fields))
            self._assets[asset_id] = updated
            return updated

    def list_bookings(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings.values())

    def get_booking(self, booking_id: int) -> Booking | None:
        with self._lock:
            return self._bookings.get(booking_id)

    def list_bookings_by_asset(self, asset_id: int) -> list[Booking]:
        with self._lock:
            return [b for b in self._bookings.values() if b.asset_id == asset_id]

    def list_bookings_by_date(self, booking_date: date | datetime | str) -> list[Booking]:
        target = to_date(booking_date)
        with self._lock:
            return [b for b in self._bookings.values() if b.booking_date == target]

    def create_booking(self, fields: dict[str, Any]) -> Booking:
        values = _normalize_booking_fields(fields)
        values["status"] = "pending"
        with self._lock:
            booking = Booking(id=self._next_booking_id, created_at=datetime.now(), **values)
            self._next_booking_id += 1
            self._bookings[booking.id] = booking
            return booking

    def update_booking(self, booking_id: int, fields: dict[str, Any]) -> Booking | None:
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return None
            updated = replace(booking, **_normalize_booking_fields(fields))
            self._bookings[booking_id] = updated
            return updated


def _normalize_asset_fields(fields: dict[str, Any]) -> dict[str, Any]:
    values = {k: v for k, v in fields.items() if k in _ASSET_FIELDS}
    for key in _ASSET_DATETIME_FIELDS:
        if key in values:
            values[key] = to_datetime(values[key])
    return values


def _normalize_booking_fields(fields: dict[str, Any]) -> dict[str, Any]:
    values = {k: v for k, v in fields.items() if k in _BOOKING_FIELDS}
    if "booking_date" in values:
        if values["booking_date"] is None:
            del values["booking_date"]
        else:
            values["booking_date"] = to_date(values["booking_date"])
    return values
