from __future__ import annotations

import json
import logging
from dataclasses import asdict
from datetime import date, datetime
from pathlib import Path
from typing import Any

from labbook.domain.entities.asset import Asset
from labbook.domain.entities.booking import Booking
from labbook.infrastructure.store.memory_store import MemoryStorage


class JsonFileStorage(MemoryStorage):
    """
    MemoryStorage that snapshots both collections to a single JSON file after
    every mutation. The file is read once at startup; seed assets are only
    applied when no readable file exists yet.
    """

    def __init__(self, data_file: str = "./data/labbook.json", seed_assets: list[dict[str, Any]] | None = None) -> None:
        self._data_file = Path(data_file)
        self._data_file.parent.mkdir(parents=True, exist_ok=True)
        self._logger = logging.getLogger(__name__)
        self._loading = True
        super().__init__(seed_assets=None)
        if not self._load():
            for asset_fields in seed_assets or []:
                self.create_asset(asset_fields)
        self._loading = False
        self._save()

    def create_asset(self, fields: dict[str, Any]) -> Asset:
        with self.transaction():
            asset = super().create_asset(fields)
            self._save()
            return asset

    def update_asset(self, asset_id: int, fields: dict[str, Any]) -> Asset | None:
        with self.transaction():
            asset = super().update_asset(asset_id, fields)
            if asset is not None:
                self._save()
            return asset

    def create_booking(self, fields: dict[str, Any]) -> Booking:
        with self.transaction():
            booking = super().create_booking(fields)
            self._save()
            return booking

    def update_booking(self, booking_id: int, fields: dict[str, Any]) -> Booking | None:
        with self.transaction():
            booking = super().update_booking(booking_id, fields)
            if booking is not None:
                self._save()
            return booking

    def _load(self) -> bool:
        """Read the snapshot. Returns False when there is nothing usable to load."""
        if not self._data_file.exists():
            return False
        try:
            with open(self._data_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            # Corrupted file: start over from the seed set, the next save overwrites it.
            self._logger.warning("Unreadable store file %s, reseeding", self._data_file, extra={"reason": str(e)})
            return False

        for raw in data.get("assets", []):
            asset = Asset(
                id=raw["id"],
                asset_id=raw["asset_id"],
                name=raw["name"],
                location=raw["location"],
                category=raw["category"],
                calibration_status=raw["calibration_status"],
                last_calibrated=datetime.fromisoformat(raw["last_calibrated"]),
                next_due=datetime.fromisoformat(raw["next_due"]),
                description=raw.get("description"),
                is_available=raw.get("is_available", True),
                maintenance_status=raw.get("maintenance_status"),
                estimated_return=_parse_optional_datetime(raw.get("estimated_return")),
            )
            self._assets[asset.id] = asset

        for raw in data.get("bookings", []):
            booking = Booking(
                id=raw["id"],
                asset_id=raw["asset_id"],
                user_email=raw["user_email"],
                purpose=raw["purpose"],
                booking_date=date.fromisoformat(raw["booking_date"]),
                time_slot=raw["time_slot"],
                duration=raw["duration"],
                created_at=datetime.fromisoformat(raw["created_at"]),
                status=raw.get("status", "pending"),
            )
            self._bookings[booking.id] = booking

        # Counters are persisted so ids are never reused across restarts.
        self._next_asset_id = data.get("next_asset_id", max(self._assets, default=0) + 1)
        self._next_booking_id = data.get("next_booking_id", max(self._bookings, default=0) + 1)
        self._logger.info(
            "Loaded store from %s (%d assets, %d bookings)",
            self._data_file,
            len(self._assets),
            len(self._bookings),
        )
        return True

    def _save(self) -> None:
        """Write the snapshot atomically via a temp file and rename."""
        if self._loading:
            return
        data = {
            "version": 1,
            "next_asset_id": self._next_asset_id,
            "next_booking_id": self._next_booking_id,
            "assets": [asdict(a) for a in self._assets.values()],
            "bookings": [asdict(b) for b in self._bookings.values()],
        }
        temp_path = self._data_file.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False, default=_json_default)
            temp_path.replace(self._data_file)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise


def _json_default(value: Any) -> str:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _parse_optional_datetime(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
