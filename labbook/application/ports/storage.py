from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import date, datetime
from typing import Any

from labbook.domain.entities.asset import Asset
from labbook.domain.entities.booking import Booking


class StoragePort(ABC):
    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """
        Hold exclusive access to both collections for the duration of the block.
        Re-entrant: store methods called inside the block do not deadlock.
        """
        raise NotImplementedError

    @abstractmethod
    def list_assets(self) -> list[Asset]:
        """All assets in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def get_asset(self, asset_id: int) -> Asset | None:
        raise NotImplementedError

    @abstractmethod
    def get_asset_by_code(self, asset_code: str) -> Asset | None:
        """Lookup by the human-readable code (e.g. "OSC-001")."""
        raise NotImplementedError

    @abstractmethod
    def create_asset(self, fields: dict[str, Any]) -> Asset:
        """Assign the next id, default the optional fields, store and return."""
        raise NotImplementedError

    @abstractmethod
    def update_asset(self, asset_id: int, fields: dict[str, Any]) -> Asset | None:
        """Merge fields into the stored asset. Returns None if the id is unknown."""
        raise NotImplementedError

    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def get_booking(self, booking_id: int) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def list_bookings_by_asset(self, asset_id: int) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_bookings_by_date(self, booking_date: date | datetime | str) -> list[Booking]:
        """Bookings whose calendar date matches. Time of day is ignored."""
        raise NotImplementedError

    @abstractmethod
    def create_booking(self, fields: dict[str, Any]) -> Booking:
        """Assign the next id, set status "pending" and created_at now."""
        raise NotImplementedError

    @abstractmethod
    def update_booking(self, booking_id: int, fields: dict[str, Any]) -> Booking | None:
        """Merge fields into the stored booking. Returns None if the id is unknown."""
        raise NotImplementedError
