from __future__ import annotations

import logging
from datetime import date

from labbook.application.exceptions import AssetNotFoundError
from labbook.application.ports.storage import StoragePort
from labbook.application.utils.time_slots import split_slots
from labbook.domain.entities.availability import Availability


class CheckAvailabilityUseCase:
    def __init__(self, store: StoragePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def execute(self, asset_id: int, booking_date: date) -> Availability:
        asset = self._store.get_asset(asset_id)
        if asset is None:
            raise AssetNotFoundError(asset_id)

        if not asset.is_available:
            self._logger.debug("Asset withdrawn, no slots offered", extra={"asset_id": asset_id})
            return Availability(asset_id=asset_id)

        booked = [
            b.time_slot
            for b in self._store.list_bookings_by_date(booking_date)
            if b.asset_id == asset_id and b.is_active
        ]
        available_slots, booked_slots = split_slots(booked)
        return Availability(asset_id=asset_id, available_slots=available_slots, booked_slots=booked_slots)
