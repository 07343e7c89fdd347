from __future__ import annotations

import logging
from datetime import date

from labbook.application.exceptions import (
    AssetNotFoundError,
    AssetUnavailableError,
    SlotAlreadyBookedError,
)
from labbook.application.ports.storage import StoragePort
from labbook.domain.entities.booking import Booking


class CreateBookingUseCase:
    def __init__(self, store: StoragePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def execute(
        self,
        asset_id: int,
        user_email: str,
        purpose: str,
        booking_date: date,
        time_slot: str,
        duration: int,
    ) -> Booking:
        """
        Reserve one slot of an asset. Input is assumed schema-validated.

        The conflict check compares slot strings only; a booking's duration
        does not block the slots that follow it.
        """
        with self._store.transaction():
            asset = self._store.get_asset(asset_id)
            if asset is None:
                raise AssetNotFoundError(asset_id)

            if not asset.is_available:
                self._logger.info(
                    "Booking rejected",
                    extra={"asset_id": asset_id, "reason": "asset_unavailable"},
                )
                raise AssetUnavailableError(asset_id)

            conflict = next(
                (
                    b
                    for b in self._store.list_bookings_by_date(booking_date)
                    if b.asset_id == asset_id and b.time_slot == time_slot and b.is_active
                ),
                None,
            )
            if conflict is not None:
                self._logger.info(
                    "Booking rejected",
                    extra={
                        "asset_id": asset_id,
                        "booking_date": booking_date.isoformat(),
                        "time_slot": time_slot,
                        "reason": "slot_already_booked",
                    },
                )
                raise SlotAlreadyBookedError(asset_id, time_slot)

            booking = self._store.create_booking(
                {
                    "asset_id": asset_id,
                    "user_email": user_email,
                    "purpose": purpose,
                    "booking_date": booking_date,
                    "time_slot": time_slot,
                    "duration": duration,
                }
            )

        self._logger.info(
            "Booking created",
            extra={
                "booking_id": booking.id,
                "asset_id": asset_id,
                "booking_date": booking.booking_date.isoformat(),
                "time_slot": time_slot,
            },
        )
        return booking
