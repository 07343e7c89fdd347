from __future__ import annotations

import logging
from typing import Any

from labbook.application.exceptions import BookingNotFoundError, SlotAlreadyBookedError
from labbook.application.ports.storage import StoragePort
from labbook.application.utils.time_slots import to_date
from labbook.domain.entities.booking import Booking


class UpdateBookingUseCase:
    """Manual edits, mostly status transitions (pending -> confirmed / cancelled)."""

    def __init__(self, store: StoragePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def execute(self, booking_id: int, fields: dict[str, Any]) -> Booking:
        with self._store.transaction():
            current = self._store.get_booking(booking_id)
            if current is None:
                raise BookingNotFoundError(booking_id)

            booking_date = to_date(fields["booking_date"]) if fields.get("booking_date") else current.booking_date
            time_slot = fields.get("time_slot") or current.time_slot
            status = fields.get("status") or current.status

            moved = booking_date != current.booking_date or time_slot != current.time_slot
            # A booking that ends up active must not share its slot with another active one.
            if status != "cancelled" and (moved or not current.is_active):
                conflict = next(
                    (
                        b
                        for b in self._store.list_bookings_by_date(booking_date)
                        if b.id != booking_id
                        and b.asset_id == current.asset_id
                        and b.time_slot == time_slot
                        and b.is_active
                    ),
                    None,
                )
                if conflict is not None:
                    self._logger.info(
                        "Booking update rejected",
                        extra={
                            "booking_id": booking_id,
                            "booking_date": booking_date.isoformat(),
                            "time_slot": time_slot,
                            "reason": "slot_already_booked",
                        },
                    )
                    raise SlotAlreadyBookedError(current.asset_id, time_slot)

            booking = self._store.update_booking(booking_id, fields)

        self._logger.info(
            "Booking updated",
            extra={"booking_id": booking_id, "fields": ",".join(sorted(fields))},
        )
        return booking
