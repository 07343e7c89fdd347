from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class Booking:
    id: int
    asset_id: int  # Asset.id, not the human-readable code
    user_email: str
    purpose: str
    booking_date: date
    time_slot: str
    duration: int  # hours
    created_at: datetime
    status: str = "pending"  # "pending", "confirmed", "cancelled"

    @property
    def is_active(self) -> bool:
        return self.status != "cancelled"
