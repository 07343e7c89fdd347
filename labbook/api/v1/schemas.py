from __future__ import annotations

from dataclasses import asdict
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from labbook.application.utils.time_slots import TIME_SLOTS, is_known_slot
from labbook.domain.entities.asset import Asset
from labbook.domain.entities.availability import Availability
from labbook.domain.entities.booking import Booking
from labbook.domain.entities.stats import AssetStats


_NULLABLE_ASSET_FIELDS = {"description", "maintenance_status", "estimated_return"}


class CalibrationStatus(str, Enum):
    calibrated = "calibrated"
    due_soon = "due_soon"
    overdue = "overdue"


class MaintenanceStatus(str, Enum):
    maintenance = "maintenance"
    repair = "repair"


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _check_slot(value: str | None) -> str | None:
    if value is not None and not is_known_slot(value):
        raise ValueError(f"Time slot must be one of {', '.join(TIME_SLOTS)}")
    return value


class AssetSchema(CamelModel):
    id: int
    asset_id: str
    name: str
    description: str | None = None
    location: str
    category: str
    calibration_status: CalibrationStatus
    last_calibrated: datetime
    next_due: datetime
    is_available: bool
    maintenance_status: MaintenanceStatus | None = None
    estimated_return: datetime | None = None

    @classmethod
    def from_entity(cls, asset: Asset) -> "AssetSchema":
        return cls.model_validate(asdict(asset))


class AssetCreateSchema(CamelModel):
    asset_id: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1)
    description: str | None = None
    location: str = Field(min_length=1)
    category: str = Field(min_length=1)
    calibration_status: CalibrationStatus
    last_calibrated: datetime
    next_due: datetime
    is_available: bool = True
    maintenance_status: MaintenanceStatus | None = None
    estimated_return: datetime | None = None


class AssetUpdateSchema(CamelModel):
    asset_id: str | None = Field(default=None, min_length=1, max_length=50)
    name: str | None = None
    description: str | None = None
    location: str | None = None
    category: str | None = None
    calibration_status: CalibrationStatus | None = None
    last_calibrated: datetime | None = None
    next_due: datetime | None = None
    is_available: bool | None = None
    maintenance_status: MaintenanceStatus | None = None
    estimated_return: datetime | None = None

    def to_fields(self) -> dict[str, Any]:
        """Explicitly sent fields; null only clears the optional ones."""
        data = self.model_dump(mode="json", exclude_unset=True)
        return {k: v for k, v in data.items() if v is not None or k in _NULLABLE_ASSET_FIELDS}


class BookingSchema(CamelModel):
    id: int
    asset_id: int
    user_email: str
    purpose: str
    booking_date: date
    time_slot: str
    duration: int
    status: BookingStatus
    created_at: datetime

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingSchema":
        return cls.model_validate(asdict(booking))


class BookingCreateSchema(CamelModel):
    asset_id: int
    user_email: EmailStr
    purpose: str = Field(min_length=10)
    booking_date: date
    time_slot: str = Field(min_length=1)
    duration: int = Field(ge=1)

    @field_validator("time_slot")
    @classmethod
    def check_time_slot(cls, value: str | None) -> str | None:
        return _check_slot(value)


class BookingUpdateSchema(CamelModel):
    user_email: EmailStr | None = None
    purpose: str | None = Field(default=None, min_length=10)
    booking_date: date | None = None
    time_slot: str | None = None
    duration: int | None = Field(default=None, ge=1)
    status: BookingStatus | None = None

    @field_validator("time_slot")
    @classmethod
    def check_time_slot(cls, value: str | None) -> str | None:
        return _check_slot(value)

    def to_fields(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", exclude_unset=True)
        return {k: v for k, v in data.items() if v is not None}


class AvailabilitySchema(CamelModel):
    available_slots: list[str]
    booked_slots: list[str]

    @classmethod
    def from_entity(cls, availability: Availability) -> "AvailabilitySchema":
        return cls(available_slots=availability.available_slots, booked_slots=availability.booked_slots)


class StatsSchema(CamelModel):
    available: int
    in_use: int
    maintenance: int
    my_bookings: int

    @classmethod
    def from_entity(cls, stats: AssetStats) -> "StatsSchema":
        return cls.model_validate(asdict(stats))
