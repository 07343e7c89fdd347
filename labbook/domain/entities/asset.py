from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Asset:
    id: int
    asset_id: str  # human-readable code, e.g. "OSC-001"
    name: str
    location: str
    category: str
    calibration_status: str  # "calibrated", "due_soon", "overdue"
    last_calibrated: datetime
    next_due: datetime
    description: str | None = None
    is_available: bool = True
    maintenance_status: str | None = None  # "maintenance", "repair", None
    estimated_return: datetime | None = None
