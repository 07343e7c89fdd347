from dataclasses import dataclass, field


@dataclass(frozen=True)
class Availability:
    asset_id: int
    available_slots: list[str] = field(default_factory=list)
    booked_slots: list[str] = field(default_factory=list)
