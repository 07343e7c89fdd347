from dataclasses import dataclass


@dataclass(frozen=True)
class AssetStats:
    available: int = 0
    in_use: int = 0
    maintenance: int = 0
    my_bookings: int = 0
