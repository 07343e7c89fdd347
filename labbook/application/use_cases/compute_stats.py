from __future__ import annotations

from labbook.application.ports.storage import StoragePort
from labbook.domain.entities.stats import AssetStats


class ComputeStatsUseCase:
    def __init__(self, store: StoragePort) -> None:
        self._store = store

    def execute(self) -> AssetStats:
        with self._store.transaction():
            assets = self._store.list_assets()
            bookings = self._store.list_bookings()

        return AssetStats(
            available=sum(1 for a in assets if a.is_available),
            in_use=sum(1 for a in assets if not a.is_available and not a.maintenance_status),
            maintenance=sum(1 for a in assets if a.maintenance_status),
            my_bookings=sum(1 for b in bookings if b.status == "confirmed"),
        )
