from __future__ import annotations

import logging
from typing import Any

from labbook.application.exceptions import AssetNotFoundError, DuplicateAssetCodeError
from labbook.application.ports.storage import StoragePort
from labbook.domain.entities.asset import Asset
from labbook.domain.entities.booking import Booking


class AssetCatalogUseCase:
    def __init__(self, store: StoragePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def list_assets(self) -> list[Asset]:
        return self._store.list_assets()

    def get_asset(self, asset_id: int) -> Asset:
        asset = self._store.get_asset(asset_id)
        if asset is None:
            raise AssetNotFoundError(asset_id)
        return asset

    def get_asset_by_code(self, asset_code: str) -> Asset:
        asset = self._store.get_asset_by_code(asset_code)
        if asset is None:
            raise AssetNotFoundError(asset_code)
        return asset

    def create_asset(self, fields: dict[str, Any]) -> Asset:
        with self._store.transaction():
            if self._store.get_asset_by_code(fields["asset_id"]) is not None:
                raise DuplicateAssetCodeError(fields["asset_id"])
            asset = self._store.create_asset(fields)
        self._logger.info("Asset created", extra={"asset_id": asset.id})
        return asset

    def update_asset(self, asset_id: int, fields: dict[str, Any]) -> Asset:
        with self._store.transaction():
            code = fields.get("asset_id")
            if code is not None:
                holder = self._store.get_asset_by_code(code)
                if holder is not None and holder.id != asset_id:
                    raise DuplicateAssetCodeError(code)
            asset = self._store.update_asset(asset_id, fields)
        if asset is None:
            raise AssetNotFoundError(asset_id)
        self._logger.info("Asset updated", extra={"asset_id": asset_id, "fields": ",".join(sorted(fields))})
        return asset

    def list_bookings(self, asset_id: int) -> list[Booking]:
        self.get_asset(asset_id)
        return self._store.list_bookings_by_asset(asset_id)
