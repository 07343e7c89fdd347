import logging

from fastapi import Depends

from labbook.core.config import settings
from labbook.application.ports.storage import StoragePort
from labbook.application.use_cases.asset_catalog import AssetCatalogUseCase
from labbook.application.use_cases.check_availability import CheckAvailabilityUseCase
from labbook.application.use_cases.compute_stats import ComputeStatsUseCase
from labbook.application.use_cases.create_booking import CreateBookingUseCase
from labbook.application.use_cases.update_booking import UpdateBookingUseCase
from labbook.infrastructure.store.json_store import JsonFileStorage
from labbook.infrastructure.store.memory_store import MemoryStorage
from labbook.infrastructure.store.seed_data import SEED_ASSETS


_storage: StoragePort | None = None


def get_storage() -> StoragePort:
    global _storage
    if _storage is None:
        seed = SEED_ASSETS if settings.SEED_ASSETS else None
        if settings.STORE_PROVIDER.lower() == "json":
            logging.getLogger(__name__).info("Using JsonFileStorage at %s", settings.DATA_FILE)
            _storage = JsonFileStorage(data_file=settings.DATA_FILE, seed_assets=seed)
        else:
            _storage = MemoryStorage(seed_assets=seed)
    return _storage


def get_asset_catalog_use_case(store: StoragePort = Depends(get_storage)) -> AssetCatalogUseCase:
    return AssetCatalogUseCase(store=store)


def get_check_availability_use_case(store: StoragePort = Depends(get_storage)) -> CheckAvailabilityUseCase:
    return CheckAvailabilityUseCase(store=store)


def get_create_booking_use_case(store: StoragePort = Depends(get_storage)) -> CreateBookingUseCase:
    return CreateBookingUseCase(store=store)


def get_update_booking_use_case(store: StoragePort = Depends(get_storage)) -> UpdateBookingUseCase:
    return UpdateBookingUseCase(store=store)


def get_compute_stats_use_case(store: StoragePort = Depends(get_storage)) -> ComputeStatsUseCase:
    return ComputeStatsUseCase(store=store)
