from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from labbook.api.v1.schemas import (
    AssetCreateSchema,
    AssetSchema,
    AssetUpdateSchema,
    AvailabilitySchema,
    BookingSchema,
)
from labbook.application.exceptions import AssetNotFoundError, BusinessRuleViolation
from labbook.application.use_cases.asset_catalog import AssetCatalogUseCase
from labbook.application.use_cases.check_availability import CheckAvailabilityUseCase
from labbook.wiring.dependencies import get_asset_catalog_use_case, get_check_availability_use_case

router = APIRouter(prefix="/api/assets")


@router.get("", response_model=list[AssetSchema])
def list_assets(uc: AssetCatalogUseCase = Depends(get_asset_catalog_use_case)):
    return [AssetSchema.from_entity(a) for a in uc.list_assets()]


@router.post("", response_model=AssetSchema, status_code=status.HTTP_201_CREATED)
def create_asset(
    req: AssetCreateSchema,
    uc: AssetCatalogUseCase = Depends(get_asset_catalog_use_case),
):
    try:
        asset = uc.create_asset(req.model_dump(mode="json"))
    except BusinessRuleViolation as e:
        raise HTTPException(status_code=400, detail=e.message)
    return AssetSchema.from_entity(asset)


@router.get("/code/{asset_code}", response_model=AssetSchema)
def get_asset_by_code(asset_code: str, uc: AssetCatalogUseCase = Depends(get_asset_catalog_use_case)):
    try:
        return AssetSchema.from_entity(uc.get_asset_by_code(asset_code))
    except AssetNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.get("/{asset_id}", response_model=AssetSchema)
def get_asset(asset_id: int, uc: AssetCatalogUseCase = Depends(get_asset_catalog_use_case)):
    try:
        return AssetSchema.from_entity(uc.get_asset(asset_id))
    except AssetNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.patch("/{asset_id}", response_model=AssetSchema)
def update_asset(
    asset_id: int,
    req: AssetUpdateSchema,
    uc: AssetCatalogUseCase = Depends(get_asset_catalog_use_case),
):
    try:
        asset = uc.update_asset(asset_id, req.to_fields())
    except AssetNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except BusinessRuleViolation as e:
        raise HTTPException(status_code=400, detail=e.message)
    return AssetSchema.from_entity(asset)


@router.get("/{asset_id}/bookings", response_model=list[BookingSchema])
def list_asset_bookings(asset_id: int, uc: AssetCatalogUseCase = Depends(get_asset_catalog_use_case)):
    try:
        bookings = uc.list_bookings(asset_id)
    except AssetNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return [BookingSchema.from_entity(b) for b in bookings]


@router.get("/{asset_id}/availability/{booking_date}", response_model=AvailabilitySchema)
def get_availability(
    asset_id: int,
    booking_date: date,
    uc: CheckAvailabilityUseCase = Depends(get_check_availability_use_case),
):
    try:
        availability = uc.execute(asset_id, booking_date)
    except AssetNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return AvailabilitySchema.from_entity(availability)
