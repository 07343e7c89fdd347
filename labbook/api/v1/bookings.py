from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from labbook.api.v1.schemas import BookingCreateSchema, BookingSchema, BookingUpdateSchema
from labbook.application.exceptions import (
    AssetNotFoundError,
    BookingNotFoundError,
    BusinessRuleViolation,
)
from labbook.application.ports.storage import StoragePort
from labbook.application.use_cases.create_booking import CreateBookingUseCase
from labbook.application.use_cases.update_booking import UpdateBookingUseCase
from labbook.wiring.dependencies import (
    get_create_booking_use_case,
    get_storage,
    get_update_booking_use_case,
)

router = APIRouter(prefix="/api/bookings")


@router.post("", response_model=BookingSchema, status_code=status.HTTP_201_CREATED)
def create_booking(
    req: BookingCreateSchema,
    uc: CreateBookingUseCase = Depends(get_create_booking_use_case),
):
    try:
        booking = uc.execute(
            asset_id=req.asset_id,
            user_email=req.user_email,
            purpose=req.purpose,
            booking_date=req.booking_date,
            time_slot=req.time_slot,
            duration=req.duration,
        )
    except AssetNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except BusinessRuleViolation as e:
        raise HTTPException(status_code=400, detail=e.message)
    return BookingSchema.from_entity(booking)


@router.get("", response_model=list[BookingSchema])
def list_bookings(
    booking_date: date | None = Query(None, alias="date"),
    store: StoragePort = Depends(get_storage),
):
    bookings = store.list_bookings() if booking_date is None else store.list_bookings_by_date(booking_date)
    return [BookingSchema.from_entity(b) for b in bookings]


@router.get("/{booking_id}", response_model=BookingSchema)
def get_booking(booking_id: int, store: StoragePort = Depends(get_storage)):
    booking = store.get_booking(booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return BookingSchema.from_entity(booking)


@router.patch("/{booking_id}", response_model=BookingSchema)
def update_booking(
    booking_id: int,
    req: BookingUpdateSchema,
    uc: UpdateBookingUseCase = Depends(get_update_booking_use_case),
):
    try:
        booking = uc.execute(booking_id, req.to_fields())
    except BookingNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except BusinessRuleViolation as e:
        raise HTTPException(status_code=400, detail=e.message)
    return BookingSchema.from_entity(booking)
