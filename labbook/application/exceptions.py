class BookingError(Exception):
    """Base class for errors raised by the booking use cases."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AssetNotFoundError(BookingError):
    def __init__(self, asset_id: int | str) -> None:
        super().__init__("Asset not found")
        self.asset_id = asset_id


class BookingNotFoundError(BookingError):
    def __init__(self, booking_id: int) -> None:
        super().__init__("Booking not found")
        self.booking_id = booking_id


class BusinessRuleViolation(BookingError):
    """Raised when a request is well-formed but current store state rejects it."""
    pass


class AssetUnavailableError(BusinessRuleViolation):
    def __init__(self, asset_id: int) -> None:
        super().__init__("Asset is not available for booking")
        self.asset_id = asset_id


class SlotAlreadyBookedError(BusinessRuleViolation):
    def __init__(self, asset_id: int, time_slot: str) -> None:
        super().__init__("Time slot is already booked")
        self.asset_id = asset_id
        self.time_slot = time_slot


class DuplicateAssetCodeError(BusinessRuleViolation):
    def __init__(self, asset_code: str) -> None:
        super().__init__(f"Asset code {asset_code} already exists")
        self.asset_code = asset_code
