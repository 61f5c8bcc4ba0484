"""Custom exceptions for vehicletax."""


class VehicleTaxError(Exception):
    """Base exception for vehicle tax computation errors."""


class InvalidInputError(VehicleTaxError):
    """Raised when a raw input value cannot be used in a computation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid input for '{field}': {message}")


class UnsupportedLocaleError(VehicleTaxError):
    """Raised when no formatting conventions exist for a locale."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Unsupported locale: {locale}")
