"""
Centralized exception hierarchy for domain-specific errors.

The statistics engine itself never raises; these exceptions are raised by the
HTTP layer when a request is well-formed JSON but not a usable input.
"""


class FuelLogError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(FuelLogError):
    """Exception raised when data validation fails."""


FuelLogException = FuelLogError
ValidationException = ValidationError
