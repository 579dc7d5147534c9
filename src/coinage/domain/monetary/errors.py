"""Errors raised when a currency or one of its denominations is misconfigured."""


class InvalidCurrencyError(ValueError):
    """Raised when a Currency cannot be constructed from the given parameters."""

    def __init__(self, message: str, digits: int | None = None):
        self.digits = digits
        super().__init__(message)


class InvalidDenominationError(ValueError):
    """Raised when a Denomination cannot be constructed, e.g. because of a negative value."""

    def __init__(self, message: str, value: int | None = None):
        self.value = value
        super().__init__(message)
