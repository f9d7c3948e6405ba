"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code=code)


class InvalidDateError(ValidationError):
    """Raised when a date cannot be parsed or is not a canonical YYYY-MM-DD key."""

    def __init__(self, value: object, reason: str = "unparseable date"):
        self.value = value
        super().__init__(f"Invalid date {value!r}: {reason}", code="INVALID_DATE")


class StoreError(AppError):
    """Base for persisted price/note store failures."""


class StoreReadError(StoreError):
    """Raised when reading from the store fails."""

    def __init__(self, message: str):
        super().__init__(message, code="STORE_READ_ERROR")


class StoreWriteError(StoreError):
    """Raised when writing to the store fails."""

    def __init__(self, message: str):
        super().__init__(message, code="STORE_WRITE_ERROR")


class ProviderError(AppError):
    """Raised when an external data provider fails (transport or parse)."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}", code="PROVIDER_ERROR")
