"""Custom exceptions for the meme token listing API."""


class MemeListingError(Exception):
    """Base exception for all meme listing errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DataSourceError(MemeListingError):
    """Raised when a data source fails or returns invalid data."""

    def __init__(
        self,
        source: str,
        message: str,
        endpoint: str | None = None,
        status_code: int | None = None,
    ):
        full_message = f"[{source}] {message}"
        super().__init__(
            full_message,
            {
                "source": source,
                "endpoint": endpoint,
                "status_code": status_code,
            },
        )
        self.source = source
        self.endpoint = endpoint
        self.status_code = status_code


class ValidationError(MemeListingError):
    """Raised when request validation fails."""

    def __init__(self, field: str, value: str, reason: str):
        message = f"Validation failed for {field}={value!r}: {reason}"
        super().__init__(message, {"field": field, "value": value, "reason": reason})
        self.field = field
        self.value = value
        self.reason = reason


class ConfigurationError(MemeListingError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key
