class AppError(Exception):
    """Base application error for the GeoIP service."""


class ConfigurationError(AppError):
    """Raised when required configuration is missing at startup."""


class DatabaseOpenError(AppError):
    """Raised when the geolocation database cannot be opened."""


class AddressUnresolvableError(AppError):
    """Raised when no IP address can be determined for a request."""
