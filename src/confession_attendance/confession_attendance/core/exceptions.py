class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DateParseError(ValidationError):
    """Raised when an explicit date string is not a valid YYYY-MM-DD date."""


class ConfigurationError(DomainError):
    """Raised when stored or deployment settings cannot be used."""


class CalendarNotFoundError(ConfigurationError):
    """Raised when the configured calendar cannot be resolved."""


class NotificationError(DomainError):
    """Raised by a mailer when a message could not be delivered."""
