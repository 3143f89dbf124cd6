from .exceptions import (
    DomainException,
    InvalidFareClass,
    InvalidPassengerName,
    InvalidTicketCount,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ValidationException",
    "InvalidFareClass",
    "InvalidTicketCount",
    "InvalidPassengerName",
]
