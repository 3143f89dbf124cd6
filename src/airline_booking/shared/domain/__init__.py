from .exception import (
    DomainException,
    InvalidFareClass,
    InvalidPassengerName,
    InvalidTicketCount,
    ValidationException,
)
from .repository import PersistenceError, Repository
from .result import Err, Ok, Result
from .value_object import Money

__all__ = [
    "DomainException",
    "ValidationException",
    "InvalidFareClass",
    "InvalidTicketCount",
    "InvalidPassengerName",
    "Repository",
    "PersistenceError",
    "Ok",
    "Err",
    "Result",
    "Money",
]
