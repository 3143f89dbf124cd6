from .book_ticket import BookTicketService
from .booking_outcome import BookingOutcome, BookingOutcomeStatus, FailureReason

__all__ = [
    "BookTicketService",
    "BookingOutcome",
    "BookingOutcomeStatus",
    "FailureReason",
]
