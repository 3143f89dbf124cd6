from .entity import BookingRecord
from .enum import FareClass
from .factory import BookingRecordFactory
from .notifier import BookingNotifier, NotificationError
from .repository import BookingRepository
from .service import TicketPricing
from .value_object import BookingId, PassengerName

__all__ = [
    "BookingRecord",
    "FareClass",
    "BookingRecordFactory",
    "BookingNotifier",
    "NotificationError",
    "BookingRepository",
    "TicketPricing",
    "BookingId",
    "PassengerName",
]
