from .booking_id import BookingId
from .passenger_name import PassengerName

__all__ = ["BookingId", "PassengerName"]
