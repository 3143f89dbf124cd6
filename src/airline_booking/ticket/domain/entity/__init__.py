from .booking_record import BookingRecord

__all__ = ["BookingRecord"]
