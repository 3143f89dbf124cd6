from .booking_record_factory import BookingRecordFactory

__all__ = ["BookingRecordFactory"]
