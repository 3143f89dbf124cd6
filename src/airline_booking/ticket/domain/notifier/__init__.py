from .booking_notifier import BookingNotifier, NotificationError

__all__ = ["BookingNotifier", "NotificationError"]
