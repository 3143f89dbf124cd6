from abc import ABC, abstractmethod
from dataclasses import dataclass

from airline_booking.shared.domain import Result
from airline_booking.ticket.domain.entity import BookingRecord
from airline_booking.ticket.domain.value_object import BookingId


@dataclass(frozen=True)
class NotificationError:
    """外部システムへの予約確定通知の失敗

    非 2xx レスポンス、タイムアウト、接続エラーを区別しない。
    """

    message: str
    status_code: int | None = None


class BookingNotifier(ABC):
    """予約確定通知のインターフェース"""

    @abstractmethod
    def notify(
        self, record: BookingRecord, booking_id: BookingId | None = None
    ) -> Result[None, NotificationError]:
        """保存済みの予約を外部システムへ通知する"""
        raise NotImplementedError
