import os

import httpx

from airline_booking.shared.domain import Err, Ok, Result
from airline_booking.shared.utils.logger import get_logger
from airline_booking.ticket.domain.entity import BookingRecord
from airline_booking.ticket.domain.notifier import BookingNotifier, NotificationError
from airline_booking.ticket.domain.value_object import BookingId

DEFAULT_CONFIRMATION_API_URL = "https://api.example.com/confirmBooking"
DEFAULT_TIMEOUT_SECONDS = 10.0

logger = get_logger("airline-booking")


class HttpConfirmationNotifier(BookingNotifier):
    """予約確定 API（HTTP POST）への通知を行う BookingNotifier の具象実装"""

    def __init__(
        self,
        client: httpx.Client,
        url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._client = client
        self.url = url or os.getenv(
            "CONFIRMATION_API_URL", DEFAULT_CONFIRMATION_API_URL
        )
        if timeout is None:
            timeout = float(
                os.getenv("CONFIRMATION_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
            )
        self.timeout = timeout

    def notify(
        self, record: BookingRecord, booking_id: BookingId | None = None
    ) -> Result[None, NotificationError]:
        """予約内容を確定 API に POST する

        2xx 以外のステータス、タイムアウト、接続エラー、不正な URL など
        送信時の失敗はすべて NotificationError として返す。
        """
        payload = self._to_payload(record, booking_id)
        try:
            response = self._client.post(self.url, json=payload, timeout=self.timeout)
        except Exception as e:
            logger.exception("Error during confirmation API call")
            return Err(NotificationError(message=f"{type(e).__name__}: {e}"))

        if not response.is_success:
            logger.warning(
                "Failed to confirm booking",
                extra={"status_code": response.status_code},
            )
            return Err(
                NotificationError(
                    message=f"Confirmation API returned {response.status_code}",
                    status_code=response.status_code,
                )
            )
        return Ok(None)

    def _to_payload(
        self, record: BookingRecord, booking_id: BookingId | None
    ) -> dict:
        """リクエストボディを構築する"""
        payload: dict = {
            "name": str(record.passenger_name),
            "totalCost": float(record.total_cost.amount),
            "ticketClass": record.fare_class.value,
            "numberOfTickets": record.ticket_count,
        }
        if booking_id is not None:
            payload["bookingId"] = booking_id.value
        return payload
