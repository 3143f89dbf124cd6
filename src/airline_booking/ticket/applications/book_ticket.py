from airline_booking.shared.domain import ValidationException
from airline_booking.shared.utils.logger import get_logger
from airline_booking.ticket.applications.booking_outcome import (
    BookingOutcome,
    FailureReason,
)
from airline_booking.ticket.domain.entity import BookingRecord
from airline_booking.ticket.domain.enum import FareClass
from airline_booking.ticket.domain.factory import BookingRecordFactory
from airline_booking.ticket.domain.notifier import BookingNotifier
from airline_booking.ticket.domain.repository import BookingRepository
from airline_booking.ticket.domain.service import TicketPricing

logger = get_logger("airline-booking")


class BookTicketService:
    """航空券予約サービス

    価格計算 → 保存 → 確定通知 の順に実行し、
    結果を BookingOutcome として返す。
    通知は保存に成功した場合にのみ行う。
    """

    def __init__(
        self,
        repository: BookingRepository,
        notifier: BookingNotifier,
        pricing: TicketPricing | None = None,
        factory: BookingRecordFactory | None = None,
    ) -> None:
        self._repository = repository
        self._notifier = notifier
        self._pricing = pricing or TicketPricing()
        self._factory = factory or BookingRecordFactory()

    def book(
        self, passenger_name: str, fare_class: FareClass | str, ticket_count: int
    ) -> BookingOutcome:
        """航空券を予約する"""
        try:
            record = self._prepare(passenger_name, fare_class, ticket_count)
        except ValidationException as e:
            logger.warning("Booking request rejected", extra={"reason": str(e)})
            return BookingOutcome.failed(FailureReason.INVALID_REQUEST, str(e))

        saved = self._repository.save(record)
        if not saved.is_ok():
            logger.error(
                "Booking failed",
                extra={
                    "passenger_name": str(record.passenger_name),
                    "reason": saved.error.message,
                },
            )
            return BookingOutcome.failed(
                FailureReason.PERSISTENCE_FAILED, saved.error.message, record=record
            )
        booking_id = saved.value

        notified = self._notifier.notify(record, booking_id)
        if not notified.is_ok():
            logger.warning(
                "Booking stored but confirmation failed",
                extra={
                    "booking_id": booking_id.value,
                    "reason": notified.error.message,
                },
            )
            return BookingOutcome.stored_but_unconfirmed(
                record, booking_id, notified.error.message
            )

        logger.info(
            "Booking confirmed",
            extra={
                "booking_id": booking_id.value,
                "fare_class": record.fare_class.value,
                "total_cost": str(record.total_cost),
            },
        )
        return BookingOutcome.confirmed(record, booking_id)

    def _prepare(
        self, passenger_name: str, fare_class: FareClass | str, ticket_count: int
    ) -> BookingRecord:
        """価格を計算し、割引を1回だけ適用して予約レコードを組み立てる"""
        total_cost = self._pricing.price(fare_class, ticket_count)
        if self._pricing.is_discount_eligible(total_cost):
            total_cost = self._pricing.apply_discount(total_cost)
        return self._factory.create(passenger_name, fare_class, ticket_count, total_cost)
