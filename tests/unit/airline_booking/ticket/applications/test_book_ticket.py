from decimal import Decimal

import httpx

from airline_booking.shared.domain import Err, Money, Ok, PersistenceError
from airline_booking.ticket.applications import (
    BookingOutcomeStatus,
    BookTicketService,
    FailureReason,
)
from airline_booking.ticket.domain.enum import FareClass
from airline_booking.ticket.domain.notifier import NotificationError
from airline_booking.ticket.domain.value_object import BookingId
from airline_booking.ticket.infrastructure.http_confirmation_notifier import (
    HttpConfirmationNotifier,
)
from airline_booking.ticket.infrastructure.sqlalchemy_booking_repository import (
    SqlAlchemyBookingRepository,
)


class TestBookTicketService:
    """BookTicketService のテスト"""

    def test_economy_booking_is_confirmed_without_discount(
        self, mock_repository, mock_notifier
    ):
        """John Doe / Economy / 2枚 → 200.00、割引なしで確定"""
        mock_repository.save.return_value = Ok(BookingId(1))
        mock_notifier.notify.return_value = Ok(None)
        service = BookTicketService(repository=mock_repository, notifier=mock_notifier)

        outcome = service.book("John Doe", "Economy", 2)

        assert outcome.status == BookingOutcomeStatus.CONFIRMED
        assert outcome.booking_id == BookingId(1)
        assert outcome.record.total_cost == Money.of("200.00")
        assert outcome.record.fare_class == FareClass.ECONOMY

    def test_first_class_booking_is_discounted(self, mock_repository, mock_notifier):
        """Jane / FirstClass / 3枚 → 900.00 に 10% 割引で 810.00"""
        mock_repository.save.return_value = Ok(BookingId(2))
        mock_notifier.notify.return_value = Ok(None)
        service = BookTicketService(repository=mock_repository, notifier=mock_notifier)

        outcome = service.book("Jane", FareClass.FIRST_CLASS, 3)

        assert outcome.status == BookingOutcomeStatus.CONFIRMED
        saved_record = mock_repository.save.call_args[0][0]
        assert saved_record.total_cost.amount == Decimal("810.00")
        assert saved_record == outcome.record

    def test_persistence_failure_skips_notification(
        self, mock_repository, mock_notifier
    ):
        """保存に失敗した場合は通知を呼ばずに FAILED"""
        mock_repository.save.return_value = Err(PersistenceError("connection refused"))
        service = BookTicketService(repository=mock_repository, notifier=mock_notifier)

        outcome = service.book("John Doe", "Economy", 2)

        assert outcome.status == BookingOutcomeStatus.FAILED
        assert outcome.reason == FailureReason.PERSISTENCE_FAILED
        assert outcome.message == "connection refused"
        assert outcome.booking_id is None
        assert mock_notifier.notify.call_count == 0

    def test_notification_failure_keeps_stored_booking(
        self, session_factory, mock_notifier
    ):
        """通知に失敗しても保存済みの予約は取り消されない"""
        repository = SqlAlchemyBookingRepository(session_factory=session_factory)
        mock_notifier.notify.return_value = Err(
            NotificationError("Confirmation API returned 503", status_code=503)
        )
        service = BookTicketService(repository=repository, notifier=mock_notifier)

        outcome = service.book("John Doe", "Economy", 2)

        assert outcome.status == BookingOutcomeStatus.STORED_BUT_UNCONFIRMED
        assert outcome.message == "Confirmation API returned 503"
        assert repository.find_by_id(outcome.booking_id) == outcome.record

    def test_misconfigured_confirmation_url_keeps_stored_booking(
        self, mock_repository
    ):
        """確定 API の URL が不正でも、保存済みの予約は STORED_BUT_UNCONFIRMED になる"""
        mock_repository.save.return_value = Ok(BookingId(1))
        with httpx.Client() as client:
            notifier = HttpConfirmationNotifier(
                client=client, url="https://exa\x01mple.com/c"
            )
            service = BookTicketService(repository=mock_repository, notifier=notifier)

            outcome = service.book("John Doe", "Economy", 2)

        assert outcome.status == BookingOutcomeStatus.STORED_BUT_UNCONFIRMED
        assert outcome.booking_id == BookingId(1)
        assert outcome.message.startswith("InvalidURL")

    def test_notifies_with_saved_booking_id(self, mock_repository, mock_notifier):
        mock_repository.save.return_value = Ok(BookingId(7))
        mock_notifier.notify.return_value = Ok(None)
        service = BookTicketService(repository=mock_repository, notifier=mock_notifier)

        outcome = service.book("John Doe", "Business", 1)

        mock_notifier.notify.assert_called_once_with(outcome.record, BookingId(7))

    def test_invalid_fare_class_fails_before_side_effects(
        self, mock_repository, mock_notifier
    ):
        service = BookTicketService(repository=mock_repository, notifier=mock_notifier)

        outcome = service.book("John Doe", "luxury", 2)

        assert outcome.status == BookingOutcomeStatus.FAILED
        assert outcome.reason == FailureReason.INVALID_REQUEST
        assert outcome.record is None
        mock_repository.save.assert_not_called()
        mock_notifier.notify.assert_not_called()

    def test_invalid_ticket_count_fails_before_side_effects(
        self, mock_repository, mock_notifier
    ):
        service = BookTicketService(repository=mock_repository, notifier=mock_notifier)

        outcome = service.book("John Doe", "Economy", 0)

        assert outcome.reason == FailureReason.INVALID_REQUEST
        mock_repository.save.assert_not_called()
        mock_notifier.notify.assert_not_called()

    def test_empty_passenger_name_fails_before_side_effects(
        self, mock_repository, mock_notifier
    ):
        service = BookTicketService(repository=mock_repository, notifier=mock_notifier)

        outcome = service.book("", "Economy", 2)

        assert outcome.reason == FailureReason.INVALID_REQUEST
        assert "Passenger name" in outcome.message
        mock_repository.save.assert_not_called()

    def test_discount_is_applied_once(self, mock_repository, mock_notifier):
        mock_repository.save.return_value = Ok(BookingId(1))
        mock_notifier.notify.return_value = Ok(None)
        service = BookTicketService(repository=mock_repository, notifier=mock_notifier)

        outcome = service.book("Jane", "Business", 10)

        assert outcome.record.total_cost == Money.of("1800.00")
