from sqlalchemy.orm import sessionmaker

from airline_booking.shared.domain import Err, Money, Ok, PersistenceError, Result
from airline_booking.shared.utils.logger import get_logger
from airline_booking.ticket.domain.entity import BookingRecord
from airline_booking.ticket.domain.enum import FareClass
from airline_booking.ticket.domain.repository import BookingRepository
from airline_booking.ticket.domain.value_object import BookingId, PassengerName
from airline_booking.ticket.infrastructure.database import BookingModel

logger = get_logger("airline-booking")


class SqlAlchemyBookingRepository(BookingRepository):
    """SQLAlchemy を使用した BookingRepository の具象実装

    sessionmaker はアプリケーション側で生成したものを受け取り、
    呼び出しごとに接続を作り直さない。
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def save(self, record: BookingRecord) -> Result[BookingId, PersistenceError]:
        """予約をDBに保存する

        接続エラー、制約違反、シリアライズ失敗などは Err(PersistenceError) として返す。
        """
        try:
            with self._session_factory.begin() as session:
                model = BookingModel(
                    passenger_name=str(record.passenger_name),
                    ticket_class=record.fare_class.value,
                    number_of_tickets=record.ticket_count,
                    total_cost=record.total_cost.amount,
                )
                session.add(model)
                session.flush()
                booking_id = BookingId(value=model.id)
        except Exception as e:
            logger.exception("Failed to save booking")
            return Err(PersistenceError(message=str(e)))

        return Ok(booking_id)

    def find_by_id(self, booking_id: BookingId) -> BookingRecord | None:
        """予約IDで検索"""
        with self._session_factory() as session:
            model = session.get(BookingModel, booking_id.value)
            if model is None:
                return None
            return self._to_entity(model)

    def _to_entity(self, model: BookingModel) -> BookingRecord:
        """テーブルの行をドメインの値に変換する"""
        return BookingRecord(
            passenger_name=PassengerName(model.passenger_name),
            fare_class=FareClass(model.ticket_class),
            ticket_count=model.number_of_tickets,
            total_cost=Money.of(model.total_cost),
        )
