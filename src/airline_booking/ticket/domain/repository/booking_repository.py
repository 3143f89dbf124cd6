from abc import abstractmethod

from airline_booking.shared.domain import PersistenceError, Repository, Result
from airline_booking.ticket.domain.entity import BookingRecord
from airline_booking.ticket.domain.value_object import BookingId


class BookingRepository(Repository[BookingRecord, BookingId]):
    """予約リポジトリのインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    これにより、Domain はインフラ（RDB 等）に依存しない。
    """

    @abstractmethod
    def save(self, record: BookingRecord) -> Result[BookingId, PersistenceError]:
        """予約を1トランザクションで保存する（部分書き込みは発生しない）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> BookingRecord | None:
        """予約IDで検索する"""
        raise NotImplementedError
