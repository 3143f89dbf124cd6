from airline_booking.shared.domain import Money
from airline_booking.ticket.domain.entity import BookingRecord
from airline_booking.ticket.domain.enum import FareClass
from airline_booking.ticket.domain.value_object import PassengerName


class BookingRecordFactory:
    """予約レコードのファクトリ

    - プリミティブ型から Value Object への変換
    - 搭乗者名の検証（InvalidPassengerName）
    """

    def create(
        self,
        passenger_name: str,
        fare_class: FareClass | str,
        ticket_count: int,
        total_cost: Money,
    ) -> BookingRecord:
        """価格計算済みの予約レコードを生成する

        Args:
            passenger_name: 搭乗者名
            fare_class: 運賃クラス
            ticket_count: チケット枚数（Pricing で検証済み）
            total_cost: 割引適用後の合計金額

        Returns:
            BookingRecord: 生成された予約レコード
        """
        return BookingRecord(
            passenger_name=PassengerName(passenger_name),
            fare_class=FareClass.parse(fare_class),
            ticket_count=ticket_count,
            total_cost=total_cost,
        )
