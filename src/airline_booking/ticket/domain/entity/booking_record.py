from dataclasses import dataclass

from airline_booking.shared.domain import Money
from airline_booking.ticket.domain.enum import FareClass
from airline_booking.ticket.domain.value_object import PassengerName


@dataclass(frozen=True)
class BookingRecord:
    """予約レコード

    価格計算（割引適用後）の結果を表す不変の値。
    ID を持たず、永続化アダプタが BookingId を採番する。
    枚数の検証は TicketPricing で済んでいるため、ここでは行わない。
    """

    passenger_name: PassengerName
    fare_class: FareClass
    ticket_count: int
    total_cost: Money

    def to_dict(self) -> dict:
        """永続化・通知用の辞書表現を返す"""
        return {
            "passenger_name": str(self.passenger_name),
            "ticket_class": self.fare_class.value,
            "number_of_tickets": self.ticket_count,
            "total_cost": str(self.total_cost.amount),
        }
