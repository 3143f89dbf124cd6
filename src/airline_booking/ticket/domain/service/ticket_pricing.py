from decimal import Decimal
from types import MappingProxyType

from airline_booking.shared.domain import InvalidTicketCount, Money
from airline_booking.ticket.domain.enum import FareClass

UNIT_PRICES = MappingProxyType(
    {
        FareClass.ECONOMY: Money.of("100.00"),
        FareClass.BUSINESS: Money.of("200.00"),
        FareClass.FIRST_CLASS: Money.of("300.00"),
    }
)

DISCOUNT_THRESHOLD = Money.of("500.00")
DISCOUNT_RATE = Decimal("0.90")


class TicketPricing:
    """チケット料金の計算（ドメインサービス）

    状態を持たず、副作用もない。

    割引は apply_discount を1回だけ呼ぶ前提で、2回適用しても防がない。
    1予約1回の適用は BookTicketService の処理順序で保証する。
    """

    def price(self, fare_class: FareClass | str, ticket_count: int) -> Money:
        """運賃クラスと枚数から合計金額を計算する

        Raises:
            InvalidFareClass: 運賃クラスが定義外の場合
            InvalidTicketCount: 枚数が正の整数ではない場合
        """
        resolved = FareClass.parse(fare_class)
        if isinstance(ticket_count, bool) or not isinstance(ticket_count, int):
            raise InvalidTicketCount(
                f"Ticket count must be an integer: {ticket_count!r}"
            )
        if ticket_count <= 0:
            raise InvalidTicketCount(
                f"Ticket count must be positive: {ticket_count}"
            )
        return UNIT_PRICES[resolved].multiply(ticket_count)

    def is_discount_eligible(self, total_cost: Money) -> bool:
        """合計金額が 500.00 を超える場合のみ割引対象（500.00 ちょうどは対象外）"""
        return total_cost.is_greater_than(DISCOUNT_THRESHOLD)

    def apply_discount(self, total_cost: Money) -> Money:
        """10% 割引を適用する"""
        return total_cost.apply_rate(DISCOUNT_RATE)
