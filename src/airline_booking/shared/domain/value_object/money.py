from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """金額

    Value Object として不変性を保証。
    浮動小数点の誤差を避けるため、内部表現は常に Decimal。
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError("Amount must be a Decimal")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)

    def multiply(self, quantity: int) -> Money:
        """数量を掛けた金額を返す"""
        return Money(amount=self.amount * quantity)

    def apply_rate(self, rate: Decimal) -> Money:
        """割合を掛けた金額を返す（割引の適用など）

        結果は1セント単位に四捨五入する。
        """
        return Money(amount=(self.amount * rate).quantize(CENT, ROUND_HALF_UP))

    def is_greater_than(self, other: Money) -> bool:
        """他の金額より大きいかどうか"""
        return self.amount > other.amount

    @classmethod
    def of(cls, amount: Decimal | int | str) -> Money:
        """プリミティブ値から Money を生成"""
        return cls(amount=Decimal(str(amount)))
