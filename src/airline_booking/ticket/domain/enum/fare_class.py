from __future__ import annotations

from enum import Enum

from airline_booking.shared.domain.exception import InvalidFareClass


class FareClass(str, Enum):
    """運賃クラス"""

    ECONOMY = "Economy"
    BUSINESS = "Business"
    FIRST_CLASS = "FirstClass"

    @classmethod
    def parse(cls, value: FareClass | str) -> FareClass:
        """文字列から運賃クラスを解決する

        大文字小文字、空白、"_"、"-" は区別しない。
        例: "economy", "FIRST_CLASS", "First Class"
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidFareClass(f"Invalid ticket class: {value!r}")

        normalized = _normalize(value)
        for fare_class in cls:
            if _normalize(fare_class.value) == normalized:
                return fare_class
        raise InvalidFareClass(f"Invalid ticket class: {value}")


def _normalize(value: str) -> str:
    return "".join(c for c in value.lower() if c not in " _-")
