from dataclasses import dataclass

from airline_booking.shared.domain.exception import InvalidPassengerName


@dataclass(frozen=True)
class PassengerName:
    """搭乗者名"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value.strip()) == 0:
            raise InvalidPassengerName("Passenger name cannot be empty")
        if len(self.value) > 100:
            raise InvalidPassengerName(
                "Passenger name is too long (max 100 characters)"
            )

    def __str__(self) -> str:
        return self.value
