from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID（Value Object）

    永続化時にストア側で採番される。
    値が同じなら同一とみなされる。
    """

    value: int

    def __str__(self) -> str:
        return str(self.value)
