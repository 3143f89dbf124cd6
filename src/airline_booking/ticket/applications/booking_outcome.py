from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from airline_booking.ticket.domain.entity import BookingRecord
from airline_booking.ticket.domain.value_object import BookingId


class BookingOutcomeStatus(str, Enum):
    """予約処理の終了状態"""

    CONFIRMED = "CONFIRMED"
    STORED_BUT_UNCONFIRMED = "STORED_BUT_UNCONFIRMED"
    FAILED = "FAILED"


class FailureReason(str, Enum):
    """予約失敗の理由"""

    INVALID_REQUEST = "INVALID_REQUEST"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"


@dataclass(frozen=True)
class BookingOutcome:
    """予約処理の結果

    CONFIRMED: 保存・通知ともに成功
    STORED_BUT_UNCONFIRMED: 保存は成功、通知は失敗（予約は取り消さない）
    FAILED: 入力不正または保存失敗（通知は行わない）
    """

    status: BookingOutcomeStatus
    record: BookingRecord | None = None
    booking_id: BookingId | None = None
    reason: FailureReason | None = None
    message: str | None = None

    @classmethod
    def confirmed(cls, record: BookingRecord, booking_id: BookingId) -> BookingOutcome:
        return cls(
            status=BookingOutcomeStatus.CONFIRMED,
            record=record,
            booking_id=booking_id,
        )

    @classmethod
    def stored_but_unconfirmed(
        cls, record: BookingRecord, booking_id: BookingId, message: str
    ) -> BookingOutcome:
        return cls(
            status=BookingOutcomeStatus.STORED_BUT_UNCONFIRMED,
            record=record,
            booking_id=booking_id,
            message=message,
        )

    @classmethod
    def failed(
        cls,
        reason: FailureReason,
        message: str,
        record: BookingRecord | None = None,
    ) -> BookingOutcome:
        return cls(
            status=BookingOutcomeStatus.FAILED,
            record=record,
            reason=reason,
            message=message,
        )
