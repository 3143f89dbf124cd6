from __future__ import annotations

from pydantic import BaseModel

from airline_booking.ticket.applications.booking_outcome import (
    BookingOutcome,
    BookingOutcomeStatus,
)


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: int
    passenger_name: str
    ticket_class: str
    number_of_tickets: int
    total_cost: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル（確定通知の失敗も含む）"""

    status: str = "success"
    outcome: BookingOutcomeStatus
    data: BookingData
    message: str | None = None


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str


def to_response(outcome: BookingOutcome) -> dict:
    """BookingOutcome をレスポンス辞書に変換する"""
    if outcome.status == BookingOutcomeStatus.FAILED:
        return ErrorResponse(
            error_code=outcome.reason.value,
            message=outcome.message or "",
        ).model_dump()

    return SuccessResponse(
        outcome=outcome.status,
        data=BookingData(
            booking_id=outcome.booking_id.value,
            **outcome.record.to_dict(),
        ),
        message=outcome.message,
    ).model_dump(mode="json", exclude_none=True)
