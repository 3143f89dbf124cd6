from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from airline_booking.shared.domain import Money
from airline_booking.ticket.domain.entity import BookingRecord
from airline_booking.ticket.domain.enum import FareClass
from airline_booking.ticket.domain.value_object import PassengerName
from airline_booking.ticket.infrastructure.database import (
    create_session_factory,
    init_db,
)


@pytest.fixture
def create_booking_record():
    """BookingRecord を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        passenger_name: str = "John Doe",
        fare_class: FareClass = FareClass.ECONOMY,
        ticket_count: int = 2,
        total_cost: Decimal = Decimal("200.00"),
    ) -> BookingRecord:
        return BookingRecord(
            passenger_name=PassengerName(passenger_name),
            fare_class=fare_class,
            ticket_count=ticket_count,
            total_cost=Money(amount=total_cost),
        )

    return _factory


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def mock_notifier():
    """通知のモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def engine():
    """in-memory SQLite の Engine（テーブル作成済み）"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)
