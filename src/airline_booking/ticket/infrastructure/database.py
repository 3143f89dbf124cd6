import os

from sqlalchemy import Column, Engine, Integer, Numeric, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

DEFAULT_DATABASE_URL = "sqlite:///./airline.db"

Base = declarative_base()


class BookingModel(Base):
    """bookings テーブル"""

    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    passenger_name = Column(String(100), nullable=False)
    ticket_class = Column(String(16), nullable=False)
    number_of_tickets = Column(Integer, nullable=False)
    total_cost = Column(Numeric(10, 2), nullable=False)


def create_db_engine(database_url: str | None = None, **kwargs) -> Engine:
    """DATABASE_URL から Engine を生成する"""
    url = database_url or os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
    if url.startswith("sqlite"):
        # Lambda のスレッドからも同じ接続を使えるようにする
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """テーブルが存在しなければ作成する"""
    Base.metadata.create_all(bind=engine)
