import httpx
from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from airline_booking.ticket.applications.book_ticket import BookTicketService
from airline_booking.ticket.handlers.request_models import BookTicketRequest
from airline_booking.ticket.handlers.response_models import to_response
from airline_booking.ticket.infrastructure.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from airline_booking.ticket.infrastructure.http_confirmation_notifier import (
    HttpConfirmationNotifier,
)
from airline_booking.ticket.infrastructure.sqlalchemy_booking_repository import (
    SqlAlchemyBookingRepository,
)

logger = Logger()


# 接続とクライアントはコールドスタート時に1度だけ生成し、呼び出し間で再利用する
engine = create_db_engine()
init_db(engine)
repository = SqlAlchemyBookingRepository(session_factory=create_session_factory(engine))
notifier = HttpConfirmationNotifier(client=httpx.Client())
service = BookTicketService(repository=repository, notifier=notifier)


@logger.inject_lambda_context
@event_parser(model=BookTicketRequest)
def lambda_handler(event: BookTicketRequest, context: LambdaContext) -> dict:
    """航空券予約 Lambda ハンドラ"""
    logger.info("Received book ticket request")

    outcome = service.book(
        passenger_name=event.passenger_name,
        fare_class=event.ticket_class,
        ticket_count=event.number_of_tickets,
    )
    return to_response(outcome)
