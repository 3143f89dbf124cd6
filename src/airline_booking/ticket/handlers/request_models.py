from pydantic import BaseModel, Field


class BookTicketRequest(BaseModel):
    """航空券予約リクエストスキーマ

    運賃クラスと枚数の業務ルールはドメイン側で検証するため、
    ここでは型のみを検証する。
    """

    passenger_name: str = Field(
        ...,
        description="搭乗者名",
        examples=["John Doe"],
    )

    ticket_class: str = Field(
        ...,
        description="運賃クラス",
        examples=["Economy", "Business", "FirstClass"],
    )

    number_of_tickets: int = Field(
        ...,
        description="チケット枚数",
        examples=[2],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "passenger_name": "John Doe",
                    "ticket_class": "Economy",
                    "number_of_tickets": 2,
                }
            ]
        }
    }
