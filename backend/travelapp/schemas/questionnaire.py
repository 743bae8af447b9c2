from datetime import datetime

from pydantic import BaseModel, ConfigDict


class QATransactionRequest(BaseModel):
    latitude: float
    longitude: float
    trip_id: int
    distance_id: int
    value_id: int
    location_interest_id: int
    activity_id: list[int]
    emotional_id: int
    custom_activity: str | None = None  # the app's "+ custom activity" free text

    # no coercion: true is not code 1, "13.7" is not a coordinate
    model_config = ConfigDict(strict=True)


class QATransactionData(QATransactionRequest):
    account_id: int


class QATransactionResponse(BaseModel):
    success: bool = True
    data: QATransactionData


class QATransactionRow(BaseModel):
    """An answer joined with the labels of its lookup codes."""
    qa_transaction_id: int
    account_id: int
    latitude: float
    longitude: float
    trip_id: int
    trip_name: str | None = None
    distance_id: int
    distance_name: str | None = None
    value_id: int
    value_name: str | None = None
    location_interest_id: int
    theme: str | None = None
    activity_id: list[int]
    custom_activity: str | None = None
    emotional_id: int
    emotional_name: str | None = None
    created_at: datetime | None = None


class RecommendedPlaceResponse(BaseModel):
    id: int
    result_id: int
    account_id: int
    event_name: str
    event_description: str | None = None
    open_day: str | None = None
    time_schedule: str | None = None
    location_text: str | None = None
    image_url: str | None = None
    distance_text: str | None = None

    model_config = {"from_attributes": True}
