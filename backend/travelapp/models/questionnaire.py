"""Questionnaire answers and the recommendation batches generated from them."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from travelapp.database import Base


class QuestionnaireAnswer(Base):
    __tablename__ = "qa_transaction"

    qa_transaction_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 0 = anonymous; stamped with qa_transaction_id right after insert
    account_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    trip_id: Mapped[int] = mapped_column(Integer, nullable=False)
    distance_id: Mapped[int] = mapped_column(Integer, nullable=False)
    value_id: Mapped[int] = mapped_column(Integer, nullable=False)
    location_interest_id: Mapped[int] = mapped_column(Integer, nullable=False)
    activity_id: Mapped[list] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list
    )
    custom_activity: Mapped[str | None] = mapped_column(String(255))
    emotional_id: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )


class RecommendedPlace(Base):
    __tablename__ = "qa_results"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    result_id: Mapped[int] = mapped_column(Integer, nullable=False)  # 1..5 within a batch
    account_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    event_name: Mapped[str] = mapped_column(String(255), nullable=False)
    event_description: Mapped[str | None] = mapped_column(Text)
    open_day: Mapped[str | None] = mapped_column(String(255))
    time_schedule: Mapped[str | None] = mapped_column(String(255))
    location_text: Mapped[str | None] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column(Text)
    distance_text: Mapped[str | None] = mapped_column(String(100))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
