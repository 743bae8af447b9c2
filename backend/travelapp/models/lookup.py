"""Static questionnaire option lists and provinces. Seeded, never written by requests."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from travelapp.database import Base


class QAPicture(Base):
    __tablename__ = "qa_picture"

    picture_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    theme: Mapped[str] = mapped_column(String(100), nullable=False)
    picture_url: Mapped[str | None] = mapped_column(Text)


class QAActivity(Base):
    __tablename__ = "qa_activity"

    activity_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    activity_key: Mapped[str] = mapped_column(String(50), nullable=False)
    activity_name: Mapped[str] = mapped_column(String(100), nullable=False)


class QATraveling(Base):
    __tablename__ = "qa_traveling"

    trip_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    trip_name: Mapped[str] = mapped_column(String(100), nullable=False)


class QADistance(Base):
    __tablename__ = "qa_distance"

    distance_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    distance_name: Mapped[str] = mapped_column(String(100), nullable=False)


class QAValue(Base):
    __tablename__ = "qa_value"

    value_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    value_name: Mapped[str] = mapped_column(String(100), nullable=False)


class QAEmotional(Base):
    __tablename__ = "qa_emotional"

    emotional_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    emotional_name: Mapped[str] = mapped_column(String(100), nullable=False)


class Province(Base):
    __tablename__ = "province"

    province_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    province_name: Mapped[str] = mapped_column(String(100), nullable=False)
    province_name_en: Mapped[str | None] = mapped_column(String(100))
    region_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
