"""Read-only questionnaire option lists and provinces."""

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travelapp.database import Base, get_db
from travelapp.errors import PersistenceError
from travelapp.models.lookup import (
    Province,
    QAActivity,
    QADistance,
    QAEmotional,
    QAPicture,
    QATraveling,
    QAValue,
)
from travelapp.schemas.lookup import (
    ProvinceResponse,
    QAActivityResponse,
    QADistanceResponse,
    QAEmotionalResponse,
    QAPictureResponse,
    QATravelingResponse,
    QAValueResponse,
)

router = APIRouter()


async def _all_rows(db: AsyncSession, model: type[Base], order_by) -> list:
    try:
        result = await db.execute(select(model).order_by(order_by))
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        raise PersistenceError(error=str(e))


@router.get("/qa_picture", response_model=list[QAPictureResponse])
async def list_pictures(db: AsyncSession = Depends(get_db)):
    return await _all_rows(db, QAPicture, QAPicture.picture_id)


@router.get("/qa_activity", response_model=list[QAActivityResponse])
async def list_activities(db: AsyncSession = Depends(get_db)):
    return await _all_rows(db, QAActivity, QAActivity.activity_id)


@router.get("/qa_traveling", response_model=list[QATravelingResponse])
async def list_trip_types(db: AsyncSession = Depends(get_db)):
    return await _all_rows(db, QATraveling, QATraveling.trip_id)


@router.get("/qa_distance", response_model=list[QADistanceResponse])
async def list_distances(db: AsyncSession = Depends(get_db)):
    return await _all_rows(db, QADistance, QADistance.distance_id)


@router.get("/qa_value", response_model=list[QAValueResponse])
async def list_budgets(db: AsyncSession = Depends(get_db)):
    return await _all_rows(db, QAValue, QAValue.value_id)


@router.get("/qa_emotional", response_model=list[QAEmotionalResponse])
async def list_emotions(db: AsyncSession = Depends(get_db)):
    return await _all_rows(db, QAEmotional, QAEmotional.emotional_id)


@router.get("/province/{region_id}", response_model=list[ProvinceResponse])
async def list_provinces(region_id: int, db: AsyncSession = Depends(get_db)):
    try:
        result = await db.execute(
            select(Province).where(Province.region_id == region_id).order_by(Province.province_id)
        )
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        raise PersistenceError(error=str(e))
