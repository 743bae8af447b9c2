from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travelapp.database import get_db
from travelapp.errors import PersistenceError
from travelapp.models.lookup import QADistance, QAEmotional, QAPicture, QATraveling, QAValue
from travelapp.models.questionnaire import QuestionnaireAnswer, RecommendedPlace
from travelapp.schemas.questionnaire import (
    QATransactionData,
    QATransactionRequest,
    QATransactionResponse,
    QATransactionRow,
    RecommendedPlaceResponse,
)
from travelapp.services.questionnaire_service import questionnaire_service

router = APIRouter()


@router.post("/qa_transaction", response_model=QATransactionResponse)
async def submit_questionnaire(req: QATransactionRequest, db: AsyncSession = Depends(get_db)):
    """Save the answers and generate up to five recommendations for them."""
    answer = await questionnaire_service.submit(db, req)
    return QATransactionResponse(
        data=QATransactionData(account_id=answer.account_id, **req.model_dump()),
    )


@router.get("/qa_transaction", response_model=list[QATransactionRow])
async def list_questionnaire_answers(db: AsyncSession = Depends(get_db)):
    """All answers with their lookup labels, newest first."""
    qa = QuestionnaireAnswer
    stmt = (
        select(
            qa,
            QATraveling.trip_name,
            QADistance.distance_name,
            QAValue.value_name,
            QAPicture.theme,
            QAEmotional.emotional_name,
        )
        .outerjoin(QATraveling, QATraveling.trip_id == qa.trip_id)
        .outerjoin(QADistance, QADistance.distance_id == qa.distance_id)
        .outerjoin(QAValue, QAValue.value_id == qa.value_id)
        .outerjoin(QAPicture, QAPicture.picture_id == qa.location_interest_id)
        .outerjoin(QAEmotional, QAEmotional.emotional_id == qa.emotional_id)
        .order_by(qa.qa_transaction_id.desc())
    )
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as e:
        raise PersistenceError(error=str(e))

    rows = []
    for answer, trip_name, distance_name, value_name, theme, emotional_name in result.all():
        rows.append(QATransactionRow(
            qa_transaction_id=answer.qa_transaction_id,
            account_id=answer.account_id,
            latitude=answer.latitude,
            longitude=answer.longitude,
            trip_id=answer.trip_id,
            trip_name=trip_name,
            distance_id=answer.distance_id,
            distance_name=distance_name,
            value_id=answer.value_id,
            value_name=value_name,
            location_interest_id=answer.location_interest_id,
            theme=theme,
            activity_id=answer.activity_id or [],
            custom_activity=answer.custom_activity,
            emotional_id=answer.emotional_id,
            emotional_name=emotional_name,
            created_at=answer.created_at,
        ))
    return rows


@router.get("/qa_results", response_model=list[RecommendedPlaceResponse])
async def list_recommendations(
    account_id: int | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    stmt = select(RecommendedPlace)
    if account_id is not None:
        stmt = stmt.where(RecommendedPlace.account_id == account_id)
    stmt = stmt.order_by(RecommendedPlace.account_id, RecommendedPlace.result_id)
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as e:
        raise PersistenceError(error=str(e))
    return [RecommendedPlaceResponse.model_validate(r) for r in result.scalars().all()]
