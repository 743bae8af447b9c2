"""Questionnaire submission: save the answer, then generate and save recommendations.

The two writes use separate transactions. The answer is committed before
generation starts and stays committed whatever happens afterwards, so a
failure (or crash) in between leaves an answer without results.
"""

import logging

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travelapp.errors import PersistenceError
from travelapp.models.questionnaire import QuestionnaireAnswer, RecommendedPlace
from travelapp.schemas.questionnaire import QATransactionRequest
from travelapp.services.choice_translator import translate_answer
from travelapp.services.recommendation_generator import GeneratedPlace, recommendation_generator

logger = logging.getLogger(__name__)


class QuestionnaireService:
    async def submit(self, db: AsyncSession, req: QATransactionRequest) -> QuestionnaireAnswer:
        answer = await self.write_answer(db, req)

        try:
            places = await recommendation_generator.generate(
                translate_answer(req), req.latitude, req.longitude
            )
        except Exception as e:
            logger.error(f"Recommendation generation failed for answer {answer.qa_transaction_id}: {e}")
            return answer

        await self.persist_places(db, answer.account_id, places)
        return answer

    async def write_answer(self, db: AsyncSession, req: QATransactionRequest) -> QuestionnaireAnswer:
        answer = QuestionnaireAnswer(
            account_id=0,
            latitude=req.latitude,
            longitude=req.longitude,
            trip_id=req.trip_id,
            distance_id=req.distance_id,
            value_id=req.value_id,
            location_interest_id=req.location_interest_id,
            activity_id=list(req.activity_id),
            custom_activity=req.custom_activity,
            emotional_id=req.emotional_id,
        )
        try:
            db.add(answer)
            await db.flush()  # get qa_transaction_id
            answer.account_id = answer.qa_transaction_id
            await db.flush()
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Saving questionnaire answer failed: {e}")
            raise PersistenceError("Failed to save answer", error=str(e))

        logger.info(f"Saved questionnaire answer {answer.qa_transaction_id}")
        return answer

    async def persist_places(
        self, db: AsyncSession, account_id: int, places: list[GeneratedPlace]
    ) -> int:
        """Insert the batch in its own transaction. Bad rows are skipped, not fatal."""
        saved = 0
        try:
            for place in places:
                try:
                    async with db.begin_nested():
                        await db.execute(
                            insert(RecommendedPlace).values(
                                result_id=place.result_id,
                                account_id=account_id,
                                event_name=place.event_name,
                                event_description=place.event_description,
                                open_day=place.open_day,
                                time_schedule=place.time_schedule,
                                location_text=place.location_text,
                                image_url=place.image_url,
                                distance_text=place.distance_text,
                            )
                        )
                    saved += 1
                except SQLAlchemyError as e:
                    logger.error(f"Skipping result {place.result_id} for account {account_id}: {e}")
            await db.commit()
        except Exception as e:
            await db.rollback()
            logger.error(f"Saving recommendations for account {account_id} failed, rolled back: {e}")
            raise PersistenceError("Failed to save recommendations", error=str(e))

        logger.info(f"Saved {saved}/{len(places)} recommendations for account {account_id}")
        return saved


questionnaire_service = QuestionnaireService()
