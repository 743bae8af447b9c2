from travelapp.models.account import Account, ProfileLocation
from travelapp.models.questionnaire import QuestionnaireAnswer, RecommendedPlace
from travelapp.models.lookup import (
    Province,
    QAActivity,
    QADistance,
    QAEmotional,
    QAPicture,
    QATraveling,
    QAValue,
)

__all__ = [
    "Account",
    "ProfileLocation",
    "Province",
    "QAActivity",
    "QADistance",
    "QAEmotional",
    "QAPicture",
    "QATraveling",
    "QAValue",
    "QuestionnaireAnswer",
    "RecommendedPlace",
]
