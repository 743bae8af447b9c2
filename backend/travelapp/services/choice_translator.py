"""Questionnaire code -> Thai text used in the recommendation prompt.

The tables here are also what `seed.py` writes into the lookup tables, so the
labels the app shows and the words the model reads stay the same.
"""

from dataclasses import dataclass
from typing import Any

UNSPECIFIED = "ไม่ระบุ"

TRIP_TYPES: dict[int, str] = {
    1: "เที่ยวคนเดียว",
    2: "เที่ยวกับคู่รัก",
    3: "เที่ยวกับเพื่อน",
    4: "เที่ยวกับครอบครัว",
}

DISTANCE_BANDS: dict[int, str] = {
    1: "ใกล้ ไม่เกิน 10 กิโลเมตร",
    2: "ระยะกลาง 10-50 กิโลเมตร",
    3: "ไกล 50-100 กิโลเมตร",
    4: "ไกลมาก มากกว่า 100 กิโลเมตร",
}

BUDGET_BANDS: dict[int, str] = {
    1: "ประหยัด ไม่เกิน 500 บาท",
    2: "ปานกลาง 500-1,500 บาท",
    3: "สูง 1,500-5,000 บาท",
    4: "ไม่จำกัดงบประมาณ",
}

LOCATION_INTERESTS: dict[int, str] = {
    1: "ทะเลและชายหาด",
    2: "ภูเขาและธรรมชาติ",
    3: "เมืองและย่านช้อปปิ้ง",
    4: "วัดและสถานที่ทางประวัติศาสตร์",
    5: "คาเฟ่และร้านอาหาร",
    6: "สวนสนุกและสวนน้ำ",
}

# (key used by the app, label)
ACTIVITIES: dict[int, tuple[str, str]] = {
    1: ("themepark", "สวนสนุกและสวนน้ำ"),
    2: ("park", "สวนสาธารณะ"),
    3: ("cafe", "คาเฟ่และกิจกรรมต่างๆ"),
    4: ("art", "งานศิลปะและนิทรรศการ"),
    5: ("temple", "วัดและสถานที่โบราณ"),
    6: ("food", "ร้านอาหารและเครื่องดื่ม"),
    7: ("mall", "ห้างสรรพสินค้า"),
    8: ("spa", "สปาและออนเซ็น"),
}

EMOTIONAL_STATES: dict[int, str] = {
    1: "มีความสุข",
    2: "เครียด",
    3: "เหนื่อยล้า",
    4: "เบื่อ",
    5: "ตื่นเต้น",
    6: "เหงา",
}

_TABLES: dict[str, dict[int, str]] = {
    "trip": TRIP_TYPES,
    "distance": DISTANCE_BANDS,
    "value": BUDGET_BANDS,
    "location_interest": LOCATION_INTERESTS,
    "emotional": EMOTIONAL_STATES,
}

ACTIVITY_CATEGORY = "activity"
CATEGORIES = (*_TABLES, ACTIVITY_CATEGORY)


@dataclass
class TranslatedChoices:
    trip: str
    distance: str
    budget: str
    location_interest: str
    activities: str
    emotional: str


def _lookup(table: dict[int, str], code: Any) -> str:
    if isinstance(code, bool):
        return UNSPECIFIED
    try:
        return table.get(int(code), UNSPECIFIED)
    except (TypeError, ValueError):
        return UNSPECIFIED


def translate_activities(codes: Any) -> str:
    if not isinstance(codes, (list, tuple, set, frozenset)) or not codes:
        return UNSPECIFIED
    if isinstance(codes, (set, frozenset)):
        codes = sorted(codes)
    labels = {code: label for code, (_, label) in ACTIVITIES.items()}
    return ", ".join(_lookup(labels, code) for code in codes)


def translate_choice(value: Any, category: str) -> Any:
    """Translate one questionnaire answer.

    Unknown codes give UNSPECIFIED. Unknown categories hand the value back
    unchanged.
    """
    if category == ACTIVITY_CATEGORY:
        return translate_activities(value)
    table = _TABLES.get(category)
    if table is None:
        return value
    return _lookup(table, value)


def translate_answer(answer) -> TranslatedChoices:
    """Translate every code on a questionnaire submission."""
    activities = translate_choice(answer.activity_id, ACTIVITY_CATEGORY)
    custom = (getattr(answer, "custom_activity", None) or "").strip()
    if custom:
        activities = custom if activities == UNSPECIFIED else f"{activities}, {custom}"

    return TranslatedChoices(
        trip=translate_choice(answer.trip_id, "trip"),
        distance=translate_choice(answer.distance_id, "distance"),
        budget=translate_choice(answer.value_id, "value"),
        location_interest=translate_choice(answer.location_interest_id, "location_interest"),
        activities=activities,
        emotional=translate_choice(answer.emotional_id, "emotional"),
    )
