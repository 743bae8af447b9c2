"""Seed the questionnaire lookup tables and provinces."""

import asyncio

from sqlalchemy import select

from travelapp.database import async_session_factory
from travelapp.models.lookup import (
    Province,
    QAActivity,
    QADistance,
    QAEmotional,
    QAPicture,
    QATraveling,
    QAValue,
)
from travelapp.services.choice_translator import (
    ACTIVITIES,
    BUDGET_BANDS,
    DISTANCE_BANDS,
    EMOTIONAL_STATES,
    LOCATION_INTERESTS,
    TRIP_TYPES,
)

# ── Provinces (region_id: 1 central, 2 north, 3 northeast, 4 east, 5 west, 6 south) ──

PROVINCES = [
    (1, "กรุงเทพมหานคร", "Bangkok", 1),
    (2, "นนทบุรี", "Nonthaburi", 1),
    (3, "ปทุมธานี", "Pathum Thani", 1),
    (4, "พระนครศรีอยุธยา", "Phra Nakhon Si Ayutthaya", 1),
    (5, "สมุทรปราการ", "Samut Prakan", 1),
    (6, "เชียงใหม่", "Chiang Mai", 2),
    (7, "เชียงราย", "Chiang Rai", 2),
    (8, "น่าน", "Nan", 2),
    (9, "ขอนแก่น", "Khon Kaen", 3),
    (10, "นครราชสีมา", "Nakhon Ratchasima", 3),
    (11, "อุดรธานี", "Udon Thani", 3),
    (12, "ชลบุรี", "Chon Buri", 4),
    (13, "ระยอง", "Rayong", 4),
    (14, "จันทบุรี", "Chanthaburi", 4),
    (15, "กาญจนบุรี", "Kanchanaburi", 5),
    (16, "ประจวบคีรีขันธ์", "Prachuap Khiri Khan", 5),
    (17, "ภูเก็ต", "Phuket", 6),
    (18, "กระบี่", "Krabi", 6),
    (19, "สงขลา", "Songkhla", 6),
    (20, "สุราษฎร์ธานี", "Surat Thani", 6),
]


async def seed():
    async with async_session_factory() as db:
        # Check if already seeded
        result = await db.execute(select(QATraveling).limit(1))
        if result.scalar_one_or_none():
            print("Database already seeded. Skipping.")
            return

        # ── Questionnaire options ──
        db.add_all(QATraveling(trip_id=k, trip_name=v) for k, v in TRIP_TYPES.items())
        db.add_all(QADistance(distance_id=k, distance_name=v) for k, v in DISTANCE_BANDS.items())
        db.add_all(QAValue(value_id=k, value_name=v) for k, v in BUDGET_BANDS.items())
        db.add_all(QAPicture(picture_id=k, theme=v) for k, v in LOCATION_INTERESTS.items())
        db.add_all(
            QAActivity(activity_id=k, activity_key=key, activity_name=label)
            for k, (key, label) in ACTIVITIES.items()
        )
        db.add_all(QAEmotional(emotional_id=k, emotional_name=v) for k, v in EMOTIONAL_STATES.items())
        print("Created questionnaire option lists")

        # ── Provinces ──
        for province_id, name, name_en, region_id in PROVINCES:
            db.add(Province(
                province_id=province_id,
                province_name=name,
                province_name_en=name_en,
                region_id=region_id,
            ))
        print(f"Created {len(PROVINCES)} provinces")

        await db.commit()
        print("Seed complete.")


if __name__ == "__main__":
    asyncio.run(seed())
