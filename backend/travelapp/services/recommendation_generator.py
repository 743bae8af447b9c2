"""Recommendation generator: prompt the LLM for five places and parse its answer.

The answer is parsed by position, not by schema. Line 0 of each blank-line
separated entry is the name, line 1 the description, and so on. A model that
skips a line shifts every field after it; that is a known weakness of the
format and is left as is.
"""

import logging
import re
from dataclasses import dataclass

from travelapp.config import settings
from travelapp.errors import GenerationError
from travelapp.services.choice_translator import TranslatedChoices
from travelapp.services.image_resolver import image_resolver
from travelapp.services.llm_client import llm_client

logger = logging.getLogger(__name__)

BATCH_SIZE = 5
MAX_DEDUP_ATTEMPTS = 3

SYSTEM_PROMPT = """You are a Thai travel guide who recommends real places that
exist today. Follow the requested output format exactly."""

USER_PROMPT = """Recommend exactly 5 places to visit for this traveller.

Current location: latitude {latitude}, longitude {longitude}
Trip type: {trip}
How far they want to go: {distance}
Budget: {budget}
Kind of place they like: {location_interest}
Activities they enjoy: {activities}
How they feel today: {emotional}

Answer in Thai. Write each place as exactly these six lines, in this order,
and put one blank line between places:
Name: <place name>
Description: <one or two sentences about the place>
Location: <district and province>
Open days: <days the place is open>
Hours: <opening hours>
Distance: <distance from the current location in km>

Do not number the places and do not add any other text."""

# (field, placeholder) in line order
FIELDS: list[tuple[str, str]] = [
    ("event_name", "ไม่ระบุชื่อสถานที่"),
    ("event_description", "ไม่มีรายละเอียด"),
    ("location_text", "ไม่ระบุที่ตั้ง"),
    ("open_day", "ไม่ระบุวันเปิด"),
    ("time_schedule", "ไม่ระบุเวลาเปิด-ปิด"),
    ("distance_text", "ไม่ทราบระยะทาง"),
]

_BLANK_LINES = re.compile(r"\n\s*\n")


@dataclass
class GeneratedPlace:
    result_id: int
    event_name: str
    event_description: str
    location_text: str
    open_day: str
    time_schedule: str
    distance_text: str
    image_url: str = ""


def build_prompt(choices: TranslatedChoices, latitude: float, longitude: float) -> str:
    return USER_PROMPT.format(
        latitude=latitude,
        longitude=longitude,
        trip=choices.trip,
        distance=choices.distance,
        budget=choices.budget,
        location_interest=choices.location_interest,
        activities=choices.activities,
        emotional=choices.emotional,
    )


def _labelled_value(lines: list[str], index: int, default: str) -> str:
    if index >= len(lines) or ":" not in lines[index]:
        return default
    value = lines[index].split(":", 1)[1].strip()
    return value or default


def parse_places(raw: str) -> list[GeneratedPlace]:
    """Split the model text into at most BATCH_SIZE places; short input stays short."""
    candidates = [c.strip() for c in _BLANK_LINES.split(raw.strip())]
    candidates = [c for c in candidates if c]

    places = []
    for i, candidate in enumerate(candidates[:BATCH_SIZE]):
        lines = [line.strip() for line in candidate.splitlines()]
        values = {field: _labelled_value(lines, idx, default) for idx, (field, default) in enumerate(FIELDS)}
        places.append(GeneratedPlace(result_id=i + 1, **values))
    return places


async def assign_image(name: str, used_images: set[str]) -> str:
    """Resolve a photo not yet used in this batch, retrying up to MAX_DEDUP_ATTEMPTS."""
    english = await image_resolver.translate_name(name)
    url = await image_resolver.resolve(name, english=english)
    attempt = 0
    while url in used_images and attempt < MAX_DEDUP_ATTEMPTS:
        attempt += 1
        logger.info(f"Duplicate image for {name!r}, retry {attempt}/{MAX_DEDUP_ATTEMPTS}")
        url = await image_resolver.resolve(name, attempt=attempt, english=english)
    used_images.add(url)
    return url


class RecommendationGenerator:
    async def generate(
        self, choices: TranslatedChoices, latitude: float, longitude: float
    ) -> list[GeneratedPlace]:
        raw = await llm_client.complete(
            system=SYSTEM_PROMPT,
            user=build_prompt(choices, latitude, longitude),
            max_tokens=settings.recommendation_max_tokens,
        )
        if not raw:
            raise GenerationError("Model returned an empty answer")
        places = parse_places(raw)
        if len(places) < BATCH_SIZE:
            logger.warning(f"Model returned {len(places)} places, expected {BATCH_SIZE}")

        used_images: set[str] = set()
        for place in places:
            place.image_url = await assign_image(place.event_name, used_images)
        return places


recommendation_generator = RecommendationGenerator()
