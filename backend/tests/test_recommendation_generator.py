import pytest

from conftest import FakeImageResolver, FakeLLM, model_answer
from travelapp.errors import GenerationError
from travelapp.services import recommendation_generator as generator_module
from travelapp.services.choice_translator import TranslatedChoices
from travelapp.services.recommendation_generator import (
    BATCH_SIZE,
    FIELDS,
    MAX_DEDUP_ATTEMPTS,
    assign_image,
    build_prompt,
    parse_places,
    recommendation_generator,
)

DEFAULTS = dict(FIELDS)

CHOICES = TranslatedChoices(
    trip="เที่ยวกับเพื่อน",
    distance="ใกล้ ไม่เกิน 10 กิโลเมตร",
    budget="ประหยัด ไม่เกิน 500 บาท",
    location_interest="ทะเลและชายหาด",
    activities="สวนสาธารณะ, คาเฟ่และกิจกรรมต่างๆ",
    emotional="เหนื่อยล้า",
)


def test_prompt_embeds_choices_and_coordinates():
    prompt = build_prompt(CHOICES, 13.7, 100.5)
    for text in (CHOICES.trip, CHOICES.distance, CHOICES.budget,
                 CHOICES.location_interest, CHOICES.activities, CHOICES.emotional):
        assert text in prompt
    assert "13.7" in prompt and "100.5" in prompt
    assert "exactly 5" in prompt


def test_parse_five_well_formed_entries():
    places = parse_places(model_answer(5))
    assert len(places) == 5
    first = places[0]
    assert first.result_id == 1
    assert first.event_name == "Place 1"
    assert first.event_description == "Description 1"
    assert first.location_text == "District 1, Bangkok"
    assert first.open_day == "Every day"
    assert first.time_schedule == "09:00-18:00"
    assert first.distance_text == "2 km"
    assert [p.result_id for p in places] == [1, 2, 3, 4, 5]


def test_parse_truncates_to_batch_size():
    places = parse_places(model_answer(8))
    assert len(places) == BATCH_SIZE
    assert places[-1].event_name == "Place 5"


def test_parse_short_batch_is_not_padded():
    assert len(parse_places(model_answer(3))) == 3
    assert parse_places("") == []


def test_parse_ignores_extra_blank_lines():
    raw = "\n\n" + model_answer(2).replace("\n\n", "\n   \n\n\n") + "\n\n\n"
    assert [p.event_name for p in parse_places(raw)] == ["Place 1", "Place 2"]


def test_missing_trailing_lines_get_placeholders():
    places = parse_places("Name: Wat Arun\nDescription: Temple of Dawn")
    place = places[0]
    assert place.event_name == "Wat Arun"
    assert place.location_text == DEFAULTS["location_text"]
    assert place.time_schedule == DEFAULTS["time_schedule"]
    assert place.distance_text == DEFAULTS["distance_text"]


def test_unlabelled_line_gets_placeholder_and_shifts_nothing_else():
    raw = "Name: Wat Pho\nA line without a label\nLocation: Phra Nakhon\nOpen days: Daily\nHours:\nDistance: 3 km"
    place = parse_places(raw)[0]
    assert place.event_description == DEFAULTS["event_description"]
    assert place.location_text == "Phra Nakhon"
    assert place.time_schedule == DEFAULTS["time_schedule"]  # empty value
    assert place.distance_text == "3 km"


def test_omitted_line_shifts_following_fields():
    # Positional parsing: a skipped description moves every later field up one slot
    raw = "Name: Lumphini Park\nLocation: Pathum Wan\nOpen days: Daily\nHours: 04:30-21:00\nDistance: 1 km"
    place = parse_places(raw)[0]
    assert place.event_description == "Pathum Wan"
    assert place.distance_text == DEFAULTS["distance_text"]


async def test_assign_image_keeps_batch_unique(monkeypatch):
    resolver = FakeImageResolver()
    monkeypatch.setattr(generator_module, "image_resolver", resolver)
    used = set()

    first = await assign_image("Wat Arun", used)
    second = await assign_image("Wat Arun", used)

    assert first != second
    assert resolver.calls == [("Wat Arun", 0), ("Wat Arun", 0), ("Wat Arun", 1)]
    assert used == {first, second}


async def test_assign_image_gives_up_after_bounded_retries(monkeypatch):
    resolver = FakeImageResolver(fixed_url="https://upload.test/same.jpg")
    monkeypatch.setattr(generator_module, "image_resolver", resolver)
    used = {"https://upload.test/same.jpg"}

    url = await assign_image("Siam Paragon", used)

    assert url == "https://upload.test/same.jpg"
    assert [attempt for _, attempt in resolver.calls] == list(range(MAX_DEDUP_ATTEMPTS + 1))


async def test_assign_image_translates_name_once_across_retries(monkeypatch):
    resolver = FakeImageResolver(fixed_url="https://upload.test/same.jpg")
    monkeypatch.setattr(generator_module, "image_resolver", resolver)

    await assign_image("วัดอรุณ", {"https://upload.test/same.jpg"})

    assert len(resolver.calls) == MAX_DEDUP_ATTEMPTS + 1
    assert resolver.translations == ["วัดอรุณ"]


async def test_generate_returns_five_places_with_distinct_images(fake_llm, fake_images):
    places = await recommendation_generator.generate(CHOICES, 13.7, 100.5)

    assert len(places) == 5
    urls = [p.image_url for p in places]
    assert len(set(urls)) == 5
    assert len(fake_llm.calls) == 1
    assert fake_llm.calls[0]["max_tokens"] > 0
    assert CHOICES.activities in fake_llm.calls[0]["user"]


async def test_generate_dedups_placeholder_collisions(monkeypatch, fake_llm):
    resolver = FakeImageResolver(fixed_url="https://placeholder.test/none.png")
    monkeypatch.setattr(generator_module, "image_resolver", resolver)

    places = await recommendation_generator.generate(CHOICES, 13.7, 100.5)

    # first place takes it directly, each later one exhausts its retries
    assert len(resolver.calls) == 1 + 4 * (1 + MAX_DEDUP_ATTEMPTS)
    assert {p.image_url for p in places} == {"https://placeholder.test/none.png"}


async def test_generate_raises_when_service_returns_nothing(monkeypatch, fake_images):
    monkeypatch.setattr(generator_module, "llm_client", FakeLLM(reply=""))
    with pytest.raises(GenerationError):
        await recommendation_generator.generate(CHOICES, 13.7, 100.5)


async def test_generate_propagates_llm_failure(monkeypatch, fake_images):
    monkeypatch.setattr(generator_module, "llm_client", FakeLLM(error=GenerationError("no choices")))
    with pytest.raises(GenerationError):
        await recommendation_generator.generate(CHOICES, 13.7, 100.5)
    assert fake_images.calls == []
