"""
Pytest configuration for the TravelApp backend tests.

Environment is pinned before the app is imported: no scheduler and no real
LLM keys, so nothing reaches the network unless a test wires in a fake.
"""
import os

os.environ["SCHEDULER_ENABLED"] = "false"
os.environ["OPENAI_API_KEY"] = ""
os.environ["ANTHROPIC_API_KEY"] = ""
os.environ["LONGDO_API_KEY"] = "test-key"

import httpx
import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import travelapp.models  # noqa: F401
from travelapp.database import Base, get_db
from travelapp.main import app
from travelapp.services import recommendation_generator as generator_module


def model_answer(count: int) -> str:
    """A well-formed model reply with `count` places."""
    entries = []
    for i in range(1, count + 1):
        entries.append(
            f"Name: Place {i}\n"
            f"Description: Description {i}\n"
            f"Location: District {i}, Bangkok\n"
            f"Open days: Every day\n"
            f"Hours: 09:00-18:00\n"
            f"Distance: {i * 2} km"
        )
    return "\n\n".join(entries)


class FakeLLM:
    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, system, user, **kwargs):
        self.calls.append({"system": system, "user": user, **kwargs})
        if self.error:
            raise self.error
        return self.reply


class FakeImageResolver:
    """Returns a distinct URL per (name, attempt) unless `fixed_url` is set."""

    def __init__(self, fixed_url: str | None = None):
        self.fixed_url = fixed_url
        self.calls = []
        self.translations = []

    async def translate_name(self, name):
        self.translations.append(name)
        return name

    async def resolve(self, name, attempt=0, english=None):
        self.calls.append((name, attempt))
        if self.fixed_url:
            return self.fixed_url
        return f"https://upload.test/{name.replace(' ', '_')}_{attempt}.jpg"


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fake_llm(monkeypatch):
    llm = FakeLLM(reply=model_answer(5))
    monkeypatch.setattr(generator_module, "llm_client", llm)
    return llm


@pytest.fixture
def fake_images(monkeypatch):
    resolver = FakeImageResolver()
    monkeypatch.setattr(generator_module, "image_resolver", resolver)
    return resolver


class BrokenSession:
    """Stands in for a session whose connection has gone away."""

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    async def rollback(self):
        pass


@pytest.fixture
async def broken_db_client():
    async def _get_db():
        yield BrokenSession()

    app.dependency_overrides[get_db] = _get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
