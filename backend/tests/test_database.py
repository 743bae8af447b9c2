from sqlalchemy.exc import OperationalError

from travelapp import database


class BrokenEngine:
    def __init__(self):
        self.disposed = False

    def connect(self):
        raise OperationalError("SELECT 1", {}, Exception("server closed the connection"))

    async def dispose(self):
        self.disposed = True


async def test_heartbeat_ok(monkeypatch, engine):
    monkeypatch.setattr(database, "engine", engine)
    assert await database.ping_database() is True


async def test_heartbeat_failure_resets_pool(monkeypatch):
    broken = BrokenEngine()
    monkeypatch.setattr(database, "engine", broken)

    assert await database.ping_database() is False
    assert broken.disposed is True
