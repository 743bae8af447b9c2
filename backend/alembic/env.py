import asyncio

from alembic import context
from sqlalchemy.ext.asyncio import create_async_engine

from travelapp.config import settings
from travelapp.database import Base
import travelapp.models  # noqa: F401  registers tables on Base.metadata

target_metadata = Base.metadata


def _url_string() -> str:
    url = settings.sqlalchemy_url
    if isinstance(url, str):
        return url
    return url.render_as_string(hide_password=False)


def run_migrations_offline() -> None:
    context.configure(
        url=_url_string(),
        target_metadata=target_metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(settings.sqlalchemy_url)
    async with engine.connect() as conn:
        await conn.run_sync(_run_sync)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
