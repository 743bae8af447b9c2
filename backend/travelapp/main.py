import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from travelapp.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_LOG_DIR.mkdir(exist_ok=True)

_log_level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "travelapp.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from travelapp.errors import register_error_handlers
from travelapp.routers import auth, lookups, profile, questionnaire, search

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: database heartbeat on a fixed interval
    scheduler = None
    if settings.scheduler_enabled:
        try:
            from apscheduler.schedulers.asyncio import AsyncIOScheduler
            from apscheduler.triggers.interval import IntervalTrigger

            from travelapp.database import ping_database

            scheduler = AsyncIOScheduler()
            scheduler.add_job(
                ping_database,
                IntervalTrigger(seconds=settings.db_heartbeat_interval_seconds),
                id="db_heartbeat",
            )
            scheduler.start()
            logger.info(f"Database heartbeat every {settings.db_heartbeat_interval_seconds}s")
        except Exception as e:
            logger.error(f"Scheduler failed to start: {e}")

    yield

    # Shutdown
    from travelapp.database import engine
    from travelapp.services.image_resolver import image_resolver
    from travelapp.services.place_search import place_search_client

    await image_resolver.close()
    await place_search_client.close()
    await engine.dispose()
    if scheduler:
        scheduler.shutdown(wait=False)
        logger.info("Background scheduler stopped")


app = FastAPI(
    title="TravelApp",
    description="Questionnaire-driven travel recommendations",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(auth.router, tags=["auth"])
app.include_router(profile.router, tags=["profile"])
app.include_router(lookups.router, tags=["lookups"])
app.include_router(search.router, tags=["search"])
app.include_router(questionnaire.router, tags=["questionnaire"])


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "travelapp"}


def run():
    import uvicorn

    uvicorn.run("travelapp.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
