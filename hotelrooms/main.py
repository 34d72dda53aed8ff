import logging

from fastapi import FastAPI

from hotelrooms.infrastructure.config import settings
from hotelrooms.infrastructure.database import create_schema, engine
from hotelrooms.presentation.exception_handlers import register_exception_handlers
from hotelrooms.presentation.routers import router

# --- Logging configuration ---
_level = getattr(logging, settings.log_level.upper(), logging.INFO)
logging.basicConfig(
    level=_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
for _name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(_name).setLevel(_level)
logger = logging.getLogger("hotelrooms.startup")

app = FastAPI(title=settings.app_name)


@app.on_event("startup")
async def _create_tables_on_startup() -> None:
    """
    Create the rooms, type_room and status_room tables if they do not exist yet
    """
    logger.info("Starting %s (database=%s)", settings.app_name, engine.url.render_as_string(hide_password=True))
    await create_schema(engine)


register_exception_handlers(app)
app.include_router(router)
