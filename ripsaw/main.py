from fastapi import FastAPI
import logging

from . import __version__
from .config import settings
from .routers import cut_lists, lumber

logger = logging.getLogger("ripsaw")

app = FastAPI(
    title="ripsaw",
    description="Lumber sizing and cut list aggregation",
    version=__version__,
)

app.include_router(lumber.router, prefix="/api")
app.include_router(cut_lists.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "ripsaw"}


@app.on_event("startup")
def log_settings():
    logger.info(
        "ripsaw %s started (blade width %s\", specs default to %s)",
        __version__,
        settings.BLADE_WIDTH_INCHES,
        "nominal" if settings.DEFAULT_NOMINAL else "actual",
    )
