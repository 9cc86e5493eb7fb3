# app.py
# FastAPI backend for the SQL reference catalog.
# - Parses the commented SQL guide once and keeps it in memory (stores.py)
# - Read-only JSON listings by module and by category
# - Text / Markdown rendering through the render_formats registry

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from settings import settings
from stores import get_catalog
from utils import configure_logging

# --- Configure structlog + stdlib logging
configure_logging(settings.log_level)
logger = structlog.get_logger("app")

# ----------------------------
# Catalog (fail fast on a broken guide)
# ----------------------------

store, index = get_catalog(settings.source_path)
logger.info(
    "catalog_ready",
    origin=store.origin,
    entries=len(store),
    categories=len(index),
)

# ----------------------------
# FastAPI app
# ----------------------------
from routes.catalog import router as catalog_router  # noqa: E402
from routes.docs import router as docs_router  # noqa: E402
from routes.health import router as health_router  # noqa: E402

app = FastAPI(title="SQL Reference Catalog")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.front_origin],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(catalog_router)
app.include_router(health_router)
app.include_router(docs_router)
