# routes/catalog.py
# FastAPI router for read-only access to the loaded SQL guide.

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse

import structlog

from catalog import UnsupportedFormatError
from models import CategorySummary, ModuleSummary
from render_formats import get_format, list_formats, render
from settings import settings
from stores import get_catalog

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["catalog"])


def _catalog():
    return get_catalog(settings.source_path)


@router.get("/modules")
def get_modules():
    store, _ = _catalog()
    items = [
        ModuleSummary(number=m.number, title=m.title, entries=len(store.get_by_module(m.number))).model_dump()
        for m in store.modules()
    ]
    return {"ok": True, "title": store.title, "items": items}


@router.get("/modules/{number}")
def get_module(number: int):
    store, _ = _catalog()
    title = store.module_title(number)
    if title is None:
        raise HTTPException(status_code=404, detail="module not found")
    return {
        "ok": True,
        "module": {"number": number, "title": title},
        "items": [e.model_dump() for e in store.get_by_module(number)],
    }


@router.get("/categories")
def get_categories():
    _, index = _catalog()
    items = [CategorySummary(category=tag, entries=n).model_dump() for tag, n in index.counts().items()]
    return {"ok": True, "items": items}


@router.get("/categories/{tag}")
def get_category(tag: str):
    # Unknown tags are an empty listing, not a 404
    _, index = _catalog()
    return {"ok": True, "category": tag, "items": [e.model_dump() for e in index.lookup(tag)]}


@router.get("/formats")
def get_formats():
    return {"ok": True, "items": [m.model_dump() for m in list_formats()]}


@router.get("/render", response_class=PlainTextResponse)
def render_entries(
    fmt: Optional[str] = Query(None, alias="format", description="text or markdown"),
    module: Optional[int] = Query(None),
    category: Optional[str] = Query(None),
):
    if module is not None and category is not None:
        raise HTTPException(status_code=400, detail="use either module or category, not both")

    store, index = _catalog()
    if module is not None:
        entries = store.get_by_module(module)
    elif category is not None:
        entries = index.lookup(category)
    else:
        entries = store.all()

    fmt_id = fmt or settings.default_format
    try:
        body = render(entries, fmt_id, module_titles=store.module_titles())
    except UnsupportedFormatError as exc:
        logger.warning("render_format_rejected", format=fmt_id)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    media_type = get_format(fmt_id).meta.media_type
    return PlainTextResponse(body, media_type=f"{media_type}; charset=utf-8")
