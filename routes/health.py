from fastapi import APIRouter

from settings import settings
from stores import get_catalog

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    store, index = get_catalog(settings.source_path)
    return {"ok": True, "origin": store.origin, "entries": len(store), "categories": len(index)}
