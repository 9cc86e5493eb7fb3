# stores.py
# Centralize the loaded catalog to avoid circular imports.
# One (ContentStore, CategoryIndex) pair per resolved source path.

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import structlog

from catalog import BUILTIN_SOURCE, CategoryIndex, ContentStore

logger = structlog.get_logger(__name__)

STORES: Dict[str, ContentStore] = {}  # source path -> store
INDEXES: Dict[str, CategoryIndex] = {}  # source path -> index built from STORES[path]


def _resolve(source: Optional[Union[str, Path]]) -> str:
    return str(Path(source).expanduser().resolve()) if source else str(BUILTIN_SOURCE)


def get_catalog(source: Optional[Union[str, Path]] = None) -> Tuple[ContentStore, CategoryIndex]:
    """Load the guide on first use; later calls return the cached pair."""
    key = _resolve(source)
    if key not in STORES:
        store = ContentStore.load(key)
        STORES[key] = store
        INDEXES[key] = CategoryIndex.build(store)
    return STORES[key], INDEXES[key]


def reload_catalog(source: Optional[Union[str, Path]] = None) -> Tuple[ContentStore, CategoryIndex]:
    """Re-read the source and rebuild the index alongside the store."""
    key = _resolve(source)
    STORES.pop(key, None)
    INDEXES.pop(key, None)
    store, index = get_catalog(key)
    logger.info("catalog_reloaded", origin=key, entries=len(store), categories=len(index))
    return store, index


def clear_catalogs() -> None:
    STORES.clear()
    INDEXES.clear()
