"""Category -> entries lookup derived from a ContentStore."""
from __future__ import annotations

from typing import Dict, Tuple

from models import Entry
from utils import slugify


class CategoryIndex:
    # Shares the store's Entry objects (plain references, not weakrefs): the
    # index is only valid while its store is alive and is rebuilt on reload.

    def __init__(self, groups: Dict[str, Tuple[Entry, ...]]) -> None:
        self._groups = dict(groups)

    @classmethod
    def build(cls, store) -> "CategoryIndex":
        groups: Dict[str, list] = {}
        for entry in store.all():
            groups.setdefault(entry.category, []).append(entry)
        return cls({tag: tuple(items) for tag, items in groups.items()})

    def lookup(self, category: str) -> Tuple[Entry, ...]:
        """Entries tagged ``category``; an unknown tag yields ``()``."""
        return self._groups.get(slugify(category), ())

    def categories(self) -> Tuple[str, ...]:
        return tuple(self._groups)

    def counts(self) -> Dict[str, int]:
        return {tag: len(items) for tag, items in self._groups.items()}

    def __contains__(self, category: str) -> bool:
        return slugify(category) in self._groups

    def __len__(self) -> int:
        return len(self._groups)
