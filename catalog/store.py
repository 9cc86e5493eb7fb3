"""Ordered, read-only store of reference entries."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple, Union, TextIO

import structlog

from models import Entry, ModuleInfo

from .errors import ParseError
from .parser import parse_document

logger = structlog.get_logger(__name__)

BUILTIN_SOURCE = Path(__file__).resolve().parent / "data" / "sql_reference_guide.sql"

Source = Union[str, Path, TextIO]


class ContentStore:
    """Entries in document order, plus the module headings and the banner.

    Instances are built by :meth:`load` / :meth:`from_text` and never mutated.
    """

    def __init__(
        self,
        entries: Tuple[Entry, ...],
        modules: Tuple[ModuleInfo, ...] = (),
        banner: Tuple[str, ...] = (),
        origin: str = "<string>",
    ) -> None:
        self._entries = tuple(entries)
        self._modules = tuple(modules)
        self._banner = tuple(banner)
        self.origin = origin

        by_module: Dict[int, list] = {}
        for entry in self._entries:
            by_module.setdefault(entry.module, []).append(entry)
        self._by_module = {n: tuple(items) for n, items in by_module.items()}
        self._by_key = {entry.key: entry for entry in self._entries}

    # ── Loading ───────────────────────────────────────────

    @classmethod
    def load(cls, source: Source) -> "ContentStore":
        """Parse a guide from a path or an open text stream."""
        if hasattr(source, "read"):
            text = source.read()
            origin = getattr(source, "name", "<stream>")
        else:
            path = Path(source)
            text = path.read_text(encoding="utf-8-sig")
            origin = str(path)
        return cls.from_text(text, origin=str(origin))

    @classmethod
    def from_text(cls, text: str, origin: str = "<string>") -> "ContentStore":
        # SSMS saves scripts with a UTF-8 BOM
        text = text.removeprefix("\ufeff")
        try:
            doc = parse_document(text, origin=origin)
        except ParseError as exc:
            logger.warning("catalog_parse_failed", origin=origin, line=exc.line, error=exc.message)
            raise
        store = cls(doc.entries, doc.modules, doc.banner, origin=origin)
        logger.info(
            "catalog_loaded",
            origin=origin,
            entries=len(store),
            modules=len(store.modules()),
        )
        return store

    @classmethod
    def builtin(cls) -> "ContentStore":
        """The guide shipped inside the package."""
        return cls.load(BUILTIN_SOURCE)

    # ── Queries ───────────────────────────────────────────

    def all(self) -> Tuple[Entry, ...]:
        return self._entries

    def get_by_module(self, number: int) -> Tuple[Entry, ...]:
        return self._by_module.get(number, ())

    def get(self, module: int, title: str) -> Optional[Entry]:
        return self._by_key.get((module, title))

    def modules(self) -> Tuple[ModuleInfo, ...]:
        return self._modules

    def module_title(self, number: int) -> Optional[str]:
        for info in self._modules:
            if info.number == number:
                return info.title
        return None

    def module_titles(self) -> Dict[int, str]:
        return {info.number: info.title for info in self._modules}

    @property
    def banner(self) -> Tuple[str, ...]:
        return self._banner

    @property
    def title(self) -> Optional[str]:
        return self._banner[0] if self._banner else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"ContentStore(origin={self.origin!r}, entries={len(self)}, modules={len(self._modules)})"
