"""Exceptions raised while loading or rendering the catalog."""
from __future__ import annotations

from typing import Iterable, Optional


class CatalogError(Exception):
    """Base class for catalog errors surfaced to the CLI and the API."""


class ParseError(CatalogError):
    def __init__(self, message: str, line: Optional[int] = None, origin: str = "<string>") -> None:
        self.message = message
        self.line = line
        self.origin = origin
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return f"{self.origin}: {self.message}"
        return f"{self.origin}:{self.line}: {self.message}"


class UnsupportedFormatError(CatalogError, ValueError):
    def __init__(self, fmt: str, supported: Iterable[str] = ()) -> None:
        self.format = fmt
        self.supported = tuple(supported)
        choices = ", ".join(self.supported) or "none registered"
        super().__init__(f"Unsupported render format {fmt!r} (expected one of: {choices})")
