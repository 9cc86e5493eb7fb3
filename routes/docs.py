"""Serve the API reference of the catalog endpoints."""

from __future__ import annotations

from pathlib import Path
from typing import List, Dict

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse


DOC_PATH = Path(__file__).resolve().parents[1] / "docs" / "api_reference.md"

try:
    DOC_CONTENT = DOC_PATH.read_text(encoding="utf-8")
except FileNotFoundError as exc:  # pragma: no cover - packaging error
    raise RuntimeError("Missing documentation file at docs/api_reference.md") from exc


router = APIRouter(prefix="/api/docs", tags=["documentation"])


@router.get("", response_class=PlainTextResponse, summary="API reference (Markdown)")
async def get_api_reference_markdown() -> PlainTextResponse:
    return PlainTextResponse(DOC_CONTENT, media_type="text/markdown; charset=utf-8")


def _parse_sections(markdown: str) -> List[Dict[str, str]]:
    """Split on `### ` headings; text before the first heading is dropped."""
    sections: List[Dict[str, str]] = []
    title = None
    body: List[str] = []

    for line in markdown.splitlines():
        if line.startswith("### "):
            if title is not None:
                sections.append({"title": title, "content": "\n".join(body).strip()})
            title = line.removeprefix("### ").strip()
            body = []
        elif title is not None:
            body.append(line)

    if title is not None:
        sections.append({"title": title, "content": "\n".join(body).strip()})
    return sections


@router.get("/structured", summary="API reference as structured JSON")
async def get_api_reference_structured() -> Dict[str, object]:
    sections = _parse_sections(DOC_CONTENT)
    if not sections:
        raise HTTPException(status_code=500, detail="Documentation is empty")
    return {"title": "SQL Reference Catalog API", "sections": sections}
