"""Core utilities and registry for render formats."""
from __future__ import annotations

from collections import defaultdict
from importlib import import_module
import pkgutil
from typing import Any, Dict, Iterable, Mapping, Optional

from pydantic import BaseModel, Field

from catalog.errors import UnsupportedFormatError
from models import Entry
from utils import module_label


class FormatMeta(BaseModel):
    id: str
    name: str
    description: str
    media_type: str = "text/plain"


class FormatTemplates(BaseModel):
    heading: str  # {label} {underline} {module}
    entry: str  # {title} {category} {module} {line}
    comment: str  # {comment}
    code: str  # {code}
    separator: str = "\n\n"


class RenderFormat(BaseModel):
    meta: FormatMeta
    templates: FormatTemplates
    comment_prefix: str = ""
    code_prefix: str = ""
    underline_char: str = Field(default="=", min_length=1, max_length=1)


class _SafeDict(defaultdict):
    def __missing__(self, key):  # type: ignore[override]
        return ""


def render_template(template: str, ctx: Dict[str, Any]) -> str:
    return template.format_map(_SafeDict(str, **ctx))


RENDER_FORMATS: Dict[str, RenderFormat] = {}


def register_format(fmt: RenderFormat) -> None:
    RENDER_FORMATS[fmt.meta.id] = fmt


def get_format(format_id: str) -> RenderFormat:
    if format_id in RENDER_FORMATS:
        return RENDER_FORMATS[format_id]
    raise UnsupportedFormatError(format_id, sorted(RENDER_FORMATS))


def list_formats() -> list[FormatMeta]:
    return [f.meta for f in RENDER_FORMATS.values()]


def _prefix_lines(text: str, prefix: str) -> str:
    if not prefix:
        return text
    return "\n".join((prefix + line).rstrip() if line else prefix.rstrip() for line in text.split("\n"))


def _render_entry(fmt: RenderFormat, entry: Entry) -> str:
    t = fmt.templates
    parts = [
        render_template(
            t.entry,
            {"title": entry.title, "category": entry.category, "module": entry.module, "line": entry.line},
        )
    ]
    if entry.comment:
        parts.append(render_template(t.comment, {"comment": _prefix_lines(entry.comment, fmt.comment_prefix)}))
    if entry.code:
        parts.append(render_template(t.code, {"code": _prefix_lines(entry.code, fmt.code_prefix)}))
    return "\n".join(parts).rstrip("\n")


def render(
    entries: Iterable[Entry],
    format_id: str,
    module_titles: Optional[Mapping[int, str]] = None,
) -> str:
    """Deterministic listing of ``entries``, one heading per run of the same module.

    Same input, same output: nothing here reads the clock or any global state
    other than the format registry.
    """
    fmt = get_format(format_id)
    titles = module_titles or {}
    blocks: list[str] = []
    current: Optional[int] = None

    for entry in entries:
        if entry.module != current:
            current = entry.module
            label = module_label(entry.module, titles.get(entry.module))
            blocks.append(
                render_template(
                    fmt.templates.heading,
                    {"label": label, "underline": fmt.underline_char * len(label), "module": entry.module},
                )
            )
        blocks.append(_render_entry(fmt, entry))

    if not blocks:
        return ""
    return fmt.templates.separator.join(blocks).rstrip("\n") + "\n"


_loaded_builtin_formats = False


def load_builtin_formats() -> None:
    global _loaded_builtin_formats
    if _loaded_builtin_formats:
        return

    package_name = f"{__package__}.definitions"
    package = import_module(package_name)

    for module_info in pkgutil.iter_modules(package.__path__):  # type: ignore[attr-defined]
        if module_info.name.startswith("_"):
            continue
        import_module(f"{package_name}.{module_info.name}")

    _loaded_builtin_formats = True


__all__ = [
    "FormatMeta",
    "FormatTemplates",
    "RenderFormat",
    "render_template",
    "RENDER_FORMATS",
    "register_format",
    "get_format",
    "list_formats",
    "render",
    "load_builtin_formats",
]
