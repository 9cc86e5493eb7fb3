"""Render format registry and built-in format loading."""
from .core import (
    FormatMeta,
    FormatTemplates,
    RenderFormat,
    render_template,
    RENDER_FORMATS,
    register_format,
    get_format,
    list_formats,
    render,
    load_builtin_formats,
)

load_builtin_formats()

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
