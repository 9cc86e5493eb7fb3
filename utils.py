import logging
import re
import sys
from typing import Optional

import structlog

_SLUG_SEP = re.compile(r"[\s_]+")
_SLUG_DROP = re.compile(r"[^a-z0-9-]")

_logging_configured = False


def _stderr_logger(*args) -> structlog.PrintLogger:
    # sys.stderr is looked up per logger so redirected streams are honoured
    return structlog.PrintLogger(sys.stderr)


def configure_logging(level: str = "WARNING") -> None:
    """structlog + stdlib logging, JSON lines on stderr (stdout is for listings)."""
    global _logging_configured
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    if not _logging_configured:
        logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=_stderr_logger,
        processors=[structlog.processors.TimeStamper(fmt="iso"), structlog.processors.JSONRenderer()],
        cache_logger_on_first_use=False,
    )
    _logging_configured = True


def slugify(value: str) -> str:
    """Normalize a category tag: "Window Functions" -> "window-functions"."""
    slug = _SLUG_SEP.sub("-", value.strip().lower())
    slug = _SLUG_DROP.sub("", slug)
    return re.sub(r"-{2,}", "-", slug).strip("-")


def module_label(number: int, title: Optional[str] = None) -> str:
    """Heading for a module; module 0 is the preamble and has no number."""
    if number == 0:
        return title or "Preamble"
    if title:
        return f"Module {number}: {title}"
    return f"Module {number}"
