"""Line scanner for the commented SQL reference guide.

The guide is plain SQL with comment conventions:

    -- ========================================
    -- Module 4: JOINs and Unions
    -- ========================================

    -- INNER JOIN
    -- @category: joins          (optional, otherwise inferred)
    SELECT ...
    FROM ...;

A block starts with a comment (its title); following comment lines are the
explanation, then the SQL. A statement stays open until a line ends with ``;``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from models import Entry, ModuleInfo
from utils import slugify

from .categories import infer_category
from .errors import ParseError

RULE_RE = re.compile(r"^--\s*={3,}\s*$")
MODULE_PREFIX_RE = re.compile(r"^module\b", re.IGNORECASE)
MODULE_RE = re.compile(r"^module\s+(\d+)\s*:\s*(\S.*)$", re.IGNORECASE)
CATEGORY_RE = re.compile(r"^@category\b\s*:?(.*)$", re.IGNORECASE)

PREAMBLE_MODULE = 0


@dataclass
class ParsedDocument:
    banner: List[str] = field(default_factory=list)
    modules: List[ModuleInfo] = field(default_factory=list)
    entries: List[Entry] = field(default_factory=list)


@dataclass
class _Block:
    title: str
    line: int
    comments: List[str] = field(default_factory=list)
    code: List[str] = field(default_factory=list)
    category: Optional[str] = None


def _strip_line_comment(line: str) -> str:
    """Drop a trailing ``-- comment`` that sits outside any '...' literal."""
    in_literal = False
    for pos, ch in enumerate(line):
        if ch == "'":
            # '' inside a literal toggles twice and stays in the literal
            in_literal = not in_literal
        elif not in_literal and line.startswith("--", pos):
            return line[:pos]
    return line


def _ends_statement(stripped: str) -> bool:
    # "SELECT 1; -- don't" still closes the statement
    return _strip_line_comment(stripped).rstrip().endswith(";")


def _comment_text(stripped: str) -> str:
    # "--     CREATE, ALTER" keeps its indentation minus the one separating space
    text = stripped[2:]
    if text.startswith(" "):
        text = text[1:]
    return text.rstrip()


class _Scanner:
    def __init__(self, text: str, origin: str) -> None:
        self.lines = text.splitlines()
        self.origin = origin
        self.doc = ParsedDocument()
        self.module: Optional[int] = None
        self.block: Optional[_Block] = None
        self.statement_open = False
        self.seen_keys: set = set()

    def error(self, message: str, line: Optional[int]) -> ParseError:
        return ParseError(message, line=line, origin=self.origin)

    def run(self) -> ParsedDocument:
        i = 0
        while i < len(self.lines):
            raw = self.lines[i]
            lineno = i + 1
            stripped = raw.strip()

            if self.statement_open:
                if RULE_RE.match(stripped):
                    raise self._unterminated(lineno)
                self.block.code.append(raw.rstrip())
                if _ends_statement(stripped):
                    self.statement_open = False
                i += 1
                continue

            if RULE_RE.match(stripped):
                self._flush()
                self._open_section(i)
                i += 3
                continue

            if not stripped:
                self._flush()
            elif stripped.startswith("--"):
                self._comment(stripped, lineno)
            else:
                self._code(raw, lineno)
            i += 1

        if self.statement_open:
            raise self._unterminated(len(self.lines))
        self._flush()
        return self.doc

    def _unterminated(self, lineno: int) -> ParseError:
        return self.error(
            f"unterminated example block {self.block.title!r} "
            f"(started at line {self.block.line}, no closing ';')",
            lineno,
        )

    def _open_section(self, i: int) -> None:
        lineno = i + 1
        if i + 2 >= len(self.lines):
            raise self.error("section header is missing its heading or closing rule", lineno)
        heading_line = self.lines[i + 1].strip()
        if not heading_line.startswith("--") or RULE_RE.match(heading_line):
            raise self.error("section header has no heading line", lineno + 1)
        if not RULE_RE.match(self.lines[i + 2].strip()):
            raise self.error("section header is not closed by a '-- ====' rule", lineno + 2)

        heading = heading_line[2:].strip()
        if not heading:
            raise self.error("section heading is empty", lineno + 1)

        if not MODULE_PREFIX_RE.match(heading):
            if any(m.number != PREAMBLE_MODULE for m in self.doc.modules):
                raise self.error(
                    f"unnumbered section {heading!r} after a numbered module", lineno + 1
                )
            if not self.doc.modules:
                self.doc.modules.append(ModuleInfo(number=PREAMBLE_MODULE, title=heading, line=lineno + 1))
            self.module = PREAMBLE_MODULE
            return

        match = MODULE_RE.match(heading)
        if match is None:
            raise self.error(
                f"malformed module marker {heading!r} (expected 'Module <N>: <Title>')", lineno + 1
            )
        number = int(match.group(1))
        if number < 1:
            raise self.error(f"malformed module marker {heading!r} (numbers start at 1)", lineno + 1)
        if any(m.number == number for m in self.doc.modules):
            raise self.error(f"duplicate module marker for module {number}", lineno + 1)

        self.doc.modules.append(ModuleInfo(number=number, title=match.group(2).strip(), line=lineno + 1))
        self.module = number

    def _comment(self, stripped: str, lineno: int) -> None:
        if self.module is None:
            if stripped[2:].strip():
                self.doc.banner.append(stripped[2:].strip())
            return

        text = stripped[2:].strip()
        marker = CATEGORY_RE.match(text)
        if self.block is not None and self.block.code:
            # a comment right after a finished statement starts the next example
            self._flush()

        if marker is not None:
            if self.block is None:
                raise self.error("category marker must follow an example title", lineno)
            tag = slugify(marker.group(1))
            if not tag:
                raise self.error("malformed category marker (empty tag)", lineno)
            self.block.category = tag
            return

        if self.block is None:
            if not text:
                return
            self.block = _Block(title=text, line=lineno)
        else:
            self.block.comments.append(_comment_text(stripped))

    def _code(self, raw: str, lineno: int) -> None:
        if self.module is None:
            raise self.error("SQL found before the first section header", lineno)
        if self.block is None:
            raise self.error("SQL example has no title comment", lineno)
        self.block.code.append(raw.rstrip())
        self.statement_open = not _ends_statement(raw.strip())

    def _flush(self) -> None:
        block = self.block
        self.block = None
        if block is None:
            return

        key = (self.module, block.title)
        if key in self.seen_keys:
            raise self.error(
                f"duplicate example title {block.title!r} in module {self.module}", block.line
            )
        self.seen_keys.add(key)

        code = "\n".join(block.code)
        comment = "\n".join(block.comments).strip("\n")
        self.doc.entries.append(
            Entry(
                module=self.module,
                title=block.title,
                category=block.category or infer_category(code),
                code=code,
                comment=comment,
                line=block.line,
            )
        )


def parse_document(text: str, origin: str = "<string>") -> ParsedDocument:
    """Parse the guide text; raises ParseError on malformed markers."""
    return _Scanner(text, origin).run()
