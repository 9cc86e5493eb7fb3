"""Parsing rules of the commented SQL guide."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


from catalog import ParseError, parse_document  # noqa: E402


GUIDE = """\
-- Demo Guide | 2025
-- Two modules

-- ========================================
-- CHEAT SHEET
-- ========================================

-- Statement Types
-- DDL:
--     CREATE, ALTER

-- ========================================
-- Module 1: Basics
-- ========================================

-- Simple SELECT
SELECT * FROM Customers;

-- Filtered SELECT
-- Only US customers.
SELECT CompanyName
FROM Customers
WHERE Country = 'USA';

-- ========================================
-- Module 2: Joins
-- ========================================

-- INNER JOIN
SELECT c.CompanyName, o.OrderDate
FROM Customers c
INNER JOIN Orders o ON c.CustomerID = o.CustomerID;
"""


def header(heading: str) -> str:
    return f"-- ====\n-- {heading}\n-- ====\n"


def test_entries_follow_document_order():
    doc = parse_document(GUIDE)

    assert [(e.module, e.title) for e in doc.entries] == [
        (0, "Statement Types"),
        (1, "Simple SELECT"),
        (1, "Filtered SELECT"),
        (2, "INNER JOIN"),
    ]
    assert [(m.number, m.title) for m in doc.modules] == [(0, "CHEAT SHEET"), (1, "Basics"), (2, "Joins")]
    assert doc.banner == ["Demo Guide | 2025", "Two modules"]


def test_comment_keeps_indentation_and_code_is_verbatim():
    doc = parse_document(GUIDE)
    notes, _, filtered, join = doc.entries

    assert notes.comment == "DDL:\n    CREATE, ALTER"
    assert notes.code == ""
    assert notes.category == "notes"
    assert filtered.comment == "Only US customers."
    assert filtered.code == "SELECT CompanyName\nFROM Customers\nWHERE Country = 'USA';"
    assert join.category == "joins"
    assert join.line == 29


def test_category_marker_overrides_inference():
    text = header("Module 1: Tags") + "\n-- Running total\n-- @category: Window Functions\nSELECT 1;\n"

    (entry,) = parse_document(text).entries

    assert entry.category == "window-functions"
    assert entry.comment == ""


def test_statement_spans_blank_lines_until_semicolon():
    text = header("Module 1: Long") + "\n-- Split\nSELECT a\n\nFROM t;\n"

    (entry,) = parse_document(text).entries

    assert entry.code == "SELECT a\n\nFROM t;"


def test_trailing_comment_after_semicolon_closes_statement():
    text = header("Module 1: Inline") + "\n-- One\nSELECT 1; -- done\n-- Two\nSELECT 2;\n"

    entries = parse_document(text).entries

    assert [e.title for e in entries] == ["One", "Two"]


def test_apostrophe_in_trailing_comment_still_closes_statement():
    text = header("Module 1: Inline") + "\n-- One\nSELECT 1; -- don't\n-- Two\nSELECT 2;\n"

    entries = parse_document(text).entries

    assert [(e.title, e.code) for e in entries] == [("One", "SELECT 1; -- don't"), ("Two", "SELECT 2;")]


def test_double_dash_and_semicolon_inside_literal_do_not_close_statement():
    text = header("Module 1: Literals") + "\n-- Quoted\nSELECT 'a;--b' AS x, 'it''s' AS y\nFROM t;\n"

    (entry,) = parse_document(text).entries

    assert entry.code.endswith("FROM t;")


@pytest.mark.parametrize(
    "heading",
    ["Module X: Letters", "Module 3", "Module 0: Zero", "Module: no number"],
)
def test_malformed_module_marker(heading):
    with pytest.raises(ParseError) as exc_info:
        parse_document(header(heading) + "\n-- Example\nSELECT 1;\n")

    assert exc_info.value.line == 2


def test_duplicate_module_marker():
    text = header("Module 1: A") + header("Module 1: B")

    with pytest.raises(ParseError, match="duplicate module"):
        parse_document(text)


def test_unterminated_block_at_end_of_text():
    text = header("Module 1: Open") + "\n-- Missing semicolon\nSELECT *\nFROM Orders\n"

    with pytest.raises(ParseError, match="unterminated example block 'Missing semicolon'"):
        parse_document(text)


def test_unterminated_block_before_next_section():
    text = header("Module 1: Open") + "\n-- Missing semicolon\nSELECT *\n" + header("Module 2: Next")

    with pytest.raises(ParseError, match="unterminated") as exc_info:
        parse_document(text, origin="guide.sql")

    assert exc_info.value.line == 7
    assert str(exc_info.value).startswith("guide.sql:7: ")


def test_section_header_without_closing_rule():
    with pytest.raises(ParseError, match="not closed"):
        parse_document("-- ====\n-- Module 1: Basics\n\n-- Example\nSELECT 1;\n")


@pytest.mark.parametrize(
    "body, message",
    [
        ("\n-- Title\n-- @category:\nSELECT 1;\n", "empty tag"),
        ("\n-- @category: joins\nSELECT 1;\n", "must follow an example title"),
        ("\nSELECT 1;\n", "no title comment"),
        ("\n-- Twice\nSELECT 1;\n\n-- Twice\nSELECT 2;\n", "duplicate example title"),
    ],
)
def test_block_errors(body, message):
    with pytest.raises(ParseError, match=message):
        parse_document(header("Module 1: Errors") + body)


def test_sql_before_first_section():
    with pytest.raises(ParseError, match="before the first section"):
        parse_document("-- Banner\nSELECT 1;\n")


def test_unnumbered_section_after_module_is_rejected():
    text = header("Module 1: A") + header("APPENDIX")

    with pytest.raises(ParseError, match="unnumbered section"):
        parse_document(text)
