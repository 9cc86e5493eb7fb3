"""Keyword rules that tag an example with a category when the source does not."""
from __future__ import annotations

import re
from typing import List, Tuple

NOTES = "notes"
FALLBACK = "statements"

_FUNCTION_NAMES = (
    "LEN|LEFT|RIGHT|SUBSTRING|CONCAT|UPPER|LOWER|TRIM|LTRIM|RTRIM|REPLACE|"
    "ROUND|ABS|CEILING|FLOOR|POWER|SQRT|"
    "GETDATE|DATEADD|DATEDIFF|EOMONTH|YEAR|MONTH|DAY|"
    "STR|CHAR|ASCII|UNICODE|IIF|COALESCE|ISNULL|NULLIF"
)

# Order matters: the first matching rule wins.
CATEGORY_RULES: List[Tuple[str, re.Pattern]] = [
    ("window-functions", re.compile(r"\bOVER\s*\(", re.IGNORECASE)),
    ("ctes", re.compile(r"^\s*WITH\s+\w+\s+AS\s*\(", re.IGNORECASE)),
    ("ddl", re.compile(r"^\s*(CREATE|ALTER|DROP|TRUNCATE|RENAME)\b", re.IGNORECASE)),
    ("dml", re.compile(r"^\s*(INSERT|UPDATE|DELETE|MERGE)\b", re.IGNORECASE)),
    ("joins", re.compile(r"\bJOIN\b", re.IGNORECASE)),
    ("set-operations", re.compile(r"\b(UNION|EXCEPT|INTERSECT)\b", re.IGNORECASE)),
    ("subqueries", re.compile(r"\(\s*SELECT\b", re.IGNORECASE)),
    ("aggregates", re.compile(r"\bGROUP\s+BY\b|\bHAVING\b", re.IGNORECASE)),
    ("conversion", re.compile(r"\b(CAST|CONVERT|TRY_CONVERT|TRY_CAST|PARSE)\s*\(", re.IGNORECASE)),
    ("functions", re.compile(rf"\b({_FUNCTION_NAMES})\s*\(|\bCASE\s+WHEN\b", re.IGNORECASE)),
    ("queries", re.compile(r"^\s*SELECT\b", re.IGNORECASE)),
]


def infer_category(code: str) -> str:
    if not code.strip():
        return NOTES
    for category, pattern in CATEGORY_RULES:
        if pattern.search(code):
            return category
    return FALLBACK
