"""Reference content store and category index for the SQL guide."""
from .errors import CatalogError, ParseError, UnsupportedFormatError
from .categories import CATEGORY_RULES, infer_category
from .parser import ParsedDocument, parse_document
from .store import BUILTIN_SOURCE, ContentStore
from .index import CategoryIndex

__all__ = [
    "CatalogError",
    "ParseError",
    "UnsupportedFormatError",
    "CATEGORY_RULES",
    "infer_category",
    "ParsedDocument",
    "parse_document",
    "BUILTIN_SOURCE",
    "ContentStore",
    "CategoryIndex",
]
