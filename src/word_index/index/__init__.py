"""Indexing and query package."""

from .builder import IndexSourceError, build_index, build_index_from_path, tokenize
from .models import EMPTY_LINE_NUMBERS, IndexSummary, QueryResult, TextIndex
from .query import query

__all__ = [
    "EMPTY_LINE_NUMBERS",
    "IndexSourceError",
    "IndexSummary",
    "QueryResult",
    "TextIndex",
    "build_index",
    "build_index_from_path",
    "query",
    "tokenize",
]
