"""Pagination, truncation and search-term helpers used by the catalog list views."""
import math
import re
from dataclasses import dataclass

DEFAULT_PAGE_SIZE = 20
DEFAULT_DESCRIPTION_LENGTH = 200

_TERM_SEPARATORS = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class Page:
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_query(cls, page: int | None, limit: int | None) -> "Page":
        """Clamp page to >= 1 and fall back to the default size for missing/invalid limits."""
        if not page or page < 1:
            page = 1
        if not limit or limit < 1:
            limit = DEFAULT_PAGE_SIZE
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def meta(self, total: int) -> dict:
        return {
            "currentPage": self.page,
            "currentPageSize": self.limit,
            "totalPages": math.ceil(total / self.limit) if total else 0,
            "totalRecords": total,
        }


def truncate(text: str | None, length: int | None = DEFAULT_DESCRIPTION_LENGTH) -> str | None:
    if text is None:
        return None
    if length is None or length < 0:
        length = DEFAULT_DESCRIPTION_LENGTH
    return text[:length]


def split_terms(query_string: str | None) -> list[str]:
    """'red, blue  shirt' -> ['red', 'blue', 'shirt']"""
    if not query_string:
        return []
    return [term for term in _TERM_SEPARATORS.split(query_string) if term]
