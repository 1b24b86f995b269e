"""Pagination and Name Filtering — deterministic page windows and wildcard patterns.

Invariants:
    - Offsets are plain integer arithmetic; pages below the first page are floored
    - A window is fetched as limit + 1 rows; "more" is true iff the extra row came back
    - Only '*' is translated; '%' and '_' pass through and act as LIKE wildcards
"""

from typing import Sequence, TypeVar

T = TypeVar("T")

ANY_MATCH = "%"


def to_like_pattern(name_filter: str | None) -> str:
    """Translate a client name filter ('pizza*') into a LIKE pattern ('pizza%')."""
    if not name_filter:
        return ANY_MATCH
    return name_filter.replace("*", ANY_MATCH)


def page_offset(page: int | None, page_size: int, first_page: int = 1) -> int:
    """Row offset of a page; order listings count from 1, franchise listings from 0."""
    if page is None or page < first_page:
        page = first_page
    return (page - first_page) * page_size


def trim_window(rows: Sequence[T], limit: int) -> tuple[list[T], bool]:
    """Cut a limit + 1 fetch down to limit rows and report whether more exist."""
    return list(rows[:limit]), len(rows) > limit
