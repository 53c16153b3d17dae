"""
Title search and pagination for the quiz list.

Matches the browser client's behaviour: the search is a case-insensitive
substring match on the title, and the requested page is clamped into
``[1, max(1, total_pages)]`` rather than rejected.
"""
import math
from dataclasses import dataclass


@dataclass
class Page:
    items: list
    page: int
    per_page: int
    total: int
    total_pages: int


def filter_by_title(summaries: list, search: str = None) -> list:
    """Keep summaries whose ``title`` contains ``search``, ignoring case."""
    if not search:
        return list(summaries)
    needle = search.lower()
    return [summary for summary in summaries if needle in (summary.get('title') or '').lower()]


def paginate_quizzes(summaries: list, search: str = None, page: int = 1, per_page: int = 4) -> Page:
    """
    Filter quiz summaries by title and cut out one page.

    Args:
        summaries: Quiz summary dicts, already in display order.
        search: Optional title search term.
        page: Requested 1-based page; out-of-range values are clamped.
        per_page: Page size, at least 1.
    """
    per_page = max(1, per_page)
    filtered = filter_by_title(summaries, search)
    total_pages = math.ceil(len(filtered) / per_page)
    page = min(max(1, page), max(1, total_pages))
    start = (page - 1) * per_page
    return Page(
        items=filtered[start:start + per_page],
        page=page,
        per_page=per_page,
        total=len(filtered),
        total_pages=total_pages,
    )
