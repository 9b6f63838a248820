"""Page selection helpers.

Users type 1-based page numbers (``"3,1,2"``); every document operation works
with 0-based indices.  Parsing keeps the order and any duplicates exactly as
supplied, since order matters for reordering.  Bounds can only be checked
once a document is loaded, so that is left to :func:`check_bounds`.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..exceptions import InvalidPageSelectionError


def parse_page_list(text: str | None) -> List[int]:
    """Parse ``"1, 3,5"`` into ``[0, 2, 4]``.

    Blank input yields an empty list, which callers treat as cancellation.

    Raises:
        InvalidPageSelectionError: If a token is not an integer or is below 1.
    """

    if text is None or not text.strip():
        return []

    indices: List[int] = []
    for token in (part.strip() for part in text.split(",")):
        if not token:
            continue
        try:
            number = int(token)
        except ValueError as exc:
            raise InvalidPageSelectionError([token], "not a page number") from exc
        if number < 1:
            raise InvalidPageSelectionError([token], "page numbers start at 1")
        indices.append(number - 1)
    return indices


def to_page_numbers(indices: Iterable[int]) -> List[int]:
    return [index + 1 for index in indices]


def check_bounds(indices: Sequence[int], page_count: int) -> None:
    """Ensure every index addresses a page of a ``page_count``-page document."""

    out_of_range = [index for index in indices if index < 0 or index >= page_count]
    if out_of_range:
        raise InvalidPageSelectionError(
            to_page_numbers(out_of_range),
            f"document has {page_count} page(s)",
        )


def check_permutation(order: Sequence[int], page_count: int) -> None:
    """Ensure *order* names every page exactly once."""

    if len(order) != page_count:
        raise InvalidPageSelectionError(
            to_page_numbers(order),
            f"new order must include all {page_count} pages, got {len(order)}",
        )
    check_bounds(order, page_count)
    if len(set(order)) != page_count:
        raise InvalidPageSelectionError(to_page_numbers(order), "duplicate page numbers")


def resolve_target_pages(
    indices: Sequence[int] | None,
    page_count: int,
    *,
    all_pages: bool = False,
) -> List[int]:
    """Return the pages an annotation applies to.

    An explicit selection wins; otherwise every page when *all_pages* is set,
    else only the last page.
    """

    if page_count < 1:
        raise InvalidPageSelectionError([], "document has no pages")
    if indices:
        check_bounds(indices, page_count)
        return list(indices)
    if all_pages:
        return list(range(page_count))
    return [page_count - 1]


__all__ = [
    "parse_page_list",
    "to_page_numbers",
    "check_bounds",
    "check_permutation",
    "resolve_target_pages",
]
