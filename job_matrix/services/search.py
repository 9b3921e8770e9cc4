"""
Search engine service.

Free-text search over engineering levels and their criteria, returning one
result per (level, category, sub-category) with a highlighted context snippet.

Algorithm:
1. Trim the query; a blank query returns no results without a store round trip.
2. The store returns every criterion (joined with its level) where the query
   is a case-insensitive literal substring of the level job_title, the level
   one_sentence_description, or the criterion category, sub_category or
   description.
3. Each row gets a snippet taken from the first field of SNIPPET_FIELDS that
   contains the query. SNIPPET_FIELDS is its own ordered policy: the field
   picked for the snippet is not necessarily the one that made the row match.
4. Results are deduplicated on (level_id, category, sub_category), keeping the
   first occurrence.

Snippet format:
    ...up to 30 chars before **Match** up to 30 chars after...

The leading/trailing '...' appear only on the side(s) where the field text
was cut. Every occurrence of the query inside the snippet is wrapped in '**',
preserving the original case. The query is treated literally (regex
metacharacters are escaped).
"""

import logging
import re
from typing import Any, Callable, List, Mapping, Optional, Set, Tuple

from job_matrix.core.store import MatrixStore
from job_matrix.models.schemas import SearchInput, SearchResult


logger = logging.getLogger(__name__)


# =============================================================================
# Module Constants
# =============================================================================

# Characters of context kept on each side of the match in a snippet
SNIPPET_CONTEXT_CHARS: int = 30

FieldAccessor = Callable[[Mapping[str, Any]], Optional[str]]

# Fields tried, in order, when choosing the text a snippet is cut from.
# Rows come from MatrixStore.search_criteria.
SNIPPET_FIELDS: Tuple[Tuple[str, FieldAccessor], ...] = (
    ("job_title", lambda row: row.get("job_title")),
    ("description", lambda row: row.get("one_sentence_description")),
    ("category", lambda row: row.get("category")),
    ("sub_category", lambda row: row.get("sub_category")),
    ("criteria", lambda row: row.get("description")),
)


# =============================================================================
# Snippet Construction
# =============================================================================


def highlight_matches(text: str, query: str) -> str:
    """Wrap every case-insensitive occurrence of query in text with '**'."""
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    return pattern.sub(lambda match: f"**{match.group(0)}**", text)


def excerpt_around(
    text: str,
    index: int,
    length: int,
    context: int = SNIPPET_CONTEXT_CHARS,
) -> str:
    """
    Cut text down to the match at text[index:index + length] plus context.

    Returns:
        The excerpt, with '...' prepended when text was cut on the left and
        appended when it was cut on the right.
    """
    start = max(0, index - context)
    end = min(len(text), index + length + context)
    excerpt = text[start:end]

    if start > 0:
        excerpt = "..." + excerpt
    if end < len(text):
        excerpt = excerpt + "..."

    return excerpt


def build_match_snippet(
    query: str,
    row: Mapping[str, Any],
    fields: Tuple[Tuple[str, FieldAccessor], ...] = SNIPPET_FIELDS,
) -> str:
    """
    Build the highlighted snippet for one search row.

    Args:
        query: Trimmed search text.
        row: Joined level/criterion row.
        fields: Ordered (name, accessor) pairs; the first field whose value
            contains the query is used.

    Returns:
        The highlighted excerpt, or "Match found in {category} - {sub_category}"
        when no field contains the query.

    Example:
        >>> build_match_snippet("plan", {"category": "Impact", "sub_category": "Planning"})
        '**Plan**ning'
    """
    query_lower = query.lower()

    for _name, accessor in fields:
        text = accessor(row)
        if not text:
            continue

        index = text.lower().find(query_lower)
        if index == -1:
            continue

        return highlight_matches(excerpt_around(text, index, len(query)), query)

    return f"Match found in {row.get('category')} - {row.get('sub_category')}"


# =============================================================================
# Search Operation
# =============================================================================


async def search_levels(store: MatrixStore, search_input: SearchInput) -> List[SearchResult]:
    """
    Search levels and criteria for free text.

    Args:
        store: Store accessor for the request.
        search_input: The raw query; surrounding whitespace is ignored.

    Returns:
        One SearchResult per (level_id, category, sub_category), in store
        order. Empty for a blank query.

    Raises:
        asyncpg.PostgresError: Propagated unchanged after logging.
    """
    query = search_input.query.strip()

    if not query:
        return []

    try:
        rows = await store.search_criteria(query)

        results: List[SearchResult] = []
        seen: Set[Tuple[str, str, str]] = set()

        for row in rows:
            key = (row['level_id'], row['category'], row['sub_category'])
            if key in seen:
                continue
            seen.add(key)

            results.append(SearchResult(
                level_id=row['level_id'],
                level_title=row['level_title'],
                category=row['category'],
                sub_category=row['sub_category'],
                description=row['description'] or "",
                match_snippet=build_match_snippet(query, row),
            ))
    except Exception:
        logger.exception("Search operation failed")
        raise

    logger.info(f"Search for {query!r} matched {len(rows)} rows, {len(results)} unique results")
    return results
