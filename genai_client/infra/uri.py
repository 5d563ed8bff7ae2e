"""
URI template building.

Combines a resolved base address, a relative path template with positional
`{0}` placeholders, and optional list query parameters into one URI.

Query order is fixed: order, after, limit, before. Unset parameters are
omitted entirely; no '?' is emitted when nothing is set. The query is built
from an ordered list of pairs so output never depends on dict ordering.
"""

from typing import List, Optional, Sequence, Tuple
from urllib.parse import quote, quote_plus

QueryPairs = Sequence[Tuple[str, Optional[object]]]


def list_query_pairs(
    order: Optional[str] = None,
    after: Optional[str] = None,
    limit: Optional[int] = None,
    before: Optional[str] = None,
) -> List[Tuple[str, Optional[object]]]:
    """Pagination/ordering parameters in wire order."""
    return [
        ("order", order),
        ("after", after),
        ("limit", limit),
        ("before", before),
    ]


def encode_query(pairs: QueryPairs) -> str:
    """
    Encode (key, value) pairs, skipping unset values.

    Returns:
        "key=value&..." without a leading '?', or "" when nothing is set.
    """
    segments = []
    for key, value in pairs:
        if value is None:
            continue
        if isinstance(value, str):
            if value == "":
                continue
            segments.append(f"{key}={quote_plus(value)}")
        else:
            # ints are emitted verbatim
            segments.append(f"{key}={value}")
    return "&".join(segments)


def build_list_query(
    order: Optional[str] = None,
    after: Optional[str] = None,
    limit: Optional[int] = None,
    before: Optional[str] = None,
) -> str:
    """Return "?order=..&after=..&limit=..&before=.." or ""."""
    query = encode_query(list_query_pairs(order, after, limit, before))
    return f"?{query}" if query else ""


def build_uri(
    base: str,
    template: str,
    *path_params: str,
    query: Optional[QueryPairs] = None,
) -> str:
    """
    Build an absolute URI.

    Args:
        base: Resolved base address (ends with '/').
        template: Relative path template, e.g. "threads/{0}/runs/{1}".
        path_params: Positional values for the template placeholders.
            Each is percent-encoded as a single path segment.
        query: Optional ordered (key, value) pairs; unset values skipped.

    Returns:
        Deterministic URI string.
    """
    path = template.format(*(quote(str(p), safe="") for p in path_params))
    uri = base.rstrip("/") + "/" + path.lstrip("/")

    encoded = encode_query(query or [])
    if encoded:
        uri = f"{uri}?{encoded}"
    return uri
