# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Normalization of free-form queue lists.
"""

import re

# whitespace surrounding a comma
_COMMA_PADDING = re.compile(r"\s*,\s*")
_WHITESPACE = re.compile(r"\s+")


def normalize_queues(raw: str | None) -> str:
    """
    Convert an arbitrary comma- or space-padded queue list into a canonical
    comma-separated list of queue names.

    Whitespace is removed entirely since queue names never contain it.
    Empty entries (e.g., produced by trailing or doubled commas) are dropped.
    Normalizing an already normalized string returns it unchanged.

    Args:
        raw (str | None): The queue list as provided by the user.

    Returns:
        str: Canonical queue list, or an empty string if no queue remains.

    Examples:
        >>> normalize_queues("  scv.q , sci.q,,  ")
        'scv.q,sci.q'
        >>> normalize_queues(" , ")
        ''
    """
    if not raw:
        return ""

    collapsed = _COMMA_PADDING.sub(",", raw.strip())
    collapsed = _WHITESPACE.sub("", collapsed)

    return ",".join(split_queues(collapsed))


def split_queues(queues: str) -> tuple[str, ...]:
    """
    Split a comma-separated queue list into individual queue names,
    skipping empty entries and preserving order.
    """
    return tuple(q for q in (token.strip() for token in queues.split(",")) if q)
