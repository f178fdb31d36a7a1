"""
Tag normalization.

API dump tags come in two shapes: plain strings ("Deprecated") and
single-level objects ({"PreferredDescriptorName": "Foo"}). Both are
flattened into one set of tag names.
"""

from __future__ import annotations

from typing import Any


def normalize_tags(raw_tags: Any) -> frozenset[str]:
    """
    Flatten a raw tag list into a set of tag names.

    String entries contribute themselves, object entries contribute
    their keys (values are discarded). Any other entry is skipped.

    Args:
        raw_tags: The raw "Tags" value from the API dump

    Returns:
        Frozen set of tag names
    """
    if not isinstance(raw_tags, (list, tuple)):
        return frozenset()

    tags: set[str] = set()
    for entry in raw_tags:
        if isinstance(entry, str):
            tags.add(entry)
        elif isinstance(entry, dict):
            tags.update(key for key in entry if isinstance(key, str))
    return frozenset(tags)
