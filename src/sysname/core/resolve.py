"""Field value resolution for wired metadata, dynamic metadata, and structured data"""

import logging
from typing import Optional, Sequence

from sysname.core.models import (
    DynamicField,
    LeafKind,
    StructuredGroup,
    StructuredLeaf,
    StructuredNode,
    WiredMetadata,
)
from sysname.core.utils.dates import from_epoch_millis, from_month_day_year, iso_date


logger = logging.getLogger(__name__)

# Checked in order by substring containment; the first keyword found wins.
WIRED_KEYWORDS: dict[str, str] = {
    "title":             "title",
    "display-name":      "display_name",
    "description":       "description",
    "author":            "author",
    "keywords":          "keywords",
    "summary":           "summary",
    "teaser":            "teaser",
    "start-date":        "start_date",
    "end-date":          "end_date",
    "review-date":       "review_date",
    "expiration-folder": "expiration_folder",
}

DATE_KEYWORDS = {"start-date", "end-date", "review-date"}


def wired_keyword(path: str) -> Optional[str]:
    """Return the first wired keyword contained in path, else None."""
    return next((k for k in WIRED_KEYWORDS if k in path), None)


def resolve_wired(record: WiredMetadata, path: str) -> Optional[str]:
    """Resolve a wired metadata attribute by keyword containment."""
    keyword = wired_keyword(path)
    if keyword is None or keyword == "expiration-folder":
        return None
    value = getattr(record, WIRED_KEYWORDS[keyword])
    if value is None:
        return None
    if keyword in DATE_KEYWORDS:
        return iso_date(value)
    return value.strip()


def resolve_dynamic(fields: Sequence[DynamicField], name: str) -> Optional[str]:
    """Return the trimmed first value of the first field named exactly `name`."""
    for field in fields:
        if field.name == name:
            if not field.values:
                return None
            return field.values[0].strip() or None
    return None


def _leaf_value(leaf: StructuredLeaf) -> Optional[str]:
    """Format a matching leaf's value according to its kind."""
    first = leaf.values[0]
    if leaf.kind == LeafKind.wysiwyg:
        return None
    if leaf.kind == LeafKind.datetime:
        try:
            return from_epoch_millis(first)
        except (ValueError, OverflowError):
            logger.debug("Skipping datetime field %r with value %r", leaf.identifier, first)
            return None
    if leaf.kind == LeafKind.calendar:
        try:
            return from_month_day_year(first)
        except (ValueError, OverflowError):
            logger.debug("Skipping calendar field %r with value %r", leaf.identifier, first)
            return None
    if leaf.kind in (LeafKind.checkbox, LeafKind.multiselect):
        return " ".join(v.strip() for v in leaf.values if v and v.strip()) or None
    return first


def resolve_structured(nodes: Sequence[StructuredNode], path: Sequence[str]) -> Optional[str]:
    """Resolve a slash path against a structured data tree.

    With more than one segment the first group named `path[0]` is entered and
    its result is final, even when it is None. A single segment searches the
    level in order, descending into every group as it is met, and returns the
    first leaf named `path[0]` that yields a value.
    """
    if len(path) > 1:
        head, tail = path[0], path[1:]
        for node in nodes:
            if isinstance(node, StructuredGroup) and node.identifier == head:
                return resolve_structured(node.children, tail)
        return None

    target = path[0] if path else ""
    for node in nodes:
        if isinstance(node, StructuredGroup):
            value = resolve_structured(node.children, path)
            if value is not None:
                return value
        elif node.identifier == target and node.values and node.values[0].strip():
            value = _leaf_value(node)
            if value is not None:
                return value
    return None
