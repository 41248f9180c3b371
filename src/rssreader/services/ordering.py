"""Ordering of feed items by publication time."""

import re
from datetime import datetime
from functools import cmp_to_key

from rssreader.models.document import Document, Item

# RFC 1123 with a numeric zone, e.g. "Mon, 02 Jan 2006 15:04:05 -0700"
RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"

# strptime also takes "Z", "+02:00" and one-digit days; the layout does not.
_RFC1123Z_SHAPE = re.compile(
    r"[A-Z][a-z]{2}, \d{2} [A-Z][a-z]{2} \d{4} \d{2}:\d{2}:\d{2} [+-]\d{4}"
)


def parse_pub_date(value: str) -> datetime | None:
    """Parse an RFC1123Z date, returning None when it does not match."""
    if not _RFC1123Z_SHAPE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, RFC1123Z)
    except ValueError:
        return None


def compare_items(a: Item, b: Item) -> int:
    """Order newer items first.

    Pairs where either date is unparsable, and pairs with equal times,
    compare as equal so the stable sort keeps their arrival order.
    """
    t1 = parse_pub_date(a.pub_date)
    t2 = parse_pub_date(b.pub_date)
    if t1 is None or t2 is None or t1 == t2:
        return 0
    return -1 if t1 > t2 else 1


def sort_items(document: Document) -> None:
    """Sort a document's items in place, newest first."""
    document.items.sort(key=cmp_to_key(compare_items))
