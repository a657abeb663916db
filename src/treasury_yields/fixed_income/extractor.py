# src/treasury_yields/fixed_income/extractor.py
"""
Extraction of the latest complete yield curve from a Treasury XML feed.

Two parsing strategies share the ``extract`` contract:

- ``"tree"``: ElementTree document parse, elements matched by local name
  so ``d:``/``m:`` prefixes (or a default namespace) are irrelevant.
- ``"pattern"``: degraded regex scan over ``<entry>`` blocks, for feeds
  whose markup is too irregular for an XML parser. Only used when chosen
  explicitly.
"""
from __future__ import annotations

import datetime as _dt
import logging
import math
import re
import xml.etree.ElementTree as ET
from typing import Callable, Dict, Iterable, List, Optional, Union

from treasury_yields.errors import NoQualifyingData, ParseFailed, YieldFeedError
from treasury_yields.fixed_income.schemas import Curve, RawEntry, YieldPoint
from treasury_yields.fixed_income.terms import (
    DATE_TAGS,
    ENTRY_TAG,
    FIELD_TO_TERM,
    NOT_AVAILABLE,
    RATE_FIELD_PREFIX,
)

LOGGER = logging.getLogger(__name__)

Document = Union[str, bytes, None]


# ------------------------------------------------------------
# Value parsing
# ------------------------------------------------------------
def _local_name(tag) -> str:
    # "{ns}NEW_DATE" -> "NEW_DATE", "d:NEW_DATE" -> "NEW_DATE"
    if not isinstance(tag, str):
        return ""
    tag = tag.rsplit("}", 1)[-1]
    return tag.rsplit(":", 1)[-1]


def parse_date(text: Optional[str]) -> Optional[_dt.date]:
    """Date portion of an ISO timestamp ("2024-01-15T00:00:00"), or None."""
    if not text:
        return None
    just_date = text.strip().split("T")[0]
    try:
        return _dt.date.fromisoformat(just_date)
    except ValueError:
        return None


def parse_rate(text: Optional[str]) -> Optional[float]:
    """Percent value of a rate field, or None for empty/N/A/non-numeric."""
    if text is None:
        return None
    v = text.strip()
    if not v or v.upper() == NOT_AVAILABLE:
        return None
    try:
        rate = float(v)
    except ValueError:
        return None
    return rate if math.isfinite(rate) else None


def _as_text(document: Document) -> str:
    if document is None:
        return ""
    if isinstance(document, bytes):
        return document.decode("utf-8", errors="replace")
    return document


# ------------------------------------------------------------
# Strategy 1: namespace-agnostic document tree
# ------------------------------------------------------------
def parse_entries_tree(document: Document) -> List[RawEntry]:
    """Dated entries of the feed, in document order (dates not yet filtered)."""
    if document is None:
        raise ParseFailed("Empty feed document")
    payload = document.strip()
    if not payload:
        raise ParseFailed("Empty feed document")

    try:
        root = ET.fromstring(payload)
    except ET.ParseError as e:
        raise ParseFailed(f"Malformed feed document: {e}") from e

    entries: List[RawEntry] = []
    for node in root.iter():
        if _local_name(node.tag).lower() != ENTRY_TAG:
            continue

        entry_date = None
        fields: Dict[str, float] = {}
        for el in node.iter():
            name = _local_name(el.tag).upper()
            if entry_date is None and name in DATE_TAGS:
                entry_date = parse_date(el.text)
                if entry_date is None:
                    break
            elif name.startswith(RATE_FIELD_PREFIX):
                rate = parse_rate(el.text)
                if rate is not None:
                    fields[name] = rate

        if entry_date is None:
            continue
        entries.append(RawEntry(date=entry_date, fields=fields))

    return entries


# ------------------------------------------------------------
# Strategy 2: degraded pattern scan
# ------------------------------------------------------------
_FLAGS = re.DOTALL | re.IGNORECASE
_ENTRY_RE = re.compile(r"<(?:[\w.-]+:)?entry\b[^>]*>(.*?)</(?:[\w.-]+:)?entry\s*>", _FLAGS)
_DATE_RE = re.compile(
    r"<(?:[\w.-]+:)?(" + "|".join(DATE_TAGS) + r")\b[^>]*>(.*?)</(?:[\w.-]+:)?\1\s*>",
    _FLAGS,
)
_FIELD_RE = re.compile(
    r"<(?:[\w.-]+:)?(" + RATE_FIELD_PREFIX + r"[A-Z0-9_]+)\b[^>]*>(.*?)</(?:[\w.-]+:)?\1\s*>",
    _FLAGS,
)


def parse_entries_pattern(document: Document) -> List[RawEntry]:
    text = _as_text(document)
    if not text.strip():
        raise ParseFailed("Empty feed document")

    entries: List[RawEntry] = []
    for block in _ENTRY_RE.findall(text):
        m = _DATE_RE.search(block)
        entry_date = parse_date(m.group(2)) if m else None
        if entry_date is None:
            continue

        fields: Dict[str, float] = {}
        for key, value in _FIELD_RE.findall(block):
            rate = parse_rate(value)
            if rate is not None:
                fields[key.upper()] = rate
        entries.append(RawEntry(date=entry_date, fields=fields))

    return entries


STRATEGIES: Dict[str, Callable[[Document], List[RawEntry]]] = {
    "tree": parse_entries_tree,
    "pattern": parse_entries_pattern,
}


# ------------------------------------------------------------
# Selection and mapping
# ------------------------------------------------------------
def select_best_entry(entries: Iterable[RawEntry], cutoff: _dt.date) -> RawEntry:
    """
    Entry with the latest date on or before ``cutoff`` among entries with
    at least one numeric field. The first entry seen wins ties.
    """
    best: Optional[RawEntry] = None
    for entry in entries:
        if entry.date > cutoff or not entry.fields:
            continue
        if best is None or entry.date > best.date:
            best = entry

    if best is None:
        raise NoQualifyingData(f"No feed entry with rates on or before {cutoff}")
    return best


def entry_to_points(entry: RawEntry) -> List[YieldPoint]:
    """Known rate fields as points, in field-table order; unknown keys dropped."""
    return [
        YieldPoint(term=term, rate=entry.fields[key])
        for key, term in FIELD_TO_TERM.items()
        if key in entry.fields
    ]


def extract(document: Document, cutoff: _dt.date, strategy: str = "tree") -> Curve:
    """
    Latest curve dated on or before ``cutoff``.

    Never raises: malformed, blank or non-XML documents, and documents
    with no qualifying entry, all give the empty curve.
    """
    size = len(document) if document is not None else 0
    try:
        parse_entries = STRATEGIES[strategy]
    except KeyError:
        LOGGER.error("Unknown extraction strategy %r; returning empty curve", strategy)
        return Curve.empty()

    try:
        entries = parse_entries(document)
        best = select_best_entry(entries, cutoff)
        points = entry_to_points(best)
    except YieldFeedError as e:
        LOGGER.info(
            "No curve extracted for cutoff=%s (size=%d bytes): %s", cutoff, size, e
        )
        return Curve.empty()
    except Exception as e:
        LOGGER.warning(
            "Extraction failed for cutoff=%s (size=%d bytes): %r", cutoff, size, e
        )
        return Curve.empty()

    LOGGER.debug(
        "Selected entry %s for cutoff=%s out of %d entries: %d fields, %d known terms",
        best.date,
        cutoff,
        len(entries),
        len(best.fields),
        len(points),
    )
    return Curve(points=tuple(points))
