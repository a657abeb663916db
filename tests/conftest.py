# tests/conftest.py
from __future__ import annotations

import datetime as _dt
from typing import Dict, List, Optional, Tuple, Union

import pytest

from treasury_yields.errors import FetchFailed

ATOM_HEAD = (
    '<?xml version="1.0" encoding="utf-8" standalone="yes"?>\n'
    '<feed xml:base="https://home.treasury.gov/"'
    ' xmlns:d="http://schemas.microsoft.com/ado/2007/08/dataservices"'
    ' xmlns:m="http://schemas.microsoft.com/ado/2007/08/dataservices/metadata"'
    ' xmlns="http://www.w3.org/2005/Atom">\n'
    "  <title type=\"text\">DailyTreasuryYieldCurveRateData</title>\n"
)


def build_feed(entries: List[Tuple[Optional[str], Dict[str, str]]]) -> str:
    """Treasury-style Atom feed; each entry is (NEW_DATE text, {field: text})."""
    parts = [ATOM_HEAD]
    for date_text, fields in entries:
        parts.append("  <entry>\n    <content type=\"application/xml\">\n      <m:properties>\n")
        if date_text is not None:
            parts.append(
                f'        <d:NEW_DATE m:type="Edm.DateTime">{date_text}</d:NEW_DATE>\n'
            )
        for key, text in fields.items():
            parts.append(f'        <d:{key} m:type="Edm.Double">{text}</d:{key}>\n')
        parts.append("      </m:properties>\n    </content>\n  </entry>\n")
    parts.append("</feed>\n")
    return "".join(parts)


@pytest.fixture
def feed_xml():
    return build_feed


class FakeFeedClient:
    """Stands in for FeedClient: canned documents or failures per YYYYMM."""

    def __init__(self, responses: Dict[str, Union[str, bytes, Exception]]):
        self.responses = responses
        self.calls: List[_dt.date] = []

    def fetch(self, as_of: _dt.date) -> bytes:
        self.calls.append(as_of)
        key = f"{as_of.year:04d}{as_of.month:02d}"
        result = self.responses.get(key, FetchFailed("status", status=404))
        if isinstance(result, Exception):
            raise result
        return result.encode("utf-8") if isinstance(result, str) else result


@pytest.fixture
def fake_client_factory():
    return FakeFeedClient


class FakeClock:
    def __init__(self, now: _dt.datetime):
        self.now = now

    def __call__(self) -> _dt.datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + _dt.timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(_dt.datetime(2024, 1, 15, 9, 30))
