# src/treasury_yields/errors.py
from __future__ import annotations

from typing import Optional


class YieldFeedError(Exception):
    """Base class for failures while producing a curve from the feed."""

    pass


class FetchFailed(YieldFeedError):
    """Transport failure: timeout, connection error or a 4xx/5xx status."""

    def __init__(
        self,
        reason: str,
        status: Optional[int] = None,
        url: Optional[str] = None,
    ):
        self.reason = reason
        self.status = status
        self.url = url
        detail = f"status={status}" if status is not None else reason
        super().__init__(f"Feed fetch failed ({detail}) for {url}")


class ParseFailed(YieldFeedError):
    """Feed document could not be parsed."""

    pass


class NoQualifyingData(YieldFeedError):
    """Document parsed but no entry satisfied the cutoff with numeric fields."""

    pass
