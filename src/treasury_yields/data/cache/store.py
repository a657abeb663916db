# src/treasury_yields/data/cache/store.py
from __future__ import annotations

import datetime as _dt
import threading
from typing import Optional

from pydantic import BaseModel, ConfigDict

from treasury_yields.fixed_income.schemas import Curve

DEFAULT_TTL = _dt.timedelta(minutes=30)


class CacheEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    curve: Curve
    fetched_at: _dt.datetime

    def age(self, now: _dt.datetime) -> _dt.timedelta:
        return now - self.fetched_at


class CurveCache:
    """
    Single-slot in-memory cache for the last successfully produced curve.

    Entries are immutable and swapped whole under a lock, so readers always
    see one complete entry. Staleness is judged at read time; a stale entry
    stays in the slot until a newer curve replaces it.
    """

    def __init__(self, ttl: _dt.timedelta = DEFAULT_TTL):
        if ttl <= _dt.timedelta(0):
            raise ValueError("ttl must be positive")
        self.ttl = ttl
        self._lock = threading.Lock()
        self._entry: Optional[CacheEntry] = None

    def read(self) -> Optional[CacheEntry]:
        with self._lock:
            return self._entry

    def write(self, curve: Curve, fetched_at: _dt.datetime) -> CacheEntry:
        if curve.is_empty:
            raise ValueError("Refusing to cache an empty curve")
        entry = CacheEntry(curve=curve, fetched_at=fetched_at)
        with self._lock:
            self._entry = entry
        return entry

    def is_fresh(self, entry: Optional[CacheEntry], now: _dt.datetime) -> bool:
        return entry is not None and entry.age(now) < self.ttl

    def read_fresh(self, now: _dt.datetime) -> Optional[CacheEntry]:
        """Current entry if younger than the ttl, else None."""
        entry = self.read()
        return entry if self.is_fresh(entry, now) else None
