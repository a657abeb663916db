# src/treasury_yields/fixed_income/schemas.py
from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from treasury_yields.fixed_income.terms import CANONICAL_TERMS, TERM_RANK


class YieldPoint(BaseModel):
    """
    Single point on the par yield curve.

    - term: canonical maturity label (e.g. "1M", "10Y")
    - rate: yield in percent (e.g. 4.25 means 4.25%)
    """

    model_config = ConfigDict(frozen=True)

    term: str = Field(..., min_length=1, description="Canonical term label")
    rate: float = Field(..., description="Yield percentage (e.g., 4.25)")


class Curve(BaseModel):
    """
    Canonically ordered yield curve built from a single dated feed entry.

    Either empty or non-empty with distinct canonical terms in canonical
    order; anything else is rejected at construction.
    """

    model_config = ConfigDict(frozen=True)

    points: Tuple[YieldPoint, ...] = ()

    @model_validator(mode="after")
    def _check_canonical(self) -> "Curve":
        ranks = []
        for p in self.points:
            if p.term not in CANONICAL_TERMS:
                raise ValueError(f"Unknown term in curve: {p.term!r}")
            ranks.append(TERM_RANK[p.term])

        if len(ranks) != len(set(ranks)):
            raise ValueError(f"Duplicate terms in curve: {self.terms}")
        if ranks != sorted(ranks):
            raise ValueError(f"Terms must be in canonical order: {self.terms}")
        return self

    @classmethod
    def empty(cls) -> "Curve":
        return cls(points=())

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def terms(self) -> List[str]:
        return [p.term for p in self.points]

    def rate_for(self, term: str) -> Optional[float]:
        """Rate for ``term`` (case-insensitive), or None if not on the curve."""
        wanted = term.strip().upper()
        for p in self.points:
            if p.term.upper() == wanted:
                return p.rate
        return None

    def to_records(self) -> List[Dict[str, object]]:
        return [{"term": p.term, "rate": p.rate} for p in self.points]


@dataclass
class RawEntry:
    """One dated observation parsed from the feed (extractor-internal)."""

    date: _dt.date
    fields: Dict[str, float] = field(default_factory=dict)
