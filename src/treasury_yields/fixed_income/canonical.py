# src/treasury_yields/fixed_income/canonical.py
from __future__ import annotations

from typing import Dict, Iterable

from treasury_yields.fixed_income.schemas import Curve, YieldPoint
from treasury_yields.fixed_income.terms import CANONICAL_ORDER


def canonicalize(points: Iterable[YieldPoint]) -> Curve:
    """
    Order points shortest to longest maturity.

    Duplicated terms keep their first occurrence; terms outside the
    canonical set are dropped. Empty input gives the empty curve.
    """
    by_term: Dict[str, YieldPoint] = {}
    for p in points:
        by_term.setdefault(p.term, p)

    ordered = tuple(by_term[t] for t in CANONICAL_ORDER if t in by_term)
    return Curve(points=ordered)
