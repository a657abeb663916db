# src/treasury_yields/fixed_income/terms.py
from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

# ------------------------------------------------------------
# Treasury feed field key -> canonical term label
# (insertion order is shortest to longest maturity)
# ------------------------------------------------------------
FIELD_TO_TERM: Dict[str, str] = {
    "BC_1MONTH": "1M",
    "BC_1_5MONTH": "1.5M",
    "BC_2MONTH": "2M",
    "BC_3MONTH": "3M",
    "BC_4MONTH": "4M",
    "BC_6MONTH": "6M",
    "BC_1YEAR": "1Y",
    "BC_2YEAR": "2Y",
    "BC_3YEAR": "3Y",
    "BC_5YEAR": "5Y",
    "BC_7YEAR": "7Y",
    "BC_10YEAR": "10Y",
    "BC_20YEAR": "20Y",
    "BC_30YEAR": "30Y",
}

CANONICAL_ORDER: Tuple[str, ...] = (
    "1M",
    "1.5M",
    "2M",
    "3M",
    "4M",
    "6M",
    "1Y",
    "2Y",
    "3Y",
    "5Y",
    "7Y",
    "10Y",
    "20Y",
    "30Y",
)

CANONICAL_TERMS: FrozenSet[str] = frozenset(CANONICAL_ORDER)
TERM_RANK: Dict[str, int] = {t: i for i, t in enumerate(CANONICAL_ORDER)}

# ------------------------------------------------------------
# Feed markup conventions
# ------------------------------------------------------------
RATE_FIELD_PREFIX = "BC_"
DATE_TAGS: Tuple[str, ...] = ("NEW_DATE", "CMTDATE", "DATE")
ENTRY_TAG = "entry"
NOT_AVAILABLE = "N/A"
