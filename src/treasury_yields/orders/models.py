# src/treasury_yields/orders/models.py
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderStatus(str, Enum):
    """Lifecycle status of a submitted order."""

    SUBMITTED = "SUBMITTED"


class OrderTicket(BaseModel):
    """Order stamped with the curve rate for its term at submission time.

    ``rate_at_submission`` stays unset when the curve has no such term
    (or the curve is unavailable).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    order_id: int = Field(..., ge=1)
    term: str = Field(..., min_length=1, description="Term label, upper-cased.")
    amount: float = Field(..., gt=0.0, description="Notional, > 0.")
    created_at: datetime
    status: OrderStatus = OrderStatus.SUBMITTED
    rate_at_submission: Optional[float] = None

    @field_validator("term")
    @classmethod
    def _upper_term(cls, v: str) -> str:
        return v.strip().upper()
