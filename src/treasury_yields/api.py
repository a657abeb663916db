# src/treasury_yields/api.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from treasury_yields.orders.desk import OrderDesk
from treasury_yields.orders.models import OrderTicket
from treasury_yields.service import YieldQueryService, build_service


class YieldCurveAPI:
    """
    Transport-neutral query/mutation surface.

    ``yield_curve`` is total: it returns an empty list instead of raising.
    """

    def __init__(
        self,
        service: Optional[YieldQueryService] = None,
        desk: Optional[OrderDesk] = None,
    ):
        self.service = service or build_service()
        self.desk = desk or OrderDesk(self.service)

    async def yield_curve(self) -> List[Dict[str, Any]]:
        curve = await self.service.get_current_curve()
        return curve.to_records()

    def orders(self) -> List[OrderTicket]:
        return self.desk.orders()

    async def create_order(self, term: str, amount: float) -> OrderTicket:
        return await self.desk.create_order(term, amount)
