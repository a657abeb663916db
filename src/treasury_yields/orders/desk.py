# src/treasury_yields/orders/desk.py
from __future__ import annotations

import datetime as _dt
import itertools
import logging
import threading
from typing import List

from treasury_yields.orders.models import OrderTicket
from treasury_yields.service import Clock, YieldQueryService

LOGGER = logging.getLogger(__name__)


class OrderDesk:
    """
    In-memory order intake that stamps each order with the current curve rate.
    """

    def __init__(self, service: YieldQueryService, clock: Clock = _dt.datetime.now):
        self.service = service
        self.clock = clock
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._orders: List[OrderTicket] = []

    async def create_order(self, term: str, amount: float) -> OrderTicket:
        if amount <= 0:
            raise ValueError("Amount must be > 0")

        curve = await self.service.get_current_curve()
        rate = curve.rate_for(term)
        if rate is None:
            LOGGER.info("No curve rate for term %r; order left unstamped", term)

        with self._lock:
            ticket = OrderTicket(
                order_id=next(self._ids),
                term=term,
                amount=amount,
                created_at=self.clock(),
                rate_at_submission=rate,
            )
            self._orders.append(ticket)
        return ticket

    def orders(self) -> List[OrderTicket]:
        """Submitted orders, newest first."""
        with self._lock:
            snapshot = list(self._orders)
        return sorted(snapshot, key=lambda o: (o.created_at, o.order_id), reverse=True)
