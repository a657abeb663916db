# src/treasury_yields/service.py
from __future__ import annotations

import asyncio
import calendar
import datetime as _dt
import logging
from typing import Callable, Optional

from treasury_yields.config.models import ServiceConfig
from treasury_yields.data.cache.store import CurveCache
from treasury_yields.data.feed.client import FeedClient
from treasury_yields.data.ingestion.base import BaseIngestor
from treasury_yields.data.ingestion.treasury import TreasuryCurveIngestor
from treasury_yields.fixed_income.canonical import canonicalize
from treasury_yields.fixed_income.schemas import Curve

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], _dt.datetime]


def shift_months(d: _dt.date, months: int) -> _dt.date:
    """Same day ``months`` away, clamped to the target month's length."""
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return _dt.date(year, month, day)


class YieldQueryService:
    """
    Public entry point: the current Treasury par curve, cached.

    A fresh cache entry is served without network access. Otherwise the
    current reporting month is ingested, then the previous month if the
    current one has nothing on or before today. Failures of any kind end
    in the empty curve; callers never see an exception.
    """

    def __init__(
        self,
        ingestor: BaseIngestor,
        cache: Optional[CurveCache] = None,
        clock: Clock = _dt.datetime.now,
    ):
        self.ingestor = ingestor
        self.cache = cache or CurveCache()
        self.clock = clock

    async def get_current_curve(self) -> Curve:
        try:
            return await self._current_curve()
        except Exception:
            LOGGER.exception("Error retrieving yield curve")
            return Curve.empty()

    def get_current_curve_sync(self) -> Curve:
        return asyncio.run(self.get_current_curve())

    async def _current_curve(self) -> Curve:
        cached = self.cache.read_fresh(self.clock())
        if cached is not None:
            LOGGER.debug("Serving yield curve from cache (%d points)", len(cached.curve.points))
            return cached.curve

        today = self.clock().date()
        curve = await self.ingestor.run(today)

        previous = shift_months(today, -1)
        if curve.is_empty:
            LOGGER.info("No curve on or before %s; trying previous month %s", today, previous)
            curve = await self.ingestor.run(previous)

        curve = canonicalize(curve.points)
        LOGGER.debug("Ordered canonically: %d points", len(curve.points))

        if curve.is_empty:
            LOGGER.warning(
                "No yield curve data available from Treasury for %s or %s", today, previous
            )
            return Curve.empty()

        self.cache.write(curve, self.clock())
        return curve


def build_service(config: Optional[ServiceConfig] = None) -> YieldQueryService:
    """Wire feed client, ingestor, cache and service from configuration."""
    cfg = config or ServiceConfig()
    client = FeedClient(
        base_url=cfg.feed.base_url,
        dataset=cfg.feed.dataset,
        connect_timeout=cfg.feed.connect_timeout,
        read_timeout=cfg.feed.read_timeout,
        user_agent=cfg.feed.user_agent,
    )
    ingestor = TreasuryCurveIngestor(client, strategy=cfg.feed.parser)
    cache = CurveCache(ttl=_dt.timedelta(minutes=cfg.cache.ttl_minutes))
    return YieldQueryService(ingestor, cache=cache)
