# src/treasury_yields/data/ingestion/treasury.py
import asyncio
import datetime as _dt
import logging
from typing import Optional

import polars as pl

from treasury_yields.data.feed.client import FeedClient
from treasury_yields.data.ingestion.base import BaseIngestor
from treasury_yields.errors import FetchFailed
from treasury_yields.fixed_income.extractor import extract
from treasury_yields.fixed_income.schemas import Curve

LOGGER = logging.getLogger(__name__)

CURVE_FRAME_SCHEMA = {"term": pl.Utf8, "rate": pl.Float64}


class TreasuryCurveIngestor(BaseIngestor):
    """
    Async ingestor for one reporting month of the Treasury par curve feed.

    ``run(as_of)`` fetches the month containing ``as_of`` and extracts the
    latest curve dated on or before ``as_of``. Transport failures degrade to
    the empty curve.
    """

    def __init__(self, client: FeedClient, strategy: str = "tree"):
        self.client = client
        self.strategy = strategy

    async def fetch_data(self, as_of: _dt.date) -> Optional[bytes]:
        try:
            # requests is blocking; keep the event loop free
            return await asyncio.to_thread(self.client.fetch, as_of)
        except FetchFailed as e:
            LOGGER.warning("Fetch for %s failed: %s", as_of, e)
            return None

    async def transform(self, raw_data: Optional[bytes], as_of: _dt.date) -> Curve:
        size = len(raw_data) if raw_data is not None else 0
        curve = extract(raw_data, as_of, strategy=self.strategy)
        LOGGER.debug(
            "Parsed %d points for %s (document size=%d bytes)",
            len(curve.points),
            as_of,
            size,
        )
        return curve


def curve_to_frame(curve: Curve) -> pl.DataFrame:
    """Curve as a two-column Polars frame (term, rate) in canonical order."""
    return pl.DataFrame(curve.to_records(), schema=CURVE_FRAME_SCHEMA)
