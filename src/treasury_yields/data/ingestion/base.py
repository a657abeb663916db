# src/treasury_yields/data/ingestion/base.py
import datetime as _dt
from abc import ABC, abstractmethod


class BaseIngestor(ABC):
    """Abstract base class for async ingestion pipelines keyed by an as-of date."""

    @abstractmethod
    async def fetch_data(self, as_of: _dt.date):
        """Fetch raw data asynchronously."""
        pass

    @abstractmethod
    async def transform(self, raw_data, as_of: _dt.date):
        """Transform raw data into validated schema."""
        pass

    async def run(self, as_of: _dt.date):
        raw_data = await self.fetch_data(as_of)
        return await self.transform(raw_data, as_of)
