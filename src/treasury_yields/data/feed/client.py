# src/treasury_yields/data/feed/client.py
from __future__ import annotations

import datetime as _dt
import logging
from typing import Dict, Optional

import requests

from treasury_yields.errors import FetchFailed

LOGGER = logging.getLogger(__name__)

TREASURY_XML_BASE = (
    "https://home.treasury.gov/resource-center/data-chart-center/"
    "interest-rates/pages/xml"
)
DAILY_PAR_CURVE_DATASET = "daily_treasury_yield_curve"
DEFAULT_USER_AGENT = "TreasuryLiquidity/1.0 (+http://localhost)"


def month_param(as_of: _dt.date) -> str:
    """Reporting month of ``as_of`` as YYYYMM."""
    return f"{as_of.year:04d}{as_of.month:02d}"


class FeedClient:
    """
    Single-shot HTTP client for the Treasury daily interest-rate XML feed.

    One GET per call, bounded by connect/read timeouts. Any transport
    problem is raised as ``FetchFailed``; retry policy belongs to the caller.
    """

    def __init__(
        self,
        base_url: str = TREASURY_XML_BASE,
        dataset: str = DAILY_PAR_CURVE_DATASET,
        connect_timeout: float = 5.0,
        read_timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.dataset = dataset
        self.timeout = (connect_timeout, read_timeout)
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/xml",
                "Accept-Encoding": "gzip, deflate",
            }
        )

    def params_for(self, as_of: _dt.date) -> Dict[str, str]:
        return {
            "data": self.dataset,
            "field_tdr_date_value_month": month_param(as_of),
        }

    def fetch(self, as_of: _dt.date) -> bytes:
        """Raw feed document for the reporting month containing ``as_of``."""
        params = self.params_for(as_of)
        url = self.base_url
        LOGGER.debug("Requesting Treasury XML: %s params=%s", url, params)

        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
        except requests.Timeout as e:
            LOGGER.warning("Treasury request timed out for %s: %s", params, e)
            raise FetchFailed("timeout", url=url) from e
        except requests.RequestException as e:
            LOGGER.warning("Treasury request failed for %s: %s", params, e)
            raise FetchFailed("network-error", url=url) from e

        if r.status_code >= 400:
            LOGGER.warning("Treasury HTTP error: status=%s for %s", r.status_code, params)
            raise FetchFailed("status", status=r.status_code, url=url)

        body = r.content or b""
        LOGGER.debug(
            "Fetched Treasury XML for %s: status=%s size=%d bytes",
            params["field_tdr_date_value_month"],
            r.status_code,
            len(body),
        )
        return body

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "FeedClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
