# src/treasury_yields/config/models.py
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from treasury_yields.data.feed.client import (
    DAILY_PAR_CURVE_DATASET,
    DEFAULT_USER_AGENT,
    TREASURY_XML_BASE,
)


# ============================================================
# Feed access
# ============================================================


class FeedSettings(BaseModel):
    """
    Treasury XML feed endpoint and request controls.
    """

    model_config = ConfigDict(extra="forbid")

    base_url: str = TREASURY_XML_BASE
    dataset: str = DAILY_PAR_CURVE_DATASET
    connect_timeout: float = Field(default=5.0, gt=0.0)
    read_timeout: float = Field(default=10.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT
    parser: Literal["tree", "pattern"] = Field(
        default="tree",
        description="'pattern' is the degraded regex extractor for irregular markup.",
    )


# ============================================================
# Cache
# ============================================================


class CacheSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    ttl_minutes: float = Field(default=30.0, gt=0.0)


# ============================================================
# Top-level ServiceConfig
# ============================================================


class ServiceConfig(BaseModel):
    """
    Yield curve service configuration. Every field has a working default.
    """

    model_config = ConfigDict(extra="forbid")

    feed: FeedSettings = Field(default_factory=FeedSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
