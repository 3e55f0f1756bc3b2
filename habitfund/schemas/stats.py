"""Data contracts for the contextual stats endpoint."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from habitfund.core.contextual_stats import Currency, StatItem


class ContextualStatsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    total_savings: float = Field(..., ge=0)
    currency: Optional[Currency] = None


class ContextualStatsResponse(BaseModel):
    currency: Currency
    symbol: str
    items: List[StatItem]
