"""Data contracts for the investment endpoints."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from habitfund.core.investment import ProjectionDataPoint


class FutureValueRequest(BaseModel):
    """Lump-sum growth inputs. Omitted rate/frequency use the configured defaults."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0, description="Current accumulated savings.")
    annual_rate: Optional[float] = Field(None, description="Annual rate in percent (10 = 10%).")
    compounding_frequency: Optional[int] = Field(None, ge=1, description="Compounding events per year.")
    years: float = Field(..., ge=0)


class FutureValueResponse(BaseModel):
    value: float
    interest_earned: float


class ContributionsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0)
    regular_contribution: float = Field(..., ge=0, description="Amount added each contribution period.")
    contribution_frequency: int = Field(365, ge=1, description="Contribution events per year.")
    annual_rate: Optional[float] = None
    compounding_frequency: Optional[int] = Field(None, ge=1)
    years: float = Field(..., ge=0)


class ContributionsResponse(BaseModel):
    value: float


class ProjectionRequest(BaseModel):
    """Chart series inputs; ``years`` is capped by the ``max_years`` validation context."""

    model_config = ConfigDict(extra="forbid")

    current_savings: float = Field(..., ge=0)
    daily_savings_rate: float = Field(..., ge=0)
    annual_rate: Optional[float] = None
    years: int = Field(..., ge=0)
    data_points_count: int = Field(20, ge=1)

    @field_validator("years")
    @classmethod
    def within_horizon(cls, value: int, info: ValidationInfo) -> int:
        max_years = (info.context or {}).get("max_years")
        if max_years is not None and value > max_years:
            raise ValueError(f"years must be at most {max_years}")
        return value


class ProjectionResponse(BaseModel):
    points: List[ProjectionDataPoint]


class GoalRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    current_savings: float = Field(..., ge=0)
    daily_savings_rate: float = Field(..., ge=0)
    goal_amount: float = Field(..., ge=0)
    annual_rate: Optional[float] = None
    reference_date: Optional[date] = Field(None, description="Defaults to today.")


class GoalEstimate(BaseModel):
    # years is None when the goal can never be reached; 100 means not within
    # the search window, which also counts as unreachable
    years: Optional[float]
    reachable: bool
    achievement_date: Optional[date]


class SimulationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    current_savings: float = Field(..., ge=0)
    daily_savings_rate: float = Field(..., ge=0)
    annual_rate: Optional[float] = None
    time_horizon: float = Field(..., ge=0)
    data_points_count: int = Field(20, ge=1)

    @field_validator("time_horizon")
    @classmethod
    def within_horizon(cls, value: float, info: ValidationInfo) -> float:
        max_years = (info.context or {}).get("max_years")
        if max_years is not None and value > max_years:
            raise ValueError(f"time_horizon must be at most {max_years}")
        return value
