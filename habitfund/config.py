"""App-wide settings loaded from config.yaml with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import yaml
from dotenv import load_dotenv

from habitfund.core.contextual_stats import Currency

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")


@dataclass(frozen=True)
class Settings:
    env: str = "dev"
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS

    # fallbacks for requests that omit the user's investment settings
    default_annual_rate: float = 10.0
    default_compounding_frequency: int = 12
    default_currency: str = "RUB"
    max_projection_years: int = 100


def _deep_get(d: Dict[str, Any], path: str, default=None):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _split_origins(value) -> Tuple[str, ...]:
    if isinstance(value, str):
        parts = value.split(",")
    else:
        parts = list(value or [])
    return tuple(p.strip() for p in parts if p and p.strip())


def load_settings(config_path: str = "config.yaml") -> Settings:
    """
    Loads config.yaml + overrides from .env/environment variables.
    Empty environment variables are treated as unset.
    """
    load_dotenv()

    cfg: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}

    def _env_or_cfg(key: str, cfg_path: str, default):
        v = os.getenv(key)
        if v is None or v.strip() == "":
            return _deep_get(cfg, cfg_path, default)
        return v.strip()

    env = _env_or_cfg("APP_ENV", "app.env", "dev")
    log_level = str(_env_or_cfg("LOG_LEVEL", "app.log_level", "INFO")).upper()
    cors_origins = _split_origins(_env_or_cfg("CORS_ORIGINS", "app.cors_origins", DEFAULT_CORS_ORIGINS))

    default_annual_rate = float(_env_or_cfg("DEFAULT_ANNUAL_RATE", "investment.annual_rate", 10.0))
    default_compounding_frequency = int(
        _env_or_cfg("DEFAULT_COMPOUNDING_FREQUENCY", "investment.compounding_frequency", 12)
    )
    default_currency = str(_env_or_cfg("DEFAULT_CURRENCY", "investment.currency", "RUB")).upper()
    max_projection_years = int(_env_or_cfg("MAX_PROJECTION_YEARS", "investment.max_projection_years", 100))

    if default_compounding_frequency < 1:
        raise ValueError("compounding_frequency must be at least 1")
    if default_currency not in {c.value for c in Currency}:
        raise ValueError(f"unsupported default currency: {default_currency}")
    if max_projection_years < 0:
        raise ValueError("max_projection_years cannot be negative")

    return Settings(
        env=env,
        log_level=log_level,
        cors_origins=cors_origins or DEFAULT_CORS_ORIGINS,
        default_annual_rate=default_annual_rate,
        default_compounding_frequency=default_compounding_frequency,
        default_currency=default_currency,
        max_projection_years=max_projection_years,
    )
