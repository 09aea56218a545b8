"""Configuration for the event form, read from environment variables."""

from __future__ import annotations

import logging
import os
from datetime import date
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from pay_period_events.pay_periods import generate
from pay_period_events.schema import PayPeriod

DEFAULT_ANCHOR = date(2025, 2, 16)
# Two pay periods a month for 24 months.
DEFAULT_PERIOD_COUNT = 48


class Settings(BaseModel):
    """Storage location and pay-period table parameters."""

    bucket: str = Field(default="")
    object_key: str = Field(default="data/events.csv")
    backend: Literal["s3", "local", "memory"] = Field(default="local")
    local_dir: Path = Field(default=Path("./data"))
    anchor_date: date = Field(default=DEFAULT_ANCHOR)
    period_count: int = Field(default=DEFAULT_PERIOD_COUNT, gt=0)
    log_level: str = Field(default="INFO")

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "Settings":
        """Load settings from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        bucket = env.get("AWS_BUCKET_NAME", "")
        backend = env.get("EVENT_STORE_BACKEND") or ("s3" if bucket else "local")

        return cls(
            bucket=bucket,
            object_key=env.get("AWS_OBJECT_KEY") or "data/events.csv",
            backend=backend,
            local_dir=Path(env.get("EVENT_STORE_DIR", "./data")),
            anchor_date=env.get("PAY_PERIOD_ANCHOR") or DEFAULT_ANCHOR,
            period_count=env.get("PAY_PERIOD_COUNT", DEFAULT_PERIOD_COUNT),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )

    def pay_periods(self) -> tuple[PayPeriod, ...]:
        return generate(self.anchor_date, self.period_count)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
