from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from service_monitor.config import DEFAULT_REPORT_DIR, MAX_LATENCY_MS, MAX_TIMEOUT_MS


class Endpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    # Kept as a plain string: a malformed URL is reported as a failed check.
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)


class MonitorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    endpoints: List[Endpoint]
    timeout_ms: int = Field(default=MAX_TIMEOUT_MS, ge=1)
    max_latency_ms: int = Field(default=MAX_LATENCY_MS, ge=0)
    report_dir: Path = DEFAULT_REPORT_DIR
