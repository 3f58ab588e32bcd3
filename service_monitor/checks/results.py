from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

CheckStatus = Literal["healthy", "slow", "error"]
STATUSES: tuple[str, ...] = ("healthy", "slow", "error")


@dataclass(frozen=True)
class CheckResult:
    endpoint: str
    url: str
    status: CheckStatus
    latency: int
    timestamp: str
    http_code: int | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "endpoint": self.endpoint,
            "url": self.url,
            "httpCode": self.http_code,
            "status": self.status,
            "latency": self.latency,
            "error": self.error,
            "timestamp": self.timestamp,
        }
