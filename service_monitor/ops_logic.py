from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Iterable

from service_monitor.checks.results import STATUSES, CheckResult

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def serialize_ts(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    return (
        dt.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def utcnow_iso() -> str:
    return serialize_ts(datetime.now(timezone.utc)) or ""


def epoch_ms(dt: datetime | None = None) -> int:
    current = dt or datetime.now(timezone.utc)
    return (current - EPOCH) // timedelta(milliseconds=1)


def is_overall_healthy(results: Iterable[CheckResult]) -> bool:
    return all(r.status == "healthy" for r in results)


def summarize_results(results: Iterable[CheckResult]) -> dict[str, Any]:
    counts = {status: 0 for status in STATUSES}
    unhealthy: list[str] = []

    for r in results:
        counts[r.status] += 1
        if r.status != "healthy":
            unhealthy.append(r.endpoint)

    return {
        "total": sum(counts.values()),
        **counts,
        "unhealthy": unhealthy,
    }
