from __future__ import annotations

from typing import Any, Dict

from service_monitor.checks.results import CheckResult


def format_result(result: CheckResult) -> str:
    parts = [
        f"[{result.status.upper()}] {result.endpoint}",
        result.url,
        f"{result.latency} ms",
    ]
    if result.http_code is not None:
        parts.append(f"HTTP {result.http_code}")
    if result.error:
        parts.append(f"error: {result.error}")
    return " | ".join(parts)


def format_summary(summary: Dict[str, Any]) -> str:
    counts = (
        f"{summary['healthy']} healthy, {summary['slow']} slow, "
        f"{summary['error']} error of {summary['total']}"
    )
    if not summary["unhealthy"]:
        return f"All endpoints healthy ({counts})"
    names = ", ".join(summary["unhealthy"])
    return f"Some endpoints are unhealthy or slow: {names} ({counts})"
