from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from service_monitor.checks.http_check import run_http
from service_monitor.checks.results import CheckResult
from service_monitor.models import Endpoint, MonitorConfig
from service_monitor.ops_logic import is_overall_healthy, utcnow_iso
from service_monitor.reporting import write_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepOutcome:
    healthy: bool
    results: list[CheckResult]
    report_path: Path


def _check_isolated(endpoint: Endpoint, config: MonitorConfig) -> CheckResult:
    start = time.perf_counter()
    try:
        return run_http(
            endpoint,
            timeout_ms=config.timeout_ms,
            max_latency_ms=config.max_latency_ms,
        )
    except Exception as e:
        # One broken check must not take the rest of the sweep down.
        logger.exception("Check for %s failed unexpectedly", endpoint.name)
        return CheckResult(
            endpoint=endpoint.name,
            url=endpoint.url,
            status="error",
            latency=int((time.perf_counter() - start) * 1000),
            error=f"{e.__class__.__name__}: {e}",
            timestamp=utcnow_iso(),
        )


def check_all(config: MonitorConfig) -> list[CheckResult]:
    if not config.endpoints:
        return []

    with ThreadPoolExecutor(
        max_workers=len(config.endpoints), thread_name_prefix="check"
    ) as pool:
        futures = [
            pool.submit(_check_isolated, endpoint, config)
            for endpoint in config.endpoints
        ]
        # Results keep registry order.
        return [f.result() for f in futures]


def run_once(config: MonitorConfig) -> SweepOutcome:
    results = check_all(config)
    path = write_report(results, config.report_dir)
    return SweepOutcome(
        healthy=is_overall_healthy(results),
        results=results,
        report_path=path,
    )
