from __future__ import annotations

import time

import requests

from service_monitor.checks.results import CheckResult, CheckStatus
from service_monitor.config import MAX_LATENCY_MS, MAX_TIMEOUT_MS
from service_monitor.models import Endpoint
from service_monitor.ops_logic import utcnow_iso

CHUNK_SIZE = 8192


def classify(http_code: int, latency_ms: int, max_latency_ms: int = MAX_LATENCY_MS) -> CheckStatus:
    # Any completed non-200 response is an error, redirects included.
    if http_code == 200 and latency_ms < max_latency_ms:
        return "healthy"
    if http_code == 200:
        return "slow"
    return "error"


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _deadline_exceeded(timeout_ms: int) -> requests.exceptions.Timeout:
    return requests.exceptions.Timeout(f"timeout of {timeout_ms}ms exceeded")


def run_http(
    endpoint: Endpoint,
    timeout_ms: int = MAX_TIMEOUT_MS,
    max_latency_ms: int = MAX_LATENCY_MS,
) -> CheckResult:
    """
    GET the endpoint once and classify the outcome.

    ``timeout_ms`` bounds the whole request, body included: requests only
    bounds connect and each socket read, so the body is streamed and the
    deadline is checked while reading and again once the response is done.
    """
    timeout_s = timeout_ms / 1000
    start = time.perf_counter()
    try:
        r = requests.get(
            endpoint.url,
            headers=dict(endpoint.headers),
            timeout=(timeout_s, timeout_s),
            allow_redirects=False,
            stream=True,
        )
        try:
            for _ in r.iter_content(chunk_size=CHUNK_SIZE):
                if _elapsed_ms(start) >= timeout_ms:
                    raise _deadline_exceeded(timeout_ms)
        finally:
            r.close()

        latency_ms = _elapsed_ms(start)
        if latency_ms >= timeout_ms:
            raise _deadline_exceeded(timeout_ms)

        error = None
        if not 200 <= r.status_code < 300:
            error = f"Request failed with status code {r.status_code}"
        return CheckResult(
            endpoint=endpoint.name,
            url=endpoint.url,
            http_code=r.status_code,
            status=classify(r.status_code, latency_ms, max_latency_ms),
            latency=latency_ms,
            error=error,
            timestamp=utcnow_iso(),
        )
    except requests.RequestException as e:
        latency_ms = _elapsed_ms(start)
        response = getattr(e, "response", None)
        return CheckResult(
            endpoint=endpoint.name,
            url=endpoint.url,
            http_code=response.status_code if response is not None else None,
            status="error",
            latency=latency_ms,
            error=str(e) or e.__class__.__name__,
            timestamp=utcnow_iso(),
        )
