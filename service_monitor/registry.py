from __future__ import annotations

from typing import Iterable

from service_monitor.config import Settings
from service_monitor.models import Endpoint, MonitorConfig

API_KEY_HEADER = "X-API-Key"

# (name, path, sends api key)
DEFAULT_ENDPOINTS: tuple[tuple[str, str, bool], ...] = (
    ("export", "/api/export", True),
    ("audit", "/api/audit", True),
    ("health", "/health", False),
)


def validate_endpoints(endpoints: Iterable[Endpoint]) -> list[Endpoint]:
    out: list[Endpoint] = []
    seen = set()
    for ep in endpoints:
        if ep.name in seen:
            raise ValueError(f"Duplicate endpoint name: {ep.name}")
        seen.add(ep.name)
        out.append(ep)
    return out


def build_endpoints(base_url: str, api_key: str | None = None) -> list[Endpoint]:
    """
    Materialize the fixed endpoint table against ``base_url``.
    Protected endpoints carry the API key header only when a key is configured.
    """
    base = base_url.rstrip("/")
    endpoints = []
    for name, path, protected in DEFAULT_ENDPOINTS:
        headers = {API_KEY_HEADER: api_key} if protected and api_key else {}
        endpoints.append(Endpoint(name=name, url=f"{base}{path}", headers=headers))
    return validate_endpoints(endpoints)


def build_config(cfg: Settings) -> MonitorConfig:
    return MonitorConfig(
        endpoints=build_endpoints(cfg.MONITOR_BASE_URL, cfg.MONITOR_API_KEY),
        report_dir=cfg.MONITOR_REPORT_DIR,
    )
