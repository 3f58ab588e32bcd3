from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from service_monitor.checks.results import CheckResult
from service_monitor.ops_logic import epoch_ms
from service_monitor.report_schemas import ReportEntries, ReportEntry

logger = logging.getLogger(__name__)

REPORT_PREFIX = "report-"


class ReportWriteFailure(RuntimeError):
    pass


def report_path(report_dir: Path, now: datetime | None = None) -> Path:
    return Path(report_dir) / f"{REPORT_PREFIX}{epoch_ms(now)}.json"


def write_report(
    results: Iterable[CheckResult],
    report_dir: Path,
    now: datetime | None = None,
) -> Path:
    """
    Write all results as one pretty-printed JSON array to
    ``report_dir/report-<epoch-ms>.json`` and return the written path.
    Filesystem errors are raised as ReportWriteFailure.
    """
    entries = ReportEntries.validate_python([r.to_dict() for r in results])
    payload = ReportEntries.dump_python(entries, mode="json", by_alias=True)
    path = report_path(report_dir, now)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2)
    except OSError as exc:
        raise ReportWriteFailure(
            f"Failed to write report to {path}: {exc.__class__.__name__}: {exc}"
        ) from exc

    logger.info("Report written to %s", path)
    return path


def load_report(path: Path) -> list[ReportEntry]:
    raw = Path(path).read_text(encoding="utf-8")
    try:
        return ReportEntries.validate_json(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid report file {path}: {exc}") from exc
