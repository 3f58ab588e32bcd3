import logging
import sys

from service_monitor.config import settings
from service_monitor.formatting import format_result, format_summary
from service_monitor.ops_logic import summarize_results
from service_monitor.registry import build_config
from service_monitor.reporting import ReportWriteFailure
from service_monitor.runner import run_once

logger = logging.getLogger(__name__)

EXIT_HEALTHY = 0
EXIT_UNHEALTHY = 1
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _BelowLevelFilter(logging.Filter):
    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def configure_logging() -> None:
    # Progress and the report path go to stdout, problems to stderr.
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowLevelFilter(logging.WARNING))
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )


def main() -> int:
    configure_logging()
    config = build_config(settings)

    try:
        outcome = run_once(config)
    except ReportWriteFailure as exc:
        logger.error("%s", exc)
        return EXIT_UNHEALTHY

    for result in outcome.results:
        level = logging.INFO if result.status == "healthy" else logging.WARNING
        logger.log(level, "%s", format_result(result))

    summary = summarize_results(outcome.results)
    if not outcome.healthy:
        logger.error("%s", format_summary(summary))
        return EXIT_UNHEALTHY

    logger.info("%s", format_summary(summary))
    return EXIT_HEALTHY


if __name__ == "__main__":
    sys.exit(main())
