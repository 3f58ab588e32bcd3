import io
import logging
import unittest
from pathlib import Path
from unittest.mock import patch

from service_monitor.checks.results import CheckResult
from service_monitor.main import configure_logging, main
from service_monitor.reporting import ReportWriteFailure
from service_monitor.runner import SweepOutcome


def _result(name: str, status: str) -> CheckResult:
    return CheckResult(
        endpoint=name,
        url=f"http://example.local/{name}",
        http_code=200 if status != "error" else 503,
        status=status,
        latency=10 if status == "healthy" else 700,
        timestamp="2026-10-18T10:00:00.000Z",
    )


class MainExitCodeTests(unittest.TestCase):
    def _run(self, outcome: SweepOutcome):
        with patch("service_monitor.main.configure_logging"), patch(
            "service_monitor.main.run_once", return_value=outcome
        ):
            with self.assertLogs("service_monitor.main", level="INFO") as logs:
                code = main()
        return code, logs.output

    def test_exit_zero_when_all_healthy(self) -> None:
        code, output = self._run(
            SweepOutcome(
                healthy=True,
                results=[_result("export", "healthy"), _result("health", "healthy")],
                report_path=Path("/tmp/report-1.json"),
            )
        )
        self.assertEqual(code, 0)
        self.assertFalse(any(line.startswith("ERROR") for line in output))

    def test_exit_one_with_diagnostic_when_unhealthy(self) -> None:
        code, output = self._run(
            SweepOutcome(
                healthy=False,
                results=[
                    _result("export", "slow"),
                    _result("audit", "error"),
                    _result("health", "healthy"),
                ],
                report_path=Path("/tmp/report-1.json"),
            )
        )
        self.assertEqual(code, 1)
        errors = [line for line in output if line.startswith("ERROR")]
        self.assertEqual(len(errors), 1)
        self.assertIn("Some endpoints are unhealthy or slow: export, audit", errors[0])

    def test_report_write_failure_exits_one(self) -> None:
        with patch("service_monitor.main.configure_logging"), patch(
            "service_monitor.main.run_once",
            side_effect=ReportWriteFailure("Failed to write report"),
        ):
            with self.assertLogs("service_monitor.main", level="ERROR") as logs:
                code = main()

        self.assertEqual(code, 1)
        self.assertIn("Failed to write report", logs.output[0])


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._saved = (root.handlers[:], root.level)

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        handlers, level = self._saved
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)

    def test_info_to_stdout_problems_to_stderr(self) -> None:
        with patch("sys.stdout", new_callable=io.StringIO) as out, patch(
            "sys.stderr", new_callable=io.StringIO
        ) as err:
            configure_logging()
            log = logging.getLogger("service_monitor.reporting")
            log.info("Report written to /tmp/report-1.json")
            log.error("Some endpoints are unhealthy or slow: audit")

        self.assertIn("Report written to /tmp/report-1.json", out.getvalue())
        self.assertNotIn("unhealthy", out.getvalue())
        self.assertIn("Some endpoints are unhealthy or slow: audit", err.getvalue())
        self.assertNotIn("Report written", err.getvalue())


if __name__ == "__main__":
    unittest.main()
