import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_REPORT_DIR = Path(__file__).resolve().parents[1] / "monitoring"

MAX_LATENCY_MS = 500
MAX_TIMEOUT_MS = 2000


class Settings:
    MONITOR_BASE_URL: str = os.getenv("MONITOR_BASE_URL", "http://localhost:8080")
    MONITOR_API_KEY: str | None = os.getenv("MONITOR_API_KEY") or None
    MONITOR_REPORT_DIR: Path = Path(
        os.getenv("MONITOR_REPORT_DIR") or DEFAULT_REPORT_DIR
    ).expanduser()


settings = Settings()
