from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ReportEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    endpoint: str = Field(description="Name of the checked endpoint")
    url: str = Field(description="Target address of the check")
    http_code: int | None = Field(
        default=None,
        alias="httpCode",
        description="HTTP status code, null when no response was received",
    )
    status: Literal["healthy", "slow", "error"]
    latency: int = Field(ge=0, description="Elapsed milliseconds")
    error: str | None = Field(default=None, description="Failure description")
    timestamp: str = Field(description="ISO-8601 capture time")


ReportEntries = TypeAdapter(List[ReportEntry])
