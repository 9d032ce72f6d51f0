"""Models for test execution results."""

import time
from dataclasses import asdict, dataclass
from typing import Any, Literal, TypeAlias

ResultStatus: TypeAlias = Literal["success", "failed", "skipped"]


def now_millis() -> int:
    """Return the current epoch time in milliseconds."""
    return round(time.time() * 1000)


@dataclass(kw_only=True)
class Result:
    """Outcome of a single test execution.

    Created when the test starts, updated through the lifecycle and stored
    once at teardown.
    """

    project_name: str
    environment: str
    browser: str
    test_name: str
    started: int
    ended: int | None = None
    status: ResultStatus = "success"
    severity: str | None = None
    error: str | None = None
    log_path: str | None = None
    screen_path: str | None = None

    @property
    def duration(self) -> float:
        """Elapsed seconds, or 0 while the test is still running."""
        if self.ended is None:
            return 0.0
        return (self.ended - self.started) / 1000

    def to_document(self) -> dict[str, Any]:
        """Serialize into a flat document for the result store."""
        return asdict(self)
