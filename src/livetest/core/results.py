"""Result data structures produced by the test runner."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

PASS_GLYPH = "✅"
FAIL_GLYPH = "❌"


@dataclass(frozen=True)
class CaseOutcome:
    """Success or failure of one case execution, before timing is attached."""

    passed: bool
    error_message: Optional[str] = None

    @classmethod
    def success(cls) -> "CaseOutcome":
        return cls(passed=True)

    @classmethod
    def failure(cls, error_message: str) -> "CaseOutcome":
        return cls(passed=False, error_message=error_message)


@dataclass(frozen=True)
class CaseResult:
    """Outcome of executing a single test case."""

    describe_label: str
    label: str
    message: str
    passed: bool
    time: float
    error_message: Optional[str] = None

    @property
    def description(self) -> str:
        return f"{self.describe_label}: {self.label}"

    @classmethod
    def build(
        cls, describe_label: str, label: str, outcome: CaseOutcome, time: float
    ) -> "CaseResult":
        description = f"{describe_label}: {label}"
        if outcome.passed:
            return cls(
                describe_label=describe_label,
                label=label,
                message=f"{description}  {PASS_GLYPH}",
                passed=True,
                time=time,
            )
        return cls(
            describe_label=describe_label,
            label=label,
            message=f"{description}  {FAIL_GLYPH}\n   {outcome.error_message}",
            passed=False,
            time=time,
            error_message=outcome.error_message,
        )

    def fragment(self) -> Dict[str, Any]:
        """Minimal payload streamed to realtime reporters."""

        return {"message": self.message, "passed": self.passed}

    def to_dict(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "describeLabel": self.describe_label,
            "description": self.description,
            "message": self.message,
            "passed": self.passed,
            "time": self.time,
        }
        if not self.passed:
            record["errorMessage"] = self.error_message
        return record


@dataclass(frozen=True)
class FullResults:
    time: float
    timestamp: dt.datetime
    test_cases: List[CaseResult]


@dataclass(frozen=True)
class Report:
    """Aggregated outcome of an entire run."""

    results: List[CaseResult]
    full_results: FullResults
    error_count: int
    duration: float

    @classmethod
    def build(
        cls, results: List[CaseResult], error_count: int, duration: float, timestamp: dt.datetime
    ) -> "Report":
        return cls(
            results=results,
            full_results=FullResults(time=duration, timestamp=timestamp, test_cases=results),
            error_count=error_count,
            duration=duration,
        )

    @property
    def passed(self) -> bool:
        return self.error_count == 0

    def to_dict(self) -> Dict[str, Any]:
        cases = [result.to_dict() for result in self.results]
        return {
            "results": cases,
            "fullResults": {
                "time": self.full_results.time,
                "timestamp": self.full_results.timestamp.isoformat(),
                "testCases": cases,
            },
            "errorCount": self.error_count,
            "duration": self.duration,
        }
