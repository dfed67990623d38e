"""
Test result data models and output protocol.

These models define the contract between a standalone test run and the
tooling that aggregates results.
"""

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

# Increment on breaking changes
SCHEMA_VERSION = "1.0"

START_MARKER = "===LABORANT_RESULTS==="
END_MARKER = "===LABORANT_RESULTS_END==="


class TestStatus(Enum):
    """Test execution status."""

    __test__ = False

    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"
    SKIP = "skip"


@dataclass
class IndividualTestResult:
    """Result from a single test_* method."""

    name: str
    status: str
    duration: float
    error: Optional[str] = None
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass
class TestFileResult:
    """Aggregated results from one test class execution."""

    __test__ = False

    test_file: str
    component: str
    category: str
    tests: List[IndividualTestResult]
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    schema_version: str = SCHEMA_VERSION

    def _count(self, status: TestStatus) -> int:
        return sum(1 for t in self.tests if t.status == status.value)

    @property
    def passed(self) -> int:
        return self._count(TestStatus.PASS)

    @property
    def failed(self) -> int:
        return self._count(TestStatus.FAIL)

    @property
    def errors(self) -> int:
        return self._count(TestStatus.ERROR)

    @property
    def success(self) -> bool:
        """Check if all tests passed."""
        return self.failed == 0 and self.errors == 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "schema_version": self.schema_version,
            "test_file": self.test_file,
            "component": self.component,
            "category": self.category,
            "total": len(self.tests),
            "passed": self.passed,
            "failed": self.failed,
            "errors": self.errors,
            "duration": sum(t.duration for t in self.tests),
            "timestamp": self.timestamp,
            "tests": [t.to_dict() for t in self.tests],
        }


def format_output(data: Dict[str, Any]) -> str:
    """Wrap JSON results in markers for parsing."""
    return f"{START_MARKER}\n{json.dumps(data, indent=2)}\n{END_MARKER}"


def parse_test_output(stdout: str) -> Optional[Dict[str, Any]]:
    """
    Extract JSON results from test output.

    Returns:
        Parsed dict, or None when markers are missing or JSON is invalid
    """
    start_idx = stdout.find(START_MARKER)
    end_idx = stdout.find(END_MARKER)
    if start_idx == -1 or end_idx == -1:
        return None

    try:
        return json.loads(stdout[start_idx + len(START_MARKER) : end_idx].strip())
    except json.JSONDecodeError:
        return None
