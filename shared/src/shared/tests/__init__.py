"""
Shared testing utilities for Brasier components.

Provides standardized test structure:
- LaborantTest: Base class for all tests
- Test result models and the JSON output protocol

All tests MUST inherit from LaborantTest.
"""

from shared.tests.models import (
    SCHEMA_VERSION,
    IndividualTestResult,
    TestFileResult,
    TestStatus,
    format_output,
    parse_test_output,
)
from shared.tests.test_base import LaborantTest

__all__ = [
    "LaborantTest",
    "TestStatus",
    "IndividualTestResult",
    "TestFileResult",
    "SCHEMA_VERSION",
    "format_output",
    "parse_test_output",
]
