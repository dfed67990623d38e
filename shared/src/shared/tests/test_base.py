"""
Base class for all Brasier component tests.

Provides standardized test structure with:
- Test discovery compatible with pytest (test_* methods, no __init__)
- Per-test hooks (setup_test / teardown_test)
- Native async/await support (pytest-asyncio or the standalone runner)
- Integrated SystemReporter
- Standalone execution with JSON output (run_as_main)
"""

import asyncio
import inspect
import logging
import sys
import time
from typing import List, Optional

from shared.reporter.system_reporter import SystemReporter
from shared.tests.models import (
    IndividualTestResult,
    TestFileResult,
    TestStatus,
    format_output,
)


class LaborantTest:
    """
    Base class for component tests.

    Required class attributes:
        component_name: str - Name of component being tested
        test_category: str - Category: "unit", "integration", or "e2e"

    Optional class attributes:
        log_dir: str - Directory for reporter log files (stdout only if None)

    Example:
        class TestReward(LaborantTest):
            component_name = "brasier"
            test_category = "unit"

            def test_rate(self):
                assert reward_for(Decimal("1")) == 100

        if __name__ == "__main__":
            TestReward.run_as_main()
    """

    component_name: str = "unknown"
    test_category: str = "unit"
    log_dir: Optional[str] = None

    reporter: SystemReporter

    # ================================================================
    # LIFECYCLE HOOKS (override in subclass if needed)
    # ================================================================

    def setup_test(self) -> None:
        """Called before every test_* method."""

    def teardown_test(self) -> None:
        """Called after every test_* method."""

    # ================================================================
    # PYTEST INTEGRATION
    # ================================================================

    def setup_method(self, method=None) -> None:
        self.reporter = SystemReporter(
            name=self.__class__.__name__,
            log_dir=self.log_dir,
            level=logging.INFO,
            verbose=1,
        )
        self.setup_test()

    def teardown_method(self, method=None) -> None:
        self.teardown_test()

    # ================================================================
    # STANDALONE EXECUTION
    # ================================================================

    def _discover_tests(self) -> List[tuple]:
        tests = []
        for name in sorted(dir(self)):
            if name.startswith("test_"):
                attr = getattr(self, name)
                if callable(attr):
                    tests.append((name, attr))
        return tests

    def _execute_test(self, test_name: str, test_method) -> IndividualTestResult:
        start_time = time.time()
        try:
            self.setup_method()
            try:
                if inspect.iscoroutinefunction(test_method):
                    asyncio.run(test_method())
                else:
                    test_method()
            finally:
                self.teardown_method()

            return IndividualTestResult(
                name=test_name,
                status=TestStatus.PASS.value,
                duration=time.time() - start_time,
            )

        except AssertionError as e:
            return IndividualTestResult(
                name=test_name,
                status=TestStatus.FAIL.value,
                duration=time.time() - start_time,
                error=str(e) or "Assertion failed",
            )

        except Exception as e:
            return IndividualTestResult(
                name=test_name,
                status=TestStatus.ERROR.value,
                duration=time.time() - start_time,
                error=f"{type(e).__name__}: {str(e)}",
            )

    def run_tests(self) -> TestFileResult:
        """Run all discovered tests and return the aggregated result."""
        results = [
            self._execute_test(name, method)
            for name, method in self._discover_tests()
        ]
        return TestFileResult(
            test_file=self.__class__.__name__,
            component=self.component_name,
            category=self.test_category,
            tests=results,
        )

    @classmethod
    def run_as_main(cls) -> None:
        """
        Standard entry point for standalone execution.

        Call this in the if __name__ == "__main__" block.
        """
        result = cls().run_tests()
        print(format_output(result.to_dict()))
        sys.exit(0 if result.success else 1)
