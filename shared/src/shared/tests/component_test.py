"""
Base class for Talardnad component tests.

Provides standardized test structure with:
- Lifecycle hooks run around every test (sync and async)
- Integrated SystemReporter
- pytest collection (pytest-asyncio drives async tests)
- Standalone execution with JSON output via run_as_main()

Example:
    class TestAPI(ComponentTest):
        component_name = "talardnad"
        test_category = "integration"

        async def async_setup_test(self):
            self.client = await create_client()

        async def test_endpoint(self):
            response = await self.client.get("/health")
            assert response.status_code == 200

        async def async_teardown_test(self):
            await self.client.aclose()

    if __name__ == "__main__":
        TestAPI.run_as_main()
"""

import asyncio
import inspect
import logging
import sys
import time
from abc import ABC
from datetime import datetime
from typing import List, Optional

import pytest
import pytest_asyncio

from shared.reporter.system_reporter import SystemReporter
from shared.tests.models import (
    IndividualTestResult,
    ResultStatus,
    SuiteResult,
)
from shared.tests.result_schema import SCHEMA_VERSION, format_output


class ComponentTest(ABC):
    """
    Base class for all component tests.

    Required class attributes:
        component_name: str - Name of component being tested
        test_category: str - Category: "unit", "integration", or "e2e"

    Optional class attributes:
        log_dir: str - Directory for reporter log files (stdout only if None)

    Lifecycle hooks (all optional), called around every test_* method:
        setup_test() then async_setup_test()
        async_teardown_test() then teardown_test()

    Subclasses must not define __init__, pytest only collects classes
    without one.
    """

    component_name: str = "unknown"
    test_category: str = "unit"
    log_dir: Optional[str] = None

    _reporter: Optional[SystemReporter] = None

    @property
    def reporter(self) -> SystemReporter:
        """Reporter named after the concrete test class."""
        if self._reporter is None:
            self._reporter = SystemReporter(
                name=self.__class__.__name__,
                log_dir=self.log_dir,
                level=logging.INFO,
                verbose=1,
            )
        return self._reporter

    # ================================================================
    # LIFECYCLE HOOKS (Override in subclass if needed)
    # ================================================================

    def setup_test(self) -> None:
        """Sync setup before each test."""

    async def async_setup_test(self) -> None:
        """Async setup before each test."""

    async def async_teardown_test(self) -> None:
        """Async cleanup after each test."""

    def teardown_test(self) -> None:
        """Sync cleanup after each test."""

    @pytest_asyncio.fixture(autouse=True)
    async def _component_lifecycle(self):
        """Run lifecycle hooks around each pytest-collected test."""
        self.setup_test()
        await self.async_setup_test()
        try:
            yield
        finally:
            await self.async_teardown_test()
            self.teardown_test()

    # ================================================================
    # STANDALONE EXECUTION (Do not override)
    # ================================================================

    @classmethod
    def _discover_tests(cls) -> List[str]:
        return sorted(
            name
            for name in dir(cls)
            if name.startswith("test_") and callable(getattr(cls, name))
        )

    async def _execute_test(self, test_name: str) -> IndividualTestResult:
        """
        Execute one test method with its lifecycle hooks.

        Args:
            test_name: Name of test method

        Returns:
            IndividualTestResult with execution details
        """
        start_time = time.time()
        test_method = getattr(self, test_name)

        try:
            self.setup_test()
            await self.async_setup_test()
            try:
                outcome = test_method()
                if inspect.isawaitable(outcome):
                    await outcome
            finally:
                await self.async_teardown_test()
                self.teardown_test()

            status, error = ResultStatus.PASS, None

        except pytest.skip.Exception as e:
            status, error = ResultStatus.SKIP, str(e)

        except AssertionError as e:
            status, error = ResultStatus.FAIL, str(e) or "Assertion failed"

        except Exception as e:
            status, error = ResultStatus.ERROR, f"{type(e).__name__}: {e}"

        return IndividualTestResult(
            name=test_name,
            status=status.value,
            duration=time.time() - start_time,
            error=error,
        )

    @classmethod
    def run_tests(cls) -> SuiteResult:
        """
        Run every test_* method on a fresh instance.

        Returns:
            SuiteResult with aggregated counts
        """
        start_time = time.time()
        results: List[IndividualTestResult] = []

        for test_name in cls._discover_tests():
            instance = cls()
            instance.reporter.info(f"Running {test_name}", context="Test")
            loop = asyncio.new_event_loop()
            try:
                result = loop.run_until_complete(instance._execute_test(test_name))
            finally:
                loop.close()
            if result.status != ResultStatus.PASS.value:
                instance.reporter.error(
                    f"{test_name}: {result.status} {result.error}",
                    context="Test",
                )
            results.append(result)

        def count(status: ResultStatus) -> int:
            return sum(1 for r in results if r.status == status.value)

        return SuiteResult(
            schema_version=SCHEMA_VERSION,
            test_file=sys.modules[cls.__module__].__file__ or cls.__module__,
            component=cls.component_name,
            category=cls.test_category,
            total=len(results),
            passed=count(ResultStatus.PASS),
            failed=count(ResultStatus.FAIL),
            errors=count(ResultStatus.ERROR),
            skipped=count(ResultStatus.SKIP),
            duration=time.time() - start_time,
            timestamp=datetime.now().isoformat(),
            tests=results,
            metadata={"test_class": cls.__name__},
        )

    @classmethod
    def run_as_main(cls) -> None:
        """Run tests, print marker-wrapped JSON and exit with status."""
        result = cls.run_tests()
        print(format_output(result.to_dict()))
        sys.exit(0 if result.success else 1)
