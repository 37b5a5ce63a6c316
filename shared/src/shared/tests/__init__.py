"""
Shared testing utilities for Talardnad components.

Provides standardized test structure:
- ComponentTest: Base class for all tests (runs under pytest or standalone)
- Test result models
- Marker-delimited JSON output for standalone runs
"""

from shared.tests.component_test import ComponentTest
from shared.tests.models import (
    IndividualTestResult,
    ResultStatus,
    SuiteResult,
)
from shared.tests.result_schema import (
    SCHEMA_VERSION,
    format_output,
    parse_test_output,
)

__all__ = [
    "ComponentTest",
    "ResultStatus",
    "IndividualTestResult",
    "SuiteResult",
    "SCHEMA_VERSION",
    "parse_test_output",
    "format_output",
]
