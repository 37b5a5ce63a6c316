"""Console/file reporter used by component tests."""

from shared.reporter.system_reporter import SystemReporter

__all__ = ["SystemReporter"]
