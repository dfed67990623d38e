"""
System reporting utilities.
"""

from shared.reporter.system_reporter import SystemReporter

__all__ = ["SystemReporter"]
