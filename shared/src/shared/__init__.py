"""
Shared utilities for Brasier components.

Provides the SystemReporter logger and the LaborantTest base class.
"""
