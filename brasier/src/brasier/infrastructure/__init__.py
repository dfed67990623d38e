"""
Infrastructure layer: chain access, persistence and monitoring.
"""
