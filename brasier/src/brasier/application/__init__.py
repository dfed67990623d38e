"""
Application layer - use cases.
"""
