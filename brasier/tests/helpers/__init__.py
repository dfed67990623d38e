"""
Test helpers for Brasier.
"""
