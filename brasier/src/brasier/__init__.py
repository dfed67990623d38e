"""
Brasier - token burn verification and claim service.
"""

__version__ = "0.1.0"
