"""
Brasier domain layer.
"""
