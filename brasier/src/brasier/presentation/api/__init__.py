"""
FastAPI routes and middleware.
"""
