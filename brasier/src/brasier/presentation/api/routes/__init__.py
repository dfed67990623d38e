"""
API routes.
"""

from brasier.presentation.api.routes import burns, health

__all__ = ["burns", "health"]
