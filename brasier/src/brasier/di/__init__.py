"""
Dependency injection.
"""

from brasier.di.container import (
    DIContainer,
    get_container,
    initialize_container,
    reset_container,
    shutdown_container,
)

__all__ = [
    "DIContainer",
    "get_container",
    "initialize_container",
    "reset_container",
    "shutdown_container",
]
