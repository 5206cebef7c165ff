"""
Adapters package - External service connections.
Appwrite client handle shared by repositories and services.
"""

from adapters import appwrite_adapter
from adapters.appwrite_adapter import AppwriteBackend, get_backend

__all__ = [
    "appwrite_adapter",
    "AppwriteBackend",
    "get_backend",
]
