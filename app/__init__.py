"""
App package - Application configuration and core utilities.
Settings live in app.config and are loaded on first import of that module;
a missing connection parameter raises ConfigurationError there.
"""

from app.exceptions import (
    FoodOrderError,
    ConfigurationError,
    AccountCreationError,
    AuthenticationError,
    NoActiveSessionError,
    ProfileNotFoundError,
    QueryError,
    SeedError,
    WipeError,
)

__all__ = [
    "FoodOrderError",
    "ConfigurationError",
    "AccountCreationError",
    "AuthenticationError",
    "NoActiveSessionError",
    "ProfileNotFoundError",
    "QueryError",
    "SeedError",
    "WipeError",
]
