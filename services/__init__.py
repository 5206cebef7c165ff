"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.catalog_service import CatalogService
from services.seed_service import SeedService, load_seed_data

__all__ = [
    "AuthService",
    "CatalogService",
    "SeedService",
    "load_seed_data",
]
