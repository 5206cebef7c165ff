"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.auth_schemas import (
    CreateUserParams,
    SignInParams,
    Session,
    UserProfileCreate,
    UserProfile,
)
from domain.schemas.catalog_schemas import (
    GetMenuParams,
    CategoryCreate,
    Category,
    CustomizationCreate,
    Customization,
    MenuItemCreate,
    MenuItem,
    MenuCustomizationCreate,
    MenuCustomization,
    StoredFile,
)
from domain.schemas.seed_schemas import (
    SeedCategory,
    SeedCustomization,
    SeedMenuItem,
    SeedData,
    DeletionResult,
    SeedReport,
)

__all__ = [
    # Auth schemas
    "CreateUserParams",
    "SignInParams",
    "Session",
    "UserProfileCreate",
    "UserProfile",
    # Catalog schemas
    "GetMenuParams",
    "CategoryCreate",
    "Category",
    "CustomizationCreate",
    "Customization",
    "MenuItemCreate",
    "MenuItem",
    "MenuCustomizationCreate",
    "MenuCustomization",
    "StoredFile",
    # Seed schemas
    "SeedCategory",
    "SeedCustomization",
    "SeedMenuItem",
    "SeedData",
    "DeletionResult",
    "SeedReport",
]
