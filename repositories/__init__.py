"""
Repositories package - Data access layer.
"""

from repositories.base import BaseDocumentRepository, delete_concurrently
from repositories.user_repository import UserRepository
from repositories.catalog_repository import (
    CategoryRepository,
    CustomizationRepository,
    MenuRepository,
    MenuCustomizationRepository,
)
from repositories.file_repository import FileRepository

__all__ = [
    "BaseDocumentRepository",
    "delete_concurrently",
    "UserRepository",
    "CategoryRepository",
    "CustomizationRepository",
    "MenuRepository",
    "MenuCustomizationRepository",
    "FileRepository",
]
