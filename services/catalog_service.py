from typing import List, Optional
import logging

from appwrite.exception import AppwriteException

from adapters.appwrite_adapter import AppwriteBackend
from app.exceptions import QueryError, backend_details, backend_message
from domain.schemas import Category, GetMenuParams, MenuItem
from repositories import CategoryRepository, MenuRepository

logger = logging.getLogger("foodorder.catalog")


class CatalogService:
    """Read operations on the menu catalog"""

    @staticmethod
    def list_menu(
        backend: AppwriteBackend,
        category: Optional[str] = None,
        query: Optional[str] = None,
    ) -> List[MenuItem]:
        """
        List menu items, optionally filtered.

        Args:
            backend: Appwrite backend handle
            category: Category document id; only items in that category are returned
            query: Free-text query searched in item names

        Both filters apply together when both are given. Blank values are ignored.
        """
        params = GetMenuParams(category=category, query=query)
        try:
            items = MenuRepository(backend).search(params.category, params.query)
        except AppwriteException as exc:
            logger.warning(
                f"menu_query_failed category={params.category} query={params.query!r} error={exc}"
            )
            raise QueryError(
                backend_message(exc), details=backend_details(exc), code="menu_query_failed"
            ) from exc
        logger.debug(f"menu_listed category={params.category} query={params.query!r} count={len(items)}")
        return items

    @staticmethod
    def list_categories(backend: AppwriteBackend) -> List[Category]:
        try:
            return CategoryRepository(backend).list()
        except AppwriteException as exc:
            logger.warning(f"category_query_failed error={exc}")
            raise QueryError(
                backend_message(exc), details=backend_details(exc), code="category_query_failed"
            ) from exc
