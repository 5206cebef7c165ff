"""
Catalog repositories - Data access for categories, customizations, menu items
and the links between menu items and customizations.
"""

from typing import List, Optional

from appwrite.query import Query

from repositories.base import BaseDocumentRepository
from domain.schemas import (
    Category,
    CategoryCreate,
    Customization,
    CustomizationCreate,
    MenuItem,
    MenuItemCreate,
    MenuCustomization,
    MenuCustomizationCreate,
)


class CategoryRepository(BaseDocumentRepository[Category]):
    collection_attr = "categories_collection_id"
    model = Category

    def create_category(self, category: CategoryCreate) -> Category:
        return self.create(category.to_document())


class CustomizationRepository(BaseDocumentRepository[Customization]):
    collection_attr = "customizations_collection_id"
    model = Customization

    def create_customization(self, customization: CustomizationCreate) -> Customization:
        return self.create(customization.to_document())


class MenuRepository(BaseDocumentRepository[MenuItem]):
    collection_attr = "menu_collection_id"
    model = MenuItem

    def create_item(self, item: MenuItemCreate) -> MenuItem:
        return self.create(item.to_document())

    def search(
        self, category: Optional[str] = None, query: Optional[str] = None
    ) -> List[MenuItem]:
        """Menu items filtered by category id and/or full-text name search

        Args:
            category: Category document id (equality)
            query: Text searched in the item name

        Returns:
            Items matching every given filter
        """
        queries: List[str] = []
        if category:
            queries.append(Query.equal("categories", category))
        if query:
            queries.append(Query.search("name", query))
        return self.list(queries)


class MenuCustomizationRepository(BaseDocumentRepository[MenuCustomization]):
    collection_attr = "menu_customizations_collection_id"
    model = MenuCustomization

    def link(self, menu_id: str, customization_id: str) -> MenuCustomization:
        data = MenuCustomizationCreate(menu_id=menu_id, customization_id=customization_id)
        return self.create(data.to_document())
