from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional

from domain.enums import CustomizationType


def _reference_id(v: Any) -> Any:
    # Relationship attributes come back expanded as the related document
    if isinstance(v, dict):
        return v.get("$id")
    return v


class GetMenuParams(BaseModel):
    """Filters of a menu listing. Blank values mean no filter."""

    category: Optional[str] = None
    query: Optional[str] = None

    @field_validator("category", "query")
    def blank_to_none(cls, v):
        if v is None:
            return None
        v = v.strip()
        return v or None


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""

    def to_document(self) -> dict:
        return self.model_dump()


class Category(BaseModel):
    id: str = Field(alias="$id")
    name: str
    description: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "ignore"}


class CustomizationCreate(BaseModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    type: str = Field(..., min_length=1)

    @field_validator("type")
    def normalize_type(cls, v):
        return v.strip().lower()

    def to_document(self) -> dict:
        return self.model_dump()


class Customization(BaseModel):
    id: str = Field(alias="$id")
    name: str
    price: float
    type: str

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @property
    def kind(self) -> Optional[CustomizationType]:
        """Known tag of this customization, None for other tags"""
        return CustomizationType.parse(self.type)


class MenuItemCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    image_url: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    rating: float = Field(..., ge=0, le=5)
    calories: int = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    category_id: str = Field(..., min_length=1, alias="categories")

    model_config = {"populate_by_name": True}

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)


class MenuItem(BaseModel):
    id: str = Field(alias="$id")
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: float
    rating: Optional[float] = None
    calories: Optional[int] = None
    protein: Optional[float] = None
    category_id: Optional[str] = Field(default=None, alias="categories")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("category_id", mode="before")
    def category_reference(cls, v):
        return _reference_id(v)


class MenuCustomizationCreate(BaseModel):
    menu_id: str = Field(..., min_length=1, alias="menu")
    customization_id: str = Field(..., min_length=1, alias="customizations")

    model_config = {"populate_by_name": True}

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)


class MenuCustomization(BaseModel):
    id: str = Field(alias="$id")
    menu_id: Optional[str] = Field(default=None, alias="menu")
    customization_id: Optional[str] = Field(default=None, alias="customizations")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("menu_id", "customization_id", mode="before")
    def link_reference(cls, v):
        return _reference_id(v)


class StoredFile(BaseModel):
    id: str = Field(alias="$id")
    bucket_id: Optional[str] = Field(default=None, alias="bucketId")
    name: Optional[str] = None
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    size: Optional[int] = Field(default=None, alias="sizeOriginal")

    model_config = {"populate_by_name": True, "extra": "ignore"}
