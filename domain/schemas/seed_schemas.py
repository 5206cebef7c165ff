from dataclasses import dataclass
from pydantic import BaseModel, Field
from typing import List, Optional


class SeedCategory(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""

    model_config = {"frozen": True}


class SeedCustomization(BaseModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    type: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class SeedMenuItem(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    image_url: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    rating: float = Field(..., ge=0, le=5)
    calories: int = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    category_name: str = Field(..., min_length=1)
    customizations: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class SeedData(BaseModel):
    """Reference dataset loaded by the seeding workflow."""

    categories: List[SeedCategory] = Field(default_factory=list)
    customizations: List[SeedCustomization] = Field(default_factory=list)
    menu: List[SeedMenuItem] = Field(default_factory=list)

    model_config = {"frozen": True}


@dataclass(frozen=True)
class DeletionResult:
    """Outcome of one deletion in the wipe phase."""

    target: str
    record_id: str
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SeedReport(BaseModel):
    """Counts of what a seeding run deleted and created."""

    deleted: dict[str, int] = Field(default_factory=dict)
    categories: int = 0
    customizations: int = 0
    menu_items: int = 0
    menu_customizations: int = 0
    uploaded_images: int = 0
    image_fallbacks: List[str] = Field(default_factory=list)
