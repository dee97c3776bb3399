"""Category schemas."""

from pydantic import Field

from app.models.category import CategoryType
from app.schemas.base import CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    type: CategoryType


class CategoryUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    type: CategoryType | None = None


class CategoryResponse(CamelModel):
    id: int
    user_id: int
    name: str
    type: str


class CategoryEnvelope(CamelModel):
    category: CategoryResponse


class CategoryListEnvelope(CamelModel):
    categories: list[CategoryResponse]
