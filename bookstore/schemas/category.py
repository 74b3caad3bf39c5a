"""
Category Pydantic Schemas
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryBase(BaseModel):
    """Shared category fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Unique category name",
        examples=["Fiction", "Mystery"],
    )
    description: str | None = Field(default=None, max_length=2000)
    parent_category_id: int | None = Field(
        default=None,
        ge=1,
        description="Parent category, None for a root category",
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""
    pass


class CategoryUpdate(BaseModel):
    """
    Partial category update.

    Setting ``parent_category_id`` explicitly to None detaches the
    category from its parent; omitting it leaves the parent unchanged.
    """

    name: str | None = Field(default=None, min_length=1, max_length=50)
    description: str | None = Field(default=None, max_length=2000)
    parent_category_id: int | None = Field(default=None, ge=1)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip() if v is not None else v


class CategoryResponse(CategoryBase):
    """Category as returned to callers."""

    id: int = Field(..., description="Unique identifier")

    model_config = ConfigDict(from_attributes=True)
