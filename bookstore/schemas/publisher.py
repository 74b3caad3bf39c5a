"""
Publisher Pydantic Schemas
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PublisherBase(BaseModel):
    """Shared publisher fields with validation."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Publisher name",
        examples=["Penguin Random House", "HarperCollins"],
    )
    address: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=20)
    email: str | None = Field(default=None, max_length=100)
    website: str | None = Field(default=None, max_length=100)
    founded_year: int | None = Field(
        default=None,
        gt=1400,
        description="Year the publisher was founded (after 1400)",
        examples=[1925],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class PublisherCreate(PublisherBase):
    """Schema for creating a publisher."""
    pass


class PublisherUpdate(BaseModel):
    """All fields optional for partial updates."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    address: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=20)
    email: str | None = Field(default=None, max_length=100)
    website: str | None = Field(default=None, max_length=100)
    founded_year: int | None = Field(default=None, gt=1400)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip() if v is not None else v


class PublisherResponse(PublisherBase):
    """Publisher as returned to callers."""

    id: int = Field(..., description="Unique identifier")

    model_config = ConfigDict(from_attributes=True)
