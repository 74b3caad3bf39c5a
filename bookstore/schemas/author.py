"""
Author Pydantic Schemas

Schemas for authors and for the book-author link (author + role).
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthorBase(BaseModel):
    """
    Base schema with shared author fields.

    (first_name, last_name, birth_date) is unique; that rule is checked
    by the database because it spans several rows.
    """

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        examples=["Agatha", "J.R.R."],
    )
    last_name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        examples=["Christie", "Tolkien"],
    )
    birth_date: date | None = Field(default=None, examples=["1890-09-15"])
    nationality: str | None = Field(default=None, max_length=50)
    biography: str | None = Field(default=None, max_length=5000)

    @field_validator("first_name", "last_name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Reject whitespace-only names and normalize surrounding spaces."""
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class AuthorCreate(AuthorBase):
    """Schema for creating a new author."""
    pass


class AuthorUpdate(BaseModel):
    """Schema for updating an author; all fields optional."""

    first_name: str | None = Field(default=None, min_length=1, max_length=50)
    last_name: str | None = Field(default=None, min_length=1, max_length=50)
    birth_date: date | None = None
    nationality: str | None = Field(default=None, max_length=50)
    biography: str | None = Field(default=None, max_length=5000)

    @field_validator("first_name", "last_name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip() if v is not None else v


class AuthorResponse(AuthorBase):
    """Author as returned to callers."""

    id: int = Field(..., description="Unique identifier")
    date_added: datetime = Field(..., description="When the author was added")

    model_config = ConfigDict(from_attributes=True)


class BookAuthorLink(BaseModel):
    """An author credited on a book, with the contribution role."""

    author_id: int = Field(..., ge=1)
    role: str = Field(
        default="Author",
        min_length=1,
        max_length=50,
        examples=["Author", "Editor", "Translator"],
    )

    model_config = ConfigDict(from_attributes=True)
