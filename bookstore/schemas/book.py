"""
Book Pydantic Schemas

Handles:
- ISBN validation
- Price / pages / stock ranges
- Author credits on creation
- The search options struct and the search result row
"""

import re
from datetime import date, datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from bookstore.schemas.author import BookAuthorLink


def _clean_isbn(v: str) -> str:
    """
    Validate an ISBN-10 or ISBN-13 and return it without separators.

    ISBN-10: 9 digits + (digit or X)
    ISBN-13: 13 digits
    """
    cleaned = re.sub(r"[-\s]", "", v)

    if len(cleaned) == 10:
        if not re.match(r"^\d{9}[\dX]$", cleaned):
            raise ValueError(
                "Invalid ISBN-10 format. Must be 10 characters: "
                "9 digits followed by a digit or 'X'"
            )
    elif len(cleaned) == 13:
        if not cleaned.isdigit():
            raise ValueError("Invalid ISBN-13 format. Must be exactly 13 digits")
    else:
        raise ValueError(
            "ISBN must be either 10 or 13 characters (excluding hyphens)"
        )
    return cleaned


class BookBase(BaseModel):
    """
    Base schema with shared book fields.

    Contains validation for:
    - ISBN format (ISBN-10 or ISBN-13)
    - Price (>= 0)
    - Pages (> 0)
    - Stock quantity (>= 0)
    """

    isbn: str = Field(
        ...,
        max_length=20,
        description="ISBN-10 or ISBN-13",
        examples=["978-0545010221"],
    )
    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        examples=["Harry Potter and the Deathly Hallows"],
    )
    publication_date: date | None = Field(default=None, examples=["2007-07-21"])
    edition: str | None = Field(default=None, max_length=20, examples=["1st"])
    pages: int | None = Field(default=None, gt=0, examples=[607])
    language: str = Field(default="English", min_length=1, max_length=50)
    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="List price",
        examples=["24.99"],
    )
    description: str | None = Field(default=None, max_length=5000)
    cover_image: str | None = Field(default=None, max_length=255)
    stock_quantity: int = Field(
        default=0,
        ge=0,
        description="Copies in stock",
    )
    publisher_id: int | None = Field(default=None, ge=1)
    category_id: int | None = Field(default=None, ge=1)

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, v: str) -> str:
        return _clean_isbn(v)

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example:
    {
        "isbn": "9780545010221",
        "title": "Harry Potter and the Deathly Hallows",
        "price": "24.99",
        "pages": 607,
        "stock_quantity": 150,
        "authors": [{"author_id": 1, "role": "Author"}]
    }
    """

    authors: list[BookAuthorLink] = Field(
        default_factory=list,
        description="Authors to credit on this book",
    )


class BookUpdate(BaseModel):
    """
    Schema for updating an existing book. All fields optional.

    ``stock_quantity`` may be set here (inventory correction) but never
    below zero.
    """

    isbn: str | None = Field(default=None, max_length=20)
    title: str | None = Field(default=None, min_length=1, max_length=255)
    publication_date: date | None = None
    edition: str | None = Field(default=None, max_length=20)
    pages: int | None = Field(default=None, gt=0)
    language: str | None = Field(default=None, min_length=1, max_length=50)
    price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    description: str | None = Field(default=None, max_length=5000)
    cover_image: str | None = Field(default=None, max_length=255)
    stock_quantity: int | None = Field(default=None, ge=0)
    publisher_id: int | None = Field(default=None, ge=1)
    category_id: int | None = Field(default=None, ge=1)

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, v: str | None) -> str | None:
        return _clean_isbn(v) if v is not None else v

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip() if v is not None else v


class BookResponse(BookBase):
    """Book as returned to callers, with its author credits."""

    id: int = Field(..., description="Unique identifier")
    created_at: datetime = Field(..., description="When the book was added")
    authors: list[BookAuthorLink] = Field(
        default_factory=list,
        validation_alias=AliasChoices("author_links", "authors"),
    )

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# Search
# =============================================================================


class BookSearchQuery(BaseModel):
    """
    Search options. Every filter is optional; absent filters are not applied
    and the ones present are combined with AND.

    - title: substring of the title (case-insensitive)
    - author_name: substring of "first last" of any credited author
    - category_id: exact category
    - min_price / max_price: inclusive price range
    """

    title: str | None = Field(default=None, min_length=1, max_length=255)
    author_name: str | None = Field(default=None, min_length=1, max_length=100)
    category_id: int | None = Field(default=None, ge=1)
    min_price: Decimal | None = Field(default=None, ge=0)
    max_price: Decimal | None = Field(default=None, ge=0)


class BookSummary(BaseModel):
    """One row of a book search result."""

    book_id: int
    isbn: str
    title: str
    publication_date: date | None = None
    price: Decimal
    stock_quantity: int
    publisher_name: str | None = None
    category_name: str | None = None

    model_config = ConfigDict(from_attributes=True)
