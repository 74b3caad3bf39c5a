"""
Review Pydantic Schemas

Business Rules:
- Rating must be 1-5 (validated at schema level)
- One review per customer per book (enforced by the review service and
  the database constraint)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreate(BaseModel):
    """Schema for creating a review."""

    book_id: int = Field(..., ge=1)
    customer_id: int = Field(..., ge=1)
    rating: int = Field(
        ...,
        ge=1,
        le=5,
        description="Rating from 1 to 5 stars",
        examples=[4, 5],
    )
    review_text: str | None = Field(
        default=None,
        max_length=5000,
        examples=["A perfect ending to an amazing series!"],
    )


class ReviewResponse(BaseModel):
    """Review as returned to callers."""

    id: int
    book_id: int
    customer_id: int
    rating: int
    review_text: str | None = None
    review_date: datetime

    model_config = ConfigDict(from_attributes=True)
