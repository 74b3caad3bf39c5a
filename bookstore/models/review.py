"""
Review Model

A customer's rating of a book.

Business Rules:
- One review per customer per book (unique constraint)
- Rating must be 1-5
- Deleted with either the book or the customer
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.book import Book
    from bookstore.models.customer import Customer


class Review(Base):
    """
    Review model for book reviews.

    Attributes:
        id: Primary key
        book_id: Foreign key to books table
        customer_id: Foreign key to customers table
        rating: 1-5 star rating
        review_text: Free text
        review_date: When the review was written
    """

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    book_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("books.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    rating: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
        comment="Rating from 1-5 stars",
    )
    review_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    review_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        index=True,
    )

    book: Mapped["Book"] = relationship("Book", back_populates="reviews")
    customer: Mapped["Customer"] = relationship("Customer", back_populates="reviews")

    __table_args__ = (
        UniqueConstraint("customer_id", "book_id", name="uq_review_customer_book"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_review_rating_range"),
    )

    def __repr__(self) -> str:
        return (
            f"<Review(id={self.id}, book_id={self.book_id}, "
            f"customer_id={self.customer_id}, rating={self.rating})>"
        )
