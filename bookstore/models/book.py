"""
Book Model

The central model of the catalog.

Referenced by:
- book_authors (deleted with the book)
- reviews (deleted with the book)
- order_items (RESTRICT: a book with order lines cannot be deleted)

``stock_quantity`` is only decremented by the order workflow when an
order line is recorded; it can never go below zero.
"""

from datetime import UTC, date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.author import Author, BookAuthor
    from bookstore.models.category import Category
    from bookstore.models.order import OrderItem
    from bookstore.models.publisher import Publisher
    from bookstore.models.review import Review


class Book(Base):
    """
    Book model representing titles in inventory.

    Table: books

    Constraints:
    - isbn: unique
    - price >= 0
    - pages > 0
    - stock_quantity >= 0

    Example:
        book = Book(
            isbn="9780545010221",
            title="Harry Potter and the Deathly Hallows",
            price=Decimal("24.99"),
            pages=607,
            stock_quantity=150,
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    isbn: Mapped[str] = mapped_column(
        String(20),
        unique=True,
        index=True,
        nullable=False,
        comment="International Standard Book Number"
    )
    title: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
    )
    publication_date: Mapped[date | None] = mapped_column(
        Date,
        index=True,
        nullable=True,
    )
    edition: Mapped[str | None] = mapped_column(String(20), nullable=True)
    pages: Mapped[int | None] = mapped_column(Integer, nullable=True)
    language: Mapped[str] = mapped_column(
        String(50),
        default="English",
        nullable=False,
    )

    # Numeric(10, 2) with Decimal on the Python side: no float rounding
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        index=True,
        nullable=False,
        comment="Current list price"
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image: Mapped[str | None] = mapped_column(String(255), nullable=True)
    stock_quantity: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
        comment="Copies available for sale"
    )

    # -------------------------------------------------------------------------
    # Foreign Keys
    # -------------------------------------------------------------------------
    publisher_id: Mapped[int | None] = mapped_column(
        ForeignKey("publishers.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
        index=True,
    )
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    publisher: Mapped["Publisher | None"] = relationship(
        "Publisher",
        back_populates="books",
    )
    category: Mapped["Category | None"] = relationship(
        "Category",
        back_populates="books",
    )

    author_links: Mapped[list["BookAuthor"]] = relationship(
        "BookAuthor",
        back_populates="book",
        cascade="all, delete-orphan",
    )
    authors: Mapped[list["Author"]] = relationship(
        "Author",
        secondary="book_authors",
        viewonly=True,
    )

    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="book",
        cascade="all, delete-orphan",
    )

    # passive_deletes="all": the ORM must never null order_items.book_id;
    # deletion is guarded in the catalog service and by the RESTRICT key.
    order_items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="book",
        passive_deletes="all",
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_books_price"),
        CheckConstraint("pages > 0", name="ck_books_pages"),
        CheckConstraint("stock_quantity >= 0", name="ck_books_stock"),
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
