"""
Category Model

Book categories form a tree through ``parent_category_id``.

Deleting a parent never deletes its children; their parent link is
set to NULL and they become roots.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.book import Book


class Category(Base):
    """
    Category model.

    Table: categories

    Relationships:
    - parent / children: self-referencing tree
    - books: One-to-Many (nullable on the book side)

    Example:
        fiction = Category(name="Fiction")
        mystery = Category(name="Mystery", parent=fiction)
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        comment="Category name (e.g., 'Fiction', 'Mystery')"
    )
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    parent_category_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
        index=True,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    parent: Mapped[Optional["Category"]] = relationship(
        "Category",
        remote_side=[id],
        back_populates="children",
    )
    children: Mapped[list["Category"]] = relationship(
        "Category",
        back_populates="parent",
    )

    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="category",
    )

    def __repr__(self) -> str:
        return f"Category(id={self.id}, name='{self.name}')"
