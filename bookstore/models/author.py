"""
Author Model

Represents an author and the book-author association.

The association is a full model (not a bare Table) because it carries
the contributor's role: Author, Editor, Translator, ...
"""

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.book import Book


class BookAuthor(Base):
    """
    Book-author association.

    Table: book_authors

    Composite primary key (book_id, author_id). Rows are deleted with
    either side.
    """

    __tablename__ = "book_authors"

    book_id: Mapped[int] = mapped_column(
        ForeignKey("books.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True,
    )
    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True,
    )
    role: Mapped[str] = mapped_column(
        String(50),
        default="Author",
        nullable=False,
        comment="Contribution: Author, Editor, Translator, ..."
    )

    book: Mapped["Book"] = relationship("Book", back_populates="author_links")
    author: Mapped["Author"] = relationship("Author", back_populates="book_links")

    def __repr__(self) -> str:
        return (
            f"BookAuthor(book_id={self.book_id}, author_id={self.author_id}, "
            f"role='{self.role}')"
        )


class Author(Base):
    """
    Author model representing writers in the system.

    Table: authors

    Relationships:
    - book_links: One-to-Many to BookAuthor (deleted with the author)
    - books: read-only view over book_links

    Constraints:
    - (first_name, last_name, birth_date) is unique
    """

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), index=True, nullable=False)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    nationality: Mapped[str | None] = mapped_column(String(50), nullable=True)
    biography: Mapped[str | None] = mapped_column(Text, nullable=True)

    date_added: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    book_links: Mapped[list[BookAuthor]] = relationship(
        BookAuthor,
        back_populates="author",
        cascade="all, delete-orphan",
    )

    books: Mapped[list["Book"]] = relationship(
        "Book",
        secondary="book_authors",
        viewonly=True,
    )

    __table_args__ = (
        UniqueConstraint(
            "first_name", "last_name", "birth_date", name="uq_author_name"
        ),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.full_name}')"
