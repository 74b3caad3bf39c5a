"""
Publisher Model

Represents a book publisher.

Deleting a publisher never deletes its books: the books stay in the
catalog with ``publisher_id`` set to NULL.
"""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.book import Book


class Publisher(Base):
    """
    Publisher model.

    Table: publishers

    Relationships:
    - books: One-to-Many (nullable on the book side)

    Constraints:
    - email is unique when present
    - founded_year must be later than 1400
    """

    __tablename__ = "publishers"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Publisher name"
    )
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(
        String(100),
        unique=True,
        nullable=True,
        comment="Contact email"
    )
    website: Mapped[str | None] = mapped_column(String(100), nullable=True)
    founded_year: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Year the publisher was founded"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # No delete cascade: on delete the ORM nulls Book.publisher_id, matching
    # the ON DELETE SET NULL clause on the foreign key.
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="publisher",
    )

    __table_args__ = (
        CheckConstraint("founded_year > 1400", name="ck_publishers_founded_year"),
    )

    def __repr__(self) -> str:
        return f"Publisher(id={self.id}, name='{self.name}')"
