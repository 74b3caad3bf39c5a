"""
Book Search Service

Filtered catalog search. Every filter is optional; the ones given are
combined with AND. Text filters are case-insensitive substring matches:
- title: against the book title
- author_name: against "first_name last_name" of any credited author

Results carry the publisher and category names (NULL when the book has
none) and are ordered by title. A book credited to several matching
authors appears once.
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bookstore.models import Author, Book, BookAuthor, Category, Publisher
from bookstore.schemas import BookSearchQuery, BookSummary
from bookstore.services.base import load_input

logger = logging.getLogger(__name__)


def search_books(
    db: Session,
    query: BookSearchQuery | Mapping[str, Any] | None = None,
    **filters: Any,
) -> list[BookSummary]:
    """
    Search books.

    Example:
        >>> search_books(db, title="Harry", min_price=20)
        [BookSummary(title='Harry Potter and the Deathly Hallows', ...)]

    Raises:
        ConstraintViolation: a filter has an invalid value
    """
    params = load_input(BookSearchQuery, query, **filters)

    stmt = (
        select(
            Book.id.label("book_id"),
            Book.isbn,
            Book.title,
            Book.publication_date,
            Book.price,
            Book.stock_quantity,
            Publisher.name.label("publisher_name"),
            Category.name.label("category_name"),
        )
        .outerjoin(Publisher, Book.publisher_id == Publisher.id)
        .outerjoin(Category, Book.category_id == Category.id)
    )
    filter_conditions = []

    if params.title:
        filter_conditions.append(
            func.lower(Book.title).contains(params.title.lower(), autoescape=True)
        )

    if params.author_name:
        full_name = func.lower(Author.first_name + " " + Author.last_name)
        author_book_ids = (
            select(BookAuthor.book_id)
            .join(Author, BookAuthor.author_id == Author.id)
            .where(full_name.contains(params.author_name.lower(), autoescape=True))
        )
        filter_conditions.append(Book.id.in_(author_book_ids))

    if params.category_id is not None:
        filter_conditions.append(Book.category_id == params.category_id)

    if params.min_price is not None:
        filter_conditions.append(Book.price >= params.min_price)
    if params.max_price is not None:
        filter_conditions.append(Book.price <= params.max_price)

    if filter_conditions:
        stmt = stmt.where(*filter_conditions)

    stmt = stmt.order_by(Book.title, Book.id)
    results = [BookSummary(**row._mapping) for row in db.execute(stmt)]
    logger.debug(f"Book search {params.model_dump(exclude_none=True)}: {len(results)} hit(s)")
    return results
