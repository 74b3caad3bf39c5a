"""
Catalog Service

Create/read/update/delete for publishers, authors, categories, books
and book-author credits.

Delete policies:
- Publisher / Category: referencing books keep existing with the
  reference set to NULL; child categories become roots
- Author / Book: their book-author credits are deleted with them
- Book: refused while any order line references it. Lines in an active
  order (Pending, Processing, Shipped) give "Cannot delete book that is
  in active orders"; lines only in finished orders still block deletion
  because order lines keep their book.
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from bookstore.database import unit_of_work
from bookstore.exceptions import ConstraintViolation, IntegrityError, NotFound
from bookstore.models import (
    ACTIVE_STATUSES,
    Author,
    Book,
    BookAuthor,
    Category,
    Order,
    OrderItem,
    Publisher,
)
from bookstore.schemas import (
    AuthorCreate,
    AuthorUpdate,
    BookCreate,
    BookUpdate,
    CategoryCreate,
    CategoryUpdate,
    PublisherCreate,
    PublisherUpdate,
)
from bookstore.services.base import (
    flush_or_conflict,
    get_or_raise,
    load_input,
    reject_nulls,
)

logger = logging.getLogger(__name__)

Payload = Mapping[str, Any]


# =============================================================================
# Publishers
# =============================================================================


def create_publisher(db: Session, data: PublisherCreate | Payload) -> Publisher:
    """Create a publisher. Email must be unique, founded_year > 1400."""
    payload = load_input(PublisherCreate, data)
    with unit_of_work(db):
        publisher = Publisher(**payload.model_dump())
        with flush_or_conflict(db, f"Publisher email '{payload.email}' already exists"):
            db.add(publisher)
    logger.info(f"Created publisher {publisher.id} ({publisher.name})")
    return publisher


def get_publisher(db: Session, publisher_id: int) -> Publisher:
    return get_or_raise(db, Publisher, publisher_id)


def list_publishers(db: Session) -> list[Publisher]:
    return list(db.execute(select(Publisher).order_by(Publisher.name)).scalars())


def update_publisher(
    db: Session, publisher_id: int, data: PublisherUpdate | Payload
) -> Publisher:
    payload = load_input(PublisherUpdate, data)
    changes = payload.model_dump(exclude_unset=True)
    reject_nulls("Publisher", changes, ("name",))
    with unit_of_work(db):
        publisher = get_or_raise(db, Publisher, publisher_id)
        with flush_or_conflict(db, f"Publisher email '{payload.email}' already exists"):
            for field, value in changes.items():
                setattr(publisher, field, value)
    return publisher


def delete_publisher(db: Session, publisher_id: int) -> None:
    """Delete a publisher; its books stay with publisher_id set to NULL."""
    with unit_of_work(db):
        publisher = get_or_raise(db, Publisher, publisher_id)
        orphaned = len(publisher.books)
        db.delete(publisher)
    logger.info(
        f"Deleted publisher {publisher_id}, {orphaned} book(s) left without publisher"
    )


# =============================================================================
# Authors
# =============================================================================


def create_author(db: Session, data: AuthorCreate | Payload) -> Author:
    """Create an author. (first_name, last_name, birth_date) must be unique."""
    payload = load_input(AuthorCreate, data)
    with unit_of_work(db):
        author = Author(**payload.model_dump())
        with flush_or_conflict(
            db,
            f"Author '{payload.first_name} {payload.last_name}' born "
            f"{payload.birth_date} already exists",
        ):
            db.add(author)
    logger.info(f"Created author {author.id} ({author.full_name})")
    return author


def get_author(db: Session, author_id: int) -> Author:
    return get_or_raise(db, Author, author_id)


def list_authors(db: Session) -> list[Author]:
    stmt = select(Author).order_by(Author.last_name, Author.first_name)
    return list(db.execute(stmt).scalars())


def update_author(db: Session, author_id: int, data: AuthorUpdate | Payload) -> Author:
    payload = load_input(AuthorUpdate, data)
    changes = payload.model_dump(exclude_unset=True)
    reject_nulls("Author", changes, ("first_name", "last_name"))
    with unit_of_work(db):
        author = get_or_raise(db, Author, author_id)
        with flush_or_conflict(db, "An author with this name and birth date already exists"):
            for field, value in changes.items():
                setattr(author, field, value)
    return author


def delete_author(db: Session, author_id: int) -> None:
    """Delete an author together with their book credits."""
    with unit_of_work(db):
        author = get_or_raise(db, Author, author_id)
        db.delete(author)
    logger.info(f"Deleted author {author_id}")


# =============================================================================
# Categories
# =============================================================================


def category_ancestors(db: Session, category_id: int) -> list[Category]:
    """
    Return the chain of parents of a category, nearest first.

    Stops if a cycle is found in existing data instead of looping.
    """
    category = get_or_raise(db, Category, category_id)
    ancestors: list[Category] = []
    seen = {category.id}
    parent_id = category.parent_category_id
    while parent_id is not None and parent_id not in seen:
        parent = db.get(Category, parent_id)
        if parent is None:
            break
        ancestors.append(parent)
        seen.add(parent.id)
        parent_id = parent.parent_category_id
    return ancestors


def _check_parent(db: Session, category_id: int | None, parent_id: int) -> None:
    """Raise unless ``parent_id`` exists and is not the category or one of its descendants."""
    get_or_raise(db, Category, parent_id)
    if category_id is None:
        return
    if parent_id == category_id or any(
        c.id == category_id for c in category_ancestors(db, parent_id)
    ):
        raise ConstraintViolation(
            f"Category {parent_id} cannot be the parent of category "
            f"{category_id}: the hierarchy would contain a cycle"
        )


def create_category(db: Session, data: CategoryCreate | Payload) -> Category:
    payload = load_input(CategoryCreate, data)
    with unit_of_work(db):
        if payload.parent_category_id is not None:
            _check_parent(db, None, payload.parent_category_id)
        category = Category(**payload.model_dump())
        with flush_or_conflict(db, f"Category '{payload.name}' already exists"):
            db.add(category)
    logger.info(f"Created category {category.id} ({category.name})")
    return category


def get_category(db: Session, category_id: int) -> Category:
    return get_or_raise(db, Category, category_id)


def list_categories(db: Session) -> list[Category]:
    return list(db.execute(select(Category).order_by(Category.name)).scalars())


def update_category(
    db: Session, category_id: int, data: CategoryUpdate | Payload
) -> Category:
    """Update a category. A new parent must not create a cycle."""
    payload = load_input(CategoryUpdate, data)
    changes = payload.model_dump(exclude_unset=True)
    reject_nulls("Category", changes, ("name",))
    with unit_of_work(db):
        category = get_or_raise(db, Category, category_id)
        new_parent = changes.get("parent_category_id")
        if new_parent is not None:
            _check_parent(db, category_id, new_parent)
        with flush_or_conflict(db, f"Category '{payload.name}' already exists"):
            for field, value in changes.items():
                setattr(category, field, value)
    return category


def delete_category(db: Session, category_id: int) -> None:
    """Delete a category; children become roots and books lose the category."""
    with unit_of_work(db):
        category = get_or_raise(db, Category, category_id)
        db.delete(category)
    logger.info(f"Deleted category {category_id}")


# =============================================================================
# Books
# =============================================================================


def _check_references(db: Session, publisher_id: int | None, category_id: int | None) -> None:
    if publisher_id is not None:
        get_or_raise(db, Publisher, publisher_id)
    if category_id is not None:
        get_or_raise(db, Category, category_id)


def create_book(db: Session, data: BookCreate | Payload) -> Book:
    """
    Create a book with optional author credits.

    Raises:
        ConstraintViolation: duplicate ISBN, price < 0, pages <= 0,
            stock_quantity < 0
        NotFound: publisher, category or author does not exist
    """
    payload = load_input(BookCreate, data)
    with unit_of_work(db):
        _check_references(db, payload.publisher_id, payload.category_id)
        book = Book(**payload.model_dump(exclude={"authors"}))
        for link in payload.authors:
            get_or_raise(db, Author, link.author_id)
            book.author_links.append(
                BookAuthor(author_id=link.author_id, role=link.role)
            )
        with flush_or_conflict(db, f"Book with ISBN '{payload.isbn}' already exists"):
            db.add(book)
    logger.info(f"Created book {book.id} ({book.title})")
    return book


def get_book(db: Session, book_id: int) -> Book:
    stmt = (
        select(Book)
        .options(selectinload(Book.author_links))
        .where(Book.id == book_id)
    )
    book = db.execute(stmt).scalar_one_or_none()
    if book is None:
        raise NotFound("Book", book_id)
    return book


def list_books(db: Session) -> list[Book]:
    stmt = select(Book).options(selectinload(Book.author_links)).order_by(Book.title)
    return list(db.execute(stmt).scalars())


def update_book(db: Session, book_id: int, data: BookUpdate | Payload) -> Book:
    """Partially update a book with the same range rules as creation."""
    payload = load_input(BookUpdate, data)
    changes = payload.model_dump(exclude_unset=True)
    reject_nulls("Book", changes, ("isbn", "title", "price", "language", "stock_quantity"))
    with unit_of_work(db):
        book = db.get(Book, book_id, with_for_update=True)
        if book is None:
            raise NotFound("Book", book_id)
        _check_references(db, changes.get("publisher_id"), changes.get("category_id"))
        with flush_or_conflict(db, f"Book with ISBN '{payload.isbn}' already exists"):
            for field, value in changes.items():
                setattr(book, field, value)
    return book


def restock_book(db: Session, book_id: int, quantity: int) -> Book:
    """Add ``quantity`` copies to a book's stock."""
    if quantity <= 0:
        raise ConstraintViolation("Restock quantity must be greater than 0")
    with unit_of_work(db):
        book = db.get(Book, book_id, with_for_update=True)
        if book is None:
            raise NotFound("Book", book_id)
        book.stock_quantity += quantity
    logger.info(f"Restocked book {book_id} by {quantity}, now {book.stock_quantity}")
    return book


def delete_book(db: Session, book_id: int) -> None:
    """
    Delete a book and its author credits and reviews.

    The check and the delete run in one unit of work with the book row
    locked, so no order line can be added in between.

    Raises:
        NotFound: the book does not exist
        IntegrityError: an order line references the book
    """
    with unit_of_work(db):
        book = db.get(Book, book_id, with_for_update=True)
        if book is None:
            raise NotFound("Book", book_id)

        active_lines = db.execute(
            select(func.count(OrderItem.id))
            .join(Order, OrderItem.order_id == Order.id)
            .where(
                OrderItem.book_id == book_id,
                Order.order_status.in_(ACTIVE_STATUSES),
            )
        ).scalar_one()
        if active_lines:
            logger.warning(
                f"Refused to delete book {book_id}: {active_lines} line(s) in active orders"
            )
            raise IntegrityError(
                "Cannot delete book that is in active orders",
                details={"book_id": book_id, "active_order_items": active_lines},
            )

        any_lines = db.execute(
            select(func.count(OrderItem.id)).where(OrderItem.book_id == book_id)
        ).scalar_one()
        if any_lines:
            logger.warning(
                f"Refused to delete book {book_id}: referenced by {any_lines} order line(s)"
            )
            raise IntegrityError(
                "Cannot delete book that has order items",
                details={"book_id": book_id, "order_items": any_lines},
            )

        db.delete(book)
    logger.info(f"Deleted book {book_id}")


# =============================================================================
# Book-author credits
# =============================================================================


def add_book_author(
    db: Session, book_id: int, author_id: int, role: str = "Author"
) -> BookAuthor:
    """Credit an author on a book. A pair can only be credited once."""
    if not role or not role.strip() or len(role) > 50:
        raise ConstraintViolation("Role must be 1-50 characters")
    with unit_of_work(db):
        get_or_raise(db, Book, book_id)
        get_or_raise(db, Author, author_id)
        if db.get(BookAuthor, (book_id, author_id)) is not None:
            raise ConstraintViolation(
                f"Author {author_id} is already credited on book {book_id}",
                conflict=True,
            )
        link = BookAuthor(book_id=book_id, author_id=author_id, role=role.strip())
        db.add(link)
    return link


def remove_book_author(db: Session, book_id: int, author_id: int) -> None:
    with unit_of_work(db):
        link = db.get(BookAuthor, (book_id, author_id))
        if link is None:
            raise NotFound("BookAuthor", (book_id, author_id))
        db.delete(link)
