"""
Reporting Service

Read-only derived views, computed from the current tables on every call:
- book_details: books with publisher and category names
- author_bibliography: (author, book) pairs with the credited role
- customer_order_history: one row per order that has lines
- book_rating_summary: review count and average rating per book
- inventory_status: stock levels with a derived label
"""

from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bookstore.config import get_settings
from bookstore.models import (
    Author,
    Book,
    BookAuthor,
    Category,
    Customer,
    Order,
    OrderItem,
    Publisher,
    Review,
)
from bookstore.schemas import (
    AuthorBookRow,
    BookDetailRow,
    BookRatingRow,
    CustomerOrderRow,
    InventoryStatusRow,
    StockStatus,
)


def stock_status(
    quantity: int,
    low_threshold: int | None = None,
    medium_threshold: int | None = None,
) -> StockStatus:
    """
    Label a stock level.

    With the default thresholds (5 and 20):
        0 -> Out of Stock, 1-4 -> Low Stock, 5-19 -> Medium Stock,
        20+ -> Good Stock
    """
    settings = get_settings()
    low = settings.low_stock_threshold if low_threshold is None else low_threshold
    medium = (
        settings.medium_stock_threshold if medium_threshold is None else medium_threshold
    )
    if quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if quantity < low:
        return StockStatus.LOW_STOCK
    if quantity < medium:
        return StockStatus.MEDIUM_STOCK
    return StockStatus.GOOD_STOCK


def book_details(db: Session, book_id: int | None = None) -> list[BookDetailRow]:
    stmt = (
        select(
            Book.id.label("book_id"),
            Book.isbn,
            Book.title,
            Book.edition,
            Book.publication_date,
            Book.language,
            Book.pages,
            Book.price,
            Book.stock_quantity,
            Publisher.name.label("publisher_name"),
            Category.name.label("category_name"),
            Book.description,
        )
        .outerjoin(Publisher, Book.publisher_id == Publisher.id)
        .outerjoin(Category, Book.category_id == Category.id)
        .order_by(Book.id)
    )
    if book_id is not None:
        stmt = stmt.where(Book.id == book_id)
    return [BookDetailRow(**row._mapping) for row in db.execute(stmt)]


def author_bibliography(db: Session, author_id: int | None = None) -> list[AuthorBookRow]:
    """Credited books per author, by author name then newest book first."""
    stmt = (
        select(
            Author.id.label("author_id"),
            Author.first_name,
            Author.last_name,
            BookAuthor.role,
            Book.id.label("book_id"),
            Book.title,
            Book.publication_date,
            Book.isbn,
        )
        .join(BookAuthor, BookAuthor.author_id == Author.id)
        .join(Book, BookAuthor.book_id == Book.id)
        .order_by(
            Author.last_name,
            Author.first_name,
            Author.id,
            Book.publication_date.desc(),
            Book.id,
        )
    )
    if author_id is not None:
        stmt = stmt.where(Author.id == author_id)
    return [
        AuthorBookRow(
            author_id=row.author_id,
            author_name=f"{row.first_name} {row.last_name}",
            role=row.role,
            book_id=row.book_id,
            title=row.title,
            publication_date=row.publication_date,
            isbn=row.isbn,
        )
        for row in db.execute(stmt)
    ]


def customer_order_history(
    db: Session, customer_id: int | None = None
) -> list[CustomerOrderRow]:
    """
    Orders with their line counts, newest first.

    Orders without any line are not listed.
    """
    stmt = (
        select(
            Customer.id.label("customer_id"),
            Customer.first_name,
            Customer.last_name,
            Order.id.label("order_id"),
            Order.order_date,
            Order.total_amount,
            Order.order_status,
            func.count(OrderItem.id).label("total_items"),
        )
        .join(Order, Order.customer_id == Customer.id)
        .join(OrderItem, OrderItem.order_id == Order.id)
        .group_by(
            Customer.id,
            Customer.first_name,
            Customer.last_name,
            Order.id,
            Order.order_date,
            Order.total_amount,
            Order.order_status,
        )
        .order_by(Order.order_date.desc(), Order.id.desc())
    )
    if customer_id is not None:
        stmt = stmt.where(Customer.id == customer_id)
    return [
        CustomerOrderRow(
            customer_id=row.customer_id,
            customer_name=f"{row.first_name} {row.last_name}",
            order_id=row.order_id,
            order_date=row.order_date,
            total_amount=row.total_amount,
            order_status=row.order_status,
            total_items=row.total_items,
        )
        for row in db.execute(stmt)
    ]


def book_rating_summary(db: Session) -> list[BookRatingRow]:
    """
    Review count and average rating of every book.

    Rows are ordered by the rounded average (highest first), then by
    review count (highest first). Books without reviews are included with
    a count of 0 and no average, after all rated books.
    """
    stmt = (
        select(
            Book.id,
            Book.title,
            func.count(Review.id).label("total_reviews"),
            func.avg(Review.rating).label("average_rating"),
        )
        .outerjoin(Review, Review.book_id == Book.id)
        .group_by(Book.id, Book.title)
        .order_by(Book.id)
    )
    rows = []
    for row in db.execute(stmt):
        # Round to 2 decimal places if we have ratings
        avg_rating = (
            Decimal(str(row.average_rating)).quantize(
                Decimal("0.01"), rounding=ROUND_HALF_UP
            )
            if row.average_rating is not None
            else None
        )
        rows.append(
            BookRatingRow(
                book_id=row.id,
                title=row.title,
                total_reviews=row.total_reviews,
                average_rating=avg_rating,
            )
        )

    # Ordered on the rounded average; equal averages go to the higher count
    rows.sort(
        key=lambda r: (
            r.average_rating is None,
            -(r.average_rating or 0),
            -r.total_reviews,
            r.book_id,
        )
    )
    return rows


def inventory_status(db: Session) -> list[InventoryStatusRow]:
    """Stock level of every book, lowest stock first."""
    settings = get_settings()
    stmt = (
        select(
            Book.id,
            Book.isbn,
            Book.title,
            Publisher.name.label("publisher"),
            Book.stock_quantity,
        )
        .outerjoin(Publisher, Book.publisher_id == Publisher.id)
        .order_by(Book.stock_quantity, Book.id)
    )
    return [
        InventoryStatusRow(
            book_id=row.id,
            isbn=row.isbn,
            title=row.title,
            publisher=row.publisher,
            stock_quantity=row.stock_quantity,
            stock_status=stock_status(
                row.stock_quantity,
                settings.low_stock_threshold,
                settings.medium_stock_threshold,
            ),
        )
        for row in db.execute(stmt)
    ]
