"""
Report Row Schemas

Read-only rows produced by ``bookstore.services.reports``. They are
computed on demand and never stored.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel

from bookstore.models.order import OrderStatus


class StockStatus(str, Enum):
    OUT_OF_STOCK = "Out of Stock"
    LOW_STOCK = "Low Stock"
    MEDIUM_STOCK = "Medium Stock"
    GOOD_STOCK = "Good Stock"


class BookDetailRow(BaseModel):
    """Book joined with its publisher and category names."""

    book_id: int
    isbn: str
    title: str
    edition: str | None = None
    publication_date: date | None = None
    language: str
    pages: int | None = None
    price: Decimal
    stock_quantity: int
    publisher_name: str | None = None
    category_name: str | None = None
    description: str | None = None


class AuthorBookRow(BaseModel):
    """One (author, book) pair of an author bibliography."""

    author_id: int
    author_name: str
    role: str
    book_id: int
    title: str
    publication_date: date | None = None
    isbn: str


class CustomerOrderRow(BaseModel):
    """One order of a customer's order history."""

    customer_id: int
    customer_name: str
    order_id: int
    order_date: datetime
    total_amount: Decimal
    order_status: OrderStatus
    total_items: int


class BookRatingRow(BaseModel):
    """Review count and average rating of one book."""

    book_id: int
    title: str
    total_reviews: int
    average_rating: Decimal | None = None


class InventoryStatusRow(BaseModel):
    """Stock level of one book with its derived label."""

    book_id: int
    isbn: str
    title: str
    publisher: str | None = None
    stock_quantity: int
    stock_status: StockStatus
