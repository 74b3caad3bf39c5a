"""
SQLAlchemy Models Package

Model Relationships:
- Publisher -> Book: One-to-Many, nulled on publisher delete
- Category -> Book: One-to-Many, nulled on category delete
- Category -> Category: parent tree, nulled on parent delete
- Author <-> Book: Many-to-Many through BookAuthor (with role)
- Customer -> Order -> OrderItem: cascading deletes
- Book -> OrderItem: RESTRICT
- Book / Customer -> Review: cascading deletes

Importing this package registers every table on Base.metadata.
"""

from bookstore.models.publisher import Publisher
from bookstore.models.category import Category
from bookstore.models.author import Author, BookAuthor
from bookstore.models.book import Book
from bookstore.models.customer import Customer
from bookstore.models.review import Review
from bookstore.models.order import (
    ACTIVE_STATUSES,
    Order,
    OrderItem,
    OrderStatus,
)

__all__ = [
    "Publisher",
    "Category",
    "Author",
    "BookAuthor",
    "Book",
    "Customer",
    "Review",
    "Order",
    "OrderItem",
    "OrderStatus",
    "ACTIVE_STATUSES",
]
