"""
Pydantic Schemas Package

Request/response models for the service layer and the HTTP binding.

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned to callers
- XxxRow: Report rows
"""

from bookstore.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
    BookAuthorLink,
)
from bookstore.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookSearchQuery,
    BookSummary,
    BookUpdate,
)
from bookstore.schemas.category import (
    CategoryBase,
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
)
from bookstore.schemas.customer import (
    CustomerBase,
    CustomerCreate,
    CustomerLogin,
    CustomerResponse,
    CustomerUpdate,
)
from bookstore.schemas.order import (
    OrderCreate,
    OrderItemCreate,
    OrderItemResponse,
    OrderResponse,
    OrderStatusUpdate,
)
from bookstore.schemas.publisher import (
    PublisherBase,
    PublisherCreate,
    PublisherResponse,
    PublisherUpdate,
)
from bookstore.schemas.report import (
    AuthorBookRow,
    BookDetailRow,
    BookRatingRow,
    CustomerOrderRow,
    InventoryStatusRow,
    StockStatus,
)
from bookstore.schemas.review import ReviewCreate, ReviewResponse

__all__ = [
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorResponse",
    "BookAuthorLink",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookSearchQuery",
    "BookSummary",
    # Category schemas
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    # Customer schemas
    "CustomerBase",
    "CustomerCreate",
    "CustomerLogin",
    "CustomerUpdate",
    "CustomerResponse",
    # Order schemas
    "OrderCreate",
    "OrderItemCreate",
    "OrderItemResponse",
    "OrderResponse",
    "OrderStatusUpdate",
    # Publisher schemas
    "PublisherBase",
    "PublisherCreate",
    "PublisherUpdate",
    "PublisherResponse",
    # Report rows
    "AuthorBookRow",
    "BookDetailRow",
    "BookRatingRow",
    "CustomerOrderRow",
    "InventoryStatusRow",
    "StockStatus",
    # Review schemas
    "ReviewCreate",
    "ReviewResponse",
]
