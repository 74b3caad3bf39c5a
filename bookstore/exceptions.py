"""
Domain Exceptions

Errors raised by the service layer. All of them are synchronous and
surface directly to the caller; nothing is retried inside the core.

- ConstraintViolation: bad input (range, uniqueness, required fields)
- InvalidStatusTransition: order status change outside the allowed graph
- IntegrityError: a cross-entity rule would be broken
- InsufficientStock: not enough copies to record an order line
- NotFound: a referenced id does not exist
"""

from typing import Any


class BookstoreError(Exception):
    """Base class for all bookstore domain errors."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ConstraintViolation(BookstoreError):
    """Raised when input breaks a uniqueness, range or required-field rule."""

    def __init__(
        self,
        message: str,
        details: Any = None,
        conflict: bool = False,
    ) -> None:
        super().__init__(message, details)
        # True for uniqueness clashes, which the HTTP layer reports as 409
        self.conflict = conflict


class InvalidStatusTransition(ConstraintViolation):
    """Raised when an order cannot move from its current status to the new one."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            f"Cannot change order status from {current} to {requested}",
            details={"current": current, "requested": requested},
        )
        self.current = current
        self.requested = requested


class IntegrityError(BookstoreError):
    """Raised when an operation would break a rule spanning several entities."""

    pass


class InsufficientStock(BookstoreError):
    """Raised when an order line asks for more copies than are in stock."""

    def __init__(self, book_id: int, requested: int, available: int) -> None:
        super().__init__(
            "Not enough items in stock",
            details={
                "book_id": book_id,
                "requested": requested,
                "available": available,
            },
        )
        self.book_id = book_id
        self.requested = requested
        self.available = available


class NotFound(BookstoreError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id
