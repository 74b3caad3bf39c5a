"""
Reports Router

Read-only derived views, recomputed on every request.
"""

from typing import List

from fastapi import APIRouter, Query

from bookstore.dependencies import DbSession
from bookstore.schemas import (
    AuthorBookRow,
    BookDetailRow,
    BookRatingRow,
    CustomerOrderRow,
    InventoryStatusRow,
)
from bookstore.services import reports

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/book-details", response_model=List[BookDetailRow], summary="Book details")
def book_details(
    db: DbSession,
    book_id: int | None = Query(default=None, ge=1),
) -> List[BookDetailRow]:
    return reports.book_details(db, book_id)


@router.get(
    "/author-bibliography",
    response_model=List[AuthorBookRow],
    summary="Books per author",
)
def author_bibliography(
    db: DbSession,
    author_id: int | None = Query(default=None, ge=1),
) -> List[AuthorBookRow]:
    return reports.author_bibliography(db, author_id)


@router.get(
    "/customer-orders",
    response_model=List[CustomerOrderRow],
    summary="Customer order history",
)
def customer_order_history(
    db: DbSession,
    customer_id: int | None = Query(default=None, ge=1),
) -> List[CustomerOrderRow]:
    return reports.customer_order_history(db, customer_id)


@router.get("/book-ratings", response_model=List[BookRatingRow], summary="Book ratings")
def book_rating_summary(db: DbSession) -> List[BookRatingRow]:
    return reports.book_rating_summary(db)


@router.get(
    "/inventory",
    response_model=List[InventoryStatusRow],
    summary="Inventory status",
)
def inventory_status(db: DbSession) -> List[InventoryStatusRow]:
    return reports.inventory_status(db)
