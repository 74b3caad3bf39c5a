"""
Books Router

Catalog endpoints for books and their author credits, plus the filtered
search.

Endpoints:
- GET /books/ - List books
- GET /books/search - Search by title, author, category and price
- GET /books/{book_id} - Get a book with its credits
- POST /books/ - Create a book
- PUT /books/{book_id} - Update a book
- POST /books/{book_id}/restock - Add copies to stock
- DELETE /books/{book_id} - Delete a book (refused while order lines reference it)
- POST /books/{book_id}/authors - Credit an author
- DELETE /books/{book_id}/authors/{author_id} - Remove a credit
"""

from decimal import Decimal
from typing import List

from fastapi import APIRouter, Query, status

from bookstore.dependencies import DbSession
from bookstore.schemas import (
    BookAuthorLink,
    BookCreate,
    BookResponse,
    BookSearchQuery,
    BookSummary,
    BookUpdate,
)
from bookstore.services import catalog
from bookstore.services.search import search_books

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


@router.get("/", response_model=List[BookResponse], summary="List all books")
def list_books(db: DbSession) -> List[BookResponse]:
    return [BookResponse.model_validate(b) for b in catalog.list_books(db)]


# Must be declared before /{book_id} so "search" is not parsed as an id
@router.get(
    "/search",
    response_model=List[BookSummary],
    summary="Search books",
    description=(
        "All filters are optional and combined with AND. Title and author "
        "name match case-insensitive substrings."
    ),
)
def search(
    db: DbSession,
    title: str | None = Query(default=None, min_length=1, max_length=255),
    author_name: str | None = Query(default=None, min_length=1, max_length=100),
    category_id: int | None = Query(default=None, ge=1),
    min_price: Decimal | None = Query(default=None, ge=0),
    max_price: Decimal | None = Query(default=None, ge=0),
) -> List[BookSummary]:
    query = BookSearchQuery(
        title=title,
        author_name=author_name,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
    )
    return search_books(db, query)


@router.get("/{book_id}", response_model=BookResponse, summary="Get a book by ID")
def get_book(book_id: int, db: DbSession) -> BookResponse:
    return BookResponse.model_validate(catalog.get_book(db, book_id))


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
)
def create_book(book_data: BookCreate, db: DbSession) -> BookResponse:
    book = catalog.create_book(db, book_data)
    return BookResponse.model_validate(catalog.get_book(db, book.id))


@router.put("/{book_id}", response_model=BookResponse, summary="Update a book")
def update_book(book_id: int, book_data: BookUpdate, db: DbSession) -> BookResponse:
    catalog.update_book(db, book_id, book_data)
    return BookResponse.model_validate(catalog.get_book(db, book_id))


@router.post("/{book_id}/restock", response_model=BookResponse, summary="Restock a book")
def restock_book(
    book_id: int,
    db: DbSession,
    quantity: int = Query(..., gt=0, description="Copies to add"),
) -> BookResponse:
    catalog.restock_book(db, book_id, quantity)
    return BookResponse.model_validate(catalog.get_book(db, book_id))


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    responses={409: {"description": "Book is referenced by order lines"}},
)
def delete_book(book_id: int, db: DbSession) -> None:
    catalog.delete_book(db, book_id)


@router.post(
    "/{book_id}/authors",
    response_model=BookAuthorLink,
    status_code=status.HTTP_201_CREATED,
    summary="Credit an author on a book",
)
def add_book_author(book_id: int, link: BookAuthorLink, db: DbSession) -> BookAuthorLink:
    credit = catalog.add_book_author(db, book_id, link.author_id, link.role)
    return BookAuthorLink.model_validate(credit)


@router.delete(
    "/{book_id}/authors/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove an author credit",
)
def remove_book_author(book_id: int, author_id: int, db: DbSession) -> None:
    catalog.remove_book_author(db, book_id, author_id)
