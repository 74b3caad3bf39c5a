"""
Authors Router

CRUD endpoints for authors. Deleting an author removes their book
credits; the books themselves stay.
"""

from typing import List

from fastapi import APIRouter, status

from bookstore.dependencies import DbSession
from bookstore.schemas import AuthorBookRow, AuthorCreate, AuthorResponse, AuthorUpdate
from bookstore.services import catalog, reports

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


@router.get(
    "/",
    response_model=List[AuthorResponse],
    summary="List all authors",
    description="Get a list of all authors ordered by last name.",
)
def list_authors(db: DbSession) -> List[AuthorResponse]:
    return [AuthorResponse.model_validate(a) for a in catalog.list_authors(db)]


@router.get("/{author_id}", response_model=AuthorResponse, summary="Get an author by ID")
def get_author(author_id: int, db: DbSession) -> AuthorResponse:
    return AuthorResponse.model_validate(catalog.get_author(db, author_id))


@router.get(
    "/{author_id}/books",
    response_model=List[AuthorBookRow],
    summary="Get books by author",
    description="Books credited to the author, newest first, with the credited role.",
)
def get_author_books(author_id: int, db: DbSession) -> List[AuthorBookRow]:
    # First verify the author exists
    catalog.get_author(db, author_id)
    return reports.author_bibliography(db, author_id)


@router.post(
    "/",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
)
def create_author(author_data: AuthorCreate, db: DbSession) -> AuthorResponse:
    return AuthorResponse.model_validate(catalog.create_author(db, author_data))


@router.put("/{author_id}", response_model=AuthorResponse, summary="Update an author")
def update_author(
    author_id: int,
    author_data: AuthorUpdate,
    db: DbSession,
) -> AuthorResponse:
    return AuthorResponse.model_validate(catalog.update_author(db, author_id, author_data))


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
)
def delete_author(author_id: int, db: DbSession) -> None:
    catalog.delete_author(db, author_id)
