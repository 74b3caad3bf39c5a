"""
Publishers Router

CRUD endpoints for publishers. Deleting a publisher keeps its books,
which are left without a publisher.
"""

from typing import List

from fastapi import APIRouter, status

from bookstore.dependencies import DbSession
from bookstore.schemas import PublisherCreate, PublisherResponse, PublisherUpdate
from bookstore.services import catalog

router = APIRouter(
    prefix="/publishers",
    tags=["Publishers"],
    responses={
        404: {"description": "Publisher not found"},
    },
)


@router.get("/", response_model=List[PublisherResponse], summary="List publishers")
def list_publishers(db: DbSession) -> List[PublisherResponse]:
    return [PublisherResponse.model_validate(p) for p in catalog.list_publishers(db)]


@router.get("/{publisher_id}", response_model=PublisherResponse, summary="Get a publisher")
def get_publisher(publisher_id: int, db: DbSession) -> PublisherResponse:
    return PublisherResponse.model_validate(catalog.get_publisher(db, publisher_id))


@router.post(
    "/",
    response_model=PublisherResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a publisher",
)
def create_publisher(publisher_data: PublisherCreate, db: DbSession) -> PublisherResponse:
    return PublisherResponse.model_validate(catalog.create_publisher(db, publisher_data))


@router.put("/{publisher_id}", response_model=PublisherResponse, summary="Update a publisher")
def update_publisher(
    publisher_id: int,
    publisher_data: PublisherUpdate,
    db: DbSession,
) -> PublisherResponse:
    publisher = catalog.update_publisher(db, publisher_id, publisher_data)
    return PublisherResponse.model_validate(publisher)


@router.delete(
    "/{publisher_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a publisher",
)
def delete_publisher(publisher_id: int, db: DbSession) -> None:
    catalog.delete_publisher(db, publisher_id)
