"""
Categories Router

Categories form a tree through ``parent_category_id``. A parent that
would make the tree cyclic is rejected with 422.
"""

from typing import List

from fastapi import APIRouter, status

from bookstore.dependencies import DbSession
from bookstore.schemas import CategoryCreate, CategoryResponse, CategoryUpdate
from bookstore.services import catalog

router = APIRouter(
    prefix="/categories",
    tags=["Categories"],
    responses={
        404: {"description": "Category not found"},
    },
)


@router.get("/", response_model=List[CategoryResponse], summary="List categories")
def list_categories(db: DbSession) -> List[CategoryResponse]:
    return [CategoryResponse.model_validate(c) for c in catalog.list_categories(db)]


@router.get("/{category_id}", response_model=CategoryResponse, summary="Get a category")
def get_category(category_id: int, db: DbSession) -> CategoryResponse:
    return CategoryResponse.model_validate(catalog.get_category(db, category_id))


@router.get(
    "/{category_id}/ancestors",
    response_model=List[CategoryResponse],
    summary="Get the parent chain of a category",
    description="Parents of the category, nearest first.",
)
def get_category_ancestors(category_id: int, db: DbSession) -> List[CategoryResponse]:
    return [
        CategoryResponse.model_validate(c)
        for c in catalog.category_ancestors(db, category_id)
    ]


@router.post(
    "/",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
)
def create_category(category_data: CategoryCreate, db: DbSession) -> CategoryResponse:
    return CategoryResponse.model_validate(catalog.create_category(db, category_data))


@router.put("/{category_id}", response_model=CategoryResponse, summary="Update a category")
def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    db: DbSession,
) -> CategoryResponse:
    category = catalog.update_category(db, category_id, category_data)
    return CategoryResponse.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category",
)
def delete_category(category_id: int, db: DbSession) -> None:
    catalog.delete_category(db, category_id)
