"""
Reviews Router

Business Rules:
- One review per customer per book (409 on a second review)
- Rating must be 1-5
"""

from typing import List

from fastapi import APIRouter, status

from bookstore.dependencies import DbSession
from bookstore.schemas import ReviewCreate, ReviewResponse
from bookstore.services import reviews

router = APIRouter(
    tags=["Reviews"],
    responses={
        404: {"description": "Review or book not found"},
    },
)


@router.get(
    "/books/{book_id}/reviews",
    response_model=List[ReviewResponse],
    summary="List reviews for a book",
)
def list_book_reviews(book_id: int, db: DbSession) -> List[ReviewResponse]:
    return [
        ReviewResponse.model_validate(r) for r in reviews.list_book_reviews(db, book_id)
    ]


@router.post(
    "/reviews/",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Review a book",
    responses={409: {"description": "Customer already reviewed this book"}},
)
def create_review(review_data: ReviewCreate, db: DbSession) -> ReviewResponse:
    review = reviews.add_review(
        db,
        book_id=review_data.book_id,
        customer_id=review_data.customer_id,
        rating=review_data.rating,
        review_text=review_data.review_text,
    )
    return ReviewResponse.model_validate(review)


@router.get("/reviews/{review_id}", response_model=ReviewResponse, summary="Get a review")
def get_review(review_id: int, db: DbSession) -> ReviewResponse:
    return ReviewResponse.model_validate(reviews.get_review(db, review_id))


@router.delete(
    "/reviews/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a review",
)
def delete_review(review_id: int, db: DbSession) -> None:
    reviews.delete_review(db, review_id)
