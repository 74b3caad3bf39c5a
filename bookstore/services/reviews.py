"""
Review Service

Business Rules:
- Rating must be 1-5
- One review per customer per book
- Book and customer must exist
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookstore.database import unit_of_work
from bookstore.exceptions import ConstraintViolation
from bookstore.models import Book, Customer, Review
from bookstore.schemas import ReviewCreate
from bookstore.services.base import flush_or_conflict, get_or_raise, load_input

logger = logging.getLogger(__name__)


def add_review(
    db: Session,
    book_id: int,
    customer_id: int,
    rating: int,
    review_text: str | None = None,
) -> Review:
    """
    Record a customer's review of a book.

    Raises:
        ConstraintViolation: rating outside 1-5, or the customer already
            reviewed this book (conflict=True)
        NotFound: the book or customer does not exist
    """
    payload = load_input(
        ReviewCreate,
        book_id=book_id,
        customer_id=customer_id,
        rating=rating,
        review_text=review_text,
    )
    with unit_of_work(db):
        get_or_raise(db, Book, payload.book_id)
        get_or_raise(db, Customer, payload.customer_id)

        existing = db.execute(
            select(Review.id).where(
                Review.book_id == payload.book_id,
                Review.customer_id == payload.customer_id,
            )
        ).first()
        if existing is not None:
            raise ConstraintViolation(
                "You have already reviewed this book",
                details={"review_id": existing.id},
                conflict=True,
            )

        review = Review(**payload.model_dump())
        with flush_or_conflict(db, "You have already reviewed this book"):
            db.add(review)

    logger.info(
        f"Customer {customer_id} rated book {book_id} {payload.rating}/5 (review {review.id})"
    )
    return review


def get_review(db: Session, review_id: int) -> Review:
    return get_or_raise(db, Review, review_id)


def list_book_reviews(db: Session, book_id: int) -> list[Review]:
    """Reviews of a book, newest first."""
    get_or_raise(db, Book, book_id)
    stmt = (
        select(Review)
        .where(Review.book_id == book_id)
        .order_by(Review.review_date.desc(), Review.id.desc())
    )
    return list(db.execute(stmt).scalars())


def delete_review(db: Session, review_id: int) -> None:
    with unit_of_work(db):
        review = get_or_raise(db, Review, review_id)
        db.delete(review)
