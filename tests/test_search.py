"""
Tests for Book Search

Runs against the sample data set.
"""

from decimal import Decimal

import pytest
from sqlalchemy.orm import Session

from bookstore.exceptions import ConstraintViolation
from bookstore.schemas import BookSearchQuery
from bookstore.services import catalog
from bookstore.services.search import search_books


def titles(results) -> list[str]:
    return [r.title for r in results]


class TestSearchBooks:
    """Tests for search_books."""

    def test_no_filters_returns_everything_by_title(
        self, db_session: Session, sample_catalog
    ):
        results = search_books(db_session)

        assert len(results) == 10
        assert titles(results) == sorted(titles(results))
        assert results[0].title == "A Game of Thrones"

    def test_title_and_min_price(self, db_session: Session, sample_catalog):
        results = search_books(db_session, title="Harry", min_price=Decimal("20"))

        assert titles(results) == ["Harry Potter and the Deathly Hallows"]
        assert results[0].price == Decimal("24.99")
        assert results[0].publisher_name == "Penguin Random House"
        assert results[0].category_name == "Fantasy"

    def test_title_is_case_insensitive(self, db_session: Session, sample_catalog):
        assert titles(search_books(db_session, title="harry POTTER")) == [
            "Harry Potter and the Deathly Hallows"
        ]

    def test_author_name_matches_full_name(self, db_session: Session, sample_catalog):
        assert titles(search_books(db_session, author_name="r.r. tolkien")) == [
            "The Lord of the Rings"
        ]

    def test_category(self, db_session: Session, sample_catalog):
        fantasy = 5
        assert titles(search_books(db_session, category_id=fantasy)) == [
            "A Game of Thrones",
            "Harry Potter and the Deathly Hallows",
            "The Lord of the Rings",
        ]

    def test_price_range_is_inclusive(self, db_session: Session, sample_catalog):
        results = search_books(
            db_session, min_price=Decimal("14.99"), max_price=Decimal("16.99")
        )
        assert titles(results) == [
            "Murder on the Orient Express",
            "Outliers: The Story of Success",
            "The Handmaid's Tale",
        ]

    def test_filters_are_combined(self, db_session: Session, sample_catalog):
        query = BookSearchQuery(author_name="martin", max_price=Decimal("10"))
        assert search_books(db_session, query) == []

    def test_like_wildcards_are_literal(self, db_session: Session, sample_catalog):
        assert search_books(db_session, title="%") == []

    def test_book_without_publisher_or_category(
        self, db_session: Session, sample_catalog
    ):
        catalog.delete_publisher(db_session, 4)

        results = search_books(db_session, title="Lord of the Rings")

        assert len(results) == 1
        assert results[0].publisher_name is None
        assert results[0].category_name == "Fantasy"

    def test_book_with_several_matching_authors_listed_once(
        self, db_session: Session, sample_catalog
    ):
        catalog.add_book_author(db_session, 6, 1, "Foreword")

        results = search_books(db_session, author_name="r", title="Thrones")
        assert titles(results) == ["A Game of Thrones"]

    def test_invalid_filter(self, db_session: Session):
        with pytest.raises(ConstraintViolation):
            search_books(db_session, min_price=Decimal("-1"))
