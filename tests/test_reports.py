"""
Tests for the Reporting Views

Runs against the sample data set. After loading it, stock levels are the
initial ones minus the copies taken by the sample orders.
"""

from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy.orm import Session

from bookstore.models import Customer, OrderStatus, Review
from bookstore.schemas import StockStatus
from bookstore.services import catalog, orders, reports, reviews
from bookstore.services.reports import stock_status


class TestStockStatus:
    """Tests for the stock level label."""

    @pytest.mark.parametrize(
        "quantity,expected",
        [
            (0, StockStatus.OUT_OF_STOCK),
            (1, StockStatus.LOW_STOCK),
            (4, StockStatus.LOW_STOCK),
            (5, StockStatus.MEDIUM_STOCK),
            (19, StockStatus.MEDIUM_STOCK),
            (20, StockStatus.GOOD_STOCK),
            (150, StockStatus.GOOD_STOCK),
        ],
    )
    def test_default_thresholds(self, quantity, expected):
        assert stock_status(quantity) == expected

    def test_custom_thresholds(self):
        assert stock_status(8, low_threshold=10, medium_threshold=50) == StockStatus.LOW_STOCK


class TestBookDetails:
    """Tests for book_details."""

    def test_all_books(self, db_session: Session, sample_catalog):
        rows = reports.book_details(db_session)

        assert [r.book_id for r in rows] == list(range(1, 11))
        assert rows[0].publisher_name == "Penguin Random House"
        assert rows[0].category_name == "Fantasy"
        assert rows[0].stock_quantity == 149

    def test_single_book(self, db_session: Session, sample_catalog):
        rows = reports.book_details(db_session, 4)

        assert len(rows) == 1
        assert rows[0].title == "Becoming"
        assert rows[0].price == Decimal("32.50")


class TestAuthorBibliography:
    """Tests for author_bibliography."""

    def test_single_author(self, db_session: Session, sample_catalog):
        rows = reports.author_bibliography(db_session, 1)

        assert len(rows) == 1
        assert rows[0].author_name == "J.K. Rowling"
        assert rows[0].role == "Author"
        assert rows[0].title == "Harry Potter and the Deathly Hallows"

    def test_ordered_by_author_name(self, db_session: Session, sample_catalog):
        rows = reports.author_bibliography(db_session)

        assert len(rows) == 10
        assert rows[0].author_name == "Margaret Atwood"
        assert rows[-1].author_name == "J.R.R. Tolkien"

    def test_newest_book_first(self, db_session: Session, sample_catalog):
        catalog.add_book_author(db_session, 8, 1, "Editor")

        rows = reports.author_bibliography(db_session, 1)

        assert [(r.book_id, r.role) for r in rows] == [(1, "Author"), (8, "Editor")]


class TestCustomerOrderHistory:
    """Tests for customer_order_history."""

    def test_newest_order_first(self, db_session: Session, sample_catalog):
        rows = reports.customer_order_history(db_session)

        assert [r.order_id for r in rows] == [5, 4, 3, 2, 1]
        assert rows[0].customer_name == "Michael Jones"
        assert rows[0].order_status == OrderStatus.PENDING
        assert rows[0].order_date == datetime(2023, 5, 12, 11, 0)
        assert all(r.total_items == 2 for r in rows)

    def test_single_customer(self, db_session: Session, sample_catalog):
        rows = reports.customer_order_history(db_session, 2)

        assert len(rows) == 1
        assert rows[0].total_amount == Decimal("75.86")
        assert rows[0].order_status == OrderStatus.SHIPPED

    def test_orders_without_lines_are_not_listed(
        self, db_session: Session, sample_catalog
    ):
        orders.place_order(
            db_session,
            customer_id=1,
            shipping_address="123 Main St",
            billing_address="123 Main St",
            payment_method="Credit Card",
        )

        assert [r.order_id for r in reports.customer_order_history(db_session, 1)] == [1]


class TestBookRatingSummary:
    """Tests for book_rating_summary."""

    def test_every_book_listed(self, db_session: Session, sample_catalog):
        rows = reports.book_rating_summary(db_session)

        assert len(rows) == 10
        assert rows[0].average_rating == Decimal("5.00")
        assert rows[-1].book_id == 8
        assert rows[-1].total_reviews == 0
        assert rows[-1].average_rating is None

    def test_average_is_rounded(self, db_session: Session, sample_catalog):
        reviews.add_review(db_session, 1, 2, 4)
        reviews.add_review(db_session, 1, 3, 4)

        row = next(r for r in reports.book_rating_summary(db_session) if r.book_id == 1)
        # (5 + 4 + 4) / 3
        assert row.total_reviews == 3
        assert row.average_rating == Decimal("4.33")

    def test_equal_rounded_averages_ordered_by_count(self, db_session: Session):
        few = catalog.create_book(
            db_session, {"isbn": "9780141439518", "title": "Few", "price": "9.99"}
        )
        many = catalog.create_book(
            db_session, {"isbn": "9780316017923", "title": "Many", "price": "9.99"}
        )
        readers = [
            Customer(
                first_name="Reader",
                last_name=str(n),
                email=f"reader{n}@example.com",
                password_hash="x",
            )
            for n in range(40)
        ]
        db_session.add_all(readers)
        db_session.flush()
        # 13 / 3 = 4.333... and 173 / 40 = 4.325 both show as 4.33
        few_ratings = [4, 4, 5]
        many_ratings = [5] * 13 + [4] * 27
        db_session.add_all(
            [
                Review(book_id=few.id, customer_id=readers[n].id, rating=rating)
                for n, rating in enumerate(few_ratings)
            ]
            + [
                Review(book_id=many.id, customer_id=readers[n].id, rating=rating)
                for n, rating in enumerate(many_ratings)
            ]
        )
        db_session.commit()

        rows = reports.book_rating_summary(db_session)

        assert [(r.book_id, r.average_rating, r.total_reviews) for r in rows] == [
            (many.id, Decimal("4.33"), 40),
            (few.id, Decimal("4.33"), 3),
        ]


class TestInventoryStatus:
    """Tests for inventory_status."""

    def test_lowest_stock_first(self, db_session: Session, sample_catalog):
        rows = reports.inventory_status(db_session)

        assert len(rows) == 10
        assert rows[0].title == "Pride and Prejudice"
        assert rows[0].stock_quantity == 39
        assert rows[0].stock_status == StockStatus.GOOD_STOCK

    def test_labels_follow_stock(self, db_session: Session, sample_catalog):
        catalog.update_book(db_session, 8, {"stock_quantity": 0})
        catalog.update_book(db_session, 9, {"stock_quantity": 3})

        rows = {r.book_id: r for r in reports.inventory_status(db_session)}

        assert rows[8].stock_status == StockStatus.OUT_OF_STOCK
        assert rows[9].stock_status == StockStatus.LOW_STOCK
        assert rows[9].publisher == "Hachette Book Group"
