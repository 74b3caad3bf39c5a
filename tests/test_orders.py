"""
Tests for the Order Workflow

Covers:
- Placing an order (empty, Pending, zero total)
- Adding order lines: stock decrement, unit price snapshot, total growth
- Refusing lines when stock is short, with nothing changed
- Status changes and tracking numbers
- Concurrent order lines never oversell stock
"""

import threading
from decimal import Decimal

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from bookstore.database import build_engine, create_tables
from bookstore.exceptions import (
    ConstraintViolation,
    InsufficientStock,
    InvalidStatusTransition,
    NotFound,
)
from bookstore.models import Book, Customer, Order, OrderItem, OrderStatus
from bookstore.services import catalog, customers, orders
from bookstore.services.orders import can_transition, line_total


def count_items(db: Session, order_id: int) -> int:
    return db.execute(
        select(func.count(OrderItem.id)).where(OrderItem.order_id == order_id)
    ).scalar_one()


# =============================================================================
# Line Totals
# =============================================================================


class TestLineTotal:
    """Tests for the order line amount."""

    def test_discounted_line(self):
        assert line_total(3, Decimal("20.00"), Decimal("10")) == Decimal("54.00")

    def test_no_discount(self):
        assert line_total(2, Decimal("24.99"), Decimal("0")) == Decimal("49.98")

    def test_rounds_half_up_to_cents(self):
        # 32.50 * 0.95 = 30.875
        assert line_total(1, Decimal("32.50"), Decimal("5")) == Decimal("30.88")

    def test_full_discount(self):
        assert line_total(4, Decimal("9.99"), Decimal("100")) == Decimal("0.00")


# =============================================================================
# Place Order
# =============================================================================


class TestPlaceOrder:
    """Tests for place_order."""

    def test_place_order_success(self, db_session: Session, sample_customer: Customer):
        order = orders.place_order(
            db_session,
            customer_id=sample_customer.id,
            shipping_address="123 Main St",
            billing_address="123 Main St",
            payment_method="PayPal",
        )

        assert order.id is not None
        assert order.order_status == OrderStatus.PENDING
        assert order.total_amount == Decimal("0.00")
        assert order.tracking_number is None
        assert order.items == []

    def test_place_order_unknown_customer(self, db_session: Session):
        with pytest.raises(NotFound):
            orders.place_order(
                db_session,
                customer_id=999,
                shipping_address="123 Main St",
                billing_address="123 Main St",
                payment_method="PayPal",
            )
        assert db_session.execute(select(func.count(Order.id))).scalar_one() == 0

    def test_place_order_blank_address(
        self, db_session: Session, sample_customer: Customer
    ):
        with pytest.raises(ConstraintViolation):
            orders.place_order(
                db_session,
                customer_id=sample_customer.id,
                shipping_address="   ",
                billing_address="123 Main St",
                payment_method="PayPal",
            )


# =============================================================================
# Add Order Item
# =============================================================================


class TestAddOrderItem:
    """Tests for add_order_item."""

    def test_add_item_updates_stock_and_total(
        self, db_session: Session, sample_order: Order, sample_book: Book
    ):
        """Price 20.00, stock 10, 3 copies at 10% off -> total 54.00, stock 7."""
        item = orders.add_order_item(
            db_session, sample_order.id, sample_book.id, 3, Decimal("10")
        )

        assert item.unit_price == Decimal("20.00")
        assert item.quantity == 3
        assert item.discount == Decimal("10")

        db_session.refresh(sample_book)
        db_session.refresh(sample_order)
        assert sample_book.stock_quantity == 7
        assert sample_order.total_amount == Decimal("54.00")

    def test_totals_accumulate(
        self, db_session: Session, sample_order: Order, sample_book: Book
    ):
        orders.add_order_item(db_session, sample_order.id, sample_book.id, 1)
        orders.add_order_item(db_session, sample_order.id, sample_book.id, 2, 50)

        order = orders.get_order(db_session, sample_order.id)
        assert len(order.items) == 2
        assert order.total_amount == Decimal("40.00")
        assert order.total_amount == sum(
            line_total(i.quantity, i.unit_price, i.discount) for i in order.items
        )
        db_session.refresh(sample_book)
        assert sample_book.stock_quantity == 7

    def test_whole_stock_can_be_ordered(
        self, db_session: Session, sample_order: Order, sample_book: Book
    ):
        orders.add_order_item(db_session, sample_order.id, sample_book.id, 10)

        db_session.refresh(sample_book)
        assert sample_book.stock_quantity == 0

    def test_insufficient_stock_changes_nothing(
        self, db_session: Session, sample_order: Order, sample_book: Book
    ):
        with pytest.raises(InsufficientStock) as exc_info:
            orders.add_order_item(db_session, sample_order.id, sample_book.id, 11)

        assert exc_info.value.message == "Not enough items in stock"
        assert exc_info.value.requested == 11
        assert exc_info.value.available == 10

        db_session.refresh(sample_book)
        db_session.refresh(sample_order)
        assert sample_book.stock_quantity == 10
        assert sample_order.total_amount == Decimal("0.00")
        assert count_items(db_session, sample_order.id) == 0

    def test_unit_price_is_a_snapshot(
        self, db_session: Session, sample_order: Order, sample_book: Book
    ):
        item = orders.add_order_item(db_session, sample_order.id, sample_book.id, 1)

        catalog.update_book(db_session, sample_book.id, {"price": Decimal("99.00")})

        db_session.refresh(item)
        db_session.refresh(sample_order)
        assert item.unit_price == Decimal("20.00")
        assert sample_order.total_amount == Decimal("20.00")

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity(
        self, db_session: Session, sample_order: Order, sample_book: Book, quantity
    ):
        with pytest.raises(ConstraintViolation):
            orders.add_order_item(db_session, sample_order.id, sample_book.id, quantity)

        db_session.refresh(sample_book)
        assert sample_book.stock_quantity == 10

    @pytest.mark.parametrize("discount", ["-1", "100.01", "150"])
    def test_discount_out_of_range(
        self, db_session: Session, sample_order: Order, sample_book: Book, discount
    ):
        with pytest.raises(ConstraintViolation):
            orders.add_order_item(
                db_session, sample_order.id, sample_book.id, 1, Decimal(discount)
            )

    def test_unknown_order(self, db_session: Session, sample_book: Book):
        with pytest.raises(NotFound):
            orders.add_order_item(db_session, 999, sample_book.id, 1)

        db_session.refresh(sample_book)
        assert sample_book.stock_quantity == 10

    def test_unknown_book(self, db_session: Session, sample_order: Order):
        with pytest.raises(NotFound):
            orders.add_order_item(db_session, sample_order.id, 999, 1)
        assert count_items(db_session, sample_order.id) == 0


# =============================================================================
# Update Order Status
# =============================================================================


class TestUpdateOrderStatus:
    """Tests for update_order_status."""

    def test_follow_lifecycle(self, db_session: Session, sample_order: Order):
        for new_status in ("Processing", "Shipped", "Delivered"):
            order = orders.update_order_status(db_session, sample_order.id, new_status)
            assert order.order_status == OrderStatus(new_status)

    def test_tracking_number_kept_when_none(
        self, db_session: Session, sample_order: Order
    ):
        orders.update_order_status(db_session, sample_order.id, OrderStatus.PROCESSING)
        orders.update_order_status(
            db_session, sample_order.id, OrderStatus.SHIPPED, "1Z999AA10123456784"
        )

        order = orders.update_order_status(
            db_session, sample_order.id, OrderStatus.DELIVERED
        )
        assert order.tracking_number == "1Z999AA10123456784"

    def test_same_status_updates_tracking(
        self, db_session: Session, sample_order: Order
    ):
        order = orders.update_order_status(
            db_session, sample_order.id, OrderStatus.PENDING, "TRACK-1"
        )
        assert order.order_status == OrderStatus.PENDING
        assert order.tracking_number == "TRACK-1"

    def test_skipping_a_status_is_rejected(
        self, db_session: Session, sample_order: Order
    ):
        with pytest.raises(InvalidStatusTransition) as exc_info:
            orders.update_order_status(db_session, sample_order.id, "Shipped")

        assert exc_info.value.current == "Pending"
        assert exc_info.value.requested == "Shipped"
        db_session.refresh(sample_order)
        assert sample_order.order_status == OrderStatus.PENDING

    def test_terminal_status_is_final(self, db_session: Session, sample_order: Order):
        orders.update_order_status(db_session, sample_order.id, "Cancelled")

        with pytest.raises(InvalidStatusTransition):
            orders.update_order_status(db_session, sample_order.id, "Pending")

    def test_any_change_allowed_when_not_enforced(
        self, db_session: Session, sample_order: Order
    ):
        orders.update_order_status(
            db_session, sample_order.id, "Delivered", enforce_transitions=False
        )
        order = orders.update_order_status(
            db_session, sample_order.id, "Pending", enforce_transitions=False
        )
        assert order.order_status == OrderStatus.PENDING

    def test_unknown_status_value(self, db_session: Session, sample_order: Order):
        with pytest.raises(ConstraintViolation):
            orders.update_order_status(db_session, sample_order.id, "Lost")

    def test_unknown_order(self, db_session: Session):
        with pytest.raises(NotFound):
            orders.update_order_status(db_session, 999, "Processing")

    @pytest.mark.parametrize(
        "current,new,allowed",
        [
            (OrderStatus.PENDING, OrderStatus.PROCESSING, True),
            (OrderStatus.PENDING, OrderStatus.CANCELLED, True),
            (OrderStatus.PROCESSING, OrderStatus.SHIPPED, True),
            (OrderStatus.SHIPPED, OrderStatus.DELIVERED, True),
            (OrderStatus.SHIPPED, OrderStatus.CANCELLED, True),
            (OrderStatus.PENDING, OrderStatus.DELIVERED, False),
            (OrderStatus.DELIVERED, OrderStatus.CANCELLED, False),
            (OrderStatus.CANCELLED, OrderStatus.PROCESSING, False),
        ],
    )
    def test_transition_graph(self, current, new, allowed):
        assert can_transition(current, new) is allowed


# =============================================================================
# Queries
# =============================================================================


class TestOrderQueries:
    """Tests for get_order and list_customer_orders."""

    def test_get_order_not_found(self, db_session: Session):
        with pytest.raises(NotFound):
            orders.get_order(db_session, 999)

    def test_list_customer_orders(self, db_session: Session, sample_catalog):
        customer_orders = orders.list_customer_orders(db_session, 2)

        assert [o.id for o in customer_orders] == [2]
        assert customer_orders[0].total_amount == Decimal("75.86")
        assert len(customer_orders[0].items) == 2

    def test_sample_order_totals(self, db_session: Session, sample_catalog):
        totals = {
            order_id: orders.get_order(db_session, order_id).total_amount
            for order_id in range(1, 6)
        }
        assert totals == {
            1: Decimal("39.98"),
            2: Decimal("75.86"),
            3: Decimal("39.98"),
            4: Decimal("38.03"),
            5: Decimal("32.98"),
        }


# =============================================================================
# Concurrency
# =============================================================================


class TestConcurrentOrderItems:
    """Concurrent add_order_item calls against a shared file database."""

    def test_stock_never_goes_negative(self, tmp_path):
        engine = build_engine(
            f"sqlite:///{tmp_path / 'orders.db'}",
            connect_args={"check_same_thread": False, "timeout": 30},
        )
        create_tables(bind=engine)
        SessionFactory = sessionmaker(autoflush=False, bind=engine)

        with SessionFactory() as db:
            customer = customers.create_customer(
                db,
                {
                    "first_name": "John",
                    "last_name": "Smith",
                    "email": "john.smith@example.com",
                    "password": "SecurePass123",
                },
            )
            book = catalog.create_book(
                db,
                {
                    "isbn": "9780451524935",
                    "title": "Nineteen Eighty-Four",
                    "price": "10.00",
                    "stock_quantity": 5,
                },
            )
            book_id = book.id
            order_ids = [
                orders.place_order(
                    db,
                    customer_id=customer.id,
                    shipping_address="123 Main St",
                    billing_address="123 Main St",
                    payment_method="Credit Card",
                ).id
                for _ in range(8)
            ]

        start = threading.Barrier(len(order_ids))
        outcomes = []

        def buy_one(order_id: int) -> None:
            with SessionFactory() as db:
                start.wait()
                try:
                    orders.add_order_item(db, order_id, book_id, 1)
                    outcomes.append("ok")
                except InsufficientStock:
                    outcomes.append("short")

        threads = [threading.Thread(target=buy_one, args=(oid,)) for oid in order_ids]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        with SessionFactory() as db:
            stock = db.get(Book, book_id).stock_quantity
            total = db.execute(select(func.sum(Order.total_amount))).scalar_one()
            lines = db.execute(select(func.count(OrderItem.id))).scalar_one()

        engine.dispose()

        assert sorted(outcomes) == ["ok"] * 5 + ["short"] * 3
        assert stock == 0
        assert lines == 5
        assert total == Decimal("50.00")
