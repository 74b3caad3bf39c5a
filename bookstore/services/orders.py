"""
Order Workflow Service

Places orders, records order lines and moves orders through their
status lifecycle.

Recording an order line is one unit of work:
1. Lock the order and book rows
2. Refuse with InsufficientStock if the book has fewer copies than asked
3. Insert the line with the book's current price as its unit price
4. Decrement the book's stock by the quantity
5. Add the rounded line total to the order total

Either all of steps 3-5 are committed or none is. The stock decrement
is a conditional UPDATE (``stock_quantity >= quantity``) so a concurrent
order can never push stock below zero, even on engines without row locks.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from bookstore.config import get_settings
from bookstore.database import unit_of_work
from bookstore.exceptions import InsufficientStock, InvalidStatusTransition, NotFound
from bookstore.models import Book, Customer, Order, OrderItem, OrderStatus
from bookstore.schemas import OrderCreate, OrderItemCreate, OrderStatusUpdate
from bookstore.services.base import get_or_raise, load_input

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

# Allowed status changes; re-setting the current status is always allowed
# so a tracking number can be added to a shipped order.
STATUS_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def line_total(quantity: int, unit_price: Decimal, discount: Decimal) -> Decimal:
    """
    Amount of one order line: quantity * unit_price * (1 - discount/100),
    rounded half-up to the cent.

    Example:
        >>> line_total(3, Decimal("20.00"), Decimal("10"))
        Decimal('54.00')
    """
    amount = Decimal(quantity) * Decimal(unit_price) * (Decimal(100) - Decimal(discount))
    return (amount / Decimal(100)).quantize(CENT, rounding=ROUND_HALF_UP)


def can_transition(current: OrderStatus, new: OrderStatus) -> bool:
    return new == current or new in STATUS_TRANSITIONS[current]


# =============================================================================
# Commands
# =============================================================================


def place_order(
    db: Session,
    customer_id: int,
    shipping_address: str,
    billing_address: str,
    payment_method: str,
) -> Order:
    """
    Create an empty Pending order with a zero total.

    Raises:
        NotFound: the customer does not exist
        ConstraintViolation: a required field is missing or blank
    """
    payload = load_input(
        OrderCreate,
        customer_id=customer_id,
        shipping_address=shipping_address,
        billing_address=billing_address,
        payment_method=payment_method,
    )
    with unit_of_work(db):
        get_or_raise(db, Customer, payload.customer_id)
        order = Order(
            **payload.model_dump(),
            order_status=OrderStatus.PENDING,
            total_amount=Decimal("0.00"),
        )
        db.add(order)
        db.flush()
    logger.info(f"Placed order {order.id} for customer {customer_id}")
    return order


def add_order_item(
    db: Session,
    order_id: int,
    book_id: int,
    quantity: int,
    discount: Decimal | int | str = Decimal("0"),
) -> OrderItem:
    """
    Record an order line, decrement stock and grow the order total.

    Raises:
        NotFound: the order or book does not exist
        ConstraintViolation: quantity <= 0 or discount outside [0, 100]
        InsufficientStock: the book has fewer than ``quantity`` copies;
            nothing is changed
    """
    payload = load_input(
        OrderItemCreate, book_id=book_id, quantity=quantity, discount=discount
    )
    with unit_of_work(db):
        order = db.get(Order, order_id, with_for_update=True, populate_existing=True)
        if order is None:
            raise NotFound("Order", order_id)
        book = db.get(Book, book_id, with_for_update=True, populate_existing=True)
        if book is None:
            raise NotFound("Book", book_id)

        if book.stock_quantity < payload.quantity:
            logger.warning(
                f"Insufficient stock for book {book_id}: "
                f"requested {payload.quantity}, available {book.stock_quantity}"
            )
            raise InsufficientStock(book_id, payload.quantity, book.stock_quantity)

        unit_price = book.price
        amount = line_total(payload.quantity, unit_price, payload.discount)

        result = db.execute(
            update(Book)
            .where(Book.id == book_id, Book.stock_quantity >= payload.quantity)
            .values(stock_quantity=Book.stock_quantity - payload.quantity)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            db.refresh(book, ["stock_quantity"])
            raise InsufficientStock(book_id, payload.quantity, book.stock_quantity)

        item = OrderItem(
            book_id=book_id,
            quantity=payload.quantity,
            unit_price=unit_price,
            discount=payload.discount,
        )
        order.items.append(item)
        # SQL expression: the increment happens in the UPDATE itself
        order.total_amount = Order.total_amount + amount
        db.flush()
        db.expire(book, ["stock_quantity"])

    logger.info(
        f"Added {payload.quantity} x book {book_id} at {unit_price} "
        f"(-{payload.discount}%) to order {order_id}: +{amount}"
    )
    return item


def update_order_status(
    db: Session,
    order_id: int,
    new_status: OrderStatus | str,
    tracking_number: str | None = None,
    enforce_transitions: bool | None = None,
) -> Order:
    """
    Change an order's status and optionally its tracking number.

    A None tracking number keeps the stored one. When transitions are
    enforced (the default, see ``Settings.enforce_status_transitions``)
    the change must follow Pending -> Processing -> Shipped -> Delivered,
    with Cancelled reachable from any non-terminal status.

    Raises:
        NotFound: the order does not exist
        ConstraintViolation: unknown status value
        InvalidStatusTransition: change not allowed from the current status
    """
    payload = load_input(
        OrderStatusUpdate, status=new_status, tracking_number=tracking_number
    )
    if enforce_transitions is None:
        enforce_transitions = get_settings().enforce_status_transitions

    with unit_of_work(db):
        order = db.get(Order, order_id, with_for_update=True, populate_existing=True)
        if order is None:
            raise NotFound("Order", order_id)

        current = order.order_status
        if enforce_transitions and not can_transition(current, payload.status):
            logger.warning(
                f"Rejected status change of order {order_id}: "
                f"{current.value} -> {payload.status.value}"
            )
            raise InvalidStatusTransition(current.value, payload.status.value)

        order.order_status = payload.status
        if payload.tracking_number is not None:
            order.tracking_number = payload.tracking_number

    logger.info(f"Order {order_id} status {current.value} -> {payload.status.value}")
    return order


# =============================================================================
# Queries
# =============================================================================


def get_order(db: Session, order_id: int) -> Order:
    """Get an order with its lines."""
    stmt = select(Order).options(selectinload(Order.items)).where(Order.id == order_id)
    order = db.execute(stmt).scalar_one_or_none()
    if order is None:
        raise NotFound("Order", order_id)
    return order


def list_customer_orders(db: Session, customer_id: int) -> list[Order]:
    """A customer's orders, newest first."""
    get_or_raise(db, Customer, customer_id)
    stmt = (
        select(Order)
        .options(selectinload(Order.items))
        .where(Order.customer_id == customer_id)
        .order_by(Order.order_date.desc(), Order.id.desc())
    )
    return list(db.execute(stmt).scalars())
