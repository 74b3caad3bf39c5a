"""
Order Models

Order headers and order lines.

An order is created empty (no lines, total 0, Pending). It is then
only changed by appending lines or by changing status/tracking.
Order lines are insert-only.

``Order.total_amount`` is derived: it is maintained by the order
workflow as lines are added and is never set by a client.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
)
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.book import Book
    from bookstore.models.customer import Customer


class OrderStatus(str, Enum):
    """
    Order lifecycle.

    Pending -> Processing -> Shipped -> Delivered
    Cancelled is reachable from any non-terminal status.
    """
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


ACTIVE_STATUSES = frozenset(
    {OrderStatus.PENDING, OrderStatus.PROCESSING, OrderStatus.SHIPPED}
)


class Order(Base):
    """
    Order header.

    Table: orders

    Relationships:
    - customer: Many-to-One (order deleted with the customer)
    - items: One-to-Many to OrderItem (deleted with the order)
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(primary_key=True)

    customer_id: Mapped[int] = mapped_column(
        ForeignKey("customers.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        index=True,
    )
    total_amount: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        default=Decimal("0.00"),
        nullable=False,
        comment="Sum of line totals, maintained by the order workflow"
    )
    shipping_address: Mapped[str] = mapped_column(String(255), nullable=False)
    billing_address: Mapped[str] = mapped_column(String(255), nullable=False)
    payment_method: Mapped[str] = mapped_column(String(50), nullable=False)

    order_status: Mapped[OrderStatus] = mapped_column(
        SAEnum(
            OrderStatus,
            name="order_status",
            native_enum=False,
            values_callable=lambda enum: [member.value for member in enum],
            validate_strings=True,
            length=20,
        ),
        default=OrderStatus.PENDING,
        nullable=False,
        index=True,
    )
    tracking_number: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    customer: Mapped["Customer"] = relationship("Customer", back_populates="orders")
    items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    __table_args__ = (
        CheckConstraint("total_amount >= 0", name="ck_orders_total_amount"),
    )

    def __repr__(self) -> str:
        return (
            f"Order(id={self.id}, customer_id={self.customer_id}, "
            f"status='{self.order_status.value}', total={self.total_amount})"
        )


class OrderItem(Base):
    """
    Order line.

    Table: order_items

    ``unit_price`` is a snapshot of the book price when the line was
    recorded; later catalog price changes do not affect it.
    """

    __tablename__ = "order_items"

    id: Mapped[int] = mapped_column(primary_key=True)

    order_id: Mapped[int] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    book_id: Mapped[int] = mapped_column(
        ForeignKey("books.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    discount: Mapped[Decimal] = mapped_column(
        Numeric(5, 2),
        default=Decimal("0.00"),
        nullable=False,
        comment="Discount percentage, 0-100"
    )

    order: Mapped[Order] = relationship(Order, back_populates="items")
    book: Mapped["Book"] = relationship("Book", back_populates="order_items")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_items_quantity"),
        CheckConstraint("unit_price >= 0", name="ck_order_items_unit_price"),
        CheckConstraint(
            "discount >= 0 AND discount <= 100", name="ck_order_items_discount"
        ),
    )

    def __repr__(self) -> str:
        return (
            f"OrderItem(id={self.id}, order_id={self.order_id}, "
            f"book_id={self.book_id}, quantity={self.quantity})"
        )
