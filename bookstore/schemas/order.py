"""
Order Pydantic Schemas

Inputs for the three order workflow commands and the order views.
``total_amount`` only appears on responses: clients never set it.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bookstore.models.order import OrderStatus


class OrderCreate(BaseModel):
    """Input of PlaceOrder."""

    customer_id: int = Field(..., ge=1)
    shipping_address: str = Field(
        ...,
        min_length=1,
        max_length=255,
        examples=["123 Main St, New York, NY 10001"],
    )
    billing_address: str = Field(..., min_length=1, max_length=255)
    payment_method: str = Field(
        ...,
        min_length=1,
        max_length=50,
        examples=["Credit Card", "PayPal"],
    )

    @field_validator("shipping_address", "billing_address", "payment_method")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace")
        return v.strip()


class OrderItemCreate(BaseModel):
    """Input of AddOrderItem. The unit price is taken from the catalog."""

    book_id: int = Field(..., ge=1)
    quantity: int = Field(..., gt=0, examples=[1, 3])
    discount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=100,
        max_digits=5,
        decimal_places=2,
        description="Discount percentage (0-100)",
        examples=["10"],
    )


class OrderStatusUpdate(BaseModel):
    """
    Input of UpdateOrderStatus.

    A None tracking number leaves the stored one unchanged.
    """

    status: OrderStatus = Field(..., examples=["Shipped"])
    tracking_number: str | None = Field(default=None, min_length=1, max_length=100)


class OrderItemResponse(BaseModel):
    """Order line as returned to callers."""

    id: int
    order_id: int
    book_id: int
    quantity: int
    unit_price: Decimal
    discount: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderResponse(BaseModel):
    """Order header with its lines."""

    id: int
    customer_id: int
    order_date: datetime
    total_amount: Decimal
    shipping_address: str
    billing_address: str
    payment_method: str
    order_status: OrderStatus
    tracking_number: str | None = None
    items: list[OrderItemResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
