"""
Orders Router

Endpoints:
- POST /orders/ - Place an empty Pending order
- GET /orders/{order_id} - Get an order with its lines
- POST /orders/{order_id}/items - Add a line (409 when stock is short)
- PATCH /orders/{order_id}/status - Change status / tracking number
- GET /customers/{customer_id}/orders - A customer's orders
"""

from typing import List

from fastapi import APIRouter, status

from bookstore.dependencies import DbSession
from bookstore.schemas import (
    OrderCreate,
    OrderItemCreate,
    OrderItemResponse,
    OrderResponse,
    OrderStatusUpdate,
)
from bookstore.services import orders

router = APIRouter(
    tags=["Orders"],
    responses={
        404: {"description": "Order not found"},
    },
)


@router.post(
    "/orders/",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
)
def place_order(order_data: OrderCreate, db: DbSession) -> OrderResponse:
    order = orders.place_order(
        db,
        customer_id=order_data.customer_id,
        shipping_address=order_data.shipping_address,
        billing_address=order_data.billing_address,
        payment_method=order_data.payment_method,
    )
    return OrderResponse.model_validate(orders.get_order(db, order.id))


@router.get("/orders/{order_id}", response_model=OrderResponse, summary="Get an order")
def get_order(order_id: int, db: DbSession) -> OrderResponse:
    return OrderResponse.model_validate(orders.get_order(db, order_id))


@router.post(
    "/orders/{order_id}/items",
    response_model=OrderItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an order line",
    responses={409: {"description": "Not enough items in stock"}},
)
def add_order_item(
    order_id: int,
    item_data: OrderItemCreate,
    db: DbSession,
) -> OrderItemResponse:
    item = orders.add_order_item(
        db,
        order_id,
        book_id=item_data.book_id,
        quantity=item_data.quantity,
        discount=item_data.discount,
    )
    return OrderItemResponse.model_validate(item)


@router.patch(
    "/orders/{order_id}/status",
    response_model=OrderResponse,
    summary="Change an order's status",
    responses={422: {"description": "Status change not allowed"}},
)
def update_order_status(
    order_id: int,
    status_data: OrderStatusUpdate,
    db: DbSession,
) -> OrderResponse:
    orders.update_order_status(
        db, order_id, status_data.status, status_data.tracking_number
    )
    return OrderResponse.model_validate(orders.get_order(db, order_id))


@router.get(
    "/customers/{customer_id}/orders",
    response_model=List[OrderResponse],
    summary="List a customer's orders",
)
def list_customer_orders(customer_id: int, db: DbSession) -> List[OrderResponse]:
    return [
        OrderResponse.model_validate(o)
        for o in orders.list_customer_orders(db, customer_id)
    ]
