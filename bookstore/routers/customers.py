"""
Customers Router

Customer accounts. Passwords are accepted on registration and login
only; responses never include the stored hash.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from bookstore.dependencies import DbSession
from bookstore.schemas import (
    CustomerCreate,
    CustomerLogin,
    CustomerResponse,
    CustomerUpdate,
)
from bookstore.services import customers

router = APIRouter(
    prefix="/customers",
    tags=["Customers"],
    responses={
        404: {"description": "Customer not found"},
    },
)


@router.get("/", response_model=List[CustomerResponse], summary="List customers")
def list_customers(db: DbSession) -> List[CustomerResponse]:
    return [CustomerResponse.model_validate(c) for c in customers.list_customers(db)]


@router.post(
    "/",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a customer",
    responses={409: {"description": "Email already registered"}},
)
def create_customer(customer_data: CustomerCreate, db: DbSession) -> CustomerResponse:
    return CustomerResponse.model_validate(customers.create_customer(db, customer_data))


@router.post("/login", response_model=CustomerResponse, summary="Check credentials")
def login(credentials: CustomerLogin, db: DbSession) -> CustomerResponse:
    customer = customers.authenticate(db, credentials.email, credentials.password)
    if customer is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
        )
    return CustomerResponse.model_validate(customer)


@router.get("/{customer_id}", response_model=CustomerResponse, summary="Get a customer")
def get_customer(customer_id: int, db: DbSession) -> CustomerResponse:
    return CustomerResponse.model_validate(customers.get_customer(db, customer_id))


@router.put("/{customer_id}", response_model=CustomerResponse, summary="Update a customer")
def update_customer(
    customer_id: int,
    customer_data: CustomerUpdate,
    db: DbSession,
) -> CustomerResponse:
    customer = customers.update_customer(db, customer_id, customer_data)
    return CustomerResponse.model_validate(customer)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a customer",
    description="Deletes the customer together with their orders and reviews.",
)
def delete_customer(customer_id: int, db: DbSession) -> None:
    customers.delete_customer(db, customer_id)
