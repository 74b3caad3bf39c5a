"""
Customer Service

Registration, profile updates, login bookkeeping and deletion of
customer accounts. Deleting a customer removes their orders, order
lines and reviews; stock taken by those orders is not returned.
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookstore.database import unit_of_work
from bookstore.exceptions import ConstraintViolation
from bookstore.models import Customer
from bookstore.schemas import CustomerCreate, CustomerUpdate
from bookstore.services.base import (
    flush_or_conflict,
    get_or_raise,
    load_input,
    reject_nulls,
)
from bookstore.services.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def _email_taken(db: Session, email: str, exclude_id: int | None = None) -> bool:
    stmt = select(Customer.id).where(Customer.email == email)
    if exclude_id is not None:
        stmt = stmt.where(Customer.id != exclude_id)
    return db.execute(stmt).first() is not None


def create_customer(db: Session, data: CustomerCreate | Mapping[str, Any]) -> Customer:
    """
    Register a customer, storing a hash of the password.

    Raises:
        ConstraintViolation: invalid fields, or the email is already
            registered (conflict=True)
    """
    payload = load_input(CustomerCreate, data)
    with unit_of_work(db):
        if _email_taken(db, payload.email):
            raise ConstraintViolation(
                f"Email '{payload.email}' is already registered", conflict=True
            )
        customer = Customer(
            **payload.model_dump(exclude={"password"}),
            password_hash=hash_password(payload.password),
        )
        with flush_or_conflict(db, f"Email '{payload.email}' is already registered"):
            db.add(customer)
    logger.info(f"Registered customer {customer.id}")
    return customer


def get_customer(db: Session, customer_id: int) -> Customer:
    return get_or_raise(db, Customer, customer_id)


def get_customer_by_email(db: Session, email: str) -> Customer | None:
    stmt = select(Customer).where(Customer.email == email.lower())
    return db.execute(stmt).scalar_one_or_none()


def list_customers(db: Session) -> list[Customer]:
    stmt = select(Customer).order_by(Customer.last_name, Customer.first_name)
    return list(db.execute(stmt).scalars())


def update_customer(
    db: Session, customer_id: int, data: CustomerUpdate | Mapping[str, Any]
) -> Customer:
    payload = load_input(CustomerUpdate, data)
    changes = payload.model_dump(exclude_unset=True)
    reject_nulls("Customer", changes, ("first_name", "last_name", "email"))
    with unit_of_work(db):
        customer = get_or_raise(db, Customer, customer_id)
        if "email" in changes and _email_taken(db, changes["email"], customer_id):
            raise ConstraintViolation(
                f"Email '{changes['email']}' is already registered", conflict=True
            )
        with flush_or_conflict(db, "Email is already registered"):
            for field, value in changes.items():
                setattr(customer, field, value)
    return customer


def authenticate(db: Session, email: str, password: str) -> Customer | None:
    """
    Check a customer's credentials and record the login time.

    Returns None when the email is unknown or the password is wrong.
    """
    customer = get_customer_by_email(db, email)
    if customer is None or not verify_password(password, customer.password_hash):
        logger.info(f"Failed login for {email}")
        return None
    return record_login(db, customer.id)


def record_login(db: Session, customer_id: int) -> Customer:
    with unit_of_work(db):
        customer = get_or_raise(db, Customer, customer_id)
        customer.last_login = datetime.now(UTC)
    return customer


def delete_customer(db: Session, customer_id: int) -> None:
    """Delete a customer with their orders and reviews."""
    with unit_of_work(db):
        customer = get_or_raise(db, Customer, customer_id)
        orders = len(customer.orders)
        db.delete(customer)
    logger.info(f"Deleted customer {customer_id} and {orders} order(s)")
