"""
pytest Fixtures for Bookstore Tests

Shared fixtures used across all test files.

FIXTURE SCOPES:
- function (default): New instance per test function

Every test gets its own in-memory SQLite database. The services commit
and roll back their own units of work, so tests need real transactions
rather than one outer transaction that is rolled back at the end.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing bookstore
# so the module-level engine is built for SQLite, not PostgreSQL
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENFORCE_STATUS_TRANSITIONS"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import Generator
from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore.database import create_tables, drop_tables, get_db
from bookstore.main import app
from bookstore.models import Author, Book, Category, Customer, Order, Publisher
from bookstore.sample_data import load_sample_data
from bookstore.services import catalog, customers, orders

# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole test.
    Without it, the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)

    yield engine

    drop_tables(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a database session bound to the test engine."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_publisher(db_session: Session) -> Publisher:
    return catalog.create_publisher(
        db_session,
        {
            "name": "Penguin Random House",
            "email": "info@penguinrandomhouse.com",
            "founded_year": 1925,
        },
    )


@pytest.fixture
def sample_category(db_session: Session) -> Category:
    return catalog.create_category(
        db_session,
        {"name": "Fiction", "description": "Novels and short stories"},
    )


@pytest.fixture
def sample_author(db_session: Session) -> Author:
    return catalog.create_author(
        db_session,
        {
            "first_name": "George",
            "last_name": "Orwell",
            "birth_date": date(1903, 6, 25),
            "nationality": "British",
        },
    )


@pytest.fixture
def sample_book(
    db_session: Session,
    sample_publisher: Publisher,
    sample_category: Category,
    sample_author: Author,
) -> Book:
    """A book priced 20.00 with 10 copies in stock."""
    return catalog.create_book(
        db_session,
        {
            "isbn": "9780451524935",
            "title": "Nineteen Eighty-Four",
            "publication_date": date(1949, 6, 8),
            "pages": 328,
            "price": Decimal("20.00"),
            "stock_quantity": 10,
            "publisher_id": sample_publisher.id,
            "category_id": sample_category.id,
            "authors": [{"author_id": sample_author.id}],
        },
    )


@pytest.fixture
def sample_customer(db_session: Session) -> Customer:
    return customers.create_customer(
        db_session,
        {
            "first_name": "John",
            "last_name": "Smith",
            "email": "john.smith@example.com",
            "password": "SecurePass123",
            "city": "New York",
        },
    )


@pytest.fixture
def sample_order(db_session: Session, sample_customer: Customer) -> Order:
    """An empty Pending order."""
    return orders.place_order(
        db_session,
        customer_id=sample_customer.id,
        shipping_address="123 Main St, New York, NY 10001",
        billing_address="123 Main St, New York, NY 10001",
        payment_method="Credit Card",
    )


@pytest.fixture
def sample_catalog(db_session: Session) -> dict[str, int]:
    """
    The full sample data set.

    Ids are assigned in insertion order starting at 1, so book 1 is
    "Harry Potter and the Deathly Hallows", customer 1 is John Smith and
    order 5 is the Pending order.
    """
    return load_sample_data(db_session)
