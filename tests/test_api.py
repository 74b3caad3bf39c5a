"""
Tests for the HTTP API

Checks that endpoints reach the services and that domain errors are
reported with the right status codes:
- NotFound -> 404
- ConstraintViolation -> 422, or 409 for duplicates
- InsufficientStock / IntegrityError -> 409
"""

from decimal import Decimal

from fastapi import status
from fastapi.testclient import TestClient


class TestHealth:
    """Tests for GET /health and GET /"""

    def test_health_check(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "healthy"

    def test_root(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["docs"] == "/docs"


class TestCatalogEndpoints:
    """Tests for /api/v1/publishers, /authors, /categories and /books"""

    def test_create_book_flow(self, client: TestClient):
        publisher = client.post(
            "/api/v1/publishers/", json={"name": "HarperCollins", "founded_year": 1817}
        ).json()
        author = client.post(
            "/api/v1/authors/", json={"first_name": "Agatha", "last_name": "Christie"}
        ).json()

        response = client.post(
            "/api/v1/books/",
            json={
                "isbn": "978-0062073488",
                "title": "Murder on the Orient Express",
                "price": "14.99",
                "stock_quantity": 70,
                "publisher_id": publisher["id"],
                "authors": [{"author_id": author["id"]}],
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["isbn"] == "9780062073488"
        assert Decimal(data["price"]) == Decimal("14.99")
        assert data["authors"] == [{"author_id": author["id"], "role": "Author"}]

    def test_get_book_not_found(self, client: TestClient):
        response = client.get("/api/v1/books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Book with id 99999 not found"

    def test_create_book_negative_price(self, client: TestClient):
        response = client.post(
            "/api/v1/books/",
            json={"isbn": "9780062073488", "title": "Bad", "price": "-1.00"},
        )

        assert response.status_code == 422

    def test_duplicate_isbn(self, client: TestClient, sample_book):
        response = client.post(
            "/api/v1/books/",
            json={"isbn": sample_book.isbn, "title": "Copy", "price": "1.00"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_category_cycle(self, client: TestClient, sample_category):
        child = client.post(
            "/api/v1/categories/",
            json={"name": "Mystery", "parent_category_id": sample_category.id},
        ).json()

        response = client.put(
            f"/api/v1/categories/{sample_category.id}",
            json={"parent_category_id": child["id"]},
        )

        assert response.status_code == 422

    def test_search(self, client: TestClient, sample_catalog):
        response = client.get(
            "/api/v1/books/search", params={"title": "Harry", "min_price": "20"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [b["title"] for b in data] == ["Harry Potter and the Deathly Hallows"]

    def test_delete_book_in_active_order(self, client: TestClient, sample_catalog):
        response = client.delete("/api/v1/books/9")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"] == "Cannot delete book that is in active orders"

    def test_restock(self, client: TestClient, sample_book):
        response = client.post(
            f"/api/v1/books/{sample_book.id}/restock", params={"quantity": 5}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["stock_quantity"] == 15


class TestOrderEndpoints:
    """Tests for /api/v1/orders"""

    def test_order_flow(self, client: TestClient, sample_customer, sample_book):
        response = client.post(
            "/api/v1/orders/",
            json={
                "customer_id": sample_customer.id,
                "shipping_address": "123 Main St",
                "billing_address": "123 Main St",
                "payment_method": "Credit Card",
            },
        )
        assert response.status_code == status.HTTP_201_CREATED
        order = response.json()
        assert order["order_status"] == "Pending"
        assert Decimal(order["total_amount"]) == Decimal("0")

        response = client.post(
            f"/api/v1/orders/{order['id']}/items",
            json={"book_id": sample_book.id, "quantity": 3, "discount": "10"},
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert Decimal(response.json()["unit_price"]) == Decimal("20.00")

        response = client.get(f"/api/v1/orders/{order['id']}")
        assert Decimal(response.json()["total_amount"]) == Decimal("54.00")
        assert len(response.json()["items"]) == 1

        response = client.get(f"/api/v1/books/{sample_book.id}")
        assert response.json()["stock_quantity"] == 7

    def test_insufficient_stock(self, client: TestClient, sample_order, sample_book):
        response = client.post(
            f"/api/v1/orders/{sample_order.id}/items",
            json={"book_id": sample_book.id, "quantity": 11},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        body = response.json()
        assert body["detail"] == "Not enough items in stock"
        assert body["errors"]["available"] == 10

    def test_status_change(self, client: TestClient, sample_order):
        response = client.patch(
            f"/api/v1/orders/{sample_order.id}/status",
            json={"status": "Processing", "tracking_number": "TRACK-42"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["order_status"] == "Processing"
        assert response.json()["tracking_number"] == "TRACK-42"

    def test_invalid_status_change(self, client: TestClient, sample_order):
        response = client.patch(
            f"/api/v1/orders/{sample_order.id}/status",
            json={"status": "Delivered"},
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"current": "Pending", "requested": "Delivered"}

    def test_customer_orders(self, client: TestClient, sample_catalog):
        response = client.get("/api/v1/customers/5/orders")

        assert response.status_code == status.HTTP_200_OK
        assert [o["id"] for o in response.json()] == [5]

    def test_unknown_order(self, client: TestClient):
        response = client.get("/api/v1/orders/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCustomerAndReviewEndpoints:
    """Tests for /api/v1/customers and /api/v1/reviews"""

    def test_register_and_login(self, client: TestClient):
        response = client.post(
            "/api/v1/customers/",
            json={
                "first_name": "Emily",
                "last_name": "Brown",
                "email": "emily.brown@example.com",
                "password": "SecurePass123",
            },
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert "password_hash" not in response.json()

        response = client.post(
            "/api/v1/customers/login",
            json={"email": "emily.brown@example.com", "password": "SecurePass123"},
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["last_login"] is not None

        response = client.post(
            "/api/v1/customers/login",
            json={"email": "emily.brown@example.com", "password": "wrong"},
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_duplicate_review(self, client: TestClient, sample_catalog):
        response = client.post(
            "/api/v1/reviews/",
            json={"book_id": 1, "customer_id": 1, "rating": 3},
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_list_book_reviews(self, client: TestClient, sample_catalog):
        response = client.get("/api/v1/books/4/reviews")

        assert response.status_code == status.HTTP_200_OK
        assert [r["rating"] for r in response.json()] == [5]


class TestReportEndpoints:
    """Tests for /api/v1/reports"""

    def test_inventory(self, client: TestClient, sample_catalog):
        response = client.get("/api/v1/reports/inventory")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()[0]["stock_status"] == "Good Stock"

    def test_book_ratings(self, client: TestClient, sample_catalog):
        response = client.get("/api/v1/reports/book-ratings")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()[-1]["average_rating"] is None

    def test_customer_orders_report(self, client: TestClient, sample_catalog):
        response = client.get("/api/v1/reports/customer-orders", params={"customer_id": 2})

        assert response.status_code == status.HTTP_200_OK
        assert Decimal(response.json()[0]["total_amount"]) == Decimal("75.86")
