"""
Test Suite for the Bookstore API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_orders.py: Order placement, order lines and status changes
- test_catalog.py: Publishers, authors, categories and books
- test_customers.py: Customer accounts and login
- test_reviews.py: Book reviews
- test_search.py: Filtered book search
- test_reports.py: Reporting views
- test_api.py: HTTP endpoints and error status codes
- test_config.py: Settings validation

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_orders.py

    # Run with verbose output
    pytest -v
"""
