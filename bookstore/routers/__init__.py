"""
API Routers Package

FastAPI routers over the service layer. Handlers only translate HTTP
input into service calls; domain errors are turned into HTTP responses
by the exception handlers registered in main.py.

Router Structure:
- publishers.py: /api/v1/publishers/*
- authors.py: /api/v1/authors/*
- categories.py: /api/v1/categories/*
- books.py: /api/v1/books/* (including search)
- customers.py: /api/v1/customers/*
- orders.py: /api/v1/orders/* and /api/v1/customers/{id}/orders
- reviews.py: /api/v1/reviews/* and /api/v1/books/{id}/reviews
- reports.py: /api/v1/reports/*
"""

from bookstore.routers.authors import router as authors_router
from bookstore.routers.books import router as books_router
from bookstore.routers.categories import router as categories_router
from bookstore.routers.customers import router as customers_router
from bookstore.routers.orders import router as orders_router
from bookstore.routers.publishers import router as publishers_router
from bookstore.routers.reports import router as reports_router
from bookstore.routers.reviews import router as reviews_router

__all__ = [
    "authors_router",
    "books_router",
    "categories_router",
    "customers_router",
    "orders_router",
    "publishers_router",
    "reports_router",
    "reviews_router",
]
