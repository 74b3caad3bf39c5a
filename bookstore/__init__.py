"""
Bookstore Consistency Layer

Catalog, customer, order and review data for an online bookstore, with
the rules that keep stock levels, order totals and order lines
consistent.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, sessions and the unit of work
- exceptions.py: Domain errors raised by the services
- models/: SQLAlchemy ORM models
- schemas/: Pydantic input/output schemas and report rows
- services/: Catalog, customer, order, review, search and report logic
- routers/: HTTP endpoints over the services
- sample_data.py: Demonstration data set
- main.py: FastAPI application factory
"""

__version__ = "0.1.0"
