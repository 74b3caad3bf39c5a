"""
Services Package

Business logic, independent of HTTP. Every function takes a SQLAlchemy
session as its first argument; mutations run in their own unit of work
and raise the errors in ``bookstore.exceptions``.

Current services:
- catalog.py: Publishers, authors, categories, books and credits
- customers.py: Customer accounts and login bookkeeping
- orders.py: Order placement, order lines and status changes
- reviews.py: Book reviews
- search.py: Filtered book search
- reports.py: Derived read-only views
- security.py: Password hashing
"""
