#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with the bookstore sample data for development.

USAGE:
    # Make sure you're in the project root with venv activated
    python scripts/seed_data.py

    # Keep existing rows (fails on duplicate ISBNs/emails)
    python scripts/seed_data.py --keep

This script:
1. Connects to the database using bookstore settings
2. Drops and recreates all tables (unless --keep)
3. Loads publishers, categories, authors, books, customers, orders,
   order lines and reviews through the services
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bookstore.database import SessionLocal, create_tables, drop_tables
from bookstore.sample_data import SAMPLE_PASSWORD, load_sample_data


def seed_database(clear_existing: bool = True) -> None:
    """
    Seed the database with sample data.

    Args:
        clear_existing: If True, drops and recreates all tables first.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    if clear_existing:
        print("Clearing existing data...")
        drop_tables()
    create_tables()

    db = SessionLocal()

    try:
        counts = load_sample_data(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        for entity, count in counts.items():
            print(f"  - {entity.replace('_', ' ').capitalize()}: {count}")
        print(f"\nSample customers log in with password '{SAMPLE_PASSWORD}'")
        print("API documentation at http://localhost:8001/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Load bookstore sample data")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Do not drop existing tables first",
    )
    args = parser.parse_args()
    seed_database(clear_existing=not args.keep)
