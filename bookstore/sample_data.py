"""
Sample Data

A small demonstration data set: 5 publishers, 10 categories (two
roots with subcategories), 10 authors, 10 books, 5 customers, 5 orders
with 10 order lines and 9 reviews.

Everything is created through the services, so order lines take their
unit price from the catalog and reduce stock like any other order.
Sample customers share the password ``SAMPLE_PASSWORD``.

Usage:
    from bookstore.database import SessionLocal
    from bookstore.sample_data import load_sample_data

    with SessionLocal() as db:
        load_sample_data(db)
"""

import logging
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from bookstore.database import unit_of_work
from bookstore.models import OrderStatus
from bookstore.services import catalog, customers, orders, reviews

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "bookstore-sample"

PUBLISHERS = [
    {
        "name": "Penguin Random House",
        "address": "1745 Broadway, New York, NY 10019",
        "phone": "212-782-9000",
        "email": "info@penguinrandomhouse.com",
        "website": "www.penguinrandomhouse.com",
        "founded_year": 1925,
    },
    {
        "name": "HarperCollins",
        "address": "195 Broadway, New York, NY 10007",
        "phone": "212-207-7000",
        "email": "info@harpercollins.com",
        "website": "www.harpercollins.com",
        "founded_year": 1817,
    },
    {
        "name": "Simon & Schuster",
        "address": "1230 Avenue of the Americas, New York, NY 10020",
        "phone": "212-698-7000",
        "email": "info@simonandschuster.com",
        "website": "www.simonandschuster.com",
        "founded_year": 1924,
    },
    {
        "name": "Macmillan Publishers",
        "address": "120 Broadway, New York, NY 10271",
        "phone": "646-307-5151",
        "email": "info@macmillan.com",
        "website": "www.macmillan.com",
        "founded_year": 1843,
    },
    {
        "name": "Hachette Book Group",
        "address": "1290 Avenue of the Americas, New York, NY 10104",
        "phone": "212-364-1100",
        "email": "info@hbgusa.com",
        "website": "www.hachettebookgroup.com",
        "founded_year": 1837,
    },
]

# (name, description, parent name)
CATEGORIES = [
    ("Fiction", "Novels, short stories and other fictional works", None),
    ("Non-Fiction", "Factual content including biography, history, and essays", None),
    ("Mystery", "Mystery novels and detective fiction", "Fiction"),
    (
        "Science Fiction",
        "Fiction dealing with imaginative content such as futuristic settings",
        "Fiction",
    ),
    ("Fantasy", "Fiction involving magical elements and imaginary worlds", "Fiction"),
    ("Biography", "Accounts of people's lives written by another person", "Non-Fiction"),
    ("History", "Books about past events", "Non-Fiction"),
    ("Technology", "Books about computers, software, and related topics", "Non-Fiction"),
    ("Self-Help", "Books aimed at helping readers solve personal problems", "Non-Fiction"),
    ("Business", "Books about commerce, management, and economics", "Non-Fiction"),
]

# (first_name, last_name, birth_date, nationality, biography)
AUTHORS = [
    ("J.K.", "Rowling", date(1965, 7, 31), "British",
     "British author best known for the Harry Potter series"),
    ("Stephen", "King", date(1947, 9, 21), "American",
     "American author of horror, supernatural fiction, suspense, and fantasy novels"),
    ("Agatha", "Christie", date(1890, 9, 15), "British",
     "British writer known for her 66 detective novels and 14 short story collections"),
    ("Michelle", "Obama", date(1964, 1, 17), "American",
     "American attorney and author who was the First Lady of the United States "
     "from 2009 to 2017"),
    ("Yuval Noah", "Harari", date(1976, 2, 24), "Israeli",
     "Israeli historian and professor, author of Sapiens and Homo Deus"),
    ("George R.R.", "Martin", date(1948, 9, 20), "American",
     "American novelist and short story writer, screenwriter, and television producer"),
    ("J.R.R.", "Tolkien", date(1892, 1, 3), "British",
     "English writer, poet, philologist, and academic, author of The Lord of the Rings"),
    ("Jane", "Austen", date(1775, 12, 16), "British",
     "English novelist known primarily for her six major novels"),
    ("Malcolm", "Gladwell", date(1963, 9, 3), "Canadian",
     "Canadian journalist, author, and public speaker"),
    ("Margaret", "Atwood", date(1939, 11, 18), "Canadian",
     "Canadian poet, novelist, literary critic, essayist, and environmental activist"),
]

# Each book is credited to the author at the same position in AUTHORS.
# (isbn, title, publisher #, publication_date, edition, pages, price,
#  category name, description, stock)
BOOKS = [
    ("9780545010221", "Harry Potter and the Deathly Hallows", 1, date(2007, 7, 21),
     "1st", 607, "24.99", "Fantasy",
     "The seventh and final novel of the Harry Potter series.", 150),
    ("9781501175466", "The Outsider", 2, date(2018, 5, 22), "1st", 576, "19.99",
     "Mystery",
     "A horror novel about an investigation into the gruesome murder of a young boy.",
     85),
    ("9780062073488", "Murder on the Orient Express", 2, date(1934, 1, 1), "Reprint",
     256, "14.99", "Mystery", "Hercule Poirot solves a murder on a snowbound train.",
     70),
    ("9781524763138", "Becoming", 3, date(2018, 11, 13), "1st", 448, "32.50",
     "Biography", "Memoir of former First Lady of the United States Michelle Obama.",
     120),
    ("9780062316110", "Sapiens: A Brief History of Humankind", 2, date(2015, 2, 10),
     "1st", 464, "24.99", "History",
     "A history of humankind from the Stone Age to the present day.", 90),
    ("9780553103540", "A Game of Thrones", 1, date(1996, 8, 1), "1st", 694, "18.99",
     "Fantasy", "The first novel in the A Song of Ice and Fire fantasy series.", 110),
    ("9780618640157", "The Lord of the Rings", 4, date(1954, 7, 29), "Anniversary",
     1178, "29.99", "Fantasy", "Epic fantasy novel in three volumes.", 65),
    ("9780141439518", "Pride and Prejudice", 1, date(1813, 1, 28), "Reprint", 432,
     "9.99", "Fiction", "Novel of manners by Jane Austen.", 40),
    ("9780316017923", "Outliers: The Story of Success", 5, date(2008, 11, 18), "1st",
     336, "16.99", "Self-Help",
     "Examination of factors that contribute to high levels of success.", 55),
    ("9780385543781", "The Handmaid's Tale", 3, date(1985, 6, 1), "Reprint", 311,
     "15.99", "Science Fiction",
     "Dystopian novel set in a near-future patriarchal society.", 78),
]

# (first_name, last_name, email, phone, address_line1, city, state, postal_code)
CUSTOMERS = [
    ("John", "Smith", "john.smith@example.com", "555-123-4567", "123 Main St",
     "New York", "NY", "10001"),
    ("Sarah", "Johnson", "sarah.j@example.com", "555-234-5678", "456 Oak Ave",
     "Los Angeles", "CA", "90001"),
    ("David", "Williams", "davidw@example.com", "555-345-6789", "789 Pine St",
     "Chicago", "IL", "60007"),
    ("Emily", "Brown", "emily.brown@example.com", "555-456-7890", "101 Maple Dr",
     "Houston", "TX", "77001"),
    ("Michael", "Jones", "mjones@example.com", "555-567-8901", "202 Cedar Ln",
     "Philadelphia", "PA", "19019"),
]

# (customer #, order_date, payment_method, final status, lines)
# lines: (book #, quantity, discount %)
ORDERS = [
    (1, datetime(2023, 1, 15, 10, 30), "Credit Card", OrderStatus.DELIVERED,
     [(1, 1, 0), (3, 1, 0)]),
    (2, datetime(2023, 2, 20, 14, 45), "PayPal", OrderStatus.SHIPPED,
     [(4, 1, 5), (5, 2, 10)]),
    (3, datetime(2023, 3, 10, 9, 15), "Credit Card", OrderStatus.PROCESSING,
     [(7, 1, 0), (8, 1, 0)]),
    (4, datetime(2023, 4, 5, 16, 20), "Credit Card", OrderStatus.DELIVERED,
     [(2, 1, 0), (6, 1, 5)]),
    (5, datetime(2023, 5, 12, 11, 0), "PayPal", OrderStatus.PENDING,
     [(9, 1, 0), (10, 1, 0)]),
]

# (book #, customer #, rating, text)
REVIEWS = [
    (1, 1, 5, "A perfect ending to an amazing series!"),
    (3, 1, 4, "Classic mystery that still holds up today."),
    (4, 2, 5, "Inspirational and beautifully written memoir."),
    (5, 2, 5, "Fascinating overview of human history."),
    (7, 3, 5, "The definitive fantasy epic."),
    (2, 4, 4, "Gripping thriller with unexpected twists."),
    (6, 4, 5, "Complex characters and intricate plot."),
    (9, 5, 4, "Thought-provoking analysis of success."),
    (10, 5, 5, "Chilling and prophetic."),
]


def load_sample_data(db: Session) -> dict[str, int]:
    """
    Load the sample data set into an empty database.

    Returns the number of rows created per entity.
    """
    publisher_ids = [catalog.create_publisher(db, data).id for data in PUBLISHERS]

    category_ids: dict[str, int] = {}
    for name, description, parent in CATEGORIES:
        category = catalog.create_category(
            db,
            {
                "name": name,
                "description": description,
                "parent_category_id": category_ids.get(parent) if parent else None,
            },
        )
        category_ids[name] = category.id

    author_ids = []
    for first_name, last_name, birth_date, nationality, biography in AUTHORS:
        author = catalog.create_author(
            db,
            {
                "first_name": first_name,
                "last_name": last_name,
                "birth_date": birth_date,
                "nationality": nationality,
                "biography": biography,
            },
        )
        author_ids.append(author.id)

    book_ids = []
    for position, row in enumerate(BOOKS):
        (isbn, title, publisher_no, published, edition, pages, price, category,
         description, stock) = row
        book = catalog.create_book(
            db,
            {
                "isbn": isbn,
                "title": title,
                "publisher_id": publisher_ids[publisher_no - 1],
                "publication_date": published,
                "edition": edition,
                "pages": pages,
                "price": Decimal(price),
                "category_id": category_ids[category],
                "description": description,
                "stock_quantity": stock,
                "authors": [{"author_id": author_ids[position], "role": "Author"}],
            },
        )
        book_ids.append(book.id)

    customer_ids = []
    for first_name, last_name, email, phone, street, city, state, postal in CUSTOMERS:
        customer = customers.create_customer(
            db,
            {
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "password": SAMPLE_PASSWORD,
                "phone": phone,
                "address_line1": street,
                "city": city,
                "state": state,
                "postal_code": postal,
                "country": "USA",
            },
        )
        customer_ids.append(customer.id)

    line_count = 0
    for customer_no, order_date, payment_method, final_status, lines in ORDERS:
        _, _, _, _, street, city, state, postal = CUSTOMERS[customer_no - 1]
        address = f"{street}, {city}, {state} {postal}"
        order = orders.place_order(
            db,
            customer_id=customer_ids[customer_no - 1],
            shipping_address=address,
            billing_address=address,
            payment_method=payment_method,
        )
        for book_no, quantity, discount in lines:
            orders.add_order_item(
                db, order.id, book_ids[book_no - 1], quantity, Decimal(discount)
            )
            line_count += 1
        # Historical orders: jump straight to their recorded status
        orders.update_order_status(db, order.id, final_status, enforce_transitions=False)
        with unit_of_work(db):
            order.order_date = order_date

    for book_no, customer_no, rating, text in REVIEWS:
        reviews.add_review(
            db,
            book_id=book_ids[book_no - 1],
            customer_id=customer_ids[customer_no - 1],
            rating=rating,
            review_text=text,
        )

    counts = {
        "publishers": len(publisher_ids),
        "categories": len(category_ids),
        "authors": len(author_ids),
        "books": len(book_ids),
        "customers": len(customer_ids),
        "orders": len(ORDERS),
        "order_items": line_count,
        "reviews": len(REVIEWS),
    }
    logger.info(f"Loaded sample data: {counts}")
    return counts
