"""initial_schema

Revision ID: 3f1c2a9d7e40
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7e40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ORDER_STATUSES = ('Pending', 'Processing', 'Shipped', 'Delivered', 'Cancelled')


def upgrade() -> None:
    # Catalog
    op.create_table(
        'publishers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False, comment='Publisher name'),
        sa.Column('address', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('email', sa.String(length=100), nullable=True, comment='Contact email'),
        sa.Column('website', sa.String(length=100), nullable=True),
        sa.Column('founded_year', sa.Integer(), nullable=True,
                  comment='Year the publisher was founded'),
        sa.CheckConstraint('founded_year > 1400', name='ck_publishers_founded_year'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False,
                  comment="Category name (e.g., 'Fiction', 'Mystery')"),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('parent_category_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['parent_category_id'], ['categories.id'],
                                ondelete='SET NULL', onupdate='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_index(op.f('ix_categories_parent_category_id'), 'categories',
                    ['parent_category_id'], unique=False)

    op.create_table(
        'authors',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=50), nullable=False),
        sa.Column('last_name', sa.String(length=50), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('nationality', sa.String(length=50), nullable=True),
        sa.Column('biography', sa.Text(), nullable=True),
        sa.Column('date_added', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('first_name', 'last_name', 'birth_date', name='uq_author_name'),
    )
    op.create_index(op.f('ix_authors_last_name'), 'authors', ['last_name'], unique=False)

    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('isbn', sa.String(length=20), nullable=False,
                  comment='International Standard Book Number'),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('publication_date', sa.Date(), nullable=True),
        sa.Column('edition', sa.String(length=20), nullable=True),
        sa.Column('pages', sa.Integer(), nullable=True),
        sa.Column('language', sa.String(length=50), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False,
                  comment='Current list price'),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('cover_image', sa.String(length=255), nullable=True),
        sa.Column('stock_quantity', sa.Integer(), nullable=False,
                  comment='Copies available for sale'),
        sa.Column('publisher_id', sa.Integer(), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('price >= 0', name='ck_books_price'),
        sa.CheckConstraint('pages > 0', name='ck_books_pages'),
        sa.CheckConstraint('stock_quantity >= 0', name='ck_books_stock'),
        sa.ForeignKeyConstraint(['publisher_id'], ['publishers.id'],
                                ondelete='SET NULL', onupdate='CASCADE'),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'],
                                ondelete='SET NULL', onupdate='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_books_isbn'), 'books', ['isbn'], unique=True)
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)
    op.create_index(op.f('ix_books_publication_date'), 'books', ['publication_date'],
                    unique=False)
    op.create_index(op.f('ix_books_price'), 'books', ['price'], unique=False)
    op.create_index(op.f('ix_books_publisher_id'), 'books', ['publisher_id'], unique=False)
    op.create_index(op.f('ix_books_category_id'), 'books', ['category_id'], unique=False)

    op.create_table(
        'book_authors',
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('role', sa.String(length=50), nullable=False,
                  comment='Contribution: Author, Editor, Translator, ...'),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'],
                                ondelete='CASCADE', onupdate='CASCADE'),
        sa.ForeignKeyConstraint(['author_id'], ['authors.id'],
                                ondelete='CASCADE', onupdate='CASCADE'),
        sa.PrimaryKeyConstraint('book_id', 'author_id'),
    )

    # Customers and orders
    op.create_table(
        'customers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=50), nullable=False),
        sa.Column('last_name', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('address_line1', sa.String(length=100), nullable=True),
        sa.Column('address_line2', sa.String(length=100), nullable=True),
        sa.Column('city', sa.String(length=50), nullable=True),
        sa.Column('state', sa.String(length=50), nullable=True),
        sa.Column('postal_code', sa.String(length=20), nullable=True),
        sa.Column('country', sa.String(length=50), nullable=True),
        sa.Column('registration_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('last_login', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_customers_email'), 'customers', ['email'], unique=True)

    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=False),
        sa.Column('order_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('total_amount', sa.Numeric(precision=10, scale=2), nullable=False,
                  comment='Sum of line totals, maintained by the order workflow'),
        sa.Column('shipping_address', sa.String(length=255), nullable=False),
        sa.Column('billing_address', sa.String(length=255), nullable=False),
        sa.Column('payment_method', sa.String(length=50), nullable=False),
        sa.Column('order_status',
                  sa.Enum(*ORDER_STATUSES, name='order_status', native_enum=False,
                          length=20),
                  nullable=False),
        sa.Column('tracking_number', sa.String(length=100), nullable=True),
        sa.CheckConstraint('total_amount >= 0', name='ck_orders_total_amount'),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id'],
                                ondelete='CASCADE', onupdate='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_orders_customer_id'), 'orders', ['customer_id'], unique=False)
    op.create_index(op.f('ix_orders_order_date'), 'orders', ['order_date'], unique=False)
    op.create_index(op.f('ix_orders_order_status'), 'orders', ['order_status'],
                    unique=False)

    op.create_table(
        'order_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('discount', sa.Numeric(precision=5, scale=2), nullable=False,
                  comment='Discount percentage, 0-100'),
        sa.CheckConstraint('quantity > 0', name='ck_order_items_quantity'),
        sa.CheckConstraint('unit_price >= 0', name='ck_order_items_unit_price'),
        sa.CheckConstraint('discount >= 0 AND discount <= 100',
                           name='ck_order_items_discount'),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id'],
                                ondelete='CASCADE', onupdate='CASCADE'),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'],
                                ondelete='RESTRICT', onupdate='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_order_items_order_id'), 'order_items', ['order_id'],
                    unique=False)
    op.create_index(op.f('ix_order_items_book_id'), 'order_items', ['book_id'],
                    unique=False)

    op.create_table(
        'reviews',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False, comment='Rating from 1-5 stars'),
        sa.Column('review_text', sa.Text(), nullable=True),
        sa.Column('review_date', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_review_rating_range'),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'],
                                ondelete='CASCADE', onupdate='CASCADE'),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id'],
                                ondelete='CASCADE', onupdate='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('customer_id', 'book_id', name='uq_review_customer_book'),
    )
    op.create_index(op.f('ix_reviews_book_id'), 'reviews', ['book_id'], unique=False)
    op.create_index(op.f('ix_reviews_customer_id'), 'reviews', ['customer_id'],
                    unique=False)
    op.create_index(op.f('ix_reviews_rating'), 'reviews', ['rating'], unique=False)
    op.create_index(op.f('ix_reviews_review_date'), 'reviews', ['review_date'],
                    unique=False)


def downgrade() -> None:
    op.drop_table('reviews')
    op.drop_table('order_items')
    op.drop_table('orders')
    op.drop_table('customers')
    op.drop_table('book_authors')
    op.drop_table('books')
    op.drop_table('authors')
    op.drop_table('categories')
    op.drop_table('publishers')
