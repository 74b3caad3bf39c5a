"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookstore.database import get_db

# Instead of writing:
#   def list_books(db: Session = Depends(get_db)):
#
# You can write:
#   def list_books(db: DbSession):
DbSession = Annotated[Session, Depends(get_db)]
