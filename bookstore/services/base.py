"""
Service Helpers

Small building blocks shared by every service module:
- load_input: turn a dict or schema instance into a validated schema,
  reporting problems as ConstraintViolation
- get_or_raise: fetch a row by primary key or raise NotFound
- reject_nulls: refuse explicit None for NOT NULL columns in an update
- flush_or_conflict: flush pending writes, reporting unique/check
  violations from the database as ConstraintViolation
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import exc as sa_exc
from sqlalchemy.orm import Session

from bookstore.exceptions import ConstraintViolation, NotFound

SchemaT = TypeVar("SchemaT", bound=BaseModel)
ModelT = TypeVar("ModelT")


def load_input(
    schema: type[SchemaT],
    data: SchemaT | Mapping[str, Any] | None = None,
    **fields: Any,
) -> SchemaT:
    """
    Validate service input against ``schema``.

    Accepts an existing schema instance (returned unchanged), a mapping,
    or keyword fields.

    Raises:
        ConstraintViolation: with the pydantic error list as details
    """
    if isinstance(data, schema) and not fields:
        return data
    payload: dict[str, Any] = {}
    if isinstance(data, BaseModel):
        payload.update(data.model_dump(exclude_unset=True))
    elif data is not None:
        payload.update(data)
    payload.update(fields)
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise ConstraintViolation(
            f"Invalid {schema.__name__} input",
            details=e.errors(
                include_url=False, include_context=False, include_input=False
            ),
        ) from e


def get_or_raise(db: Session, model: type[ModelT], entity_id: Any) -> ModelT:
    """Get a row by primary key or raise NotFound."""
    instance = db.get(model, entity_id)
    if instance is None:
        raise NotFound(model.__name__, entity_id)
    return instance


def reject_nulls(entity: str, changes: Mapping[str, Any], fields: tuple[str, ...]) -> None:
    """Raise ConstraintViolation if an update sets a required field to None."""
    for field in fields:
        if field in changes and changes[field] is None:
            raise ConstraintViolation(f"{entity} {field} cannot be null")


@contextmanager
def flush_or_conflict(db: Session, message: str) -> Iterator[None]:
    """
    Flush the session, mapping database integrity failures.

    Unique violations become ConstraintViolation(conflict=True); other
    integrity failures (check constraints) become ConstraintViolation.
    The surrounding unit of work performs the rollback.
    """
    try:
        yield
        db.flush()
    except sa_exc.IntegrityError as e:
        text = str(e.orig).lower()
        conflict = "unique" in text or "duplicate" in text
        raise ConstraintViolation(
            message,
            details={"db_error": str(e.orig)},
            conflict=conflict,
        ) from e
