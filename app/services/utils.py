"""Helpers shared by the CRUD services."""

from datetime import datetime
from typing import Any, TypeVar

from sqlmodel import Session, SQLModel

from app.exceptions.crud import NotFoundError

M = TypeVar("M", bound=SQLModel)


def get_or_404(
    session: Session, model: type[M], record_id: int, label: str | None = None
) -> M:
    """
    Load a row by primary key.

    `label` is the resource name used in the error message; it defaults to the
    model's class name.

    Raises:
        NotFoundError: No row has that id.
    """
    record = session.get(model, record_id)
    if record is None:
        raise NotFoundError(label or model.__name__, record_id)
    return record


def apply_update(session: Session, entity: M, changes: SQLModel) -> M:
    """
    Copy the fields explicitly set on `changes` onto `entity`, bump `updated_at` and commit.
    """
    update_data: dict[str, Any] = changes.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(entity, key, value)
    if hasattr(entity, "updated_at"):
        setattr(entity, "updated_at", datetime.now())

    session.add(entity)
    session.commit()
    session.refresh(entity)
    return entity
