"""Cat service module for CRUD operations."""

from sqlmodel import Session, col, select

from app.models.cat import Cat, CatCreate, CatUpdate
from app.services.utils import apply_update, get_or_404


def get_all_cats(session: Session) -> list[Cat]:
    return list(session.exec(select(Cat).order_by(col(Cat.id))).all())


def get_cat(session: Session, cat_id: int) -> Cat:
    """
    Retrieve a cat by ID.

    Raises:
        NotFoundError: If the cat doesn't exist.
    """
    return get_or_404(session, Cat, cat_id, "Cat")


def create_cat(session: Session, cat_in: CatCreate) -> Cat:
    cat = Cat.model_validate(cat_in)
    session.add(cat)
    session.commit()
    session.refresh(cat)
    return cat


def update_cat(session: Session, cat_id: int, cat_update: CatUpdate) -> Cat:
    """
    Update a cat with the fields present in `cat_update`.

    Raises:
        NotFoundError: If the cat doesn't exist.
    """
    cat = get_cat(session, cat_id)
    return apply_update(session, cat, cat_update)


def delete_cat(session: Session, cat_id: int) -> None:
    cat = get_cat(session, cat_id)
    session.delete(cat)
    session.commit()
