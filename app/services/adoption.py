"""Adoption service module for CRUD operations."""

from sqlmodel import Session, col, select

from app.models.adoption import Adoption, AdoptionCreate, AdoptionUpdate
from app.models.cat import Cat
from app.models.user import User
from app.services.utils import apply_update, get_or_404


def get_all_adoptions(session: Session) -> list[Adoption]:
    return list(session.exec(select(Adoption).order_by(col(Adoption.id))).all())


def get_adoption(session: Session, adoption_id: int) -> Adoption:
    return get_or_404(session, Adoption, adoption_id, "Adoption")


def create_adoption(session: Session, adoption_in: AdoptionCreate) -> Adoption:
    """
    Create an adoption record.

    Parameters:
        session: Database session.
        adoption_in: Adoption data; the referenced cat(s) and user must exist.

    Returns:
        Adoption: The created adoption.

    Raises:
        NotFoundError: If the cat, the companion cat or the user doesn't exist.
    """
    get_or_404(session, Cat, adoption_in.cat_id, "Cat")
    get_or_404(session, User, adoption_in.user_id, "User")
    if adoption_in.adopted_with is not None:
        get_or_404(session, Cat, adoption_in.adopted_with, "Cat")

    adoption = Adoption.model_validate(adoption_in)
    session.add(adoption)
    session.commit()
    session.refresh(adoption)
    return adoption


def update_adoption(
    session: Session, adoption_id: int, adoption_update: AdoptionUpdate
) -> Adoption:
    adoption = get_adoption(session, adoption_id)
    if adoption_update.adopted_with is not None:
        get_or_404(session, Cat, adoption_update.adopted_with, "Cat")
    return apply_update(session, adoption, adoption_update)


def delete_adoption(session: Session, adoption_id: int) -> None:
    adoption = get_adoption(session, adoption_id)
    session.delete(adoption)
    session.commit()
