"""
People Service

Storage operations for people and their comments.

Every function takes an explicit SQLAlchemy session so the caller
decides its scope (one per HTTP request, one per seed run, one per test).
Writes commit exactly once; on a database failure the session is
rolled back and an InternalError is raised, so no partial write is
ever visible.
"""

import logging
from collections.abc import Mapping
from typing import Any

import pydantic
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from strawberry.utils.str_converters import to_camel_case

from app.exceptions import InternalError, NotFoundError, ValidationError
from app.models import Comment, Person
from app.schemas import CommentCreate, PersonCreate

logger = logging.getLogger(__name__)


def _argument_name(loc: tuple) -> str:
    """Name an invalid field the way clients spell it, e.g. `firstName`."""
    return ".".join(to_camel_case(str(part)) for part in loc)


def _validate(schema: type[pydantic.BaseModel], data: Mapping[str, Any]):
    """Validate input with a Pydantic schema, raising our ValidationError."""
    try:
        return schema.model_validate(dict(data))
    except pydantic.ValidationError as e:
        fields = [_argument_name(err["loc"]) for err in e.errors()]
        details = "; ".join(
            f"{_argument_name(err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(f"Invalid input: {details}", fields=fields) from e


def _commit(db: Session, action: str) -> None:
    """Commit the session, rolling back and wrapping database failures."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error while {action}: {e}")
        raise InternalError(f"Database error while {action}") from e


# =============================================================================
# People
# =============================================================================


def create_person(db: Session, fields: Mapping[str, Any]) -> Person:
    """
    Create a person.

    Args:
        db: Database session
        fields: first_name, last_name, email, job_title and optional avatar

    Returns:
        The persisted Person with a freshly generated id

    Raises:
        ValidationError: If a required field is empty or the email is malformed
    """
    data = _validate(PersonCreate, fields)

    person = Person(**data.model_dump())
    db.add(person)
    _commit(db, "creating person")
    db.refresh(person)

    logger.info(f"Created person {person.id}")
    return person


def find_person(db: Session, person_id: str) -> Person:
    """
    Get a person by ID.

    Raises:
        NotFoundError: If no person has this ID
    """
    person = db.get(Person, person_id)
    if person is None:
        raise NotFoundError(f"Person with ID {person_id} not found")
    return person


def list_people(db: Session) -> list[Person]:
    """Get all people, oldest first."""
    stmt = select(Person).order_by(Person.created_at, Person.id)
    return list(db.execute(stmt).scalars().all())


def delete_person(db: Session, person_id: str) -> None:
    """
    Delete a person together with all of their comments.

    Raises:
        NotFoundError: If no person has this ID
    """
    person = find_person(db, person_id)
    db.delete(person)
    _commit(db, "deleting person")
    logger.info(f"Deleted person {person_id}")


def count_people(db: Session) -> int:
    """Count stored people."""
    return db.execute(select(func.count(Person.id))).scalar() or 0


# =============================================================================
# Comments
# =============================================================================


def create_comment(db: Session, person_id: str, body: str) -> Comment:
    """
    Create a comment for an existing person.

    The body is validated first, then the person is looked up; nothing
    is written unless both checks pass.

    Args:
        db: Database session
        person_id: ID of the person writing the comment
        body: Comment text

    Returns:
        The persisted Comment

    Raises:
        ValidationError: If the body is empty
        NotFoundError: If person_id does not resolve to a person
    """
    data = _validate(CommentCreate, {"person_id": person_id, "comment": body})

    person = find_person(db, data.person_id)

    comment = Comment(comment=data.comment, person_id=person.id)
    db.add(comment)
    try:
        db.commit()
    except IntegrityError as e:
        # The person was deleted between the lookup and the insert
        db.rollback()
        raise NotFoundError(f"Person with ID {person_id} not found") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error while creating comment: {e}")
        raise InternalError("Database error while creating comment") from e
    db.refresh(comment)

    logger.info(f"Created comment {comment.id} for person {person.id}")
    return comment


def find_comment(db: Session, comment_id: str) -> Comment:
    """
    Get a comment by ID.

    Raises:
        NotFoundError: If no comment has this ID
    """
    comment = db.get(Comment, comment_id)
    if comment is None:
        raise NotFoundError(f"Comment with ID {comment_id} not found")
    return comment


def list_comments(db: Session) -> list[Comment]:
    """Get all comments, oldest first."""
    stmt = select(Comment).order_by(Comment.created_at, Comment.id)
    return list(db.execute(stmt).scalars().all())


def comments_for_person(db: Session, person_id: str) -> list[Comment]:
    """Get the comments written by one person, oldest first."""
    stmt = (
        select(Comment)
        .where(Comment.person_id == person_id)
        .order_by(Comment.created_at, Comment.id)
    )
    return list(db.execute(stmt).scalars().all())


def count_comments(db: Session) -> int:
    """Count stored comments."""
    return db.execute(select(func.count(Comment.id))).scalar() or 0
