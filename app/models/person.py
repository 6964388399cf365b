"""
Person Model

Represents a person who can author comments.

SQLAlchemy 2.0 Features Used:
- mapped_column(): Columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(): One-to-many link to Comment
- back_populates: Two-way relationship binding
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import uuid4

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.comment import Comment


def generate_id() -> str:
    """Return a fresh opaque identifier (UUID4 as a string)."""
    return str(uuid4())


def format_full_name(first_name: str | None, last_name: str | None) -> str:
    """
    Join first and last name with a single space.

    A missing or blank part is left out:
        >>> format_full_name("Matt", "Groff")
        'Matt Groff'
        >>> format_full_name("Matt", None)
        'Matt'
    """
    parts = (first_name, last_name)
    return " ".join(part.strip() for part in parts if part and part.strip())


class Person(Base):
    """
    Person model.

    Table: people

    Relationships:
    - comments: One-to-Many, deleted together with the person

    Example:
        person = Person(
            first_name="Matt",
            last_name="Groff",
            email="matt@umbrage.com",
            job_title="Director of Engineering",
        )
        db.add(person)
        db.commit()
    """

    __tablename__ = "people"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    # Opaque string identifiers, generated client-side so the id is known
    # before the INSERT and never changes afterwards.
    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_id,
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    first_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Given name"
    )
    last_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Family name"
    )
    email: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Contact email address"
    )
    job_title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Job title"
    )
    avatar: Mapped[str | None] = mapped_column(
        String(2048),
        nullable=True,
        comment="Avatar image URL"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=func.now(),
        nullable=False,
        comment="When the person record was created"
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=func.now(),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
        comment="When the person record was last updated"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # delete-orphan: a comment cannot outlive its person
    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="person",
        cascade="all, delete-orphan",
    )

    @property
    def full_name(self) -> str:
        """First and last name separated by a single space."""
        return format_full_name(self.first_name, self.last_name)

    def __repr__(self) -> str:
        return f"Person(id='{self.id}', email='{self.email}')"
