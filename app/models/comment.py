"""
Comment Model

A free-text comment written by exactly one Person.

Business Rules:
- person_id must reference an existing person (foreign key)
- Comments are deleted when their person is deleted
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.person import generate_id

if TYPE_CHECKING:
    from app.models.person import Person


class Comment(Base):
    """
    Comment model.

    Attributes:
        id: Primary key (UUID string)
        comment: Comment body
        person_id: Foreign key to people table
        created_at: When the comment was created
        updated_at: When the comment was last updated
    """

    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_id,
    )

    comment: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Comment body",
    )

    person_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("people.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=func.now(),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    person: Mapped["Person"] = relationship("Person", back_populates="comments")

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, person_id={self.person_id})>"
