"""
GraphQL Comment Type

Defines the Comment type for GraphQL queries.
"""

from datetime import datetime

import strawberry

from app.graphql.resolvers import PersonRef, as_utc, resolve_comment_person
from app.models import Comment


@strawberry.type
class CommentType:
    """
    GraphQL type representing a comment.

    Maps to the Comment SQLAlchemy model. The owning person is loaded
    only when `person` is selected.
    """

    id: strawberry.ID
    comment: str
    created_at: datetime
    updated_at: datetime

    # Foreign key kept for the person resolver, not exposed in the schema
    person_id: strawberry.Private[str]

    person: PersonRef = strawberry.field(
        resolver=resolve_comment_person,
        description="The person who wrote this comment",
    )

    @classmethod
    def from_model(cls, comment: Comment) -> "CommentType":
        """Convert SQLAlchemy Comment model to GraphQL CommentType."""
        return cls(
            id=strawberry.ID(comment.id),
            comment=comment.comment,
            created_at=as_utc(comment.created_at),
            updated_at=as_utc(comment.updated_at),
            person_id=comment.person_id,
        )
