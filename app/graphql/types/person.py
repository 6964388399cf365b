"""
GraphQL Person Type

Defines the Person type for GraphQL queries.
"""

from datetime import datetime

import strawberry

from app.graphql.resolvers import (
    as_utc,
    CommentRef,
    resolve_person_comments,
    resolve_person_full_name,
)
from app.models import Person


@strawberry.type
class PersonType:
    """
    GraphQL type representing a person.

    Maps to the Person SQLAlchemy model. `fullName` is computed and
    `comments` is loaded only when selected.
    """

    id: strawberry.ID
    first_name: str
    last_name: str
    email: str
    job_title: str
    created_at: datetime
    updated_at: datetime
    avatar: str | None = None

    full_name: str = strawberry.field(
        resolver=resolve_person_full_name,
        description="First and last name separated by a space",
    )
    comments: list[CommentRef] = strawberry.field(
        resolver=resolve_person_comments,
        description="Comments written by this person",
    )

    @classmethod
    def from_model(cls, person: Person) -> "PersonType":
        """Convert SQLAlchemy Person model to GraphQL PersonType."""
        return cls(
            id=strawberry.ID(person.id),
            first_name=person.first_name,
            last_name=person.last_name,
            email=person.email,
            job_title=person.job_title,
            avatar=person.avatar,
            created_at=as_utc(person.created_at),
            updated_at=as_utc(person.updated_at),
        )
