"""
GraphQL Field Resolvers

Explicit resolver functions for the fields that are not plain stored
columns. Each function is bound to exactly one (type, field) pair in
app/graphql/types:

    PersonType.full_name  -> resolve_person_full_name
    PersonType.comments   -> resolve_person_comments
    CommentType.person    -> resolve_comment_person

Related records are loaded only when the field is selected, while the
response tree is assembled. `as_utc` normalises the stored timestamps
the types expose.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.models.person import format_full_name
from app.services import people as people_service

if TYPE_CHECKING:
    from app.graphql.types.comment import CommentType
    from app.graphql.types.person import PersonType

PersonRef = Annotated["PersonType", strawberry.lazy("app.graphql.types.person")]
CommentRef = Annotated["CommentType", strawberry.lazy("app.graphql.types.comment")]


def as_utc(value: datetime) -> datetime:
    """
    Return a timestamp as an aware UTC datetime.

    PostgreSQL returns aware values; SQLite drops the offset on the way
    back, and stored values are always UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def resolve_person_full_name(root: PersonRef) -> str:
    """First and last name separated by a single space."""
    return format_full_name(root.first_name, root.last_name)


def resolve_person_comments(
    root: PersonRef,
    info: Info[GraphQLContext, None],
) -> list[CommentRef]:
    """Comments written by the person, oldest first."""
    # Import here to avoid circular imports
    from app.graphql.types.comment import CommentType

    comments = people_service.comments_for_person(info.context.db, root.id)
    return [CommentType.from_model(c) for c in comments]


def resolve_comment_person(
    root: CommentRef,
    info: Info[GraphQLContext, None],
) -> PersonRef:
    """The person who wrote the comment."""
    from app.graphql.types.person import PersonType

    person = people_service.find_person(info.context.db, root.person_id)
    return PersonType.from_model(person)
