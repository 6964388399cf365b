"""
GraphQL Query Resolvers

Defines all read operations for the GraphQL API.
"""

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.types.comment import CommentType
from app.graphql.types.person import PersonType
from app.services import people as people_service


@strawberry.type
class Query:
    """
    GraphQL Query type containing all read operations.

    All resolvers receive an `info` parameter that contains the
    GraphQL context with the request's database session.
    """

    @strawberry.field(description="Get all comments")
    def comments(self, info: Info[GraphQLContext, None]) -> list[CommentType]:
        """Get every comment, oldest first."""
        db = info.context.db
        return [CommentType.from_model(c) for c in people_service.list_comments(db)]

    @strawberry.field(description="Get all people")
    def people(self, info: Info[GraphQLContext, None]) -> list[PersonType]:
        """Get every person, oldest first."""
        db = info.context.db
        return [PersonType.from_model(p) for p in people_service.list_people(db)]

    @strawberry.field(description="Get a single person by ID")
    def person(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> PersonType | None:
        """
        Get a single person by their ID.

        An unknown ID is reported as a NOT_FOUND error on this field only;
        other fields in the same request still resolve.
        """
        person = people_service.find_person(info.context.db, str(id))
        return PersonType.from_model(person)
