"""
GraphQL Mutation Resolvers

Defines all write operations (mutations) for the GraphQL API.
Each mutation runs in its own transaction.
"""

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.types.comment import CommentType
from app.graphql.types.person import PersonType
from app.services import people as people_service


@strawberry.type
class Mutation:
    """GraphQL Mutation type containing all write operations."""

    @strawberry.mutation(description="Add a comment written by an existing person")
    def add_comment(
        self,
        info: Info[GraphQLContext, None],
        comment: str,
        person_id: strawberry.ID,
    ) -> CommentType:
        """
        Create a comment.

        Fails with NOT_FOUND if person_id is unknown and with
        BAD_USER_INPUT if the comment is empty. Nothing is written on failure.
        """
        created = people_service.create_comment(
            info.context.db,
            person_id=str(person_id),
            body=comment,
        )
        return CommentType.from_model(created)

    @strawberry.mutation(description="Add a new person")
    def add_person(
        self,
        info: Info[GraphQLContext, None],
        first_name: str,
        last_name: str,
        email: str,
        job_title: str,
        avatar: str | None = None,
    ) -> PersonType:
        """
        Create a person.

        Fails with BAD_USER_INPUT if a required field is empty or the
        email is malformed.
        """
        person = people_service.create_person(
            info.context.db,
            {
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "job_title": job_title,
                "avatar": avatar,
            },
        )
        return PersonType.from_model(person)
