"""
GraphQL Package

This package provides the GraphQL API using Strawberry GraphQL.

Features:
- Type-safe schema matching SQLAlchemy models
- Query resolvers for people and comments
- Mutation resolvers for creating people and comments
- Related records resolved on demand through explicit field resolvers
- Error details hidden in production

Usage:
    The GraphQL endpoint is available at POST /graphql. Outside
    production an interactive GraphiQL explorer is served at GET /graphql.

Example Query:
    query {
        people {
            fullName
            comments { comment }
        }
    }
"""

import logging

import strawberry
from graphql import GraphQLError
from strawberry.extensions import MaskErrors
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext
from strawberry.utils.logging import StrawberryLogger

from app.config import get_settings
from app.exceptions import APIError, InternalError
from app.graphql.context import get_context
from app.graphql.mutations import Mutation
from app.graphql.queries import Query

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An internal error occurred."


def is_client_error(error: GraphQLError) -> bool:
    """
    Whether an error is the client's fault and safe to show verbatim.

    Parse and validation errors come from graphql-core itself and carry
    no original exception. NotFound and ValidationError are raised by
    our services. Anything else is an internal failure.
    """
    original = error.original_error
    if original is None:
        return True
    return isinstance(original, APIError) and not isinstance(original, InternalError)


def should_mask_error(error: GraphQLError) -> bool:
    """Mask every internal failure (used only in production)."""
    return not is_client_error(error)


class PeopleSchema(strawberry.Schema):
    """Schema that logs client errors quietly and internal errors in full."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            if is_client_error(error):
                logger.info(f"GraphQL client error: {error.message}")
            else:
                StrawberryLogger.error(error, execution_context)


def create_schema(production: bool) -> PeopleSchema:
    """
    Build the GraphQL schema.

    Args:
        production: Mask internal error messages when True

    Returns:
        Schema with the Query and Mutation root types
    """
    extensions = []
    if production:
        # Strawberry builds a fresh extension instance per operation
        extensions.append(
            lambda: MaskErrors(
                should_mask_error=should_mask_error,
                error_message=GENERIC_ERROR_MESSAGE,
            )
        )

    return PeopleSchema(
        query=Query,
        mutation=Mutation,
        extensions=extensions,
    )


# Built once at import time and shared by every request
schema = create_schema(production=get_settings().is_production)


def create_graphql_router(graphql_schema: strawberry.Schema = schema) -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Queries are only accepted as POST; GET serves the explorer when enabled.

    Returns:
        GraphQLRouter configured with schema and context
    """
    settings = get_settings()
    return GraphQLRouter(
        graphql_schema,
        context_getter=get_context,
        graphql_ide=settings.graphql_ide if settings.graphql_ide_enabled else None,
        allow_queries_via_get=False,
    )


__all__ = ["schema", "create_schema", "create_graphql_router", "should_mask_error"]
