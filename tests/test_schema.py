"""
GraphQL Schema Tests

Tests for schema construction and error masking:
- Internal errors are shown in full outside production
- Internal errors are replaced by a generic message in production
- Client errors (NOT_FOUND, BAD_USER_INPUT, parse errors) are never masked
"""

import warnings

import pytest
from sqlalchemy.orm import Session

from app.exceptions import InternalError
from app.graphql import GENERIC_ERROR_MESSAGE, create_schema, schema
from app.graphql.context import GraphQLContext
from app.services import people as people_service


@pytest.fixture
def context(db_session: Session) -> GraphQLContext:
    return GraphQLContext(db=db_session)


@pytest.fixture
def broken_storage(monkeypatch):
    """Make list_people fail the way an unexpected runtime error would."""

    def fail(db):
        raise RuntimeError("connection to 10.0.0.5 refused")

    monkeypatch.setattr(people_service, "list_people", fail)


def test_schema_exposes_operations():
    """Test the schema declares the queries and mutations."""
    sdl = schema.as_str()

    assert "people: [PersonType!]!" in sdl
    assert "comments: [CommentType!]!" in sdl
    assert "person(id: ID!): PersonType" in sdl
    assert "addComment(comment: String!, personId: ID!): CommentType!" in sdl
    assert "addPerson(" in sdl
    assert "fullName: String!" in sdl
    assert "avatar: String\n" in sdl


def test_internal_error_detail_in_development(context, broken_storage):
    """Test development mode returns the original message."""
    result = create_schema(production=False).execute_sync(
        "query { people { id } }", context_value=context
    )

    assert result.errors[0].message == "connection to 10.0.0.5 refused"


def test_internal_error_masked_in_production(context, broken_storage):
    """Test production mode hides the original message."""
    result = create_schema(production=True).execute_sync(
        "query { people { id } }", context_value=context
    )

    assert result.errors[0].message == GENERIC_ERROR_MESSAGE


def test_internal_error_class_masked_in_production(context, monkeypatch):
    """Test InternalError raised by storage is masked too."""

    def fail(db):
        raise InternalError("Database error while listing people")

    monkeypatch.setattr(people_service, "list_comments", fail)

    result = create_schema(production=True).execute_sync(
        "query { comments { id } }", context_value=context
    )

    assert result.errors[0].message == GENERIC_ERROR_MESSAGE


def test_not_found_not_masked_in_production(context):
    """Test client errors keep their message in production."""
    result = create_schema(production=True).execute_sync(
        'query { person(id: "missing") { id } }', context_value=context
    )

    assert result.data == {"person": None}
    assert result.errors[0].message == "Person with ID missing not found"
    assert result.errors[0].extensions == {"code": "NOT_FOUND"}


def test_validation_error_not_masked_in_production(context):
    """Test document validation errors keep their message in production."""
    result = create_schema(production=True).execute_sync(
        "query { people { nickname } }", context_value=context
    )

    assert "nickname" in result.errors[0].message


def test_production_schema_extensions_not_deprecated(context):
    """Test the masking extension is registered the way Strawberry expects."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = create_schema(production=True).execute_sync(
            "query { people { id } }", context_value=context
        )

    assert result.errors is None
    assert not [
        w
        for w in caught
        if issubclass(w.category, DeprecationWarning)
        and "extension" in str(w.message).lower()
    ]
