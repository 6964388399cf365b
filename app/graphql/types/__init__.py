"""
GraphQL Types Package

This package contains the GraphQL type definitions that map to our
SQLAlchemy models. Types are defined using Strawberry's decorator syntax.

Types defined here:
- PersonType: Person with computed full name and their comments
- CommentType: Comment with the person who wrote it
"""

from app.graphql.types.comment import CommentType
from app.graphql.types.person import PersonType

__all__ = [
    "PersonType",
    "CommentType",
]
