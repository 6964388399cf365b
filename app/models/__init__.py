"""
SQLAlchemy Models Package

This package contains all database models for the People API.

Model Relationships:
- Person -> Comment: One-to-Many (a person writes many comments,
                     every comment belongs to exactly one person)

Import all models here to:
1. Make them available as: from app.models import Person, Comment
2. Ensure Alembic discovers them for migrations
"""

# The order matters for SQLAlchemy to resolve relationships
from app.models.person import Person
from app.models.comment import Comment

__all__ = [
    "Person",
    "Comment",
]
