"""
Pydantic Schemas Package

This package contains Pydantic models that validate submitted data
before it reaches the database.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Validation: Input rules live in one place for every caller
   (GraphQL mutations, seed script, tests)
2. Decoupling: Database schema can evolve independently of input rules

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
"""

from app.schemas.comment import CommentCreate
from app.schemas.person import PersonCreate

__all__ = [
    "PersonCreate",
    "CommentCreate",
]
