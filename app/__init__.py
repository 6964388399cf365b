"""
People API Application Package

A GraphQL API for people and the comments they write.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- exceptions.py: Errors reported to API clients
- main.py: FastAPI application factory and configuration
- models/: SQLAlchemy ORM models
- schemas/: Pydantic input validation
- services/: Storage operations
- graphql/: Strawberry schema, types and resolvers
"""

__version__ = "0.1.0"
