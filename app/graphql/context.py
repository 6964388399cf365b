"""
GraphQL Context

Provides request context to all GraphQL resolvers:
- Database session for queries and mutations
- Request information (set by Strawberry)

The context is created fresh for each GraphQL request and passed
to all resolvers via the `info` parameter.
"""

from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from app.database import get_db


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Inherits from Strawberry's BaseContext for proper integration.

    Attributes:
        db: SQLAlchemy database session scoped to the request
    """

    def __init__(self, db: Session):
        super().__init__()
        self.db = db


async def get_context(db: Session = Depends(get_db)) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    The session comes from the `get_db` dependency, so FastAPI closes it
    once the response has been sent, whether the request succeeded or not.
    Tests swap in their own session with `app.dependency_overrides`.

    Args:
        db: Request-scoped database session

    Returns:
        GraphQLContext with db session
    """
    return GraphQLContext(db=db)
