"""
pytest Fixtures for People API Tests

This file contains shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"
os.environ["GRAPHQL_IDE"] = "graphiql"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Comment, Person

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps tests fast and self-contained. Foreign keys are
# switched on for every SQLite connection by app.database, so cascades and
# FK checks behave as they do on PostgreSQL.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the entire session.
    Without it, the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is bound to a connection whose transaction is rolled back
    after the test, so commits made by the code under test never leak
    into other tests.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def committing_session(engine) -> Generator[Session, None, None]:
    """
    Create a session whose commits and rollbacks are real.

    Used where the code under test rolls back on failure: a rollback
    inside db_session would also discard the outer test transaction.
    Rows are deleted again afterwards.
    """
    session = Session(bind=engine, autoflush=False)

    yield session

    session.close()
    with Session(bind=engine) as cleanup:
        cleanup.execute(delete(Comment))
        cleanup.execute(delete(Person))
        cleanup.commit()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    The GraphQL context gets its session from get_db, so overriding that
    dependency routes every resolver to the test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_person(db_session: Session) -> Person:
    """Create a sample person for testing."""
    person = Person(
        first_name="Matt",
        last_name="Groff",
        email="matt@umbrage.com",
        job_title="Director of Engineering",
        avatar="https://www.gravatar.com/avatar/b21bbd4c0b7f75a0fbb469c238639eb7",
    )
    db_session.add(person)
    db_session.commit()
    db_session.refresh(person)
    return person


@pytest.fixture
def second_person(db_session: Session) -> Person:
    """Create a second person without an avatar."""
    person = Person(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        job_title="Analyst",
    )
    db_session.add(person)
    db_session.commit()
    db_session.refresh(person)
    return person


@pytest.fixture
def sample_comments(db_session: Session, sample_person: Person) -> list[Comment]:
    """Create the two sample comments written by sample_person."""
    comments = [
        Comment(person_id=sample_person.id, comment="This is a comment from Matt Groff"),
        Comment(person_id=sample_person.id, comment="This is another comment from Matt Groff"),
    ]
    db_session.add_all(comments)
    db_session.commit()
    for comment in comments:
        db_session.refresh(comment)
    return comments
