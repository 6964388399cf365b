"""
Seed Script Tests

Tests that scripts/seed_data.py creates the sample person and comments
and that they are reachable through the GraphQL API.
"""

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.services import people as people_service
from scripts.seed_data import SEED_COMMENTS, seed


def test_seed_creates_person_and_comments(db_session: Session):
    """Test seeding creates one person with two comments."""
    person, comments = seed(db_session)

    assert person.full_name == "Matt Groff"
    assert person.email == "matt@umbrage.com"
    assert person.avatar.startswith("https://www.gravatar.com/avatar/")
    assert len(comments) == 2
    assert {c.person_id for c in comments} == {person.id}


def test_seed_clears_existing_data(db_session: Session):
    """Test seeding twice leaves a single copy of the data."""
    seed(db_session)
    seed(db_session)

    assert people_service.count_people(db_session) == 1
    assert people_service.count_comments(db_session) == 2


def test_seeded_people_query(client: TestClient, db_session: Session):
    """Test `people { comments { comment } }` returns the two seeded bodies."""
    seed(db_session)

    response = client.post(
        "/graphql",
        json={"query": "query { people { comments { comment } } }"},
    )
    result = response.json()

    assert "errors" not in result
    assert len(result["data"]["people"]) == 1
    bodies = [c["comment"] for c in result["data"]["people"][0]["comments"]]
    assert sorted(bodies) == sorted(SEED_COMMENTS)
