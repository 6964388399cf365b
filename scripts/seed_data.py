#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample data for development.

USAGE:
    # Make sure you're in the project root with venv activated
    python scripts/seed_data.py

    # Keep existing rows instead of clearing them first
    python scripts/seed_data.py --keep

This script:
1. Connects to the database using app settings
2. Clears existing data (unless --keep is given)
3. Creates Matt Groff and two comments written by him
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.database import SessionLocal, create_tables
from app.models import Comment, Person
from app.services import people as people_service

SEED_PERSON = {
    "first_name": "Matt",
    "last_name": "Groff",
    "email": "matt@umbrage.com",
    "job_title": "Director of Engineering",
    "avatar": "https://www.gravatar.com/avatar/b21bbd4c0b7f75a0fbb469c238639eb7",
}

SEED_COMMENTS = [
    "This is a comment from Matt Groff",
    "This is another comment from Matt Groff",
]


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Comment))
    db.execute(delete(Person))
    db.commit()
    print("Data cleared.")


def create_people(db: Session) -> Person:
    """Create the sample person."""
    print("Creating people...")
    person = people_service.create_person(db, SEED_PERSON)
    print(f"Created {person.full_name} ({person.id}).")
    return person


def create_comments(db: Session, person: Person) -> list[Comment]:
    """Create the sample comments for a person."""
    print("Creating comments...")
    comments = [
        people_service.create_comment(db, person_id=person.id, body=body)
        for body in SEED_COMMENTS
    ]
    print(f"Created {len(comments)} comments.")
    return comments


def seed(db: Session, clear_existing: bool = True) -> tuple[Person, list[Comment]]:
    """
    Seed an open session.

    Args:
        db: Database session
        clear_existing: If True, clears existing data before seeding.

    Returns:
        The seeded person and their comments
    """
    if clear_existing:
        clear_data(db)

    person = create_people(db)
    comments = create_comments(db, person)
    return person, comments


def seed_database(clear_existing: bool = True) -> None:
    """Create tables if needed and seed them in a fresh session."""
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        person, comments = seed(db, clear_existing=clear_existing)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - People: 1 ({person.full_name})")
        print(f"  - Comments: {len(comments)}")
        print("\nYou can now query the API at http://localhost:8001/graphql")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the People API database")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing rows instead of clearing them first",
    )
    args = parser.parse_args()

    seed_database(clear_existing=not args.keep)


if __name__ == "__main__":
    main()
