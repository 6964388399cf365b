"""
Test Suite for People API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_people_service.py: Storage operations for people and comments
- test_graphql.py: Queries, mutations and error reporting over HTTP
- test_schema.py: Schema shape and production error masking
- test_config.py: Settings validation
- test_seed.py: Seed script

Running Tests:
    pip install -e ".[test]"
    pytest
    pytest tests/test_graphql.py -v
"""
