"""
Services Package

This package contains business logic services that are:
- Separate from HTTP and GraphQL handling
- Reusable across the API, scripts and tests
- Easier to test in isolation

Current services:
- people.py: Storage operations for people and comments
"""
