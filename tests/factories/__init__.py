"""Test factories for creating test data."""

from tests.factories.users import LogEntryFactory, UserFactory

__all__ = [
    "LogEntryFactory",
    "UserFactory",
]
