"""
Identity assignment for generated records.

Ordinary records get a random UUID4. Fixture records get a UUID5 derived
from a stable key, so re-runs and tests can address them by name:

    deterministic_id(FixtureKeys.TEST_MENTOR) == deterministic_id("test-mentor")
"""

import uuid

# Namespace for fixture ids. Changing it re-keys every fixture in existing stores.
FIXTURE_NAMESPACE = uuid.UUID("6f1c2b9e-3d4a-5e7f-8a9b-0c1d2e3f4a5b")


def new_id() -> str:
    """Return a random UUID in canonical text form."""
    return str(uuid.uuid4())


def deterministic_id(key: str) -> str:
    """
    Return a stable UUID derived from key.

    Args:
        key: Fixture key, e.g. "special-mentee-0"

    Returns:
        UUID text with the same shape as new_id()
    """
    return str(uuid.uuid5(FIXTURE_NAMESPACE, key))


class FixtureKeys:
    """Well-known keys for fixture records."""

    ORGANIZATION = "fixture-organization"
    ACTIVITY_GROUP = "fixture-activity-group"
    TAG = "fixture-tag"

    TEST_MENTOR = "test-mentor"
    TEST_STUDENT = "test-student"
    TEST_RELATIONSHIP = "test-relationship"
    TEST_RECENT_INTERACTION = "test-recent-interaction"
    TEST_UPCOMING_INTERACTION = "test-upcoming-interaction"

    NEGLECTED_MENTEE = "neglected-mentee"
    NEGLECTED_RELATIONSHIP = "neglected-relationship"
    NEGLECTED_INTERACTION = "neglected-interaction"

    @staticmethod
    def special_mentee(index: int) -> str:
        return f"special-mentee-{index}"

    @staticmethod
    def special_relationship(index: int) -> str:
        return f"special-relationship-{index}"
