"""
Activity groups: programs and clubs people take part in.

Table generated: activity_groups
"""

from .. import console
from ..constants import (
    ACTIVITY_CATEGORY_WEIGHTS,
    ACTIVITY_DEFAULT_SUFFIXES,
    ACTIVITY_NAME_SUFFIXES,
    CAREER_FIELDS,
    COMMON_ACTIVITY_GROUPS,
    NAME_ADJECTIVES,
    Collections,
)
from ..identity import FixtureKeys, deterministic_id, new_id
from ..store import Row
from .base import BaseGenerator


class ActivityGroupsGenerator(BaseGenerator):
    """Generate activity groups, mentorship-oriented ones first."""

    COLLECTION = Collections.ACTIVITY_GROUPS
    LABEL = "activity groups"

    def generate(self) -> list[Row]:
        console.info(f"Generating {self.config.activity_groups} activity groups...")
        existing = self.fetch_existing()
        if existing is not None:
            return existing

        groups: list[Row] = []

        if self.config.create_special_test_cases:
            groups.append(
                {
                    "id": deterministic_id(FixtureKeys.ACTIVITY_GROUP),
                    "name": "Test Activity Group",
                    "description": "A special test activity group for development",
                    "category": "academic",
                    "created_at": self.now,
                }
            )

        target = self.config.activity_groups
        for common in COMMON_ACTIVITY_GROUPS[: min(len(COMMON_ACTIVITY_GROUPS), target)]:
            groups.append(self._group(common["name"], common["category"]))

        while len(groups) < target:
            category = self.random.pick_weighted(ACTIVITY_CATEGORY_WEIGHTS)
            groups.append(self._group(self.group_name(category), category))

        self.persist(groups)
        console.success(f"Successfully generated {len(groups)} activity groups")
        return groups

    def group_name(self, category: str) -> str:
        suffix = self.random.pick(ACTIVITY_NAME_SUFFIXES.get(category, ACTIVITY_DEFAULT_SUFFIXES))
        if category == "career":
            return f"{self.random.pick(CAREER_FIELDS)} {suffix}"
        return f"{self.random.pick(NAME_ADJECTIVES)} {suffix}"

    def _group(self, name: str, category: str) -> Row:
        return {
            "id": new_id(),
            "name": name,
            "description": self.fake.sentence(),
            "category": category,
            "created_at": self.timestamp(),
        }
