"""
Organizations: schools, employers and community partners people affiliate with.

Table generated: organizations
"""

from .. import console
from ..constants import (
    COMMON_ORGANIZATIONS,
    NAME_ADJECTIVES,
    ORGANIZATION_NAME_SUFFIXES,
    ORGANIZATION_TYPE_WEIGHTS,
    Collections,
)
from ..identity import FixtureKeys, deterministic_id, new_id
from ..store import Row
from .base import BaseGenerator

FIXTURE_ORGANIZATION_NAME = "Test University"


class OrganizationsGenerator(BaseGenerator):
    """Generate organizations with type-appropriate names."""

    COLLECTION = Collections.ORGANIZATIONS
    LABEL = "organizations"

    def generate(self) -> list[Row]:
        console.info(f"Generating {self.config.organizations} organizations...")
        existing = self.fetch_existing()
        if existing is not None:
            return existing

        organizations: list[Row] = []

        if self.config.create_special_test_cases:
            organizations.append(
                {
                    "id": deterministic_id(FixtureKeys.ORGANIZATION),
                    "name": FIXTURE_ORGANIZATION_NAME,
                    "description": "A special test university for development",
                    "type": "university",
                    "metadata": {"isTestData": True},
                    "created_at": self.now,
                    "updated_at": self.now,
                }
            )

        target = self.config.organizations
        for common in COMMON_ORGANIZATIONS[: min(len(COMMON_ORGANIZATIONS), target)]:
            organizations.append(self._organization(common["name"], common["type"]))

        while len(organizations) < target:
            org_type = self.random.pick_weighted(ORGANIZATION_TYPE_WEIGHTS)
            organizations.append(self._organization(self.organization_name(org_type), org_type))

        self.persist(organizations)
        console.success(f"Successfully generated {len(organizations)} organizations")
        return organizations

    def organization_name(self, org_type: str) -> str:
        """Build a realistic name for the given organization type."""
        suffixes = ORGANIZATION_NAME_SUFFIXES.get(org_type)
        if org_type == "university":
            base = self.fake.city()
        elif org_type == "corporation":
            base = self.fake.last_name()
        elif org_type == "nonprofit":
            base = self.random.pick(NAME_ADJECTIVES)
        elif org_type == "k12":
            base = self.fake.street_name()
        else:
            return self.fake.company()
        return f"{base} {self.random.pick(suffixes)}".strip()

    def _organization(self, name: str, org_type: str) -> Row:
        created_at = self.timestamp()
        return {
            "id": new_id(),
            "name": name,
            "description": self.fake.catch_phrase(),
            "type": org_type,
            "metadata": None,
            "created_at": created_at,
            "updated_at": created_at,
        }
