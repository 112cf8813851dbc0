"""
Tags: labels attached to people (interests, skills, program status...).

Table generated: tags
"""

from .. import console
from ..constants import COMMON_TAGS, TAG_CATEGORY_WEIGHTS, TAG_NAMES, Collections
from ..identity import FixtureKeys, deterministic_id, new_id
from ..store import Row
from .base import BaseGenerator


class TagsGenerator(BaseGenerator):
    """Generate tags with unique names."""

    COLLECTION = Collections.TAGS
    LABEL = "tags"

    def generate(self) -> list[Row]:
        console.info(f"Generating {self.config.tags_total} tags...")
        existing = self.fetch_existing()
        if existing is not None:
            return existing

        tags: list[Row] = []

        if self.config.create_special_test_cases:
            tags.append(
                {
                    "id": deterministic_id(FixtureKeys.TAG),
                    "name": "Test Tag",
                    "category": "status",
                    "color": "#FF5733",
                    "created_at": self.now,
                    "updated_at": self.now,
                }
            )

        target = self.config.tags_total
        for common in COMMON_TAGS[: min(len(COMMON_TAGS), target)]:
            tags.append(self._tag(common["name"], common["category"], common["color"]))

        names = {tag["name"] for tag in tags}
        while len(tags) < target:
            category = self.random.pick_weighted(TAG_CATEGORY_WEIGHTS)
            name = self.tag_name(category)
            base_name = name
            while name in names:
                name = f"{base_name} {self.fake.bothify('????').upper()}"
            names.add(name)
            tags.append(self._tag(name, category, self.fake.hex_color().upper()))

        self.persist(tags)
        console.success(f"Successfully generated {len(tags)} tags")
        return tags

    def tag_name(self, category: str) -> str:
        if category == "location":
            return self.fake.city()
        return self.random.pick(TAG_NAMES[category])

    def _tag(self, name: str, category: str, color: str) -> Row:
        created_at = self.timestamp()
        return {
            "id": new_id(),
            "name": name,
            "category": category,
            "color": color,
            "created_at": created_at,
            "updated_at": created_at,
        }
