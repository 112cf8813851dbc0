"""
Milestones: shared templates and per-relationship achievements.

Tables generated:
- mentor_milestones (templates, seeded once)
- relationship_milestones
"""

from collections.abc import Sequence

from .. import console
from ..config import DEFAULT_BATCH_SIZE, LINK_BATCH_SIZE
from ..constants import MILESTONE_TEMPLATES, Collections
from ..helpers import as_datetime
from ..identity import new_id
from ..store import Row
from .base import BaseGenerator

INACTIVE_SKIP_PROBABILITY = 0.3


class MilestonesGenerator(BaseGenerator):
    """
    Generate milestone achievements for relationships.

    Required templates are attempted first, each with the configured
    probability; optional templates then fill the remaining slots in
    random order. A template is achieved at most once per relationship.
    """

    COLLECTION = Collections.RELATIONSHIP_MILESTONES
    LABEL = "relationship milestones"
    BATCH_SIZE = LINK_BATCH_SIZE

    def __init__(self, ctx) -> None:
        super().__init__(ctx)
        self.templates: list[Row] = []

    def generate(self, relationships: Sequence[Row]) -> list[Row]:
        console.info("Generating relationship milestones...")
        existing = self.fetch_existing()
        if existing is not None:
            self.templates = self.store.fetch_all(Collections.MILESTONE_TEMPLATES)
            return existing

        self.templates = self.ensure_templates()
        required = [t for t in self.templates if t.get("is_required") is True]
        optional = [t for t in self.templates if t.get("is_required") is not True]

        achievements: list[Row] = []
        for i, relationship in enumerate(relationships):
            achievements.extend(self.achievements_for(relationship, required, optional))
            console.progress(i + 1, len(relationships), "relationships processed")

        self.persist(achievements)
        console.success(f"Successfully generated {len(achievements)} relationship milestones")
        return achievements

    def ensure_templates(self) -> list[Row]:
        existing = self.fetch_existing(Collections.MILESTONE_TEMPLATES, "milestone templates")
        if existing is not None:
            return existing

        templates = [
            {"id": new_id(), **template, "created_at": self.now, "updated_at": self.now}
            for template in MILESTONE_TEMPLATES
        ]
        self.persist(templates, Collections.MILESTONE_TEMPLATES, DEFAULT_BATCH_SIZE)
        console.success(f"Successfully generated {len(templates)} milestone templates")
        return templates

    def achievements_for(
        self,
        relationship: Row,
        required: Sequence[Row],
        optional: Sequence[Row],
    ) -> list[Row]:
        """Achievements for one relationship (may be empty)."""
        if relationship.get("status") != "active" and self.random.boolean(INACTIVE_SKIP_PROBABILITY):
            return []

        target = self.random.between(0, self.config.milestones_per_relationship)
        used: set[str] = set()
        achievements: list[Row] = []

        for template in required:
            if template["id"] in used:
                continue
            if self.random.boolean(self.config.required_milestone_probability):
                used.add(template["id"])
                achievements.append(self._achievement(relationship, template, 0.7, 0.3))

        remaining = target - len(achievements)
        if remaining > 0:
            for template in self.random.shuffle(optional)[:remaining]:
                if template["id"] in used:
                    continue
                used.add(template["id"])
                achievements.append(self._achievement(relationship, template, 0.6, 0.2))

        return achievements

    def _achievement(
        self,
        relationship: Row,
        template: Row,
        notes_probability: float,
        evidence_probability: float,
    ) -> Row:
        start = as_datetime(relationship.get("start_date")) or self.config.start_date
        achieved = self.random.date_between(start, self.now)
        notes = " ".join(self.fake.sentences(nb=2)) if self.random.boolean(notes_probability) else None
        return {
            "id": new_id(),
            "relationship_id": relationship["id"],
            "milestone_id": template["id"],
            "achieved_date": achieved,
            "notes": notes,
            "evidence_url": self.fake.url() if self.random.boolean(evidence_probability) else None,
            "created_by": relationship.get("from_person_id"),
            "created_at": achieved,
            "updated_at": achieved,
        }
