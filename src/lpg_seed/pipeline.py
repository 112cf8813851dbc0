"""
SeedPipeline - Runs the generators in dependency order.

Stage order (each stage's output feeds the next):
    organizations -> activity_groups -> tags -> people -> relationships
    -> milestones -> interactions -> special_cases

Every stage is durable before the next starts. A failure in any stage stops
the run and is reported as PipelineError naming the stage; collections
written by earlier stages are left in place.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any

from . import console
from .config import SeedConfig
from .errors import PipelineError
from .generators import (
    ActivityGroupsGenerator,
    GeneratorContext,
    InteractionsGenerator,
    MilestonesGenerator,
    OrganizationsGenerator,
    PeopleGenerator,
    RelationshipsGenerator,
    SpecialCasesGenerator,
    TagsGenerator,
)
from .helpers import utc_now
from .randomization import RandomEngine
from .store import Store


@dataclass
class SeedSummary:
    """Record counts per entity family after a run (existing plus created)."""

    organizations: int = 0
    activity_groups: int = 0
    tags: int = 0
    people: int = 0
    affiliations: int = 0
    person_activities: int = 0
    relationship_types: int = 0
    relationships: int = 0
    milestone_templates: int = 0
    relationship_milestones: int = 0
    interactions: int = 0
    interaction_participants: int = 0
    special_cases: dict[str, int] = field(default_factory=dict)
    elapsed_seconds: float = 0.0

    def counts(self) -> dict[str, int]:
        """Entity family -> count, without the special-case breakdown."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("special_cases", "elapsed_seconds")
        }

    def print_report(self) -> None:
        console.section("Seeding summary")
        for name, count in self.counts().items():
            print(f"  {name.replace('_', ' ').capitalize():<26} {count:>8,}")
        if self.special_cases:
            print("\n  Special cases (created this run):")
            for name, count in self.special_cases.items():
                print(f"    {name:<24} {count:>8,}")
        print(f"\n  Completed in {self.elapsed_seconds:.2f}s")


class SeedPipeline:
    """
    Orchestrates one seeding run against a store.

    Args:
        store: Persistence target
        config: Validated seeding configuration
        seed: Random seed for reproducible output (None = nondeterministic)
        now: Reference time for the run (defaults to the current UTC time)
    """

    STAGES = (
        "organizations",
        "activity_groups",
        "tags",
        "people",
        "relationships",
        "milestones",
        "interactions",
        "special_cases",
    )

    def __init__(
        self,
        store: Store,
        config: SeedConfig,
        seed: int | None = None,
        now: datetime | None = None,
    ) -> None:
        self.ctx = GeneratorContext(
            config=config.validate(),
            store=store,
            random=RandomEngine(seed),
            now=now or utc_now(),
        )
        self.summary = SeedSummary()

    def run(self) -> SeedSummary:
        """
        Run every stage in order and return the summary.

        Raises:
            PipelineError: If any stage fails; later stages do not run
        """
        console.section("Starting database seeding")
        console.info(f"Config: {self.ctx.config.to_dict()}")
        start = time.time()
        ctx = self.ctx
        summary = self.summary

        organizations = self._stage("organizations", OrganizationsGenerator(ctx).generate)
        summary.organizations = len(organizations)

        activity_groups = self._stage("activity_groups", ActivityGroupsGenerator(ctx).generate)
        summary.activity_groups = len(activity_groups)

        tags = self._stage("tags", TagsGenerator(ctx).generate)
        summary.tags = len(tags)

        people_gen = PeopleGenerator(ctx)
        people = self._stage("people", people_gen.generate, organizations, activity_groups)
        summary.people = len(people)
        summary.affiliations = len(people_gen.affiliations)
        summary.person_activities = len(people_gen.activities)

        relationships_gen = RelationshipsGenerator(ctx)
        relationships = self._stage("relationships", relationships_gen.generate, people)
        summary.relationships = len(relationships)
        summary.relationship_types = len(relationships_gen.relationship_types)

        milestones_gen = MilestonesGenerator(ctx)
        achievements = self._stage("milestones", milestones_gen.generate, relationships)
        summary.relationship_milestones = len(achievements)
        summary.milestone_templates = len(milestones_gen.templates)

        interactions_gen = InteractionsGenerator(ctx)
        interactions = self._stage("interactions", interactions_gen.generate, people, relationships)
        summary.interactions = len(interactions)
        summary.interaction_participants = len(interactions_gen.participants)

        if ctx.config.create_special_test_cases:
            summary.special_cases = self._stage(
                "special_cases", SpecialCasesGenerator(ctx).generate, people, relationships
            )

        summary.elapsed_seconds = time.time() - start
        console.success("Database seeding completed successfully!")
        summary.print_report()
        return summary

    def _stage(self, name: str, step: Callable[..., Any], *upstream: Any) -> Any:
        console.info(f"Stage: {name}")
        try:
            return step(*upstream)
        except Exception as err:
            raise PipelineError(name, err) from err
