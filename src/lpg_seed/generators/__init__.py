"""
Generators Package - One generator per entity family.

Each generator gates on its collection, builds records, persists them in
batches and returns the collection for downstream generators.

Modules:
- base: GeneratorContext and the BaseGenerator abstract class
- organizations, activity_groups, tags: reference entities
- people: people, affiliations, activity memberships
- relationships: relationship types and mentor/student relationships
- milestones: milestone templates and achievements
- interactions: interactions and their participants
- special_cases: fixture scenarios for UI development and testing

Usage:
    from lpg_seed.generators import GeneratorContext, PeopleGenerator

    ctx = GeneratorContext(config=DEV_CONFIG, store=MemoryStore())
    people = PeopleGenerator(ctx).generate(organizations, activity_groups)
"""

from .activity_groups import ActivityGroupsGenerator
from .base import BaseGenerator, GeneratorContext
from .interactions import InteractionsGenerator
from .milestones import MilestonesGenerator
from .organizations import OrganizationsGenerator
from .people import PeopleGenerator
from .relationships import RelationshipsGenerator
from .special_cases import SpecialCasesGenerator
from .tags import TagsGenerator

__all__ = [
    # Base
    "BaseGenerator",
    "GeneratorContext",
    # Reference entities
    "OrganizationsGenerator",
    "ActivityGroupsGenerator",
    "TagsGenerator",
    # People and links
    "PeopleGenerator",
    "RelationshipsGenerator",
    "MilestonesGenerator",
    "InteractionsGenerator",
    # Fixtures
    "SpecialCasesGenerator",
]
