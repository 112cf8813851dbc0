"""
Relationships: directed mentor -> student links between people.

Tables generated:
- relationship_types (only codes not already present)
- relationships

Mentors are people who graduated at least three years ago; students are
people graduating within the last five years or in the future. A person can
fall in both pools. Pairs are sampled uniformly; the target count is an upper
bound, not a guarantee.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from .. import console
from ..constants import (
    ACTIVE_STRENGTH_RANGE,
    INACTIVE_STATUSES,
    INACTIVE_STRENGTH_RANGE,
    MAX_MENTORS_PER_STUDENT,
    MAX_PAIR_ATTEMPTS,
    MENTOR_MIN_YEARS_SINCE_GRADUATION,
    PRIMARY_RELATIONSHIP_TYPE,
    RELATIONSHIP_TYPES,
    STUDENT_MAX_YEARS_SINCE_GRADUATION,
    Collections,
)
from ..identity import FixtureKeys, deterministic_id, new_id
from ..store import Row
from .base import BaseGenerator


def is_potential_mentor(person: Row, current_year: int) -> bool:
    year = person.get("graduation_year")
    return bool(year) and year <= current_year - MENTOR_MIN_YEARS_SINCE_GRADUATION


def is_potential_student(person: Row, current_year: int) -> bool:
    year = person.get("graduation_year")
    return bool(year) and year > current_year - STUDENT_MAX_YEARS_SINCE_GRADUATION


def pair_key(mentor_id: str, student_id: str) -> str:
    return f"{mentor_id}:{student_id}"


def relationship_type_name(code: str) -> str:
    return " ".join(word.capitalize() for word in code.split("_"))


class RelationshipsGenerator(BaseGenerator):
    """Generate relationship types and mentor/student relationships."""

    COLLECTION = Collections.RELATIONSHIPS
    LABEL = "relationships"

    def __init__(self, ctx) -> None:
        super().__init__(ctx)
        self.relationship_types: list[Row] = []

    def generate(self, people: Sequence[Row]) -> list[Row]:
        console.info("Generating relationships...")
        self.relationship_types = self.ensure_relationship_types()
        type_ids = {row["code"]: row["id"] for row in self.relationship_types}

        existing = self.fetch_existing()
        if existing is not None:
            return existing

        year = self.ctx.current_year
        mentors = [p for p in people if is_potential_mentor(p, year)]
        students = [p for p in people if is_potential_student(p, year)]

        relationships: list[Row] = []
        used_pairs: set[str] = set()

        if self.config.create_special_test_cases:
            fixture = self.fixture_relationship(people, type_ids)
            if fixture is not None:
                relationships.append(fixture)
                used_pairs.add(pair_key(fixture["from_person_id"], fixture["to_person_id"]))

        target = min(
            len(mentors) * self.config.relationships_per_person,
            len(students) * MAX_MENTORS_PER_STUDENT,
        )
        console.info(f"Generating {target} mentor-student relationships...")

        for i in range(target):
            pair = self.sample_pair(mentors, students, used_pairs)
            if pair is not None:
                mentor, student = pair
                relationships.append(self.build_relationship(mentor, student, type_ids))
            console.progress(i + 1, target, "relationships")

        self.persist(relationships)
        console.success(f"Successfully generated {len(relationships)} relationships")
        return relationships

    def ensure_relationship_types(self) -> list[Row]:
        """
        Insert any relationship type codes missing from the store.

        Returns:
            All relationship types (existing and created)
        """
        existing = self.store.fetch_all(Collections.RELATIONSHIP_TYPES)
        known_codes = {row["code"] for row in existing}
        missing = [
            {
                "id": new_id(),
                "code": code,
                "name": relationship_type_name(code),
                "description": f"A {code.replace('_', ' ')} relationship",
                "created_at": self.now,
            }
            for code in RELATIONSHIP_TYPES
            if code not in known_codes
        ]
        if missing:
            console.info(f"Creating {len(missing)} relationship types...")
            self.persist(missing, Collections.RELATIONSHIP_TYPES)
        return existing + missing

    def sample_pair(
        self,
        mentors: Sequence[Row],
        students: Sequence[Row],
        used_pairs: set[str],
    ) -> tuple[Row, Row] | None:
        """
        Sample an unused (mentor, student) pair and mark it used.

        Self-pairs count as used. Returns None after MAX_PAIR_ATTEMPTS misses.
        """
        for _ in range(MAX_PAIR_ATTEMPTS):
            mentor = self.random.pick(mentors)
            student = self.random.pick(students)
            key = pair_key(mentor["id"], student["id"])
            if mentor["id"] == student["id"] or key in used_pairs:
                continue
            used_pairs.add(key)
            return mentor, student
        return None

    def build_relationship(self, mentor: Row, student: Row, type_ids: dict[str, str]) -> Row:
        if self.random.boolean(0.8):
            code = PRIMARY_RELATIONSHIP_TYPE
        else:
            code = self.random.pick(RELATIONSHIP_TYPES)

        window_start = self.now - timedelta(days=self.config.relationship_max_age_days)
        start_date = self.random.date_between(window_start, self.now)

        is_active = self.random.boolean(self.config.active_mentorship_probability)
        end_date = None if is_active else self.random.date_between(start_date, self.now)
        strength_range = ACTIVE_STRENGTH_RANGE if is_active else INACTIVE_STRENGTH_RANGE

        return {
            "id": new_id(),
            "from_person_id": mentor["id"],
            "to_person_id": student["id"],
            "relationship_type_id": type_ids.get(code),
            "status": "active" if is_active else self.random.pick(INACTIVE_STATUSES),
            "start_date": start_date,
            "end_date": end_date,
            "strength_score": self.random.between(*strength_range),
            "created_at": start_date,
            "updated_at": end_date or start_date,
        }

    def fixture_relationship(self, people: Sequence[Row], type_ids: dict[str, str]) -> Row | None:
        """Active test mentor -> test student relationship, if both exist."""
        mentor_id = deterministic_id(FixtureKeys.TEST_MENTOR)
        student_id = deterministic_id(FixtureKeys.TEST_STUDENT)
        person_ids = {p["id"] for p in people}
        if mentor_id not in person_ids or student_id not in person_ids:
            console.warn("Test mentor or student missing; skipping test relationship")
            return None

        return {
            "id": deterministic_id(FixtureKeys.TEST_RELATIONSHIP),
            "from_person_id": mentor_id,
            "to_person_id": student_id,
            "relationship_type_id": type_ids.get(PRIMARY_RELATIONSHIP_TYPE),
            "status": "active",
            "start_date": datetime(self.ctx.current_year - 1, 1, 1, tzinfo=timezone.utc),
            "end_date": None,
            "strength_score": 85,
            "created_at": self.now,
            "updated_at": self.now,
        }
