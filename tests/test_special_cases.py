"""
Tests for the fixture scenarios.

A full pipeline run with the special-cases preset seeds the base data; the
scenarios are then checked record by record.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from lpg_seed.constants import Collections
from lpg_seed.errors import StoreError
from lpg_seed.generators import SpecialCasesGenerator
from lpg_seed.helpers import shift_months
from lpg_seed.identity import FixtureKeys, deterministic_id
from lpg_seed.pipeline import SeedPipeline
from lpg_seed.store import MemoryStore

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)
SEED = 42

MENTOR_ID = deterministic_id(FixtureKeys.TEST_MENTOR)
STUDENT_ID = deterministic_id(FixtureKeys.TEST_STUDENT)
TEST_RELATIONSHIP_ID = deterministic_id(FixtureKeys.TEST_RELATIONSHIP)


class RejectPeople(MemoryStore):
    """Rejects every insert into people."""

    def insert(self, collection, records):
        if collection == Collections.PEOPLE:
            raise StoreError("permission denied for table people")
        super().insert(collection, records)


@pytest.fixture
def seeded(store, small_config):
    """Store after one full run, plus the run's summary."""
    summary = SeedPipeline(store, small_config, seed=SEED, now=NOW).run()
    return store, summary


class TestMultipleMentees:
    """The test mentor with five special mentees."""

    def test_mentees_exist(self, seeded):
        store, _ = seeded
        for i in range(5):
            assert store.has_id(Collections.PEOPLE, deterministic_id(FixtureKeys.special_mentee(i)))

    def test_relationships(self, seeded):
        store, _ = seeded
        relationships = [
            store.fetch_where(Collections.RELATIONSHIPS, {"id": deterministic_id(FixtureKeys.special_relationship(i))})[0]
            for i in range(5)
        ]

        assert [r["strength_score"] for r in relationships] == [95, 80, 65, 40, None]
        assert [r["status"] for r in relationships] == ["active"] * 4 + ["pending"]
        assert all(r["from_person_id"] == MENTOR_ID for r in relationships)
        assert [r["start_date"] for r in relationships] == [shift_months(NOW, -2 * i) for i in range(5)]

    def test_first_three_checked_in(self, seeded):
        store, _ = seeded
        checkins = [
            store.fetch_where(Collections.PEOPLE, {"id": deterministic_id(FixtureKeys.special_mentee(i))})[0][
                "last_checkin_date"
            ]
            for i in range(5)
        ]
        assert all(c is not None for c in checkins[:3])
        assert checkins[3:] == [None, None]

    def test_mentor_has_at_least_six_relationships(self, seeded):
        store, _ = seeded
        assert len(store.fetch_where(Collections.RELATIONSHIPS, {"from_person_id": MENTOR_ID})) >= 6


class TestNeglectedMentee:
    """A relationship whose last interaction was three months ago."""

    def test_records(self, seeded):
        store, _ = seeded
        mentee_id = deterministic_id(FixtureKeys.NEGLECTED_MENTEE)
        relationship = store.fetch_where(
            Collections.RELATIONSHIPS, {"id": deterministic_id(FixtureKeys.NEGLECTED_RELATIONSHIP)}
        )[0]
        interaction = store.fetch_where(
            Collections.INTERACTIONS, {"id": deterministic_id(FixtureKeys.NEGLECTED_INTERACTION)}
        )[0]

        assert relationship["to_person_id"] == mentee_id
        assert relationship["strength_score"] == 45
        assert relationship["start_date"] == shift_months(NOW, -6)
        assert interaction["start_time"] == shift_months(NOW, -3)
        assert interaction["status"] == "completed"

        participants = store.fetch_where(Collections.INTERACTION_PARTICIPANTS, {"interaction_id": interaction["id"]})
        assert {(p["person_id"], p["role"]) for p in participants} == {(MENTOR_ID, "mentor"), (mentee_id, "mentee")}

    def test_no_recent_interactions(self, seeded):
        store, _ = seeded
        mentee_id = deterministic_id(FixtureKeys.NEGLECTED_MENTEE)
        interaction_ids = {
            p["interaction_id"]
            for p in store.fetch_where(Collections.INTERACTION_PARTICIPANTS, {"person_id": mentee_id})
        }
        for interaction_id in interaction_ids:
            interaction = store.fetch_where(Collections.INTERACTIONS, {"id": interaction_id})[0]
            assert interaction["start_time"] <= NOW - timedelta(days=60)


class TestAllMilestonesAndTags:
    """Scenarios (c) and (d)."""

    def test_every_template_achieved(self, seeded):
        store, _ = seeded
        templates = {t["id"] for t in store.fetch_all(Collections.MILESTONE_TEMPLATES)}
        achieved = [
            m["milestone_id"]
            for m in store.fetch_where(Collections.RELATIONSHIP_MILESTONES, {"relationship_id": TEST_RELATIONSHIP_ID})
        ]
        assert set(achieved) == templates
        assert len(achieved) == len(templates)

    def test_student_holds_ten_tags(self, seeded):
        store, _ = seeded
        tags = store.fetch_where(Collections.PERSON_TAGS, {"person_id": STUDENT_ID})
        assert len(tags) == 10
        assert len({t["tag_id"] for t in tags}) == 10

    def test_summary_counts(self, seeded):
        _, summary = seeded
        created = summary.special_cases
        assert created["multiple_mentees"] == 10
        assert created["neglected_mentee"] == 5
        assert created["many_tags"] == 10
        assert created["all_milestones"] >= 1


class TestRerunAndSoftFailures:
    """Record-level idempotency and soft failures."""

    def test_rerun_creates_nothing(self, seeded, ctx):
        store, _ = seeded
        people = store.fetch_all(Collections.PEOPLE)
        relationships = store.fetch_all(Collections.RELATIONSHIPS)
        calls = len(store.insert_calls)

        created = SpecialCasesGenerator(ctx).generate(people, relationships)

        assert created == {"multiple_mentees": 0, "neglected_mentee": 0, "all_milestones": 0, "many_tags": 0}
        assert len(store.insert_calls) == calls

    def test_missing_prerequisites(self, ctx, store):
        created = SpecialCasesGenerator(ctx).generate([], [])
        assert created == {"multiple_mentees": 0, "neglected_mentee": 0, "all_milestones": 0, "many_tags": 0}
        assert store.insert_calls == []

    def test_disabled(self, ctx):
        ctx.config = replace(ctx.config, create_special_test_cases=False)
        assert SpecialCasesGenerator(ctx).generate([], []) == {}

    def test_rejected_insert_skips_record(self, ctx):
        ctx.store = RejectPeople()
        mentor = {"id": MENTOR_ID, "graduation_year": 2000}

        created = SpecialCasesGenerator(ctx).mentor_with_multiple_mentees(mentor)

        # Mentees are rejected; the relationships are still attempted
        assert created == 5
        assert ctx.store.count(Collections.PEOPLE) == 0
        assert ctx.store.count(Collections.RELATIONSHIPS) == 5

    def test_neglected_stops_after_failed_mentee(self, ctx):
        ctx.store = RejectPeople()
        created = SpecialCasesGenerator(ctx).mentee_with_no_recent_interactions({"id": MENTOR_ID})

        assert created == 0
        assert ctx.store.counts() == {}
