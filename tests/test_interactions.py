"""
Tests for the interactions generator.

The bulk tests build 10,000 interactions directly through build_interaction()
so score bounds and status-conditioned nullability are checked over a large
sample without touching the store.
"""

from collections import Counter
from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from lpg_seed.config import DEFAULT_CONFIG
from lpg_seed.constants import (
    INTERACTION_TYPES,
    PERIPHERAL_ROLES,
    QUALITY_SCORE_RANGE,
    RECIPROCITY_SCORE_RANGE,
    SENTIMENT_SCORE_RANGE,
    Collections,
)
from lpg_seed.generators import GeneratorContext, InteractionsGenerator
from lpg_seed.identity import FixtureKeys, deterministic_id
from lpg_seed.randomization import RandomEngine
from lpg_seed.store import MemoryStore

SAMPLE_SIZE = 10_000
NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)

RELATIONSHIP = {
    "id": "rel-1",
    "from_person_id": "mentor-1",
    "to_person_id": "student-1",
    "status": "active",
    "start_date": datetime(2024, 1, 1, tzinfo=timezone.utc),
    "end_date": None,
}

PEOPLE = [{"id": "mentor-1"}, {"id": "student-1"}] + [{"id": f"guest-{i}"} for i in range(6)]


@pytest.fixture(scope="module")
def sample():
    """10,000 (interaction, participants) pairs from one seeded generator."""
    ctx = GeneratorContext(config=DEFAULT_CONFIG, store=MemoryStore(), random=RandomEngine(seed=1), now=NOW)
    gen = InteractionsGenerator(ctx)
    return NOW, [gen.build_interaction(RELATIONSHIP, PEOPLE) for _ in range(SAMPLE_SIZE)]


class TestBulkInteractions:
    """Invariants over a 10,000-interaction sample."""

    def test_scores_bounded_when_completed(self, sample):
        _, rows = sample
        completed = [i for i, _ in rows if i["status"] == "completed"]
        assert completed
        for interaction in completed:
            assert QUALITY_SCORE_RANGE[0] <= interaction["quality_score"] <= QUALITY_SCORE_RANGE[1]
            assert RECIPROCITY_SCORE_RANGE[0] <= interaction["reciprocity_score"] <= RECIPROCITY_SCORE_RANGE[1]
            assert SENTIMENT_SCORE_RANGE[0] <= interaction["sentiment_score"] <= SENTIMENT_SCORE_RANGE[1]

    def test_scheduled_have_no_scores_or_attendance(self, sample):
        _, rows = sample
        scheduled = [(i, p) for i, p in rows if i["status"] == "scheduled"]
        assert scheduled
        for interaction, participants in scheduled:
            assert interaction["quality_score"] is None
            assert interaction["reciprocity_score"] is None
            assert interaction["sentiment_score"] is None
            assert all(p["attended"] is None for p in participants)

    def test_statuses(self, sample):
        _, rows = sample
        assert {i["status"] for i, _ in rows} == {"completed", "scheduled"}

    def test_future_interactions_are_planned_and_upcoming(self, sample):
        now, rows = sample
        for interaction, _ in rows:
            if interaction["status"] == "scheduled":
                assert interaction["is_planned"] is True
                assert now <= interaction["start_time"] <= now + timedelta(days=30)
                assert interaction["scheduled_at"] == now
            else:
                assert interaction["start_time"] <= now

    def test_scheduled_at_precedes_start(self, sample):
        _, rows = sample
        for interaction, _ in rows:
            if interaction["is_planned"] and interaction["status"] == "completed":
                start = interaction["start_time"]
                assert start - timedelta(days=365) <= interaction["scheduled_at"] <= start
            elif not interaction["is_planned"]:
                assert interaction["scheduled_at"] is None

    def test_end_after_start(self, sample):
        _, rows = sample
        for interaction, _ in rows:
            minutes = (interaction["end_time"] - interaction["start_time"]) / timedelta(minutes=1)
            assert minutes in (30, 45, 60, 90, 120)

    def test_type_mix(self, sample):
        _, rows = sample
        types = Counter(i["type"] for i, _ in rows)
        assert set(types) <= set(INTERACTION_TYPES)
        # Weighted 30 / 5: meetings far outnumber texts
        assert types["meeting"] > types["text"] * 3

    def test_location_absent_for_remote_types(self, sample):
        _, rows = sample
        for interaction, _ in rows:
            if interaction["type"] in ("call", "email", "text"):
                assert interaction["location"] is None
            else:
                assert interaction["location"]

    def test_participants(self, sample):
        _, rows = sample
        for interaction, participants in rows:
            mentor, mentee, *guests = participants
            completed = interaction["status"] == "completed"

            assert (mentor["role"], mentor["person_id"]) == ("mentor", "mentor-1")
            assert (mentee["role"], mentee["person_id"]) == ("mentee", "student-1")
            assert mentor["attended"] is (True if completed else None)
            if completed:
                assert mentee["attended"] in (True, False)
            else:
                assert mentee["attended"] is None

            assert len(guests) <= 3
            for guest in guests:
                assert guest["role"] in PERIPHERAL_ROLES
                assert guest["person_id"] not in ("mentor-1", "student-1")
                assert guest["attended"] is None or completed
            assert len({p["person_id"] for p in participants}) == len(participants)
            assert all(p["interaction_id"] == interaction["id"] for p in participants)

    def test_group_types_have_guests(self, sample):
        _, rows = sample
        for interaction, participants in rows:
            if interaction["type"] in ("workshop", "social_event"):
                assert len(participants) >= 3
            elif interaction["type"] != "meeting":
                assert len(participants) == 2


class TestGenerate:
    """Tests for InteractionsGenerator.generate()."""

    def test_fixture_interactions(self, ctx, store):
        fixture = dict(
            RELATIONSHIP,
            id=deterministic_id(FixtureKeys.TEST_RELATIONSHIP),
        )
        gen = InteractionsGenerator(ctx)
        interactions = gen.generate(PEOPLE, [fixture])
        by_id = {i["id"]: i for i in interactions}

        recent = by_id[deterministic_id(FixtureKeys.TEST_RECENT_INTERACTION)]
        assert recent["status"] == "completed"
        assert recent["start_time"] == ctx.now - timedelta(days=3)
        assert (recent["quality_score"], recent["reciprocity_score"], recent["sentiment_score"]) == (80, 75, 85)

        upcoming = by_id[deterministic_id(FixtureKeys.TEST_UPCOMING_INTERACTION)]
        assert upcoming["status"] == "scheduled"
        assert upcoming["type"] == "video_call"
        assert upcoming["start_time"] == ctx.now + timedelta(days=7)

        recent_attendance = [p["attended"] for p in gen.participants if p["interaction_id"] == recent["id"]]
        assert recent_attendance == [True, True]

    def test_no_fixtures_without_test_relationship(self, ctx):
        interactions = InteractionsGenerator(ctx).generate(PEOPLE, [RELATIONSHIP])
        assert deterministic_id(FixtureKeys.TEST_RECENT_INTERACTION) not in {i["id"] for i in interactions}

    def test_persisted_in_batches(self, ctx, store):
        relationships = [dict(RELATIONSHIP, id=f"rel-{i}") for i in range(60)]
        gen = InteractionsGenerator(ctx)
        interactions = gen.generate(PEOPLE, relationships)

        assert store.count(Collections.INTERACTIONS) == len(interactions)
        assert store.count(Collections.INTERACTION_PARTICIPANTS) == len(gen.participants)
        for name, count in store.insert_calls:
            if name == Collections.INTERACTIONS:
                assert count <= 50
            elif name == Collections.INTERACTION_PARTICIPANTS:
                assert count <= 100

    def test_interaction_count_by_status(self, ctx):
        gen = InteractionsGenerator(ctx)
        per_relationship = ctx.config.interactions_per_relationship
        for _ in range(200):
            assert 1 <= gen.interaction_count(RELATIONSHIP) <= per_relationship
            count = gen.interaction_count(dict(RELATIONSHIP, status="completed"))
            assert 0 <= count <= max(1, per_relationship // 2)

    def test_zero_interactions_configured(self, ctx):
        ctx.config = replace(ctx.config, interactions_per_relationship=0)
        gen = InteractionsGenerator(ctx)
        assert gen.interaction_count(RELATIONSHIP) == 0
        assert gen.interaction_count(dict(RELATIONSHIP, status="completed")) == 0

    def test_gated(self, ctx, store):
        InteractionsGenerator(ctx).generate(PEOPLE, [dict(RELATIONSHIP, id=f"rel-{i}") for i in range(10)])
        assert store.count(Collections.INTERACTIONS)
        calls = len(store.insert_calls)
        gen = InteractionsGenerator(ctx)
        again = gen.generate(PEOPLE, [RELATIONSHIP])
        assert len(store.insert_calls) == calls
        assert len(again) == store.count(Collections.INTERACTIONS)
        assert len(gen.participants) == store.count(Collections.INTERACTION_PARTICIPANTS)
