"""
Interactions between related people, with their participants.

Tables generated:
- interactions
- interaction_participants

Every interaction is classified into a timeframe first:
- past: between the relationship start and its end (or now), completed
- recent: within the last 30 days, completed
- future: within the next 30 days, scheduled and always planned

Scores and attendance are only recorded for completed interactions.
"""

from collections.abc import Sequence
from datetime import timedelta
from typing import Any

from .. import console
from ..config import LINK_BATCH_SIZE
from ..constants import (
    DRESS_CODES,
    DURATION_MINUTES,
    EVENT_VENUES,
    FUTURE_WINDOW_DAYS,
    GROUP_INTERACTION_TYPES,
    INTERACTION_TITLES,
    INTERACTION_TYPE_WEIGHTS,
    LUNCH_VENUE_SUFFIXES,
    MEETING_ROOMS,
    MEETING_VENUES,
    PERIPHERAL_ROLES,
    QUALITY_SCORE_RANGE,
    RECENT_WINDOW_DAYS,
    RECIPROCITY_SCORE_RANGE,
    SENTIMENT_SCORE_RANGE,
    TIMEFRAME_WEIGHTS,
    VIDEO_PLATFORMS,
    WORKSHOP_MATERIALS,
    Collections,
)
from ..helpers import as_datetime
from ..identity import FixtureKeys, deterministic_id, new_id
from ..store import Row
from .base import BaseGenerator

RELATIONSHIP_SKIP_PROBABILITY = 0.2
MENTEE_ATTENDANCE_PROBABILITY = 0.9
GUEST_ATTENDANCE_PROBABILITY = 0.8
MEETING_GUEST_PROBABILITY = 0.2


def participant(interaction: Row, person_id: str, role: str, attended: bool | None) -> Row:
    return {
        "id": new_id(),
        "interaction_id": interaction["id"],
        "person_id": person_id,
        "role": role,
        "attended": attended,
        "created_at": interaction["start_time"],
    }


class InteractionsGenerator(BaseGenerator):
    """
    Generate interactions for relationships.

    After generate() the participant rows are available as self.participants.
    """

    COLLECTION = Collections.INTERACTIONS
    LABEL = "interactions"

    def __init__(self, ctx) -> None:
        super().__init__(ctx)
        self.participants: list[Row] = []

    def generate(self, people: Sequence[Row], relationships: Sequence[Row]) -> list[Row]:
        console.info("Generating interactions...")
        existing = self.fetch_existing()
        if existing is not None:
            self.participants = self.store.fetch_all(Collections.INTERACTION_PARTICIPANTS)
            return existing

        interactions: list[Row] = []
        participants: list[Row] = []

        if self.config.create_special_test_cases:
            fixture_id = deterministic_id(FixtureKeys.TEST_RELATIONSHIP)
            fixture = next((r for r in relationships if r["id"] == fixture_id), None)
            if fixture is not None:
                for interaction, attendees in self.fixture_interactions(fixture):
                    interactions.append(interaction)
                    participants.extend(attendees)

        for i, relationship in enumerate(relationships):
            if self.random.boolean(RELATIONSHIP_SKIP_PROBABILITY):
                console.progress(i + 1, len(relationships), "relationships processed")
                continue
            for _ in range(self.interaction_count(relationship)):
                interaction, attendees = self.build_interaction(relationship, people)
                interactions.append(interaction)
                participants.extend(attendees)
            console.progress(i + 1, len(relationships), "relationships processed")

        self.persist(interactions)
        self.persist(participants, Collections.INTERACTION_PARTICIPANTS, LINK_BATCH_SIZE)
        self.participants = participants
        console.success(
            f"Successfully generated {len(interactions)} interactions "
            f"with {len(participants)} participants"
        )
        return interactions

    def interaction_count(self, relationship: Row) -> int:
        per_relationship = self.config.interactions_per_relationship
        if per_relationship == 0:
            return 0
        if relationship.get("status") == "active":
            return self.random.between(1, per_relationship)
        return self.random.between(0, max(1, per_relationship // 2))

    # =========================================================================
    # Single interaction
    # =========================================================================

    def build_interaction(self, relationship: Row, people: Sequence[Row]) -> tuple[Row, list[Row]]:
        """
        Build one interaction and its participants for a relationship.

        Returns:
            (interaction row, participant rows)
        """
        timeframe = self.random.pick_weighted(TIMEFRAME_WEIGHTS)

        if timeframe == "future":
            start_time = self.random.soon(FUTURE_WINDOW_DAYS, self.now)
            status = "scheduled"
            is_planned = True
        elif timeframe == "recent":
            start_time = self.random.recent(RECENT_WINDOW_DAYS, self.now)
            status = "completed"
            is_planned = self.random.boolean(0.8)
        else:
            window_start = as_datetime(relationship.get("start_date")) or self.config.start_date
            window_end = as_datetime(relationship.get("end_date")) or self.now
            start_time = self.random.date_between(window_start, window_end)
            status = "completed"
            is_planned = self.random.boolean(0.7)

        end_time = start_time + timedelta(minutes=self.random.pick(DURATION_MINUTES))
        interaction_type = self.random.pick_weighted(INTERACTION_TYPE_WEIGHTS)

        if timeframe == "future":
            scheduled_at = self.now
        elif is_planned:
            scheduled_at = self.random.date_between(start_time - timedelta(days=365), start_time)
        else:
            scheduled_at = None

        completed = status == "completed"
        interaction = {
            "id": new_id(),
            "title": self.random.pick(INTERACTION_TITLES[interaction_type]),
            "description": self.fake.paragraph() if self.random.boolean(0.7) else None,
            "type": interaction_type,
            "start_time": start_time,
            "end_time": end_time,
            "location": self.location_for(interaction_type),
            "is_planned": is_planned,
            "status": status,
            "quality_score": self.random.between(*QUALITY_SCORE_RANGE) if completed else None,
            "reciprocity_score": self.random.between(*RECIPROCITY_SCORE_RANGE) if completed else None,
            "sentiment_score": self.random.between(*SENTIMENT_SCORE_RANGE) if completed else None,
            "metadata": self.metadata_for(interaction_type),
            "scheduled_at": scheduled_at,
            "created_by": relationship["from_person_id"],
            "updated_by": None,
            "created_at": scheduled_at or start_time,
            "updated_at": start_time,
        }

        mentee_attended = None
        if completed:
            mentee_attended = timeframe == "past" and self.random.boolean(MENTEE_ATTENDANCE_PROBABILITY)
        attendees = [
            participant(interaction, relationship["from_person_id"], "mentor", True if completed else None),
            participant(interaction, relationship["to_person_id"], "mentee", mentee_attended),
        ]

        if self.has_guests(interaction_type):
            pair = {relationship["from_person_id"], relationship["to_person_id"]}
            pool = [p for p in people if p["id"] not in pair]
            for guest in self.random.pick_n(pool, self.random.between(1, 3)):
                attended = self.random.boolean(GUEST_ATTENDANCE_PROBABILITY) if completed else None
                attendees.append(
                    participant(interaction, guest["id"], self.random.pick(PERIPHERAL_ROLES), attended)
                )

        return interaction, attendees

    def has_guests(self, interaction_type: str) -> bool:
        if interaction_type in GROUP_INTERACTION_TYPES:
            return True
        return interaction_type == "meeting" and self.random.boolean(MEETING_GUEST_PROBABILITY)

    def location_for(self, interaction_type: str) -> str | None:
        """Type-appropriate location; None for calls, emails and texts."""
        if interaction_type == "meeting":
            return self.random.pick(
                [
                    f"{self.fake.company()} Office",
                    *MEETING_VENUES,
                    self.fake.street_address(),
                    f"{self.fake.company()} Headquarters",
                ]
            )
        if interaction_type == "video_call":
            return self.random.pick(VIDEO_PLATFORMS)
        if interaction_type == "lunch":
            return f"{self.fake.last_name()} {self.random.pick(LUNCH_VENUE_SUFFIXES)}"
        if interaction_type in GROUP_INTERACTION_TYPES:
            return self.random.pick([*EVENT_VENUES, f"{self.fake.company()} Event Space"])
        return None

    def metadata_for(self, interaction_type: str) -> dict[str, Any] | None:
        """Optional type-specific details (absent 30% of the time)."""
        if not self.random.boolean(0.7):
            return None

        metadata: dict[str, Any] = {}
        if interaction_type == "video_call":
            platform = self.random.pick(VIDEO_PLATFORMS)
            host = platform.lower().replace(" ", "")
            metadata["platform"] = platform
            metadata["link"] = f"https://{host}.com/{self.fake.bothify('??##??##??').lower()}"
        elif interaction_type == "meeting":
            if self.random.boolean(0.5):
                metadata["room"] = self.random.pick(MEETING_ROOMS)
            if self.random.boolean(0.3):
                metadata["agenda"] = " ".join(self.fake.sentences(nb=3))
        elif interaction_type == "workshop":
            metadata["materials"] = self.random.pick(WORKSHOP_MATERIALS)
            metadata["capacity"] = self.random.between(5, 30)
        elif interaction_type == "social_event":
            metadata["attendees"] = self.random.between(10, 100)
            metadata["dress_code"] = self.random.pick(DRESS_CODES)
        return metadata

    # =========================================================================
    # Fixtures
    # =========================================================================

    def fixture_interactions(self, relationship: Row) -> list[tuple[Row, list[Row]]]:
        """A completed meeting three days ago and a video call one week out."""
        mentor_id = relationship["from_person_id"]
        mentee_id = relationship["to_person_id"]

        recent = self.now - timedelta(days=3)
        recent_meeting = {
            "id": deterministic_id(FixtureKeys.TEST_RECENT_INTERACTION),
            "title": "Test Recent Meeting",
            "description": "A recent meeting for testing purposes",
            "type": "meeting",
            "start_time": recent,
            "end_time": recent + timedelta(hours=1),
            "location": "Test Office",
            "is_planned": True,
            "status": "completed",
            "quality_score": 80,
            "reciprocity_score": 75,
            "sentiment_score": 85,
            "metadata": {"isTestData": True},
            "scheduled_at": recent - timedelta(days=7),
            "created_by": mentor_id,
            "updated_by": None,
            "created_at": self.now,
            "updated_at": self.now,
        }

        upcoming = self.now + timedelta(days=7)
        upcoming_call = {
            "id": deterministic_id(FixtureKeys.TEST_UPCOMING_INTERACTION),
            "title": "Test Upcoming Meeting",
            "description": "An upcoming meeting for testing purposes",
            "type": "video_call",
            "start_time": upcoming,
            "end_time": upcoming + timedelta(hours=1),
            "location": "Zoom",
            "is_planned": True,
            "status": "scheduled",
            "quality_score": None,
            "reciprocity_score": None,
            "sentiment_score": None,
            "metadata": {"isTestData": True, "zoomLink": "https://zoom.us/test"},
            "scheduled_at": self.now,
            "created_by": mentor_id,
            "updated_by": None,
            "created_at": self.now,
            "updated_at": self.now,
        }

        return [
            (
                recent_meeting,
                [
                    participant(recent_meeting, mentor_id, "mentor", True),
                    participant(recent_meeting, mentee_id, "mentee", True),
                ],
            ),
            (
                upcoming_call,
                [
                    participant(upcoming_call, mentor_id, "mentor", None),
                    participant(upcoming_call, mentee_id, "mentee", None),
                ],
            ),
        ]
