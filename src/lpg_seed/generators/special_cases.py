"""
Fixture scenarios for UI development and testing.

Scenarios:
- multiple_mentees: the test mentor with five mentees of varying strength
- neglected_mentee: an active relationship whose last interaction was
  three months ago
- all_milestones: every milestone template achieved for the test relationship
- many_tags: the test student holding ten tags

Every record is looked up by its deterministic id (or an equality filter)
before it is inserted, so repeated runs only fill in what is missing. A
missing prerequisite stops that one scenario; a rejected insert skips that
one record.
"""

from collections.abc import Sequence
from datetime import timedelta

from .. import console
from ..constants import PRIMARY_RELATIONSHIP_TYPE, Collections
from ..errors import StoreError
from ..helpers import shift_months
from ..identity import FixtureKeys, deterministic_id, new_id
from ..store import Row
from .base import BaseGenerator
from .organizations import FIXTURE_ORGANIZATION_NAME
from .people import avatar_url

SPECIAL_MENTEE_COUNT = 5
SPECIAL_STRENGTHS = (95, 80, 65, 40, None)
RECENT_CHECKIN_MENTEES = 3
ACTIVE_SPECIAL_RELATIONSHIPS = 4
MANY_TAGS = 10


class SpecialCasesGenerator(BaseGenerator):
    """Create the fixture scenarios and report how many records each added."""

    LABEL = "special test cases"

    def generate(self, people: Sequence[Row], relationships: Sequence[Row]) -> dict[str, int]:
        """
        Run every scenario in order.

        Returns:
            Scenario name -> number of records created this run
        """
        if not self.config.create_special_test_cases:
            console.info("Special test cases generation is disabled in config")
            return {}

        console.info("Generating special test cases...")
        people_by_id = {p["id"]: p for p in people}
        mentor = people_by_id.get(deterministic_id(FixtureKeys.TEST_MENTOR))
        student = people_by_id.get(deterministic_id(FixtureKeys.TEST_STUDENT))
        test_relationship = next(
            (r for r in relationships if r["id"] == deterministic_id(FixtureKeys.TEST_RELATIONSHIP)),
            None,
        )

        created = {
            "multiple_mentees": self.mentor_with_multiple_mentees(mentor),
            "neglected_mentee": self.mentee_with_no_recent_interactions(mentor),
            "all_milestones": self.relationship_with_all_milestones(test_relationship),
            "many_tags": self.person_with_many_tags(student),
        }
        console.success(f"Successfully generated special test cases ({sum(created.values())} new records)")
        return created

    # =========================================================================
    # Record helpers
    # =========================================================================

    def _insert_one(self, collection: str, record: Row, label: str) -> bool:
        """Insert a single record; a rejected insert is logged, not raised."""
        try:
            self.store.insert(collection, [record])
        except StoreError as err:
            console.error(f"Error creating {label}: {err}")
            return False
        console.info(f"Created {label}")
        return True

    def _mentor_student_type_id(self) -> str | None:
        rows = self.store.fetch_where(
            Collections.RELATIONSHIP_TYPES,
            {"code": PRIMARY_RELATIONSHIP_TYPE},
            columns=["id"],
            limit=1,
        )
        return rows[0]["id"] if rows else None

    def _special_student(self, key: str, first_name: str, email: str, graduation_year: int) -> Row:
        return {
            "id": deterministic_id(key),
            "auth_id": None,
            "first_name": first_name,
            "last_name": "Mentee",
            "email": email,
            "phone": self.fake.phone_number(),
            "birthdate": self.fake.date_of_birth(minimum_age=18, maximum_age=25),
            "graduation_year": graduation_year,
            "avatar_url": avatar_url(first_name, "Mentee"),
            "employment_status": "student",
            "post_grad_status": None,
            "college_attending": FIXTURE_ORGANIZATION_NAME,
            "last_checkin_date": None,
            "address": {
                "street": self.fake.street_address(),
                "city": self.fake.city(),
                "state": self.fake.state_abbr(),
                "zip": self.fake.zipcode(),
            },
            "metadata": {"isSpecialTestCase": True},
            "created_at": self.now,
            "updated_at": self.now,
        }

    # =========================================================================
    # Scenarios
    # =========================================================================

    def mentor_with_multiple_mentees(self, mentor: Row | None) -> int:
        console.info("Creating special case: Mentor with multiple mentees")
        if mentor is None:
            console.error("Test mentor not found. Special case cannot be created.")
            return 0

        created = 0
        mentee_ids = []
        for i in range(SPECIAL_MENTEE_COUNT):
            mentee_id = deterministic_id(FixtureKeys.special_mentee(i))
            mentee_ids.append(mentee_id)
            if self.store.has_id(Collections.PEOPLE, mentee_id):
                console.info(f"Special mentee {i + 1} already exists")
                continue

            mentee = self._special_student(
                FixtureKeys.special_mentee(i),
                f"Special{i + 1}",
                f"special.mentee{i + 1}@example.com",
                self.ctx.current_year + self.random.between(1, 4),
            )
            mentee["last_checkin_date"] = self.now if i < RECENT_CHECKIN_MENTEES else None
            mentee["metadata"]["specialCaseType"] = "multipleMentees"
            created += self._insert_one(Collections.PEOPLE, mentee, f"special mentee {i + 1}")

        type_id = self._mentor_student_type_id()
        for i, mentee_id in enumerate(mentee_ids):
            relationship_id = deterministic_id(FixtureKeys.special_relationship(i))
            if self.store.has_id(Collections.RELATIONSHIPS, relationship_id):
                console.info(f"Special relationship {i + 1} already exists")
                continue

            relationship = {
                "id": relationship_id,
                "from_person_id": mentor["id"],
                "to_person_id": mentee_id,
                "relationship_type_id": type_id,
                "status": "active" if i < ACTIVE_SPECIAL_RELATIONSHIPS else "pending",
                "start_date": shift_months(self.now, -2 * i),
                "end_date": None,
                "strength_score": SPECIAL_STRENGTHS[i],
                "created_at": self.now,
                "updated_at": self.now,
            }
            created += self._insert_one(Collections.RELATIONSHIPS, relationship, f"special relationship {i + 1}")

        return created

    def mentee_with_no_recent_interactions(self, mentor: Row | None) -> int:
        console.info("Creating special case: Mentee with no recent interactions")
        if mentor is None:
            console.error("Test mentor not found. Special case cannot be created.")
            return 0

        created = 0
        mentee_id = deterministic_id(FixtureKeys.NEGLECTED_MENTEE)
        if self.store.has_id(Collections.PEOPLE, mentee_id):
            console.info("Neglected mentee already exists")
        else:
            mentee = self._special_student(
                FixtureKeys.NEGLECTED_MENTEE,
                "Neglected",
                "neglected.mentee@example.com",
                self.ctx.current_year + 1,
            )
            mentee["last_checkin_date"] = shift_months(self.now, -3)
            mentee["metadata"].update(specialCaseType="neglectedMentee", needsFollowUp=True)
            if not self._insert_one(Collections.PEOPLE, mentee, "neglected mentee"):
                return created
            created += 1

        relationship_id = deterministic_id(FixtureKeys.NEGLECTED_RELATIONSHIP)
        if self.store.has_id(Collections.RELATIONSHIPS, relationship_id):
            console.info("Neglected relationship already exists")
        else:
            relationship = {
                "id": relationship_id,
                "from_person_id": mentor["id"],
                "to_person_id": mentee_id,
                "relationship_type_id": self._mentor_student_type_id(),
                "status": "active",
                "start_date": shift_months(self.now, -6),
                "end_date": None,
                "strength_score": 45,
                "created_at": self.now,
                "updated_at": self.now,
            }
            if not self._insert_one(Collections.RELATIONSHIPS, relationship, "neglected relationship"):
                return created
            created += 1

        interaction_id = deterministic_id(FixtureKeys.NEGLECTED_INTERACTION)
        if self.store.has_id(Collections.INTERACTIONS, interaction_id):
            console.info("Neglected interaction already exists")
            return created

        held = shift_months(self.now, -3)
        interaction = {
            "id": interaction_id,
            "title": "Last Check-in Meeting",
            "description": "This was the last meeting before radio silence",
            "type": "meeting",
            "start_time": held,
            "end_time": held + timedelta(hours=1),
            "location": "Campus Center",
            "is_planned": True,
            "status": "completed",
            "quality_score": 60,
            "reciprocity_score": 50,
            "sentiment_score": 55,
            "metadata": {
                "isSpecialTestCase": True,
                "specialCaseType": "neglectedMentee",
                "notes": "Mentee seemed disengaged",
            },
            "scheduled_at": held - timedelta(days=7),
            "created_by": mentor["id"],
            "updated_by": None,
            "created_at": held,
            "updated_at": held,
        }
        if not self._insert_one(Collections.INTERACTIONS, interaction, "neglected interaction"):
            return created
        created += 1

        participants = [
            {
                "id": new_id(),
                "interaction_id": interaction_id,
                "person_id": person_id,
                "role": role,
                "attended": True,
                "created_at": held,
            }
            for person_id, role in ((mentor["id"], "mentor"), (mentee_id, "mentee"))
        ]
        try:
            self.store.insert(Collections.INTERACTION_PARTICIPANTS, participants)
        except StoreError as err:
            console.error(f"Error creating neglected interaction participants: {err}")
            return created
        console.info("Created neglected interaction from 3 months ago")
        return created + len(participants)

    def relationship_with_all_milestones(self, relationship: Row | None) -> int:
        console.info("Creating special case: Relationship with all milestones completed")
        if relationship is None:
            console.error("Test relationship not found. Special case cannot be created.")
            return 0

        templates = self.store.fetch_all(Collections.MILESTONE_TEMPLATES)
        if not templates:
            console.error("No milestone templates found. Special case cannot be created.")
            return 0

        achieved = {
            row["milestone_id"]
            for row in self.store.fetch_where(
                Collections.RELATIONSHIP_MILESTONES,
                {"relationship_id": relationship["id"]},
                columns=["milestone_id"],
            )
        }
        remaining = [t for t in templates if t["id"] not in achieved]
        if not remaining:
            console.info("All milestones already achieved for test relationship")
            return 0

        achievements = []
        for index, template in enumerate(remaining):
            achieved_date = shift_months(self.now, -(len(remaining) - index))
            achievements.append(
                {
                    "id": new_id(),
                    "relationship_id": relationship["id"],
                    "milestone_id": template["id"],
                    "achieved_date": achieved_date,
                    "notes": self.fake.paragraph(),
                    "evidence_url": self.fake.url(),
                    "created_by": relationship["from_person_id"],
                    "created_at": achieved_date,
                    "updated_at": achieved_date,
                }
            )

        try:
            self.store.insert(Collections.RELATIONSHIP_MILESTONES, achievements)
        except StoreError as err:
            console.error(f"Error creating milestone achievements: {err}")
            return 0
        console.info(f"Created {len(achievements)} milestone achievements for test relationship")
        return len(achievements)

    def person_with_many_tags(self, student: Row | None) -> int:
        console.info("Creating special case: Person with many tags")
        if student is None:
            console.error("Test student not found. Special case cannot be created.")
            return 0

        tags = self.store.fetch_all(Collections.TAGS)
        if not tags:
            console.error("No tags found. Special case cannot be created.")
            return 0

        held = {
            row["tag_id"]
            for row in self.store.fetch_where(
                Collections.PERSON_TAGS,
                {"person_id": student["id"]},
                columns=["tag_id"],
            )
        }
        wanted = MANY_TAGS - len(held)
        to_assign = [t for t in tags if t["id"] not in held][: max(0, wanted)]
        if not to_assign:
            console.info("Test student already has many tags")
            return 0

        person_tags = [
            {
                "id": new_id(),
                "person_id": student["id"],
                "tag_id": tag["id"],
                "created_by": None,
                "created_at": self.now,
            }
            for tag in to_assign
        ]
        try:
            self.store.insert(Collections.PERSON_TAGS, person_tags)
        except StoreError as err:
            console.error(f"Error creating person tags: {err}")
            return 0
        console.info(f"Assigned {len(person_tags)} additional tags to test student")
        return len(person_tags)
