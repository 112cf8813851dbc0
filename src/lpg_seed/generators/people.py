"""
People, plus their organization affiliations and activity memberships.

Tables generated:
- people
- affiliations
- person_activities

Each person is first classified as a current student or a graduate. That
single decision drives graduation year, college and which of
employment_status / post_grad_status is meaningful.
"""

from collections.abc import Sequence
from datetime import date, datetime, timezone

from .. import console
from ..constants import (
    ACTIVITY_ROLES,
    EARLIEST_GRADUATION_YEAR,
    EMPLOYMENT_STATUSES,
    POST_GRAD_STATUSES,
    STUDENT_PROBABILITY,
    Collections,
)
from ..identity import FixtureKeys, deterministic_id, new_id
from ..store import Row
from .base import BaseGenerator
from .organizations import FIXTURE_ORGANIZATION_NAME

AFFILIATION_PROBABILITY = 0.8
ACTIVITY_PROBABILITY = 0.7


def avatar_url(first_name: str, last_name: str) -> str:
    return f"https://ui-avatars.com/api/?name={first_name}+{last_name}&background=random"


class PeopleGenerator(BaseGenerator):
    """
    Generate people and link them to organizations and activity groups.

    After generate() the secondary collections are available as
    self.affiliations and self.activities.
    """

    COLLECTION = Collections.PEOPLE
    LABEL = "people"

    def __init__(self, ctx) -> None:
        super().__init__(ctx)
        self.affiliations: list[Row] = []
        self.activities: list[Row] = []

    def generate(self, organizations: Sequence[Row], activity_groups: Sequence[Row]) -> list[Row]:
        console.info(f"Generating {self.config.people} people...")
        people = self.fetch_existing()
        if people is None:
            people = self._generate_people(organizations)

        self.affiliations = self._generate_affiliations(people, organizations)
        self.activities = self._generate_activities(people, activity_groups)
        console.success(
            f"People ready: {len(people)} people, {len(self.affiliations)} affiliations, "
            f"{len(self.activities)} activity memberships"
        )
        return people

    # =========================================================================
    # People
    # =========================================================================

    def _generate_people(self, organizations: Sequence[Row]) -> list[Row]:
        people: list[Row] = []
        if self.config.create_special_test_cases:
            people.extend(self.fixture_people())

        college = self._default_college(organizations)
        for i in range(self.config.people):
            people.append(self.build_person(college))
            console.progress(i + 1, self.config.people, "people")

        self.persist(people)
        console.success(f"Successfully generated {len(people)} people")
        return people

    def fixture_people(self) -> list[Row]:
        """The test mentor and test student used by the fixture scenarios."""
        return [
            {
                "id": deterministic_id(FixtureKeys.TEST_MENTOR),
                "auth_id": None,
                "first_name": "Test",
                "last_name": "Mentor",
                "email": "test.mentor@example.com",
                "phone": "(555) 123-4567",
                "birthdate": date(1980, 1, 1),
                "graduation_year": 2000,
                "avatar_url": avatar_url("Test", "Mentor"),
                "employment_status": "full_time",
                "post_grad_status": "employed",
                "college_attending": None,
                "last_checkin_date": None,
                "address": {"street": "123 Main St", "city": "Anytown", "state": "CA", "zip": "90210"},
                "metadata": {"isTestData": True},
                "created_at": self.now,
                "updated_at": self.now,
            },
            {
                "id": deterministic_id(FixtureKeys.TEST_STUDENT),
                "auth_id": None,
                "first_name": "Test",
                "last_name": "Student",
                "email": "test.student@example.com",
                "phone": "(555) 987-6543",
                "birthdate": date(self.ctx.current_year - 20, 1, 1),
                "graduation_year": self.ctx.current_year + 1,
                "avatar_url": avatar_url("Test", "Student"),
                "employment_status": "student",
                "post_grad_status": None,
                "college_attending": FIXTURE_ORGANIZATION_NAME,
                "last_checkin_date": self.now,
                "address": {"street": "456 Campus Dr", "city": "College Town", "state": "CA", "zip": "90211"},
                "metadata": {"isTestData": True},
                "created_at": self.now,
                "updated_at": self.now,
            },
        ]

    def build_person(self, college: str) -> Row:
        """
        Build one ordinary person.

        Students graduate this year or within five years, attend `college`
        and have no post-grad status. Graduates finished between 1990 and last
        year and carry a non-student employment status plus a post-grad status.
        """
        year = self.ctx.current_year
        created_at = self.timestamp()
        first_name = self.fake.first_name()
        last_name = self.fake.last_name()

        is_student = self.random.boolean(STUDENT_PROBABILITY)
        if is_student:
            graduation_year = self.random.between(year, year + 5)
            college_attending = college
            employment_status = "student"
            post_grad_status = None
        else:
            graduation_year = self.random.between(EARLIEST_GRADUATION_YEAR, year - 1)
            college_attending = None
            employment_status = self.random.pick([s for s in EMPLOYMENT_STATUSES if s != "student"])
            post_grad_status = self.random.pick(POST_GRAD_STATUSES)

        last_checkin = None
        if self.random.boolean(0.7):
            last_checkin = self.random.date_between(datetime(year - 1, 1, 1, tzinfo=timezone.utc), self.now)

        address = None
        if self.random.boolean(0.7):
            address = {
                "street": self.fake.street_address(),
                "city": self.fake.city(),
                "state": self.fake.state_abbr(),
                "zip": self.fake.zipcode(),
            }

        return {
            "id": new_id(),
            "auth_id": None,
            "first_name": first_name,
            "last_name": last_name,
            "email": f"{first_name}.{last_name}@{self.fake.free_email_domain()}".lower(),
            "phone": self.fake.phone_number(),
            "birthdate": (
                self.fake.date_of_birth(minimum_age=18, maximum_age=65) if self.random.boolean(0.8) else None
            ),
            "graduation_year": graduation_year,
            "avatar_url": avatar_url(first_name, last_name) if self.random.boolean(0.9) else None,
            "employment_status": employment_status,
            "post_grad_status": post_grad_status,
            "college_attending": college_attending,
            "last_checkin_date": last_checkin,
            "address": address,
            "metadata": None,
            "created_at": created_at,
            "updated_at": created_at,
        }

    def _default_college(self, organizations: Sequence[Row]) -> str:
        for org in organizations:
            if org.get("type") == "university":
                return org["name"]
        return f"{self.fake.last_name()} University"

    # =========================================================================
    # Affiliations and activity memberships
    # =========================================================================

    def _generate_affiliations(self, people: Sequence[Row], organizations: Sequence[Row]) -> list[Row]:
        existing = self.fetch_existing(Collections.AFFILIATIONS, "affiliations")
        if existing is not None:
            return existing

        console.info("Creating affiliations between people and organizations...")
        affiliations: list[Row] = []
        for person in people:
            if not self.random.boolean(AFFILIATION_PROBABILITY):
                continue
            person_orgs = self.random.pick_n(organizations, self.random.between(1, 2))
            for org in person_orgs:
                affiliations.append(
                    {
                        "id": new_id(),
                        "person_id": person["id"],
                        "organization_id": org["id"],
                        "is_primary": len(person_orgs) == 1 or self.random.boolean(0.7),
                        "role": self.fake.job(),
                        "start_date": self.timestamp(),
                        "end_date": self.timestamp() if self.random.boolean(0.2) else None,
                        "created_at": self.now,
                        "updated_at": self.now,
                    }
                )

        self.persist(affiliations, Collections.AFFILIATIONS)
        return affiliations

    def _generate_activities(self, people: Sequence[Row], activity_groups: Sequence[Row]) -> list[Row]:
        existing = self.fetch_existing(Collections.PERSON_ACTIVITIES, "activity memberships")
        if existing is not None:
            return existing

        console.info("Creating activity memberships...")
        activities: list[Row] = []
        for person in people:
            if not self.random.boolean(ACTIVITY_PROBABILITY):
                continue
            person_groups = self.random.pick_n(activity_groups, self.random.between(1, 3))
            for group in person_groups:
                activities.append(
                    {
                        "id": new_id(),
                        "person_id": person["id"],
                        "activity_group_id": group["id"],
                        "primary_activity": len(person_groups) == 1 or self.random.boolean(0.6),
                        "role": self.random.pick(ACTIVITY_ROLES),
                        "joined_at": self.timestamp(),
                        "created_at": self.now,
                        "updated_at": self.now,
                    }
                )

        self.persist(activities, Collections.PERSON_ACTIVITIES)
        return activities
