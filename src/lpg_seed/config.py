"""
Seeding configuration and named presets.

Three presets mirror the supported run profiles:
- DEFAULT_CONFIG: full dataset
- DEV_CONFIG: smaller dataset for local development
- SPECIAL_CASES_CONFIG: minimal base data plus the fixture scenarios

Any preset can be overridden from a YAML file:

    organizations: 3
    people: 25
    start_date: 2023-01-01
    create_special_test_cases: false
"""

from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigurationError
from .helpers import shift_months, utc_now

# Batch sizes keep each insert request under the store's payload ceiling
DEFAULT_BATCH_SIZE = 50
LINK_BATCH_SIZE = 100


def _two_years_ago() -> datetime:
    return shift_months(utc_now(), -24)


@dataclass(frozen=True)
class SeedConfig:
    """Counts, time windows and probabilities for one seeding run."""

    # Entity counts
    organizations: int = 5
    activity_groups: int = 8
    people: int = 50
    relationships_per_person: int = 3
    interactions_per_relationship: int = 5
    milestones_per_relationship: int = 2
    tags_total: int = 20

    # Time ranges
    start_date: datetime = field(default_factory=_two_years_ago)
    relationship_max_age_days: int = 730
    interaction_max_age_days: int = 365

    # Probabilities
    required_milestone_probability: float = 0.7
    active_mentorship_probability: float = 0.8
    healthy_relationship_probability: float = 0.7  # not read by any generator
    recent_interaction_probability: float = 0.6  # not read by any generator

    # Fixture scenarios
    create_special_test_cases: bool = True

    COUNT_FIELDS = (
        "organizations",
        "activity_groups",
        "people",
        "relationships_per_person",
        "interactions_per_relationship",
        "milestones_per_relationship",
        "tags_total",
        "relationship_max_age_days",
        "interaction_max_age_days",
    )
    PROBABILITY_FIELDS = (
        "required_milestone_probability",
        "active_mentorship_probability",
        "healthy_relationship_probability",
        "recent_interaction_probability",
    )

    def validate(self) -> "SeedConfig":
        """
        Check counts and probabilities.

        Returns:
            self, for chaining

        Raises:
            ConfigurationError: On a negative count or a probability outside [0, 1]
        """
        for name in self.COUNT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigurationError(f"{name} must be a non-negative integer, got {value!r}")
        for name in self.PROBABILITY_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not 0 <= value <= 1:
                raise ConfigurationError(f"{name} must be between 0 and 1, got {value!r}")
        if not isinstance(self.create_special_test_cases, bool):
            raise ConfigurationError("create_special_test_cases must be a boolean")
        if not isinstance(self.start_date, datetime):
            raise ConfigurationError("start_date must be a datetime")
        return self

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_CONFIG = SeedConfig()

DEV_CONFIG = replace(
    DEFAULT_CONFIG,
    people=20,
    relationships_per_person=2,
    interactions_per_relationship=3,
    milestones_per_relationship=1,
)

SPECIAL_CASES_CONFIG = replace(
    DEFAULT_CONFIG,
    organizations=2,
    activity_groups=3,
    people=10,
    relationships_per_person=2,
    interactions_per_relationship=2,
    create_special_test_cases=True,
)

PRESETS = {
    "default": DEFAULT_CONFIG,
    "dev": DEV_CONFIG,
    "special-cases": SPECIAL_CASES_CONFIG,
}


def _coerce_start_date(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, str):
        try:
            return _coerce_start_date(datetime.fromisoformat(value))
        except ValueError as err:
            raise ConfigurationError(f"start_date is not an ISO date: {value!r}") from err
    raise ConfigurationError(f"start_date must be a date, got {value!r}")


def apply_overrides(base: SeedConfig, overrides: dict[str, Any]) -> SeedConfig:
    """
    Return a copy of base with the given fields replaced and validated.

    Raises:
        ConfigurationError: On unknown keys or invalid values
    """
    known = {f.name for f in fields(SeedConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    values = dict(overrides)
    if "start_date" in values:
        values["start_date"] = _coerce_start_date(values["start_date"])
    return replace(base, **values).validate()


def load_config(path: Path | str, base: SeedConfig = DEFAULT_CONFIG) -> SeedConfig:
    """
    Load YAML overrides on top of a preset.

    Args:
        path: YAML file containing a mapping of SeedConfig fields
        base: Preset to start from

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as err:
        raise ConfigurationError(f"Config file not found: {path}") from err
    except yaml.YAMLError as err:
        raise ConfigurationError(f"Config file is not valid YAML: {path}: {err}") from err

    if data is None:
        return replace(base).validate()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {path}")
    return apply_overrides(base, data)
