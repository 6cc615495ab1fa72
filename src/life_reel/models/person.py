"""Person data model."""

from datetime import date, datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from life_reel.dates import to_day, whole_months_between
from life_reel.models.photo import Photo


class PregnancyTracking(str, Enum):
    """How photos taken before the birth date are labelled."""

    NONE = "none"
    TRIMESTERS = "trimesters"
    WEEKS = "weeks"


class BirthMonthsDisplay(str, Enum):
    """How many months are shown before switching to year buckets."""

    NONE = "None"
    TWELVE_MONTHS = "12 Months"
    TWENTY_FOUR_MONTHS = "24 Months"

    @property
    def cutoff_months(self) -> int | None:
        """Month count at which years take over, or None when months are never shown."""
        return {
            BirthMonthsDisplay.NONE: None,
            BirthMonthsDisplay.TWELVE_MONTHS: 12,
            BirthMonthsDisplay.TWENTY_FOUR_MONTHS: 24,
        }[self]


class ReminderFrequency(str, Enum):
    """Photo reminder cadence."""

    NONE = "None"
    DAILY = "Daily"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"


class SortOrder(str, Enum):
    """Display order of stacks."""

    LATEST_TO_OLDEST = "latestToOldest"
    OLDEST_TO_LATEST = "oldestToLatest"


class Person(BaseModel):
    """A tracked person. Equality covers every field."""

    id: UUID = Field(default_factory=uuid4, description="Opaque unique identifier")
    name: str = Field(..., description="Display name")
    date_of_birth: date = Field(..., description="Birth date, or due date while pregnant")
    photos: list[Photo] = Field(default_factory=list)
    birth_months_display: BirthMonthsDisplay = Field(default=BirthMonthsDisplay.NONE)
    show_empty_stacks: bool = Field(default=True, description="Show ranges that have no photos")
    pregnancy_tracking: PregnancyTracking = Field(default=PregnancyTracking.NONE)
    reminder_frequency: ReminderFrequency = Field(default=ReminderFrequency.NONE)

    @staticmethod
    def default_pregnancy_tracking(date_of_birth: date, now: date | datetime | None = None) -> PregnancyTracking:
        """Suggested tracking mode at creation time. Not re-evaluated later."""
        today = to_day(now) if now is not None else date.today()
        if date_of_birth <= today:
            return PregnancyTracking.NONE
        if whole_months_between(today, date_of_birth) > 2:
            return PregnancyTracking.WEEKS
        return PregnancyTracking.TRIMESTERS

    @staticmethod
    def default_birth_months_display(date_of_birth: date, now: date | datetime | None = None) -> BirthMonthsDisplay:
        """Babies under two get monthly stacks; older people go straight to years."""
        today = to_day(now) if now is not None else date.today()
        if whole_months_between(date_of_birth, today) < 24:
            return BirthMonthsDisplay.TWELVE_MONTHS
        return BirthMonthsDisplay.NONE

    @classmethod
    def create(
        cls,
        name: str,
        date_of_birth: date,
        birth_months_display: BirthMonthsDisplay | None = None,
        now: date | datetime | None = None,
    ) -> "Person":
        """New person with suggested display and tracking defaults."""
        return cls(
            name=name,
            date_of_birth=date_of_birth,
            birth_months_display=(
                birth_months_display or cls.default_birth_months_display(date_of_birth, now)
            ),
            pregnancy_tracking=cls.default_pregnancy_tracking(date_of_birth, now),
        )
