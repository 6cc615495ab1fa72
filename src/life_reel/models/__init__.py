"""Data models."""

from life_reel.models.age import AgeBucket, BucketKind, ExactAge, Trimester
from life_reel.models.person import (
    BirthMonthsDisplay,
    Person,
    PregnancyTracking,
    ReminderFrequency,
    SortOrder,
)
from life_reel.models.photo import Photo

__all__ = [
    "AgeBucket",
    "BirthMonthsDisplay",
    "BucketKind",
    "ExactAge",
    "Person",
    "Photo",
    "PregnancyTracking",
    "ReminderFrequency",
    "SortOrder",
    "Trimester",
]
