"""Computed age and age bucket value types."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


class Trimester(str, Enum):
    """Pregnancy trimester."""

    FIRST = "first"
    SECOND = "second"
    THIRD = "third"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Trimester"


@dataclass(frozen=True)
class ExactAge:
    """Calendar age at a given date. Pregnancy ages carry weeks instead of y/m/d."""

    years: int = 0
    months: int = 0
    days: int = 0
    is_pregnancy: bool = False
    pregnancy_weeks: int | None = None
    trimester: Trimester | None = None

    @property
    def is_newborn(self) -> bool:
        """Zero full months and zero full years since birth."""
        return not self.is_pregnancy and self.years == 0 and self.months == 0

    @property
    def total_months(self) -> int:
        return self.years * 12 + self.months


class BucketKind(str, Enum):
    """Variants of AgeBucket, declared in display order."""

    PREGNANCY = "pregnancy"
    BIRTH_MONTH = "birth_month"
    MONTH = "month"
    YEAR = "year"
    CUSTOM = "custom"

    @property
    def rank(self) -> int:
        return _KIND_RANK[self]


_KIND_RANK = {kind: i for i, kind in enumerate(BucketKind)}


@total_ordering
@dataclass(frozen=True)
class AgeBucket:
    """
    Named age category a photo belongs to.
    Build with the constructors below; ordering comes from sort_key only.
    """

    kind: BucketKind
    value: int = 0
    label: str = ""

    @classmethod
    def pregnancy(cls) -> "AgeBucket":
        return cls(BucketKind.PREGNANCY)

    @classmethod
    def birth_month(cls) -> "AgeBucket":
        return cls(BucketKind.BIRTH_MONTH)

    @classmethod
    def month(cls, n: int) -> "AgeBucket":
        return cls(BucketKind.MONTH, value=n)

    @classmethod
    def year(cls, n: int) -> "AgeBucket":
        return cls(BucketKind.YEAR, value=n)

    @classmethod
    def custom(cls, label: str) -> "AgeBucket":
        return cls(BucketKind.CUSTOM, label=label)

    @property
    def sort_key(self) -> tuple[int, int, str]:
        """Pregnancy < Birth Month < months ascending < years ascending < custom by label."""
        return (self.kind.rank, self.value, self.label)

    @property
    def display_name(self) -> str:
        if self.kind is BucketKind.PREGNANCY:
            return "Pregnancy"
        if self.kind is BucketKind.BIRTH_MONTH:
            return "Birth Month"
        if self.kind is BucketKind.MONTH:
            return f"{self.value} Month{'' if self.value == 1 else 's'}"
        if self.kind is BucketKind.YEAR:
            return f"{self.value} Year{'' if self.value == 1 else 's'}"
        return self.label

    def __str__(self) -> str:
        return self.display_name

    def __lt__(self, other: "AgeBucket") -> bool:
        if not isinstance(other, AgeBucket):
            return NotImplemented
        return self.sort_key < other.sort_key

