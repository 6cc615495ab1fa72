"""Age bucket classification, display policy, and photo grouping."""

import logging
from datetime import date, datetime, timezone
from typing import Any, Iterable

from life_reel.config import get_age_rules
from life_reel.models import (
    AgeBucket,
    BirthMonthsDisplay,
    BucketKind,
    ExactAge,
    Person,
    Photo,
    PregnancyTracking,
    SortOrder,
)
from life_reel.rules.calculator import AgeCalculator

logger = logging.getLogger(__name__)

DEFAULT_MAX_MONTHS = 24
DEFAULT_MAX_YEARS = 18
DEFAULT_RANGE_MONTHS = 12

PhotoGroups = list[tuple[AgeBucket, list[Photo]]]


def _photo_order(photo: Photo) -> tuple[datetime, str]:
    taken = photo.date_taken
    # Aware and naive timestamps compare as UTC wall time.
    if taken.tzinfo is not None:
        taken = taken.astimezone(timezone.utc).replace(tzinfo=None)
    return (taken, str(photo.id))


class AgeClassifier:
    """
    Maps dates to age buckets and groups photos by bucket.
    Classification and the birth-months display policy are separate steps:
    classify() is strict, apply_display_policy() reshapes the result for display.
    """

    def __init__(
        self,
        calculator: AgeCalculator | None = None,
        rules: dict[str, Any] | None = None,
    ) -> None:
        self._rules = get_age_rules() if rules is None else rules
        self._calculator = calculator or AgeCalculator(self._rules)
        buckets = self._rules.get("buckets", {})
        self._max_months = int(buckets.get("max_months", DEFAULT_MAX_MONTHS))
        self._max_years = int(buckets.get("max_years", DEFAULT_MAX_YEARS))
        self._range_months = int(self._rules.get("ranges", {}).get("months", DEFAULT_RANGE_MONTHS))

    @property
    def calculator(self) -> AgeCalculator:
        return self._calculator

    def default_pregnancy_tracking(
        self,
        birth_date: date,
        now: date | datetime | None = None,
    ) -> PregnancyTracking:
        return self._calculator.default_pregnancy_tracking(birth_date, now)

    def calculate_age(self, person: Person, at_date: date | datetime) -> ExactAge:
        return self._calculator.calculate_age(person, at_date)

    def bucket_for_age(self, age: ExactAge, tracking: PregnancyTracking) -> AgeBucket | None:
        """Strict bucket for a computed age. None means the photo is not displayable."""
        if age.is_pregnancy:
            if tracking == PregnancyTracking.NONE:
                return None
            return AgeBucket.pregnancy()
        if age.is_newborn:
            return AgeBucket.birth_month()
        if age.years == 0:
            return AgeBucket.month(age.months)
        if age.years > self._max_years:
            logger.debug("Clamping age %d years to %d", age.years, self._max_years)
            return AgeBucket.year(self._max_years)
        return AgeBucket.year(age.years)

    def classify(self, person: Person, photo_date: date | datetime) -> AgeBucket | None:
        """Bucket for a photo taken on photo_date, or None when it is excluded."""
        age = self._calculator.calculate_age(person, photo_date)
        return self.bucket_for_age(age, person.pregnancy_tracking)

    def apply_display_policy(
        self,
        bucket: AgeBucket | None,
        age: ExactAge,
        policy: BirthMonthsDisplay,
    ) -> AgeBucket | None:
        """Reshape a strict bucket according to the birth-months display policy."""
        if bucket is None or bucket.kind in (BucketKind.PREGNANCY, BucketKind.CUSTOM):
            return bucket
        if age.is_newborn:
            return AgeBucket.birth_month()
        cutoff = policy.cutoff_months
        if cutoff is None:
            # Months are never shown: the first year collapses into Birth Month.
            return AgeBucket.birth_month() if age.years == 0 else bucket
        cutoff = min(cutoff, self._max_months)
        if age.total_months < cutoff:
            return AgeBucket.month(age.total_months)
        return bucket

    def display_bucket(self, person: Person, photo_date: date | datetime) -> AgeBucket | None:
        """Classify, then apply the person's display policy."""
        age = self._calculator.calculate_age(person, photo_date)
        bucket = self.bucket_for_age(age, person.pregnancy_tracking)
        return self.apply_display_policy(bucket, age, person.birth_months_display)

    def _bucket_of(self, person: Person, photo_date: date | datetime, use_display_policy: bool) -> AgeBucket | None:
        if use_display_policy:
            return self.display_bucket(person, photo_date)
        return self.classify(person, photo_date)

    def display_ranges(self, person: Person, *, use_display_policy: bool = False) -> list[AgeBucket]:
        """Fixed, ordered list of ranges a person's photos can be browsed by."""
        ranges: list[AgeBucket] = []
        if person.pregnancy_tracking != PregnancyTracking.NONE:
            ranges.append(AgeBucket.pregnancy())
        ranges.append(AgeBucket.birth_month())
        if use_display_policy:
            cutoff = person.birth_months_display.cutoff_months
            month_count = min(cutoff, self._max_months) - 1 if cutoff else 0
        else:
            # Strict classification turns 12 months into Year(1).
            month_count = min(self._range_months, 12) - 1
        ranges.extend(AgeBucket.month(n) for n in range(1, month_count + 1))
        ranges.extend(AgeBucket.year(n) for n in range(1, self._max_years + 1))
        return ranges

    def visible_photos(self, photos: Iterable[Photo], person: Person) -> list[Photo]:
        """Photos minus pre-birth ones when pregnancy tracking is off."""
        photos = list(photos)
        if person.pregnancy_tracking != PregnancyTracking.NONE:
            return photos
        visible = [p for p in photos if p.capture_day >= person.date_of_birth]
        if len(visible) != len(photos):
            logger.debug(
                "Excluded %d pre-birth photos for person %s",
                len(photos) - len(visible),
                person.id,
            )
        return visible

    def photos_in_range(
        self,
        photos: Iterable[Photo],
        person: Person,
        bucket: AgeBucket | None = None,
        *,
        use_display_policy: bool = False,
    ) -> list[Photo]:
        """Photos of one range ordered by capture date. None selects all photos."""
        visible = self.visible_photos(photos, person)
        if bucket is None:
            return sorted(visible, key=_photo_order)
        selected = [
            p for p in visible
            if self._bucket_of(person, p.date_taken, use_display_policy) == bucket
        ]
        return sorted(selected, key=_photo_order)

    def group_and_sort(
        self,
        photos: Iterable[Photo],
        person: Person,
        *,
        use_display_policy: bool = False,
        include_empty: bool = False,
        now: date | datetime | None = None,
        sort_order: SortOrder = SortOrder.OLDEST_TO_LATEST,
    ) -> PhotoGroups:
        """
        Group photos by bucket.

        Groups are ordered by AgeBucket.sort_key and photos by capture date, so the
        result does not depend on input order. include_empty adds the empty display
        ranges up to the latest bucket present (or the bucket of `now`, if later).
        """
        groups: dict[AgeBucket, list[Photo]] = {}
        excluded = 0
        for photo in photos:
            bucket = self._bucket_of(person, photo.date_taken, use_display_policy)
            if bucket is None:
                excluded += 1
                continue
            groups.setdefault(bucket, []).append(photo)
        if excluded:
            logger.debug("Excluded %d photos from grouping for person %s", excluded, person.id)

        if include_empty:
            limits = list(groups)
            if now is not None:
                current = self._bucket_of(person, now, use_display_policy)
                if current is not None:
                    limits.append(current)
            if limits:
                latest = max(limits)
                for bucket in self.display_ranges(person, use_display_policy=use_display_policy):
                    if bucket <= latest:
                        groups.setdefault(bucket, [])

        reverse = sort_order == SortOrder.LATEST_TO_OLDEST
        return [
            (bucket, sorted(groups[bucket], key=_photo_order, reverse=reverse))
            for bucket in sorted(groups, key=lambda b: b.sort_key, reverse=reverse)
        ]
