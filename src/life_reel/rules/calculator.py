"""Exact age calculation, including pregnancy weeks and trimesters."""

import logging
from datetime import date, datetime
from typing import Any

from life_reel.config import get_age_rules, get_settings
from life_reel.dates import calendar_difference, to_day
from life_reel.models import ExactAge, Person, PregnancyTracking, Trimester

logger = logging.getLogger(__name__)

DEFAULT_TRIMESTER_WEEK_LIMITS = (13, 26)
DEFAULT_MAX_PREGNANCY_WEEKS = 42


class AgeCalculator:
    """Calendar-aware age arithmetic. Pure: same inputs, same ExactAge."""

    def __init__(self, rules: dict[str, Any] | None = None) -> None:
        self._rules = get_age_rules() if rules is None else rules
        pregnancy = self._rules.get("pregnancy", {})
        first, second = pregnancy.get("trimester_week_limits", DEFAULT_TRIMESTER_WEEK_LIMITS)
        self._trimester_limits = (int(first), int(second))
        override = get_settings().max_pregnancy_weeks
        self._max_weeks = override or int(pregnancy.get("max_weeks", DEFAULT_MAX_PREGNANCY_WEEKS))

    @property
    def max_pregnancy_weeks(self) -> int:
        return self._max_weeks

    def default_pregnancy_tracking(
        self,
        birth_date: date,
        now: date | datetime | None = None,
    ) -> PregnancyTracking:
        """Suggested pregnancy tracking mode for a person created today."""
        today = to_day(now) if now is not None else None
        return Person.default_pregnancy_tracking(birth_date, today)

    def trimester_for_week(self, weeks: int) -> Trimester:
        """Weeks up to the first limit are the first trimester, and so on."""
        first, second = self._trimester_limits
        if weeks <= first:
            return Trimester.FIRST
        if weeks <= second:
            return Trimester.SECOND
        return Trimester.THIRD

    def pregnancy_weeks(self, birth_date: date, at_date: date) -> int:
        """Whole weeks between a pre-birth date and the birth date, clamped."""
        weeks = (birth_date - at_date).days // 7
        if weeks > self._max_weeks:
            logger.debug("Clamping pregnancy weeks %d to %d", weeks, self._max_weeks)
            return self._max_weeks
        return max(0, weeks)

    def calculate_age(self, person: Person, at_date: date | datetime) -> ExactAge:
        """Signed calendar difference between the birth date and at_date."""
        birth = person.date_of_birth
        day = to_day(at_date)
        if day < birth:
            weeks = self.pregnancy_weeks(birth, day)
            trimester = None
            if person.pregnancy_tracking == PregnancyTracking.TRIMESTERS:
                trimester = self.trimester_for_week(weeks)
            return ExactAge(is_pregnancy=True, pregnancy_weeks=weeks, trimester=trimester)

        years, months, days = calendar_difference(birth, day)
        return ExactAge(years=years, months=months, days=days)

    def age_text(self, person: Person, at_date: date | datetime) -> str:
        """General age label shown under a slideshow photo."""
        age = self.calculate_age(person, at_date)
        if age.is_pregnancy:
            return "Pregnancy"
        if age.is_newborn:
            return "Birth Month"
        if age.years == 0:
            return f"{age.months} month{'' if age.months == 1 else 's'}"
        return f"{age.years} year{'' if age.years == 1 else 's'}"

    def pregnancy_text(self, age: ExactAge) -> str:
        """Detailed pregnancy label: trimester name or week count."""
        if not age.is_pregnancy:
            return ""
        if age.trimester is not None:
            return age.trimester.label
        weeks = age.pregnancy_weeks or 0
        return f"{weeks} Week{'' if weeks == 1 else 's'}"
