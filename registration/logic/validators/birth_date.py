"""Birth Date Validator"""

import re
from datetime import date, datetime
from typing import Tuple, Optional

from registration.config.constants import MIN_AGE_YEARS, DAYS_PER_YEAR
from registration.logic.validators.base import BaseValidator


_CALENDAR_DATE = re.compile(r"^([0-9]{4}-[0-9]{2}-[0-9]{2})(?:[T ][0-9:.]*)?$")


def parse_calendar_date(value: str) -> Optional[date]:
    """Parse YYYY-MM-DD, optionally followed by a time of day, to a date."""
    match = _CALENDAR_DATE.match(value.strip())
    if not match:
        return None
    try:
        return date.fromisoformat(match.group(1))
    except ValueError:
        return None


class BirthDateValidator(BaseValidator):
    """
    Validates a birth date against a reference day.

    Age is measured as elapsed days divided by an average year length,
    not by calendar year subtraction, so results within about a day of
    a birthday can differ from calendar age.
    """

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        if not value:
            return False, "Birth date is required."

        dob = parse_calendar_date(str(value))
        if dob is None:
            return False, "Please choose a valid date."

        today = kwargs.get("today") or date.today()
        if isinstance(today, datetime):
            today = today.date()

        if dob > today:
            return False, "Birth date cannot be in the future."

        min_age = kwargs.get("min_age", MIN_AGE_YEARS)
        age = (today - dob).days / DAYS_PER_YEAR
        if age < min_age:
            return False, f"You must be at least {min_age} years old."

        return True, None
