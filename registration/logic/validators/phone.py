"""Phone Validator"""

import re
from typing import Tuple, Optional

from registration.config.constants import PHONE_MIN_DIGITS, PHONE_MAX_DIGITS
from registration.logic.validators.base import BaseValidator


class PhoneValidator(BaseValidator):
    """Validates phone numbers: digits, spaces, dashes, optional leading +."""

    ALLOWED_PATTERN = re.compile(r"^[+0-9][0-9\s-]*$")

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        phone = (value or "").strip()
        if not phone:
            return False, "Phone number is required."

        if not self.ALLOWED_PATTERN.match(phone):
            return False, "Use only numbers, spaces, dashes, and an optional leading +."

        # Subsumed by ALLOWED_PATTERN
        if "+" in phone and not phone.startswith("+"):
            return False, "If you include a country code, the + must be at the start."

        digits = re.sub(r"[^0-9]", "", phone)

        min_digits = kwargs.get("min_digits", PHONE_MIN_DIGITS)
        max_digits = kwargs.get("max_digits", PHONE_MAX_DIGITS)

        if len(digits) < min_digits or len(digits) > max_digits:
            return False, f"Phone number needs between {min_digits} and {max_digits} digits."

        return True, None
