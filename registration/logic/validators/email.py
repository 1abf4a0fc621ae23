"""Email Validator"""

import re
from typing import Tuple, Optional
from registration.logic.validators.base import BaseValidator


class EmailValidator(BaseValidator):
    """
    Validates email addresses in two tiers.

    The first tier is the lenient grammar browsers apply to
    <input type="email">. Values that pass it are then rejected if they
    contain consecutive dots or anything other than exactly one '@'.
    """

    EMAIL_PATTERN = re.compile(
        r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
        r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
        r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
    )

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        email = (value or "").strip()
        if not email:
            return False, "Email is required."

        if not self.EMAIL_PATTERN.match(email):
            return False, "Please enter a valid email address."

        if ".." in email or email.count("@") != 1:
            return False, "Email format looks invalid."

        return True, None
