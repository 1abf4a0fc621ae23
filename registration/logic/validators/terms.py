"""Terms Acceptance Validator"""

from typing import Tuple, Optional
from registration.logic.validators.base import BaseValidator


class TermsValidator(BaseValidator):
    """Requires the terms checkbox to be ticked."""

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        if value is True:
            return True, None
        return False, "You must accept the terms."
