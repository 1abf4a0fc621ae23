"""Full Name Validator"""

from typing import Tuple, Optional

from registration.config.constants import NAME_MIN_WORDS, NAME_MIN_WORD_LENGTH
from registration.logic.validators.base import BaseValidator
from registration.models import normalize_full_name


class FullNameValidator(BaseValidator):
    """Validates a person's full name: at least two words of two characters."""

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        name = normalize_full_name(value)
        if not name:
            return False, "Full name is required."

        min_words = kwargs.get("min_words", NAME_MIN_WORDS)
        min_word_length = kwargs.get("min_word_length", NAME_MIN_WORD_LENGTH)

        parts = name.split(" ")
        if len(parts) < min_words:
            return False, "Please enter at least two words."

        if any(len(word) < min_word_length for word in parts):
            return False, f"Each word must be at least {min_word_length} characters."

        return True, None
