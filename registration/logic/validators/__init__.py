"""
Field Validators

Provides one validator per registration form field.
Additional validators can be added with register_validator().
"""

from typing import Optional

from registration.logic.validators.base import BaseValidator
from registration.logic.validators.name import FullNameValidator
from registration.logic.validators.email import EmailValidator
from registration.logic.validators.phone import PhoneValidator
from registration.logic.validators.birth_date import BirthDateValidator
from registration.logic.validators.terms import TermsValidator

# Registry of built-in validators, keyed by field id
_VALIDATORS = {
    "full_name": FullNameValidator(),
    "email": EmailValidator(),
    "phone": PhoneValidator(),
    "birth_date": BirthDateValidator(),
    "terms": TermsValidator(),
}


def get_validator(name: str) -> Optional[BaseValidator]:
    """Get a validator by field id. Returns None if not found."""
    return _VALIDATORS.get(name)


def register_validator(name: str, validator: BaseValidator):
    """Register a custom validator."""
    _VALIDATORS[name] = validator


__all__ = [
    "BaseValidator",
    "FullNameValidator",
    "EmailValidator",
    "PhoneValidator",
    "BirthDateValidator",
    "TermsValidator",
    "get_validator",
    "register_validator",
]
