"""Form validation predicates and per-form error collectors.

Every ``validate_<form>`` helper returns a mapping of field name to message;
an empty mapping means the form is valid.
"""
import re
import logging
from typing import Dict, Any

from domain.constants import (
    PASSWORD_SYMBOLS,
    PHONE_ERROR,
    GMAIL_ERROR,
    USERNAME_ERROR,
    PASSWORD_ERROR,
    REQUIRED_ERROR,
    FARM_SIZE_ERROR,
)

logger = logging.getLogger(__name__)

PHONE_RE = re.compile(r'\d{10}', re.ASCII)
GMAIL_RE = re.compile(r'[a-zA-Z0-9._%+-]+@gmail\.com')
_SYM = re.escape(PASSWORD_SYMBOLS)
PASSWORD_RE = re.compile(
    rf'(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[{_SYM}])[A-Za-z\d{_SYM}]{{8,}}', re.ASCII)
FARM_SIZE_RE = re.compile(r'\d+(?:\.\d+)?', re.ASCII)

FARM_FIELDS = {
    'soil_type': 'Soil type',
    'location': 'Location',
    'farm_size': 'Farm size',
    'climate': 'Climate',
}


def validate_phone(phone: str) -> bool:
    return bool(PHONE_RE.fullmatch(phone or ''))


def validate_gmail(gmail: str) -> bool:
    return bool(GMAIL_RE.fullmatch(gmail or ''))


def validate_password(password: str) -> bool:
    return bool(PASSWORD_RE.fullmatch(password or ''))


def _log_failures(form: str, errors: Dict[str, str]):
    if errors:
        logger.info("%s validation failed: %s", form, ', '.join(sorted(errors)))


def validate_sign_in(form: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not validate_phone(form.get('phone', '')):
        errors['phone'] = PHONE_ERROR
    if not validate_gmail(form.get('gmail', '')):
        errors['gmail'] = GMAIL_ERROR
    if not (form.get('username') or '').strip():
        errors['username'] = USERNAME_ERROR
    if not validate_password(form.get('password', '')):
        errors['password'] = PASSWORD_ERROR
    _log_failures('sign-in', errors)
    return errors


def validate_sign_up(form: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not validate_phone(form.get('phone', '')):
        errors['phone'] = PHONE_ERROR
    if not validate_password(form.get('password', '')):
        errors['password'] = PASSWORD_ERROR
    _log_failures('sign-up', errors)
    return errors


def _positive_number(value: str) -> bool:
    # plain decimals only: no exponents, underscores, inf or nan
    if not FARM_SIZE_RE.fullmatch(value or ''):
        return False
    return float(value) > 0


def validate_farm_details(form: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for key, label in FARM_FIELDS.items():
        if not str(form.get(key) or '').strip():
            errors[key] = REQUIRED_ERROR.format(label=label)
    size = str(form.get('farm_size') or '').strip()
    if size and not _positive_number(size):
        errors['farm_size'] = FARM_SIZE_ERROR
    _log_failures('farm details', errors)
    return errors
