"""Session-state holder for the wizard: current page, user, farm and crop.

All helpers take an optional ``state`` mapping and fall back to
``st.session_state``; tests pass a plain dict.
"""
from __future__ import annotations
import logging
from dataclasses import asdict
from typing import Any, Dict, MutableMapping, Optional

import streamlit as st

from domain.constants import PAGES, DEFAULT_START_PAGE
from domain.models import UserProfile, FarmProfile, user_from_dict, farm_from_dict
from services import validation

logger = logging.getLogger(__name__)

ERROR_KEYS = {
    'signin': 'signin_errors',
    'signup': 'signup_errors',
    'farmDetails': 'farm_errors',
}

SIGN_IN_FIELDS = ('phone', 'gmail', 'username', 'password')
SIGN_UP_FIELDS = ('phone', 'password')


def _state(state: Optional[MutableMapping[str, Any]]) -> MutableMapping[str, Any]:
    return st.session_state if state is None else state


def init_state(state: Optional[MutableMapping[str, Any]] = None, start_page: str = DEFAULT_START_PAGE):
    """Seed wizard keys once per session; existing values are kept."""
    s = _state(state)
    if 'current_page' not in s:
        s['current_page'] = start_page if start_page in PAGES else DEFAULT_START_PAGE
        s['start_page'] = s['current_page']
    if 'user_data' not in s:
        s['user_data'] = asdict(UserProfile())
    if 'farm_data' not in s:
        s['farm_data'] = asdict(FarmProfile())
    if 'selected_crop' not in s:
        s['selected_crop'] = None
    return s


def current_page(state: Optional[MutableMapping[str, Any]] = None) -> str:
    return _state(state).get('current_page', DEFAULT_START_PAGE)


def navigate(page: str, state: Optional[MutableMapping[str, Any]] = None):
    if page not in PAGES:
        raise ValueError(f"Unknown page: {page}")
    s = _state(state)
    previous = s.get('current_page')
    s['current_page'] = page
    logger.info("navigate %s -> %s", previous, page)


def get_user(state: Optional[MutableMapping[str, Any]] = None) -> UserProfile:
    return user_from_dict(_state(state).get('user_data') or {})


def get_farm(state: Optional[MutableMapping[str, Any]] = None) -> FarmProfile:
    return farm_from_dict(_state(state).get('farm_data') or {})


def get_selected_crop(state: Optional[MutableMapping[str, Any]] = None) -> Any:
    return _state(state).get('selected_crop')


def get_errors(page: str, state: Optional[MutableMapping[str, Any]] = None) -> Dict[str, str]:
    return dict(_state(state).get(ERROR_KEYS[page]) or {})


def clear_errors(page: str, state: Optional[MutableMapping[str, Any]] = None):
    _state(state).pop(ERROR_KEYS[page], None)


def _merge_user(s: MutableMapping[str, Any], form: Dict[str, Any], keys):
    user = dict(s.get('user_data') or asdict(UserProfile()))
    user.update({k: form.get(k, '') for k in keys})
    s['user_data'] = user


def submit_sign_in(form: Dict[str, Any], state: Optional[MutableMapping[str, Any]] = None) -> Dict[str, str]:
    """Validate sign-in; on success merge into the user and go to farm details."""
    s = _state(state)
    errors = validation.validate_sign_in(form)
    s[ERROR_KEYS['signin']] = errors
    if errors:
        return errors
    _merge_user(s, form, SIGN_IN_FIELDS)
    navigate('farmDetails', s)
    return errors


def submit_sign_up(form: Dict[str, Any], state: Optional[MutableMapping[str, Any]] = None) -> Dict[str, str]:
    """Validate sign-up; on success merge phone/password and return to sign-in."""
    s = _state(state)
    errors = validation.validate_sign_up(form)
    s[ERROR_KEYS['signup']] = errors
    if errors:
        return errors
    _merge_user(s, form, SIGN_UP_FIELDS)
    navigate('signin', s)
    return errors


def submit_farm_details(form: Dict[str, Any], state: Optional[MutableMapping[str, Any]] = None) -> Dict[str, str]:
    """Validate farm details; on success replace the farm record and show crops."""
    s = _state(state)
    errors = validation.validate_farm_details(form)
    s[ERROR_KEYS['farmDetails']] = errors
    if errors:
        return errors
    farm = farm_from_dict(form)
    farm.farm_size = str(farm.farm_size).strip()
    farm.location = farm.location.strip()
    s['farm_data'] = asdict(farm)
    navigate('crops', s)
    return errors


def select_crop(crop: Any, state: Optional[MutableMapping[str, Any]] = None):
    s = _state(state)
    s['selected_crop'] = crop
    navigate('plan', s)


def sign_out(state: Optional[MutableMapping[str, Any]] = None):
    """Drop user, farm and crop data and return to the session's start page."""
    s = _state(state)
    s['user_data'] = asdict(UserProfile())
    s['farm_data'] = asdict(FarmProfile())
    s['selected_crop'] = None
    for key in ERROR_KEYS.values():
        s.pop(key, None)
    navigate(s.get('start_page', DEFAULT_START_PAGE), s)


def go(page: str):
    """Navigate and rerun the script so the new page renders immediately."""
    navigate(page)
    st.rerun()
