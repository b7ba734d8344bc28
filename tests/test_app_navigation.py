"""Button-level walk through the wizard using Streamlit's AppTest harness."""
import os
import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'app.py'))

VALID_FARM = {'soil_type': 'Loamy', 'location': 'Nashik', 'farm_size': '2.5', 'climate': 'Tropical',
              'soil_image': None}


def start_at(page: str, **state) -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.session_state['current_page'] = page
    for key, value in state.items():
        at.session_state[key] = value
    at.run()
    assert not at.exception
    return at


def click(at: AppTest, label: str) -> AppTest:
    button = next(b for b in at.button if b.label == label)
    button.click().run()
    assert not at.exception
    return at


def field_errors_shown(at: AppTest):
    return [m.value for m in at.markdown if m.value.startswith("<div class='field-error'>")]


@pytest.mark.parametrize("page, label, target", [
    ("landing", "Get Started ➜", "signin"),
    ("signin", "◀ Back to Home", "landing"),
    ("signin", "Sign Up", "signup"),
    ("signup", "◀ Back to Sign In", "signin"),
    ("farmDetails", "◀ Back", "signin"),
    ("crops", "◀ Back to Farm Details", "farmDetails"),
])
def test_back_and_forward_buttons(page, label, target):
    at = click(start_at(page, farm_data=VALID_FARM), label)
    assert at.session_state['current_page'] == target


def test_plan_buttons():
    at = click(start_at('plan', selected_crop={'name': 'Wheat', 'icon': '🌾'}), "Start My Wheat Journey")
    assert at.session_state['current_page'] == 'dashboard'
    at = click(start_at('plan', selected_crop={'name': 'Wheat'}), "◀ Back to Crop Selection")
    assert at.session_state['current_page'] == 'crops'


def test_dashboard_buttons():
    at = click(start_at('dashboard', selected_crop='Spinach'), "➕ New Plan")
    assert at.session_state['current_page'] == 'farmDetails'
    at = click(start_at('dashboard', selected_crop='Spinach'), "◀ Back to Plan")
    assert at.session_state['current_page'] == 'plan'


def test_selecting_a_crop_opens_its_plan():
    at = click(start_at('crops', farm_data=VALID_FARM), "View Carrots Plan ➜")
    assert at.session_state['current_page'] == 'plan'
    assert at.session_state['selected_crop']['name'] == 'Carrots'


def test_failed_sign_in_shows_inline_errors():
    at = click(start_at('signin'), "Sign In")
    assert at.session_state['current_page'] == 'signin'
    assert set(at.session_state['signin_errors']) == {'phone', 'gmail', 'username', 'password'}
    assert len(field_errors_shown(at)) == 4


def test_leaving_sign_in_for_home_drops_old_errors():
    at = click(start_at('signin'), "Sign In")
    assert field_errors_shown(at)
    click(at, "◀ Back to Home")
    assert 'signin_errors' not in at.session_state
    click(at, "Get Started ➜")
    assert at.session_state['current_page'] == 'signin'
    assert field_errors_shown(at) == []


def test_valid_sign_in_moves_to_farm_details():
    at = start_at('signin')
    at.text_input(key="signin_phone").input("9876543210")
    at.text_input(key="signin_gmail").input("ravi@gmail.com")
    at.text_input(key="signin_username").input("ravi")
    at.text_input(key="signin_password").input("Harvest1!")
    click(at, "Sign In")
    assert at.session_state['current_page'] == 'farmDetails'
    assert at.session_state['user_data']['username'] == 'ravi'
    assert at.session_state['signin_errors'] == {}
