import pytest
import logging
from services import validation
from domain.constants import PHONE_ERROR, GMAIL_ERROR, USERNAME_ERROR, PASSWORD_ERROR, FARM_SIZE_ERROR


@pytest.mark.parametrize("phone", ["9876543210", "0000000000"])
def test_phone_accepts_ten_digits(phone):
    assert validation.validate_phone(phone)


@pytest.mark.parametrize("phone", ["", "987654321", "98765432101", "98765-4321", "98765 43210",
                                   "987654321a", "+919876543", "９８７６５４３２１０", "9876543210\n"])
def test_phone_rejects_everything_else(phone):
    assert not validation.validate_phone(phone)


@pytest.mark.parametrize("gmail", ["farmer@gmail.com", "john.doe+crops@gmail.com", "a_b%c-d@gmail.com"])
def test_gmail_accepts_gmail_addresses(gmail):
    assert validation.validate_gmail(gmail)


@pytest.mark.parametrize("gmail", ["", "@gmail.com", "farmer@yahoo.com", "farmer@gmail.co",
                                   "farmer@GMAIL.COM", "farmer@gmail.com.in", "far mer@gmail.com",
                                   "farmer@@gmail.com", "farmer@gmailxcom"])
def test_gmail_rejects_other_addresses(gmail):
    assert not validation.validate_gmail(gmail)


@pytest.mark.parametrize("password", ["Passw0rd!", "Abcdefg1@", "aB3$aB3$", "Zz9&&&&&&&&&"])
def test_password_accepts_strong_passwords(password):
    assert validation.validate_password(password)


@pytest.mark.parametrize("password", [
    "",
    "Pa0!",          # too short
    "Abc1@xy",       # seven characters
    "password1!",    # no uppercase
    "PASSWORD1!",    # no lowercase
    "Password!!",    # no digit
    "Password11",    # no symbol
    "Password1#",    # symbol outside the allowed set
    "Pass word1!",   # space not allowed
])
def test_password_rejects_weak_passwords(password):
    assert not validation.validate_password(password)


def test_sign_in_collects_every_failing_field():
    errors = validation.validate_sign_in({'phone': '123', 'gmail': 'x@y.com', 'username': '   ', 'password': 'weak'})
    assert errors == {
        'phone': PHONE_ERROR,
        'gmail': GMAIL_ERROR,
        'username': USERNAME_ERROR,
        'password': PASSWORD_ERROR,
    }


def test_sign_in_valid_form_has_no_errors():
    form = {'phone': '9876543210', 'gmail': 'farmer@gmail.com', 'username': 'ravi', 'password': 'Harvest1!'}
    assert validation.validate_sign_in(form) == {}


def test_sign_in_missing_keys_are_errors():
    assert set(validation.validate_sign_in({})) == {'phone', 'gmail', 'username', 'password'}


def test_sign_up_checks_only_phone_and_password():
    assert validation.validate_sign_up({'phone': '9876543210', 'password': 'Harvest1!'}) == {}
    errors = validation.validate_sign_up({'phone': 'abc', 'password': 'Harvest1!', 'gmail': 'bad'})
    assert errors == {'phone': PHONE_ERROR}


def test_farm_details_requires_all_fields():
    errors = validation.validate_farm_details({'soil_type': '', 'location': ' ', 'farm_size': '', 'climate': None})
    assert set(errors) == {'soil_type', 'location', 'farm_size', 'climate'}
    assert errors['location'] == "Location is required"


@pytest.mark.parametrize("size", ["0", "-2", "two", "1,5"])
def test_farm_size_must_be_positive_number(size):
    form = {'soil_type': 'Loamy', 'location': 'Nashik', 'farm_size': size, 'climate': 'Tropical'}
    assert validation.validate_farm_details(form) == {'farm_size': FARM_SIZE_ERROR}


def test_farm_details_valid():
    form = {'soil_type': 'Clay', 'location': 'Nashik', 'farm_size': '2.5', 'climate': 'Temperate'}
    assert validation.validate_farm_details(form) == {}


@pytest.mark.parametrize("size", ["inf", "Infinity", "nan", "1e400", "1e3", "1_0", "0.0", ".5", "5."])
def test_farm_size_rejects_non_decimal_forms(size):
    form = {'soil_type': 'Loamy', 'location': 'Nashik', 'farm_size': size, 'climate': 'Tropical'}
    assert validation.validate_farm_details(form) == {'farm_size': FARM_SIZE_ERROR}


@pytest.mark.parametrize("size", ["3", "0.5", "12.75"])
def test_farm_size_accepts_plain_decimals(size):
    form = {'soil_type': 'Loamy', 'location': 'Nashik', 'farm_size': size, 'climate': 'Tropical'}
    assert validation.validate_farm_details(form) == {}


def test_failed_sign_in_logs_field_names_not_values(caplog):
    secret = 'hunter2secret'
    form = {'phone': '9876543210', 'gmail': 'ravi@gmail.com', 'username': 'ravi', 'password': secret}
    with caplog.at_level(logging.INFO, logger='services.validation'):
        errors = validation.validate_sign_in(form)
    assert list(errors) == ['password']
    assert 'password' in caplog.text
    assert secret not in caplog.text
