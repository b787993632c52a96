from datetime import datetime

import pytest
import pytz
from fastapi.testclient import TestClient

from form_server import create_app
from registration import VARIANTS, RegistrationPage

TZ_NAME = "Europe/Helsinki"
DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri"]


@pytest.fixture
def now():
    return pytz.timezone(TZ_NAME).localize(datetime(2026, 10, 19, 9, 5, 7))


@pytest.fixture
def page():
    return RegistrationPage(VARIANTS["a"], TZ_NAME)


@pytest.fixture
def app():
    return create_app(day_order=DAYS, tz_name=TZ_NAME)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def valid_fields():
    return {
        "fullName": "Maija Meikäläinen",
        "email": "maija@example.fi",
        "phone": "0501234567",
        "birthDate": "2000-05-17",
        "terms": "on",
    }
