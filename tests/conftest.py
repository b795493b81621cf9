import pytest

from cfp_signup import create_app


@pytest.fixture
def valid_form_data():
    return {
        "email": "speaker@conference.org",
        "password": "hunter22",
        "password2": "hunter22",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "speaker_info": "I talk about analytical engines.",
    }


@pytest.fixture
def app():
    app = create_app({"TESTING": True})
    yield app
