import pytest
from werkzeug.datastructures import MultiDict

import config

from cfp_signup import create_app, ValidationPolicy
from cfp_signup.request_form import signup_data_from_request, signup_form_from_request


POSTED = {
    "email": "speaker@conference.org",
    "password": "hunter22",
    "password2": "hunter22",
    "firstName": "Grace",
    "lastName": "Hopper",
    "speaker_info": "Compilers and nanoseconds.",
}


class TestCreateApp:
    def test_defaults_loaded(self, app):
        assert app.config["SIGNUP_VALIDATION_POLICY"] == "ALL"
        assert not hasattr(config.Config, "SECRET_KEY")
        assert app.config["PASSWORD_MIN_LENGTH"] == 5
        assert app.config["NAME_MAX_LENGTH"] == 255
        assert app.config["SANITIZER_ALLOWED_TAGS"] == ()

    def test_lowercase_policy_accepted(self):
        app = create_app({"TESTING": True, "SIGNUP_VALIDATION_POLICY": "any"})
        with app.test_request_context("/signup", method="POST", data=POSTED):
            assert signup_form_from_request().policy == ValidationPolicy.ANY

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValueError):
            create_app({"SIGNUP_VALIDATION_POLICY": "MOST"})


class TestSignupFromRequest:
    def test_reads_posted_form(self, app):
        with app.test_request_context("/signup", method="POST", data=POSTED):
            data = signup_data_from_request()
        assert data.first_name == "Grace"
        assert data.last_name == "Hopper"

    def test_explicit_mapping(self, app):
        with app.app_context():
            data = signup_data_from_request(MultiDict(POSTED))
        assert data.email == "speaker@conference.org"

    def test_builds_form_from_config(self, app):
        with app.test_request_context("/signup", method="POST", data=POSTED):
            form = signup_form_from_request()
        assert form.policy == ValidationPolicy.ALL
        assert form.has_required_fields() is True
        assert form.validate_all() is True

    def test_config_overrides_are_honoured(self):
        app = create_app(
            {
                "TESTING": True,
                "SIGNUP_VALIDATION_POLICY": "any",
                "PASSWORD_MIN_LENGTH": 10,
                "NAME_MAX_LENGTH": 3,
            }
        )
        with app.test_request_context("/signup", method="POST", data=POSTED):
            form = signup_form_from_request()
        assert form.policy == ValidationPolicy.ANY
        assert form.validate_passwords() == (False, "Your password must be at least 10 characters")
        assert form.validate_first_name() is False

    def test_allowed_tags_reach_purifier(self):
        app = create_app({"TESTING": True, "SANITIZER_ALLOWED_TAGS": ("b",)})
        posted = dict(POSTED, speaker_info="<b>Compilers</b>")
        with app.test_request_context("/signup", method="POST", data=posted):
            form = signup_form_from_request()
        assert form.sanitize()["speaker_info"] == "<b>Compilers</b>"
        assert form.validate_all() is True
