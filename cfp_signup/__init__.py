from flask import Flask

from .models import SignupData
from .services.errors_enum import SignupErrorKind, ValidationPolicy
from .services.sanitizer_service import BleachPurifier, NoopPurifier, Purifier
from .signup_form import REQUIRED_FIELDS, SignupForm


def create_app(test_config=None):
    # No routes: the host application owns the signup endpoint and calls
    # request_form.signup_form_from_request() inside its handler.
    app = Flask(__name__)
    app.config.from_object("config.Config")

    if test_config:
        app.config.update(test_config)

    # Reject an unknown policy at startup.
    ValidationPolicy(app.config["SIGNUP_VALIDATION_POLICY"])

    return app


__all__ = [
    "BleachPurifier",
    "NoopPurifier",
    "Purifier",
    "REQUIRED_FIELDS",
    "SignupData",
    "SignupErrorKind",
    "SignupForm",
    "ValidationPolicy",
    "create_app",
]
