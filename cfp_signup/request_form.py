from flask import current_app, request

from .models import SignupData
from .services.sanitizer_service import BleachPurifier
from .signup_form import SignupForm


def signup_data_from_request(form=None) -> SignupData:
    """Read the posted signup fields, folding legacy field names into canonical ones."""
    if form is None:
        form = request.form
    return SignupData.from_mapping(form)


def signup_form_from_request(form=None) -> SignupForm:
    config = current_app.config
    purifier = BleachPurifier(tags=config.get("SANITIZER_ALLOWED_TAGS", ()))
    return SignupForm(
        signup_data_from_request(form),
        purifier=purifier,
        policy=config.get("SIGNUP_VALIDATION_POLICY", "ALL"),
        password_min_length=config.get("PASSWORD_MIN_LENGTH", 5),
        name_max_length=config.get("NAME_MAX_LENGTH", 255),
    )
