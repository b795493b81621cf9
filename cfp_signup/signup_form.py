"""Form object for the speaker signup page.

Wraps the submitted fields, sanitizes them and runs the per-field rules.
Nothing here raises on bad user input: every check reports back as a
bool, an ``(ok, err)`` tuple or a list of errors.
"""
from __future__ import annotations

import logging
from typing import Mapping

from .models import SignupData
from .services.errors_enum import SignupErrorKind, ValidationPolicy
from .services.flag_service import altered_fields, compute_tamper_flags
from .services.sanitizer_service import BleachPurifier, Purifier
from .services import validation_service

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "email",
    "password",
    "password2",
    "first_name",
    "last_name",
    "speaker_info",
)

# Raw values compared against their purified copy; speaker_info joins when posted.
TAMPER_CHECKED_FIELDS = (
    "email",
    "password",
    "password2",
    "first_name",
    "last_name",
)


class SignupForm:
    def __init__(
        self,
        data: SignupData | Mapping[str, str],
        purifier: Purifier | None = None,
        policy: ValidationPolicy | str = ValidationPolicy.ALL,
        password_min_length: int = 5,
        name_max_length: int = 255,
        required_fields=REQUIRED_FIELDS,
    ):
        if not isinstance(data, SignupData):
            data = SignupData.from_mapping(data)
        self.data = data
        self.purifier = purifier if purifier is not None else BleachPurifier()
        self.policy = ValidationPolicy(policy)
        self.password_min_length = int(password_min_length)
        self.name_max_length = int(name_max_length)
        self.required_fields = tuple(required_fields)

    # =====================================================
    # PRESENCE
    # =====================================================

    def missing_fields(self) -> list[str]:
        return [name for name in self.required_fields if self.data.get(name) is None]

    def has_required_fields(self) -> bool:
        """True when every required key was posted; empty strings count."""
        for name in self.required_fields:
            if self.data.get(name) is None:
                logger.debug("Signup form missing required field %s", name)
                return False
        return True

    # =====================================================
    # SANITIZE / TAMPER
    # =====================================================

    def sanitize(self) -> dict[str, str]:
        return {key: self.purifier.purify(value) for key, value in self.data.as_dict().items()}

    def _tamper_candidates(self) -> dict[str, str | None]:
        original = {name: self.data.get(name) for name in TAMPER_CHECKED_FIELDS}
        if self.data.speaker_info is not None:
            original["speaker_info"] = self.data.speaker_info
        return original

    def tamper_flags(self, sanitized: dict[str, str] | None = None):
        if sanitized is None:
            sanitized = self.sanitize()
        return compute_tamper_flags(self._tamper_candidates(), sanitized)

    # =====================================================
    # FIELD VALIDATORS
    # =====================================================

    def validate_email(self) -> bool:
        ok, _ = validation_service.validate_email(self.data.email)
        return ok

    def validate_passwords(self):
        """Returns ``(True, None)`` or ``(False, reason)``."""
        return validation_service.validate_passwords(
            self.data.password,
            self.data.password2,
            min_length=self.password_min_length,
        )

    def validate_first_name(self) -> bool:
        ok, _ = validation_service.validate_name(self.data.first_name, max_length=self.name_max_length)
        return ok

    def validate_last_name(self) -> bool:
        ok, _ = validation_service.validate_name(
            self.data.last_name,
            max_length=self.name_max_length,
            strip_markup=True,
        )
        return ok

    # =====================================================
    # ALL
    # =====================================================

    def validate_all(self) -> bool:
        """Tamper check first, then the field validators combined per policy.

        Under ``ValidationPolicy.ANY`` a single passing check accepts the
        form; that mirrors the old signup page and is kept only for
        compatibility.
        """
        altered = altered_fields(self._tamper_candidates(), self.sanitize())
        if altered:
            logger.warning("Signup rejected: sanitization altered fields %s", ", ".join(altered))
            return False

        checks = [
            self.validate_email(),
            self.validate_passwords()[0],
            self.validate_first_name(),
            self.validate_last_name(),
        ]
        if self.policy == ValidationPolicy.ANY:
            result = any(checks)
        else:
            result = all(checks)

        logger.info("Signup validation %s (policy=%s)", "passed" if result else "failed", self.policy.value)
        return result

    def collect_errors(self):
        """Every failure as ``(kind, field, message)``; empty means the form is good."""
        errors = []

        for name in self.missing_fields():
            errors.append((SignupErrorKind.MISSING_FIELD, name, f"Missing field: {name}"))

        for name in altered_fields(self._tamper_candidates(), self.sanitize()):
            errors.append((SignupErrorKind.TAMPER_DETECTED, name, f"Field '{name}' was altered by sanitization."))

        ok, err = validation_service.validate_email(self.data.email)
        if not ok:
            errors.append((SignupErrorKind.MALFORMED_VALUE, "email", err))

        ok, err = self.validate_passwords()
        if not ok:
            errors.append((SignupErrorKind.PASSWORD_POLICY_VIOLATION, "password", err))

        ok, err = validation_service.validate_name(self.data.first_name, max_length=self.name_max_length)
        if not ok:
            errors.append((SignupErrorKind.MALFORMED_VALUE, "first_name", err))

        ok, err = validation_service.validate_name(
            self.data.last_name,
            max_length=self.name_max_length,
            strip_markup=True,
        )
        if not ok:
            errors.append((SignupErrorKind.MALFORMED_VALUE, "last_name", err))

        return errors
