from enum import Enum


class SignupErrorKind(str, Enum):
    MISSING_FIELD = "MISSING_FIELD"
    MALFORMED_VALUE = "MALFORMED_VALUE"
    TAMPER_DETECTED = "TAMPER_DETECTED"
    PASSWORD_POLICY_VIOLATION = "PASSWORD_POLICY_VIOLATION"


class ValidationPolicy(str, Enum):
    ALL = "ALL"
    ANY = "ANY"  # legacy: accept if any single check passes

    @classmethod
    def _missing_(cls, value):
        # case-insensitive lookup so "any" from config or callers works
        if isinstance(value, str):
            for member in cls:
                if member.value == value.upper():
                    return member
        return None
