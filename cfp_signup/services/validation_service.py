from email_validator import validate_email as _check_email_syntax, EmailNotValidError

from .sanitizer_service import sanitize_string, strip_tags

MISSING_PASSWORDS = "Missing passwords"
PASSWORDS_DO_NOT_MATCH = "The submitted passwords do not match"


def validate_email(email: str | None):
    if email is None:
        return False, "Email is required."
    try:
        # ASCII syntax only; no DNS lookups
        _check_email_syntax(email, check_deliverability=False, allow_smtputf8=False)
    except EmailNotValidError:
        return False, "Invalid email format."
    return True, None


def validate_passwords(password: str | None, password2: str | None, min_length: int = 5):
    passwd = sanitize_string(password)
    passwd2 = sanitize_string(password2)

    if passwd == "" or passwd2 == "":
        return False, MISSING_PASSWORDS
    if passwd != passwd2:
        return False, PASSWORDS_DO_NOT_MATCH
    if len(passwd) < min_length and len(passwd2) < min_length:
        return False, f"Your password must be at least {min_length} characters"
    return True, None


def validate_name(name: str | None, max_length: int = 255, strip_markup: bool = False):
    """Accept a name only if cleaning it would leave it untouched.

    The cleaned value is never returned; cleaning only probes the raw input.
    """
    cleaned = sanitize_string(name, strip_high=True)
    if strip_markup:
        cleaned = strip_tags(cleaned)

    if cleaned == "":
        return False, "Name is required."
    if len(cleaned) > max_length:
        return False, f"Name must be at most {max_length} characters."
    if cleaned != name:
        return False, "Name contains invalid characters."
    return True, None
