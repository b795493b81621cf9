import os

class Config:
    # "ALL" requires every field check to pass; "ANY" keeps the legacy OR behaviour.
    SIGNUP_VALIDATION_POLICY = os.environ.get("SIGNUP_VALIDATION_POLICY", "ALL")

    PASSWORD_MIN_LENGTH = int(os.environ.get("PASSWORD_MIN_LENGTH", "5"))
    NAME_MAX_LENGTH = int(os.environ.get("NAME_MAX_LENGTH", "255"))

    # Comma separated; empty means strip every tag.
    SANITIZER_ALLOWED_TAGS = tuple(
        t.strip() for t in os.environ.get("SANITIZER_ALLOWED_TAGS", "").split(",") if t.strip()
    )
