def normalize_newlines(value: str) -> str:
    # Browsers post textarea newlines as CRLF; the purifier emits LF.
    return value.replace("\r\n", "\n").replace("\r", "\n")


def altered_fields(original: dict, sanitized: dict):
    """Names of posted fields whose sanitized value differs from the raw one."""
    return [
        field
        for field, raw in original.items()
        if raw is not None and normalize_newlines(sanitized.get(field) or "") != normalize_newlines(raw)
    ]


def compute_tamper_flags(original: dict, sanitized: dict):
    flags = []
    for field in altered_fields(original, sanitized):
        flags.append(("TAMPER_DETECTED", "HIGH", f"Field '{field}' was altered by sanitization."))
    return flags
