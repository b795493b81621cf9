from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Mapping

# Legacy camelCase spellings still posted by older signup templates.
FIELD_ALIASES = {
    "firstName": "first_name",
    "lastName": "last_name",
}


@dataclass(frozen=True)
class SignupData:
    """Submitted signup fields. ``None`` means the key was not posted at all."""

    email: str | None = None
    password: str | None = None
    password2: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    speaker_info: str | None = None
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls) if f.name != "extra"]

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> "SignupData":
        known = set(cls.field_names())
        values: dict[str, str] = {}
        extra: dict[str, str] = {}

        for key, value in data.items():
            canonical = FIELD_ALIASES.get(key, key)
            if canonical not in known:
                extra[key] = value
            elif key == canonical:
                values[canonical] = value
            else:
                # canonical spelling wins over its alias
                values.setdefault(canonical, value)

        return cls(extra=extra, **values)

    def get(self, name: str) -> str | None:
        if name in self.field_names():
            return getattr(self, name)
        return self.extra.get(name)

    def as_dict(self) -> dict[str, str]:
        out = {name: getattr(self, name) for name in self.field_names() if getattr(self, name) is not None}
        out.update(self.extra)
        return out
