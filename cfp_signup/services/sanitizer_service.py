"""Sanitizers used by the signup form.

Two flavours live here:

* ``Purifier`` implementations clean markup the way an HTML purifier does
  (tags removed, stray ``<``/``>``/``&`` escaped). The signup form compares
  raw input against the purified copy to spot injection attempts.
* ``sanitize_string`` / ``strip_tags`` are plain-text filters used by the
  password and name validators.
"""
from __future__ import annotations

import re
from typing import Iterable, Mapping, Protocol

import bleach

# A tag, or an unterminated "<..." running to the end of the string. A "<"
# followed by whitespace is plain text.
_TAG_RE = re.compile(r"<(?!\s)[^>]*>?")
_CLOSED_TAG_RE = re.compile(r"<[^<>]*>")


class Purifier(Protocol):
    def purify(self, text: str) -> str:
        ...


class BleachPurifier:
    """Default markup policy: keep plain text, drop every tag and comment."""

    def __init__(
        self,
        tags: Iterable[str] = (),
        attributes: Mapping[str, list] | None = None,
        strip: bool = True,
        strip_comments: bool = True,
    ):
        self.tags = frozenset(tags)
        self.attributes = dict(attributes or {})
        self.strip = strip
        self.strip_comments = strip_comments

    def purify(self, text: str) -> str:
        return bleach.clean(
            str(text),
            tags=self.tags,
            attributes=self.attributes,
            strip=self.strip,
            strip_comments=self.strip_comments,
        )


class NoopPurifier:
    def purify(self, text: str) -> str:
        return text


def strip_tags(value: str) -> str:
    return _CLOSED_TAG_RE.sub("", value or "")


def sanitize_string(value: str | None, strip_low: bool = False, strip_high: bool = False) -> str:
    """Plain-text filter: drops tags and NUL bytes, optionally out-of-range chars.

    ``strip_high`` removes everything above U+007F, ``strip_low`` everything
    below U+0020. Quotes are left as-is.
    """
    if value is None:
        return ""
    cleaned = _TAG_RE.sub("", str(value)).replace("\x00", "")
    if strip_high:
        cleaned = "".join(c for c in cleaned if ord(c) < 128)
    if strip_low:
        cleaned = "".join(c for c in cleaned if ord(c) >= 32)
    return cleaned
