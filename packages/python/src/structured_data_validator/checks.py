"""Type checker primitives used by rule-set conditions.

Every predicate has the shape ``(value, *args) -> bool`` and never raises:
malformed input simply fails the check.  :func:`check_type` dispatches on
a kind name and passes unknown kinds trivially.
"""

from __future__ import annotations
import math
import re
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, Callable
from urllib.parse import urljoin, urlsplit


# Base used to resolve document-relative URLs.
URL_BASE = "https://example.com"

_DURATION_RE = re.compile(
    r"^P(?=\d|T\d)(\d+Y)?(\d+M)?(\d+D)?(T(\d+H)?(\d+M)?(\d+S)?)?$"
)
_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")

_DATE_FORMATS = [
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M%z",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d",
    "%Y-%m",
    "%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
]


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_object(value: Any) -> bool:
    """A mapping (JSON object); lists and scalars are not objects."""
    return isinstance(value, dict)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_array_or_object(value: Any) -> bool:
    return is_object(value) or is_array(value)


def is_number(value: Any) -> bool:
    """Numbers, and strings that parse as finite numbers.

    Booleans are excluded even though they subclass ``int``.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if isinstance(value, str):
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


def is_date(value: Any) -> bool:
    """True if *value* is a timestamp or a string naming a valid date/time."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if not isinstance(value, str) or not value.strip():
        return False
    text = value.strip()
    # Normalise trailing Z to +00:00 for consistent parsing
    normalised = text[:-1] + "+00:00" if text.endswith("Z") else text
    for fmt in _DATE_FORMATS:
        try:
            datetime.strptime(normalised, fmt)
            return True
        except ValueError:
            continue
    try:
        datetime.fromisoformat(normalised)
        return True
    except ValueError:
        pass
    try:
        parsedate_to_datetime(text)
        return True
    except (TypeError, ValueError, IndexError):
        return False


def _is_single_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    if value.startswith("data:"):
        return False
    try:
        parts = urlsplit(urljoin(URL_BASE, value))
        if parts.scheme in ("http", "https"):
            host = parts.hostname
            if not host or any(c.isspace() or c in "<>^|" for c in host):
                return False
            parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    return True


def is_url(value: Any) -> bool:
    """Absolute or document-relative URL, or a sequence of them.

    ``data:`` URLs are always rejected.
    """
    values = value if is_array(value) else [value]
    return all(_is_single_url(v) for v in values)


def is_currency(value: Any) -> bool:
    """ISO 4217 style code: exactly three uppercase letters."""
    return isinstance(value, str) and bool(_CURRENCY_RE.match(value))


def is_enum(value: Any, *allowed: Any) -> bool:
    return any(value == a for a in allowed)


def matches_regex(value: Any, pattern: str | re.Pattern[str]) -> bool:
    text = value if isinstance(value, str) else str(value)
    try:
        return re.search(pattern, text) is not None
    except re.error:
        return False


def is_duration(value: Any) -> bool:
    """ISO 8601 duration such as ``PT1H30M`` or ``P3D``."""
    return isinstance(value, str) and bool(_DURATION_RE.match(value))


TYPE_CHECKS: dict[str, Callable[..., bool]] = {
    "string": is_string,
    "object": is_object,
    "array": is_array,
    "arrayOrObject": is_array_or_object,
    "number": is_number,
    "date": is_date,
    "url": is_url,
    "currency": is_currency,
    "enum": is_enum,
    "regex": matches_regex,
    "duration": is_duration,
}


def check_type(value: Any, kind: str, *args: Any) -> bool:
    """Check *value* against the named kind.

    Unrecognised kinds pass, so a rule-set naming a kind this module does
    not know never produces spurious failures.
    """
    checker = TYPE_CHECKS.get(kind)
    if checker is None:
        return True
    return checker(value, *args)


_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def is_absolute_url(value: Any) -> bool:
    """A URL with its own scheme; web URLs also need a host."""
    if not isinstance(value, str):
        return False
    try:
        parts = urlsplit(value)
        if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
            return False
        if parts.scheme in ("http", "https"):
            host = parts.hostname
            if not host or any(c.isspace() for c in host):
                return False
            parts.port
    except ValueError:
        return False
    return True
