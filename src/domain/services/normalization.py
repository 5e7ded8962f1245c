"""Domain normalization helpers."""

import re

from src.domain.errors import InvalidInputError

_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")
_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")


def normalize_name(raw: str | None, field: str = "name") -> str:
    """Trim a display name and reject blank values.

    Args:
        raw: Name as received from the caller.
        field: Field label used in the error message.

    Returns:
        str: Trimmed name.

    Raises:
        InvalidInputError: If the name is missing or blank.
    """
    cleaned = raw.strip() if isinstance(raw, str) else ""
    if not cleaned:
        raise InvalidInputError(f"{field} is required")
    return cleaned


def name_key(name: str) -> str:
    """Return the case-insensitive comparison key for a name."""
    return name.strip().casefold()


def normalize_color_hex(raw: str) -> str:
    """Normalize a color to ``#RRGGBB`` upper-case.

    Raises:
        InvalidInputError: If the value is not six hex digits.
    """
    match = _COLOR_RE.match(raw.strip()) if isinstance(raw, str) else None
    if match is None:
        raise InvalidInputError(f"Invalid color '{raw}', expected #RRGGBB")
    return f"#{match.group(1).upper()}"


def normalize_currency_code(raw: str | None) -> str | None:
    """Normalize a currency code; blank values become None.

    Raises:
        InvalidInputError: If the code is not three letters.
    """
    if not raw or not raw.strip():
        return None
    cleaned = raw.strip().upper()
    if not _CURRENCY_RE.match(cleaned):
        raise InvalidInputError(f"Invalid currency code '{raw}'")
    return cleaned


def normalize_email(raw: str | None) -> str:
    """Trim and lower-case an email address."""
    cleaned = raw.strip().lower() if isinstance(raw, str) else ""
    if "@" not in cleaned or cleaned.startswith("@") or cleaned.endswith("@"):
        raise InvalidInputError(f"Invalid email '{raw}'")
    return cleaned


def normalize_description(raw: str | None) -> str | None:
    """Trim a description, mapping blank values to None."""
    if raw is None:
        return None
    cleaned = raw.strip()
    return cleaned or None


__all__ = [
    "normalize_name",
    "name_key",
    "normalize_color_hex",
    "normalize_currency_code",
    "normalize_email",
    "normalize_description",
]
