"""Phone number normalization to E.164, used to compare numbers for duplicate detection."""

import phonenumbers


def normalize_phone(raw: str, default_region: str | None = None) -> str | None:
    """Parse and return the E.164 form of the number, or None if it is not a valid number.

    default_region (e.g. "SG") is used for numbers without a leading +; a number
    that carries its own country code ignores it. Without a region, a local number
    cannot be parsed and None is returned.
    """
    text = str(raw or "").strip()
    if not text:
        return None
    try:
        parsed = phonenumbers.parse(text, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def comparable_phone(raw: str, default_region: str | None = None) -> str:
    """Return the E.164 form when the number parses, else the raw digits unchanged."""
    return normalize_phone(raw, default_region=default_region) or str(raw).strip()
