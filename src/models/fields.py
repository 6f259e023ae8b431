"""Validation shared by fields that end up in the comma-separated data files."""

FIELD_DELIMITER = ","

# Characters that would split a record across fields or lines
FORBIDDEN_CHARACTERS = (FIELD_DELIMITER, "\n", "\r")


def ensure_single_field(value: str) -> str:
    """Reject text that cannot be stored as a single data-file field.

    Args:
        value: Free-text value (room type, guest name)

    Returns:
        The value unchanged

    Raises:
        ValueError: If the value contains the delimiter or a line break
    """
    if any(character in value for character in FORBIDDEN_CHARACTERS):
        raise ValueError(f"must not contain '{FIELD_DELIMITER}' or line breaks")
    return value
