"""Validation functions for label operations."""


def validate_label_name(value: str | None) -> str | None:
    """Validate a label name typed by the user.

    Names are used verbatim (no trimming) because label equality is exact,
    but a name made only of whitespace is rejected.

    Args:
        value: Raw name from the input field

    Returns:
        The name, or None if it is empty or blank
    """
    if not value or not value.strip():
        return None
    return value
