"""Input validators shared by the CLI prompts and the user service."""

import re
import unicodedata

from src.accounts.core.errors import ValidationError

FULL_NAME_MAX_LENGTH = 255

# Words of letters joined by a single space, hyphen, apostrophe or period
_FULL_NAME_PATTERN = re.compile(r"^[^\W\d_]+(?:(?:[ '\-]|\. ?)[^\W\d_]+)*\.?$")


def validate_full_name(value: str | None) -> str:
    """Validate a first or last name and return it without surrounding blanks.

    Raises:
        ValidationError: If the name is empty, too long, or contains anything
            other than letters, spaces, hyphens, apostrophes and periods.
    """
    # Decomposed accents (NFD) are combining marks, not letters
    full_name = unicodedata.normalize("NFC", (value or "").strip())

    if not full_name:
        raise ValidationError("The full name can not be empty.")

    if len(full_name) > FULL_NAME_MAX_LENGTH:
        raise ValidationError(
            f"The full name must not be longer than {FULL_NAME_MAX_LENGTH} characters."
        )

    if not _FULL_NAME_PATTERN.match(full_name):
        raise ValidationError(
            "The full name must contain only letters, spaces, hyphens, "
            "apostrophes and periods."
        )

    return full_name
