"""API errors and validation helpers."""

import re


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


class AuthenticationError(Exception):
    """No API key supplied."""

    def __init__(self, message: str = "API key required"):
        self.message = message
        super().__init__(self.message)


class ForbiddenError(Exception):
    """API key supplied but not accepted."""

    def __init__(self, message: str = "Invalid API key provided"):
        self.message = message
        super().__init__(self.message)


# Australian postcodes are exactly four digits
POSTCODE_PATTERN = re.compile(r"[0-9]{4}")


def validate_postcode(postcode: str | int | None) -> int:
    """Validate a raw postcode and return it as an int."""
    if postcode is None or (isinstance(postcode, str) and not postcode.strip()):
        raise ValidationError("Postcode is required")

    cleaned = str(postcode).strip()
    if not POSTCODE_PATTERN.fullmatch(cleaned):
        raise ValidationError("Postcode must be a 4-digit number")
    return int(cleaned)
