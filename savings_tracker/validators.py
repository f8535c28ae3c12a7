import math
from typing import Optional

from savings_tracker.errors import ValidationError


def validate_title(title: Optional[str]) -> str:
    """
    Checks a goal title and returns it stripped.

    Raises:
        ValidationError: if the title is missing, not text, or blank
    """
    if title is None or not isinstance(title, str):
        raise ValidationError("title is required")
    title = title.strip()
    if not title:
        raise ValidationError("title must not be empty")
    return title


def validate_positive_amount(value, field: str = "amount") -> float:
    """
    Checks that ``value`` is a finite number greater than zero.

    Booleans are rejected even though they are ints in Python.

    Raises:
        ValidationError: if the value is missing, not numeric, or <= 0
    """
    if value is None:
        raise ValidationError(f"{field} is required")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field} must be a number", details={"value": repr(value)})
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"{field} must be a finite number")
    if value <= 0:
        raise ValidationError(f"{field} must be greater than 0", details={"value": value})
    return value


def validate_image_url(image_url: Optional[str]) -> Optional[str]:
    """Empty strings are stored as no image."""
    if image_url is None:
        return None
    if not isinstance(image_url, str):
        raise ValidationError("imageUrl must be a string")
    image_url = image_url.strip()
    return image_url or None
