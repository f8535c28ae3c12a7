import math

import pytest

from savings_tracker.errors import ValidationError
from savings_tracker.validators import validate_title, validate_positive_amount, validate_image_url


def test_title_validation():
    assert validate_title("Bike") == "Bike"
    assert validate_title("  New laptop ") == "New laptop"

    with pytest.raises(ValidationError):
        validate_title(None)
    with pytest.raises(ValidationError):
        validate_title("")
    with pytest.raises(ValidationError):
        validate_title("   ")
    with pytest.raises(ValidationError):
        validate_title(42)


def test_positive_amount_validation():
    assert validate_positive_amount(200) == 200.0
    assert validate_positive_amount(0.01) == 0.01

    for bad in (0, -5, -0.5, None, "100", True, math.inf, math.nan):
        with pytest.raises(ValidationError):
            validate_positive_amount(bad)


def test_amount_error_names_the_field():
    with pytest.raises(ValidationError) as exc:
        validate_positive_amount(0, "targetAmount")
    assert "targetAmount" in exc.value.message


def test_image_url_validation():
    assert validate_image_url(None) is None
    assert validate_image_url("") is None
    assert validate_image_url(" https://img.example/bike.png ") == "https://img.example/bike.png"
