import pytest
from flowershop.shared.email import verify_email_address
from protean.exceptions import ValidationError


@pytest.mark.parametrize("email", ["olena@example.com", "first.last@shop.example.co.uk", "a+tag@b.io"])
def test_valid_addresses(email):
    verify_email_address(email)


@pytest.mark.parametrize(
    "email",
    [
        "no-at-sign.example.com",
        "two@@example.com",
        "spaces in@example.com",
        ".leading@example.com",
        "user@nodot",
        "user@-bad.com",
        "user@example..com",
        "user;x@example.com",
    ],
)
def test_invalid_addresses(email):
    with pytest.raises(ValidationError):
        verify_email_address(email)
