"""Structural validation for customer email addresses."""

from protean.exceptions import ValidationError

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def _invalid(email):
    return ValidationError({"email": [f"Invalid email address: {email!r}"]})


def verify_email_address(email: str) -> None:
    """Ensure that the email address follows a basic valid structure.

    Exactly one @, non-empty local and domain parts, a dotted domain without
    leading or trailing hyphens on its labels, no consecutive dots, no
    whitespace and none of the forbidden characters.
    """
    if any(ch.isspace() for ch in email):
        raise _invalid(email)

    if email.count("@") != 1:
        raise _invalid(email)

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        raise _invalid(email)

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        raise _invalid(email)

    if "." not in domain_part:
        raise _invalid(email)

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            raise _invalid(email)

    if ".." in local_part or ".." in domain_part:
        raise _invalid(email)

    if any(forbidden in email for forbidden in _FORBIDDEN):
        raise _invalid(email)
