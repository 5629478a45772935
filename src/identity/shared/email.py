"""Structural email address validation."""

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\", " ", "\t", "\n")


def is_valid_email(email: str | None) -> bool:
    """Check that an address has exactly one @ and sane local and domain parts."""
    if not email or len(email) > 254:
        return False

    if any(ch in email for ch in _FORBIDDEN):
        return False

    if email.count("@") != 1:
        return False

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return False

    if "." not in domain_part or ".." in local_part or ".." in domain_part:
        return False

    # Domain labels cannot begin or end with a hyphen
    return not any(label.startswith("-") or label.endswith("-") for label in domain_part.split("."))
