"""Formatted-string validators (RFC 3696 style email checks)."""

import re

# RFC 5321 / RFC 3696 limits
MAX_EMAIL_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64
MAX_DOMAIN_PART_LENGTH = 255

_LOCAL_CHARS = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]"
_LOCAL_PART_RE = re.compile(rf"{_LOCAL_CHARS}+(?:\.{_LOCAL_CHARS}+)*")

# LDH labels of at most 63 characters, hyphens only inside a label, alphabetic TLD
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
_DOMAIN_PART_RE = re.compile(rf"{_LABEL}(?:\.{_LABEL})*\.[A-Za-z]{{2,}}")


class EmailValidationError(ValueError):
    """Base class for email validation failures."""

    message = "email address has invalid format"

    def __init__(self):
        super().__init__(self.message)


class EmailEmptyError(EmailValidationError):
    message = "email address is empty"


class EmailTooLongError(EmailValidationError):
    message = "email address exceeds 254 characters (RFC 5321 limit)"


class EmailMissingAtSignError(EmailValidationError):
    message = "email address must contain exactly one @ sign"


class EmailLocalPartTooLongError(EmailValidationError):
    message = "email local part exceeds 64 characters (RFC 3696)"


class EmailDomainPartTooLongError(EmailValidationError):
    message = "email domain part exceeds 255 characters (RFC 3696)"


class EmailLocalPartInvalidError(EmailValidationError):
    message = "email local part contains invalid characters or format"


class EmailDomainPartInvalidError(EmailValidationError):
    message = "email domain part is invalid"


def validate_email(email: str) -> None:
    """
    Validate an email address.

    Only surrounding whitespace is ignored; whitespace inside the address is
    rejected by the character checks.

    Args:
        email: Address to check

    Raises:
        EmailValidationError: The subclass describing the first failed rule
    """
    email = email.strip()
    if not email:
        raise EmailEmptyError()

    if email.count("@") != 1:
        raise EmailMissingAtSignError()

    local_part, domain_part = email.split("@")

    if len(local_part) > MAX_LOCAL_PART_LENGTH:
        raise EmailLocalPartTooLongError()
    if len(domain_part) > MAX_DOMAIN_PART_LENGTH:
        raise EmailDomainPartTooLongError()
    if len(email) > MAX_EMAIL_LENGTH:
        raise EmailTooLongError()

    if not local_part or not _LOCAL_PART_RE.fullmatch(local_part):
        raise EmailLocalPartInvalidError()

    if not domain_part or not _DOMAIN_PART_RE.fullmatch(domain_part):
        raise EmailDomainPartInvalidError()


def is_valid_email(email: str) -> bool:
    """Return True if the address passes validate_email."""
    try:
        validate_email(email)
    except EmailValidationError:
        return False
    return True
