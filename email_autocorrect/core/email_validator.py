import re

from email_validator import EmailNotValidError, validate_email

from email_autocorrect.core.models import ValidationResult
from email_autocorrect.utils.logging import get_logger

logger = get_logger(__name__)

MAX_LOCAL_LENGTH = 64
MAX_DOMAIN_LENGTH = 255
MAX_LABEL_LENGTH = 63

_ATOM = r"[a-zA-Z0-9!#$%&'*+\-/=?^_`{|}~]+"
_DOT_ATOM = rf"{_ATOM}(?:\.{_ATOM})*"
_QUOTED = r'"(?:[^"\\]|\\.)*"'
_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?"

DOT_ATOM_RE = re.compile(_DOT_ATOM)
QUOTED_RE = re.compile(_QUOTED)
LABEL_RE = re.compile(_LABEL)

# Whole-address grammars; which one applies depends on whether the
# address contains any non-ASCII code point
ASCII_EMAIL_RE = re.compile(rf"(?:{_DOT_ATOM}|{_QUOTED})@{_LABEL}(?:\.{_LABEL})*")
UNICODE_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def has_non_ascii(text):
    return not text.isascii()


class EmailValidator:
    """
    Structural email validation

    Checks run in a fixed order and stop at the first failure, so every
    invalid address gets exactly one, most specific, error message.
    Internationalized (EAI/IDN) addresses are accepted by the character
    checks; they only have to satisfy the permissive Unicode grammar.
    """

    def validate(self, email):
        """
        Validate the structure of an address

        Returns:
            ValidationResult: is_valid plus the first violated rule's message
        """
        if not email or not email.strip():
            return ValidationResult(False, 'Email is required')

        trimmed = email.strip()

        at_count = trimmed.count('@')
        if at_count == 0:
            return ValidationResult(False, 'Email must contain @ symbol')
        if at_count > 1:
            return ValidationResult(False, 'Email can only contain one @ symbol')

        local_part, domain = trimmed.split('@')

        if not local_part:
            return ValidationResult(False, 'Email username is missing')
        if not domain:
            return ValidationResult(False, 'Email domain is missing')

        if len(local_part) > MAX_LOCAL_LENGTH:
            return ValidationResult(False, f'Email username too long (max {MAX_LOCAL_LENGTH} characters)')
        if len(domain) > MAX_DOMAIN_LENGTH:
            return ValidationResult(False, f'Email domain too long (max {MAX_DOMAIN_LENGTH} characters)')

        if '.' not in domain:
            return ValidationResult(False, 'Email domain must have extension (e.g., .com)')

        if not self.is_valid_local_part(local_part):
            return ValidationResult(False, 'Invalid characters in email username')

        if not self.is_valid_domain(domain):
            return ValidationResult(False, 'Invalid email domain format')

        pattern = UNICODE_EMAIL_RE if has_non_ascii(trimmed) else ASCII_EMAIL_RE
        if not pattern.fullmatch(trimmed):
            return ValidationResult(False, 'Invalid email format')

        return ValidationResult(True)

    def is_valid_local_part(self, local_part):
        if QUOTED_RE.fullmatch(local_part):
            return True

        if local_part.startswith('.') or local_part.endswith('.') or '..' in local_part:
            return False

        # EAI: any non-ASCII local part is left to the final grammar check
        if has_non_ascii(local_part):
            return True

        return DOT_ATOM_RE.fullmatch(local_part) is not None

    def is_valid_domain(self, domain):
        for label in domain.split('.'):
            if not label or len(label) > MAX_LABEL_LENGTH:
                return False

            # IDN labels are accepted as typed
            if has_non_ascii(label):
                continue

            if not LABEL_RE.fullmatch(label):
                return False

        return True

    def normalize(self, email):
        """
        Canonical form of an address using the email-validator library

        Lower-cases the domain, applies Unicode NFC and IDNA rules. No DNS
        lookups are made.

        Returns:
            str: normalized address, or None if the library rejects it
        """
        try:
            validated = validate_email(
                email.strip(),
                check_deliverability=False,
                allow_smtputf8=True,
                allow_quoted_local=True,
            )
        except EmailNotValidError as e:
            logger.debug(f"Normalization rejected {email!r}: {e}")
            return None

        return validated.normalized
