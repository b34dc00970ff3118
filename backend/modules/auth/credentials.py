"""
Credential generation and shape checks.

Everything here draws from the `secrets` CSPRNG. Uniqueness of tokens and
keys is enforced by the datastore's unique constraints, not checked here.
"""

import re
import secrets
from typing import Optional

from pydantic import EmailStr, TypeAdapter, ValidationError as PydanticValidationError

API_KEY_PREFIX = "sk_dabotcentral_"

OTP_LENGTH = 6
_OTP_MIN = 10 ** (OTP_LENGTH - 1)
_OTP_MAX = 10**OTP_LENGTH - 1

# 32 bytes = 256 bits, rendered as 64 hex characters
TOKEN_BYTES = 32

_EMAIL_SHAPE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_email_adapter = TypeAdapter(EmailStr)


def generate_otp() -> str:
    """Return a 6-digit code drawn uniformly from 100000-999999."""
    return str(_OTP_MIN + secrets.randbelow(_OTP_MAX - _OTP_MIN + 1))


def generate_session_token() -> str:
    """Return a 256-bit random session token as 64 hex characters."""
    return secrets.token_hex(TOKEN_BYTES)


def generate_api_key() -> str:
    """Return a new API key: the fixed prefix followed by 64 hex characters."""
    return API_KEY_PREFIX + secrets.token_hex(TOKEN_BYTES)


def is_api_key(credential: Optional[str]) -> bool:
    """Whether a bearer credential has the shape of an API key."""
    return bool(credential) and credential.startswith(API_KEY_PREFIX)


def is_valid_email(email: object) -> bool:
    """
    Check that a value is a syntactically valid email address.

    Requires a non-whitespace local part, an `@`, and a domain containing a
    dot, then runs the stricter RFC checks from email-validator.
    """
    if not isinstance(email, str) or not _EMAIL_SHAPE.match(email):
        return False
    try:
        _email_adapter.validate_python(email)
    except PydanticValidationError:
        return False
    return True
