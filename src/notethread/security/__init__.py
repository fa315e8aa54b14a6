"""Security utilities."""

from .jwt import Identity, create_access_token, decode_access_token, verify_access_token
from .password import hash_password, verify_password
from .sanitize import sanitize_text

__all__ = [
    "Identity",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
    "verify_access_token",
    "sanitize_text",
]
