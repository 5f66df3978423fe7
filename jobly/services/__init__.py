from .access_policy import (
    SENSITIVE_FIELDS,
    Decision,
    Identity,
    Policy,
    authorize,
    decide,
    has_sensitive_field,
)
from .auth_service import create_access_token, decode_token, get_password_hash, verify_password

__all__ = [
    "SENSITIVE_FIELDS",
    "Decision",
    "Identity",
    "Policy",
    "authorize",
    "decide",
    "has_sensitive_field",
    "create_access_token",
    "decode_token",
    "get_password_hash",
    "verify_password",
]
