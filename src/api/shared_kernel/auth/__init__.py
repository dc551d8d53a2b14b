"""Authentication shared kernel module."""

from shared_kernel.auth.observability import (
    DefaultTokenServiceProbe,
    TokenServiceProbe,
)
from shared_kernel.auth.passwords import PasswordHasher
from shared_kernel.auth.token_service import (
    InvalidTokenError,
    IssuedToken,
    TokenClaims,
    TokenService,
    TokenSubject,
)

__all__ = [
    "DefaultTokenServiceProbe",
    "InvalidTokenError",
    "IssuedToken",
    "PasswordHasher",
    "TokenClaims",
    "TokenService",
    "TokenServiceProbe",
    "TokenSubject",
]
