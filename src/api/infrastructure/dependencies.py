"""Shared infrastructure dependencies.

Provides ONLY application-scoped security components (password hashing and
token signing) built from settings.
Does NOT import from bounded contexts to maintain DDD boundaries.
"""

from datetime import timedelta
from functools import lru_cache

from infrastructure.settings import get_auth_settings
from shared_kernel.auth import PasswordHasher, TokenService
from shared_kernel.auth.observability import DefaultTokenServiceProbe


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get application-scoped password hasher (singleton).

    Returns:
        PasswordHasher using the configured bcrypt work factor.
    """
    return PasswordHasher(rounds=get_auth_settings().bcrypt_rounds)


@lru_cache
def get_token_service() -> TokenService:
    """Get application-scoped token service (singleton).

    Returns:
        TokenService configured from auth settings.
    """
    settings = get_auth_settings()
    return TokenService(
        secret_key=settings.secret_key.get_secret_value(),
        issuer=settings.issuer,
        audience=settings.audience,
        algorithm=settings.algorithm,
        lifetime=timedelta(minutes=settings.token_lifetime_minutes),
        probe=DefaultTokenServiceProbe(),
    )
