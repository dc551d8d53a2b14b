"""Unit test fixtures shared across bounded contexts."""

from datetime import UTC, datetime, timedelta

import pytest

from shared_kernel.auth import PasswordHasher, TokenService

TEST_SECRET = "unit-test-secret-key-that-is-long-enough"
TEST_ISSUER = "screechr-test"
TEST_AUDIENCE = "screechr-test-api"


class SteppingClock:
    """Clock that advances by one second on every call."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture
def password_hasher() -> PasswordHasher:
    """Password hasher with the minimum bcrypt work factor."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def stepping_clock() -> SteppingClock:
    """Deterministic clock starting at 2024-01-01T00:00:00Z."""
    return SteppingClock(datetime(2024, 1, 1, tzinfo=UTC))


@pytest.fixture
def token_service() -> TokenService:
    """Token service with test signing settings."""
    return TokenService(
        secret_key=TEST_SECRET,
        issuer=TEST_ISSUER,
        audience=TEST_AUDIENCE,
    )
