"""Unit tests for TokenService."""

from datetime import UTC, datetime, timedelta
from unittest.mock import create_autospec

import pytest
from jose import jwt

from shared_kernel.auth import (
    InvalidTokenError,
    TokenService,
    TokenServiceProbe,
    TokenSubject,
)

SECRET = "unit-test-secret-key-that-is-long-enough"
ISSUER = "screechr-test"
AUDIENCE = "screechr-test-api"

SUBJECT = TokenSubject(
    subject="1",
    given_name="Anakin",
    family_name="Skywalker",
    date_created="2024-01-01T00:00:00+00:00",
)


@pytest.fixture
def mock_probe():
    """Create mock token service probe."""
    return create_autospec(TokenServiceProbe, instance=True)


@pytest.fixture
def service(mock_probe) -> TokenService:
    return TokenService(
        secret_key=SECRET,
        issuer=ISSUER,
        audience=AUDIENCE,
        probe=mock_probe,
    )


def _encode(claims: dict, secret: str = SECRET) -> str:
    now = datetime.now(UTC)
    payload = {
        "iss": ISSUER,
        "aud": AUDIENCE,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=5)).timestamp()),
        **claims,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


class TestIssue:
    """Tests for TokenService.issue."""

    def test_embeds_identity_claims(self, service):
        issued = service.issue(SUBJECT)

        claims = jwt.get_unverified_claims(issued.token)
        assert claims["sub"] == "1"
        assert claims["given_name"] == "Anakin"
        assert claims["family_name"] == "Skywalker"
        assert claims["datecreated"] == "2024-01-01T00:00:00+00:00"
        assert claims["iss"] == ISSUER
        assert claims["aud"] == AUDIENCE

    def test_expires_after_configured_lifetime(self, mock_probe):
        issued_at = datetime(2030, 1, 1, tzinfo=UTC)
        service = TokenService(
            secret_key=SECRET,
            issuer=ISSUER,
            audience=AUDIENCE,
            lifetime=timedelta(minutes=30),
            clock=lambda: issued_at,
            probe=mock_probe,
        )

        issued = service.issue(SUBJECT)

        claims = jwt.get_unverified_claims(issued.token)
        assert issued.expires_at == issued_at + timedelta(minutes=30)
        assert claims["exp"] - claims["iat"] == 30 * 60
        assert claims["nbf"] == claims["iat"]

    def test_records_probe_event(self, service, mock_probe):
        issued = service.issue(SUBJECT)

        mock_probe.token_issued.assert_called_once_with(
            subject="1", expires_at=issued.expires_at.isoformat()
        )

    def test_each_issue_returns_fresh_token(self, mock_probe):
        times = iter(
            [datetime(2030, 1, 1, tzinfo=UTC), datetime(2030, 1, 1, 0, 0, 5, tzinfo=UTC)]
        )
        service = TokenService(
            secret_key=SECRET,
            issuer=ISSUER,
            audience=AUDIENCE,
            clock=lambda: next(times),
            probe=mock_probe,
        )

        assert service.issue(SUBJECT).token != service.issue(SUBJECT).token


class TestValidate:
    """Tests for TokenService.validate."""

    def test_round_trips_issued_token(self, service, mock_probe):
        token = service.issue(SUBJECT).token

        claims = service.validate(token)

        assert claims.sub == "1"
        assert claims.given_name == "Anakin"
        assert claims.family_name == "Skywalker"
        mock_probe.token_validated.assert_called_once_with(subject="1")

    def test_token_without_subject_validates_with_none(self, service):
        claims = service.validate(_encode({}))

        assert claims.sub is None

    def test_expired_token_is_rejected(self, mock_probe):
        issuing = TokenService(
            secret_key=SECRET,
            issuer=ISSUER,
            audience=AUDIENCE,
            clock=lambda: datetime(2020, 1, 1, tzinfo=UTC),
            probe=mock_probe,
        )
        token = issuing.issue(SUBJECT).token

        with pytest.raises(InvalidTokenError, match="expired"):
            issuing.validate(token)
        mock_probe.token_validation_failed.assert_called_once_with(
            reason="Token expired"
        )

    def test_wrong_signature_is_rejected(self, service):
        token = _encode({"sub": "1"}, secret="another-secret-key-of-sufficient-size")

        with pytest.raises(InvalidTokenError):
            service.validate(token)

    def test_wrong_audience_is_rejected(self, service):
        token = _encode({"sub": "1", "aud": "someone-else"})

        with pytest.raises(InvalidTokenError, match="audience"):
            service.validate(token)

    def test_wrong_issuer_is_rejected(self, service):
        token = _encode({"sub": "1", "iss": "https://evil.example.com"})

        with pytest.raises(InvalidTokenError, match="issuer"):
            service.validate(token)

    def test_garbage_is_rejected(self, service, mock_probe):
        with pytest.raises(InvalidTokenError):
            service.validate("not.a.jwt")

        mock_probe.token_validation_failed.assert_called_once()
