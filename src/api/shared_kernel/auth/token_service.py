"""Bearer token issuance and validation.

Tokens are self-contained HS256 JWTs signed with a shared secret. Nothing is
stored server-side; a token is valid while its signature, issuer, audience
and lifetime all check out.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError

from shared_kernel.auth.observability import DefaultTokenServiceProbe
from shared_kernel.clock import Clock, utc_now

if TYPE_CHECKING:
    from shared_kernel.auth.observability import TokenServiceProbe


@dataclass(frozen=True)
class TokenSubject:
    """Identity data embedded in an issued token."""

    subject: str
    given_name: str
    family_name: str
    date_created: str


@dataclass(frozen=True)
class TokenClaims:
    """Validated token claims.

    ``sub`` may be missing from a correctly signed token; callers that need
    it decide how to treat its absence.
    """

    sub: str | None
    given_name: str | None = None
    family_name: str | None = None


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed token and its expiry."""

    token: str
    expires_at: datetime


class InvalidTokenError(Exception):
    """Raised when token validation fails."""

    pass


class TokenService:
    """Signs and validates bearer tokens."""

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(hours=1),
        clock: Clock = utc_now,
        probe: TokenServiceProbe | None = None,
    ):
        """Initialize the token service.

        Args:
            secret_key: Symmetric signing key.
            issuer: Value for the ``iss`` claim, required on validation.
            audience: Value for the ``aud`` claim, required on validation.
            algorithm: JWS algorithm (default: HS256).
            lifetime: How long an issued token stays valid.
            clock: Source of the issuance time.
            probe: Observability probe for logging events.
        """
        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._algorithm = algorithm
        self._lifetime = lifetime
        self._clock = clock
        self._probe = probe or DefaultTokenServiceProbe()

    def issue(self, subject: TokenSubject) -> IssuedToken:
        """Sign a new token for the given subject.

        Args:
            subject: Identity data to embed.

        Returns:
            IssuedToken holding the compact JWT and its expiry time.
        """
        issued_at = self._clock()
        expires_at = issued_at + self._lifetime
        claims: dict[str, Any] = {
            "sub": subject.subject,
            "given_name": subject.given_name,
            "family_name": subject.family_name,
            "datecreated": subject.date_created,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": int(issued_at.timestamp()),
            "nbf": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

        self._probe.token_issued(
            subject=subject.subject, expires_at=expires_at.isoformat()
        )
        return IssuedToken(token=token, expires_at=expires_at)

    def validate(self, token: str) -> TokenClaims:
        """Validate a token and return its claims.

        Args:
            token: The compact JWT string.

        Returns:
            TokenClaims containing the validated claims.

        Raises:
            InvalidTokenError: If the token is malformed, expired, or fails
                signature, issuer or audience checks.
        """
        try:
            claims = jwt.decode(
                token=token,
                key=self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options={
                    "verify_signature": True,
                    "verify_aud": True,
                    "verify_iss": True,
                    "verify_exp": True,
                    "verify_nbf": True,
                    "verify_iat": True,
                    "verify_sub": False,
                },
            )
        except ExpiredSignatureError as e:
            self._probe.token_validation_failed(reason="Token expired")
            raise InvalidTokenError("Token has expired") from e
        except JWTClaimsError as e:
            error_msg = str(e).lower()
            if "audience" in error_msg:
                self._probe.token_validation_failed(reason="Invalid audience")
                raise InvalidTokenError("Invalid audience claim") from e
            if "issuer" in error_msg:
                self._probe.token_validation_failed(reason="Invalid issuer")
                raise InvalidTokenError("Invalid issuer claim") from e
            self._probe.token_validation_failed(reason=f"Claims error: {e}")
            raise InvalidTokenError(f"Invalid token claims: {e}") from e
        except JWTError as e:
            self._probe.token_validation_failed(reason=f"JWT error: {e}")
            raise InvalidTokenError(f"Invalid token: {e}") from e

        subject = claims.get("sub")
        given_name = claims.get("given_name")
        family_name = claims.get("family_name")

        self._probe.token_validated(subject=str(subject) if subject is not None else None)

        return TokenClaims(
            sub=str(subject) if subject is not None else None,
            given_name=str(given_name) if given_name is not None else None,
            family_name=str(family_name) if family_name is not None else None,
        )
