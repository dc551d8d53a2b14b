"""Authentication application service.

Verifies credentials against stored profiles and issues bearer tokens.
"""

from __future__ import annotations

from auth.observability import AuthenticationProbe, DefaultAuthenticationProbe
from auth.ports import InvalidCredentialsError
from shared_kernel.auth import PasswordHasher, TokenService, TokenSubject
from social.ports.repositories import IUserDataRepository


class AuthenticationService:
    """Exchanges user credentials for a signed token."""

    def __init__(
        self,
        repository: IUserDataRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
        probe: AuthenticationProbe | None = None,
    ):
        """Initialize AuthenticationService with dependencies.

        Args:
            repository: Repository used to look profiles up by user name
            password_hasher: Verifies the supplied password against its hash
            token_service: Issues the bearer token on success
            probe: Optional domain probe for observability
        """
        self._repository = repository
        self._password_hasher = password_hasher
        self._token_service = token_service
        self._probe = probe or DefaultAuthenticationProbe()

    async def authenticate(self, user_name: str, password: str) -> str:
        """Verify credentials and return a new bearer token.

        User names match case-insensitively. Every successful call issues a
        fresh token; earlier tokens stay valid until they expire.

        Args:
            user_name: The profile's user name
            password: The plaintext password

        Returns:
            The signed token

        Raises:
            InvalidCredentialsError: If no profile has this user name or the
                password does not match
        """
        profile = await self._repository.get_profile_by_name(user_name)
        if profile is None:
            self._probe.login_failed(user_name=user_name, reason="unknown_user")
            raise InvalidCredentialsError("Invalid user name or password")

        if not self._password_hasher.verify(password, profile.password_hash):
            self._probe.login_failed(user_name=user_name, reason="wrong_password")
            raise InvalidCredentialsError("Invalid user name or password")

        issued = self._token_service.issue(
            TokenSubject(
                subject=str(profile.id),
                given_name=profile.first_name,
                family_name=profile.last_name,
                date_created=profile.date_created,
            )
        )

        self._probe.login_succeeded(
            profile_id=profile.id.value, user_name=profile.user_name
        )
        return issued.token
