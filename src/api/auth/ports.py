"""Exceptions for the authentication bounded context."""


class InvalidCredentialsError(Exception):
    """Raised when a user name and password pair does not match a profile.

    The message never says which half was wrong.
    """

    pass
