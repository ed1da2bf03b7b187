"""Credentials attached to every API request."""

from abc import ABC, abstractmethod


class BaseAuth(ABC):
    """Base authentication class.

    Credentials are supplied at construction and never refreshed.
    """

    @abstractmethod
    def get_headers(self) -> dict[str, str]:
        """Get authentication headers for requests."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<redacted>)"


class BearerTokenAuth(BaseAuth):
    """Authentication using a pre-obtained bearer token."""

    def __init__(self, token: str) -> None:
        """Initialize bearer token authentication.

        Args:
            token: Access token obtained outside of this library
        """
        self._token = token

    @property
    def token(self) -> str:
        return self._token

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers."""
        return {"Authorization": f"Bearer {self._token}"}


class ApiKeyAuth(BaseAuth):
    """Authentication using a platform API key."""

    def __init__(self, api_key: str) -> None:
        """Initialize API key authentication.

        Args:
            api_key: API key created in the platform's developer settings
        """
        self._api_key = api_key

    @property
    def api_key(self) -> str:
        return self._api_key

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers."""
        return {"Api-Key": self._api_key}


def resolve_auth(
    *, bearer_token: str | None = None, api_key: str | None = None
) -> BaseAuth:
    """Pick the credential from client constructor arguments.

    Raises:
        ValueError: If neither or both credentials are provided
    """
    if bearer_token and api_key:
        raise ValueError("Provide either bearer_token or api_key, not both")
    if bearer_token:
        return BearerTokenAuth(bearer_token)
    if api_key:
        return ApiKeyAuth(api_key)
    raise ValueError("Either bearer_token or api_key must be provided")
