"""Abstract interface for session validation and user lookup."""

from abc import ABC, abstractmethod

from starlette.requests import HTTPConnection

from lecture_notes.domain import SessionClaims, UserProfile


class IdentityProvider(ABC):
    """Abstract base class for identity provider backends."""

    @abstractmethod
    def authenticate(self, request: HTTPConnection) -> SessionClaims | None:
        """
        Validates the session credential carried by an inbound request.

        Args:
            request: The inbound request; only its headers are read.

        Returns:
            The verified session claims, or None if the credential is
            missing or invalid.
        """

    @abstractmethod
    def get_user(self, user_id: str) -> UserProfile:
        """
        Fetches the profile of an authenticated user.

        Args:
            user_id: The subject identifier from the session claims.

        Returns:
            The user's profile.

        Raises:
            UserLookupError: If the lookup fails.
        """
