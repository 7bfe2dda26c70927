"""Clerk implementation of the IdentityProvider interface."""

from clerk_backend_api import Clerk
from clerk_backend_api.security.types import AuthenticateRequestOptions
from starlette.requests import HTTPConnection

from lecture_notes.domain import SessionClaims, UserProfile
from lecture_notes.exceptions import UserLookupError
from lecture_notes.interfaces import IdentityProvider
from lecture_notes.logging import setup_logging

logger = setup_logging()


class ClerkIdentityProvider(IdentityProvider):
    """Validates Clerk session tokens and reads user records from the Backend API."""

    def __init__(self, client: Clerk, authorized_parties: list[str]):
        self._client = client
        self._options = AuthenticateRequestOptions(
            authorized_parties=authorized_parties or None,
        )

    def authenticate(self, request: HTTPConnection) -> SessionClaims | None:
        request_state = self._client.authenticate_request(request, self._options)

        if not request_state.is_signed_in:
            logger.info(
                "Session token rejected",
                extra={"reason": str(request_state.reason)},
            )
            return None

        payload = request_state.payload or {}
        subject = payload.get("sub")
        if not subject:
            logger.warning("Session token has no subject claim")
            return None

        return SessionClaims(subject=subject, session_id=payload.get("sid"))

    def get_user(self, user_id: str) -> UserProfile:
        try:
            user = self._client.users.get(user_id=user_id)
        except Exception as e:
            logger.exception("Clerk user lookup failed", extra={"user_id": user_id})
            raise UserLookupError(user_id, e) from e

        if user is None:
            raise UserLookupError(user_id)

        return UserProfile(id=user.id, banned=bool(user.banned))
