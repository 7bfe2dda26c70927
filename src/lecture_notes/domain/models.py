"""Domain models for the lecture-notes service."""

from pydantic import BaseModel


class SessionClaims(BaseModel, frozen=True):
    """Verified session token claims identifying the requesting user."""

    subject: str
    session_id: str | None = None


class UserProfile(BaseModel, frozen=True):
    """The parts of an identity-provider user record the service acts on."""

    id: str
    banned: bool = False
