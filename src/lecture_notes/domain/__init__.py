"""Domain layer exports."""

from .models import SessionClaims, UserProfile
from .prompts import SUMMARY_PROMPT_PREFIX, build_summary_prompt
from .sanitizer import strip_control_characters

__all__ = [
    "SessionClaims",
    "UserProfile",
    "SUMMARY_PROMPT_PREFIX",
    "build_summary_prompt",
    "strip_control_characters",
]
