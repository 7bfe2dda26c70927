"""Custom exceptions for the lecture-notes service."""


class ConfigurationError(Exception):
    """Raised when a required environment variable is missing or invalid at startup."""

    def __init__(self, variable: str, reason: str = "not set in environment or .env file"):
        self.variable = variable
        self.reason = reason
        super().__init__(f"{variable} {reason}")


class AccessDeniedError(Exception):
    """Raised by the auth guard to reject a request before it reaches a route."""

    def __init__(self, status_code: int, access: str):
        self.status_code = status_code
        self.access = access
        super().__init__(f"Access denied ({status_code}): {access}")


class UserLookupError(Exception):
    """Raised when the identity provider cannot return a user profile."""

    def __init__(self, user_id: str, cause: Exception | None = None):
        self.user_id = user_id
        self.cause = cause
        super().__init__(f"Failed to get user '{user_id}': {cause}")


class ScratchFileError(Exception):
    """Raised when an upload cannot be written to a temporary file."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to store upload '{file_name}': {cause}")


class TranscriptionError(Exception):
    """Raised when audio transcription fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class SummarizationError(Exception):
    """Raised when the chat-completion call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class EmptyCompletionError(SummarizationError):
    """Raised when the completion response contains no choices."""

    def __init__(self):
        super().__init__("no response from AI")
