"""Application errors raised by the settings handlers."""


class TranslationStatsError(Exception):
    """Base class for errors with a user-facing message."""

    message = "An error occurred."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class PermissionDeniedError(TranslationStatsError):
    """The current user lacks the capability required by the page or action."""

    message = "You do not have sufficient permissions to access this page."

    def __init__(self, capability: str, message: str | None = None):
        super().__init__(message)
        self.capability = capability


class NonceVerificationError(TranslationStatsError):
    """The anti-forgery token is missing or did not verify."""

    message = "Sorry, your nonce did not verify."

    def __init__(self, action: str, message: str | None = None):
        super().__init__(message)
        self.action = action
