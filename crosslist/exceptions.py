"""Exception hierarchy for the crosslist pipeline."""


class CrosslistError(Exception):
    """Base class for every error raised by crosslist."""


class ClassificationError(CrosslistError):
    """The classification service could not produce a usable answer."""


class ClassificationServiceError(ClassificationError):
    """Transport or HTTP failure while calling the classification service."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidCredentialError(ClassificationServiceError):
    """The service rejected the credential (HTTP 401)."""

    def __init__(self, message: str = "Invalid API key. Check that the key is correct."):
        super().__init__(message, status_code=401)


class MissingCredentialError(ClassificationError):
    """No credential was configured or supplied."""


class ClassificationParseError(ClassificationError):
    """The service answered, but no JSON array could be read from the answer."""


class InstagramError(CrosslistError):
    """Instagram refused or failed a follower list request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
