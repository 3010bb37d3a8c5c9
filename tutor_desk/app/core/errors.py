"""Error taxonomy shared by the data-access layer and its consumers."""


class TutorDeskError(Exception):
    """Base class for errors surfaced to callers with a human-readable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StorageError(TutorDeskError):
    """The persistence boundary reported a failure during a write."""


class ValidationError(TutorDeskError):
    """Input was rejected before reaching storage."""


class UnknownToolError(TutorDeskError, LookupError):
    """No tool is registered under the requested name."""
