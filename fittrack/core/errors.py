"""Domain exceptions raised below the HTTP layer."""


class FitTrackError(Exception):
    """Base class for application errors."""


class InvalidSessionTransition(FitTrackError):
    """A live session operation was invoked from a state that does not allow it."""


class SessionPersistenceError(FitTrackError):
    """The finalized session could not be handed to the persistence sink."""


class LiveSessionNotFound(FitTrackError):
    """The user has no open live session."""


class LiveSessionConflict(FitTrackError):
    """The user already has a live session that has not finished."""


class RecordDecodeError(FitTrackError):
    """A stored row did not match its schema."""

    def __init__(self, entity: str, detail: str):
        super().__init__(f"Stored {entity} failed validation: {detail}")
        self.entity = entity
        self.detail = detail
