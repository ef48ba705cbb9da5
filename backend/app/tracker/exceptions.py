class SessionError(RuntimeError):
    """Base class for workout session lifecycle errors."""

class SessionAlreadyStarted(SessionError):
    pass

class SessionNotStarted(SessionError):
    pass

class EmptyWorkout(SessionError):
    """Finishing needs at least one exercise with at least one set."""

class SaveInProgress(SessionError):
    """A finish() call is already waiting on the server."""
