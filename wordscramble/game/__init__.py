from .session import (
    DEFAULT_ROOT_WORD,
    GameSession,
    SessionNotStartedError,
    SessionSnapshot,
    SessionState,
)

__all__ = ["DEFAULT_ROOT_WORD", "GameSession", "SessionNotStartedError",
           "SessionSnapshot", "SessionState"]
