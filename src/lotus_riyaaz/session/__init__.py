"""Practice session configuration and process-wide practice state."""

from lotus_riyaaz.session.config import (
    Instrument,
    Mode,
    SessionConfig,
    SessionSnapshot,
)
from lotus_riyaaz.session.state import PracticeState, View

__all__ = [
    "Instrument",
    "Mode",
    "PracticeState",
    "SessionConfig",
    "SessionSnapshot",
    "View",
]
