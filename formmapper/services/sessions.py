"""In-memory session store holding one mapping projector per browser session."""

import logging
import uuid
from collections import OrderedDict

from formmapper.config import settings
from formmapper.services.mapping import MappingProjector

logger = logging.getLogger(__name__)


class SessionStore:
    """Bounded store of MappingProjector instances keyed by session id.

    Sessions are ephemeral: nothing is persisted, and the least recently used
    session is evicted once ``max_sessions`` is exceeded.
    """

    def __init__(self, max_sessions: int | None = None):
        self.max_sessions = max_sessions or settings.max_sessions
        self._sessions: OrderedDict[str, MappingProjector] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get(self, session_id: str | None) -> MappingProjector | None:
        """Return the session's projector and mark it as recently used."""
        if not session_id or session_id not in self._sessions:
            return None
        self._sessions.move_to_end(session_id)
        return self._sessions[session_id]

    def create(self) -> tuple[str, MappingProjector]:
        """Start a new session with an empty projector."""
        session_id = str(uuid.uuid4())
        projector = MappingProjector()
        self._sessions[session_id] = projector

        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info(f"Evicted session {evicted_id} (max sessions: {self.max_sessions})")

        return session_id, projector

    def clear(self) -> None:
        self._sessions.clear()


session_store = SessionStore()
