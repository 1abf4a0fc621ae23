"""
In-memory session registry.

Form state itself lives in the LangGraph checkpointer; this store only
tracks which session ids exist so unknown ids can be rejected.
"""

import logging
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


class SessionStore:
    """Tracks live form session ids in creation order."""

    def __init__(self, max_sessions: int = 1000, on_evict: Optional[Callable[[str], None]] = None):
        self.max_sessions = max(1, max_sessions)
        self.on_evict = on_evict
        self._sessions: Dict[str, bool] = {}

    def create(self, session_id: str) -> Optional[str]:
        """
        Register a new session, evicting the oldest when full.

        Returns:
            The evicted session id, or None
        """
        evicted = None
        if self._sessions and len(self._sessions) >= self.max_sessions:
            evicted = next(iter(self._sessions))
            logger.warning(f"Max sessions reached, evicting {evicted}")
            del self._sessions[evicted]
            if self.on_evict:
                self.on_evict(evicted)

        self._sessions[session_id] = True
        return evicted

    def exists(self, session_id: str) -> bool:
        """Check whether a session id is live."""
        return session_id in self._sessions

    def count_active(self) -> int:
        """Count active sessions."""
        return len(self._sessions)
