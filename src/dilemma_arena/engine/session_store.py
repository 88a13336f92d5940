"""In-memory session store.

The store lock only guards the dictionary itself (insert, lookup, remove)
and is never held while a round is resolved. Play on one session is
serialized by that session's own lock, so unrelated matches never wait on
each other.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from dilemma_arena.errors import SessionNotFoundError
from dilemma_arena.models.session import MatchSession


class SessionStore:
    """Thread-safe dictionary of live sessions keyed by session id."""

    def __init__(self) -> None:
        self._sessions: dict[str, MatchSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    def add(self, session: MatchSession) -> None:
        with self._lock:
            if session.session_id in self._sessions:
                raise ValueError(f"Duplicate session id: {session.session_id}")
            self._sessions[session.session_id] = session

    def get(self, session_id: str) -> MatchSession:
        """Look up a session.

        Raises:
            SessionNotFoundError: If no live session has this id
        """
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    @contextmanager
    def locked(self, session_id: str) -> Iterator[MatchSession]:
        """Hold a session's own lock for the duration of the block.

        Raises:
            SessionNotFoundError: If no live session has this id
        """
        session = self.get(session_id)
        with session.lock:
            yield session

    def remove(self, session_id: str) -> bool:
        """Remove a session if present.

        Returns:
            True if removed, False if it was not there
        """
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def session_ids(self) -> list[str]:
        with self._lock:
            return list(self._sessions)
