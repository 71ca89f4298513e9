"""Session storage for conversation handles.

Handles live only in process memory: nothing is persisted and nothing is
evicted, so every session is lost on restart. The store interface is small
enough that a persistent backend can be dropped in without touching the
gateway.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class SessionStore:
    """Maps a session id to at most one conversation handle."""

    def get(self, session_id: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, session_id: str, handle: Any) -> None:
        raise NotImplementedError

    def delete(self, session_id: str) -> None:
        raise NotImplementedError


class InMemorySessionStore(SessionStore):
    def __init__(self) -> None:
        self._handles: Dict[str, Any] = {}

    def get(self, session_id: str) -> Optional[Any]:
        return self._handles.get(session_id)

    def set(self, session_id: str, handle: Any) -> None:
        self._handles[session_id] = handle

    def delete(self, session_id: str) -> None:
        self._handles.pop(session_id, None)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._handles

    def __len__(self) -> int:
        return len(self._handles)
