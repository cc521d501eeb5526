from __future__ import annotations

from typing import Any, List, Optional

from django.contrib.sessions.backends.base import SessionBase

from apps.common import get_logger

logger = get_logger(__name__).bind(component="session", layer="store")


class SessionAttributeStore:
    """
    Named attributes of one HTTP session.

    Wraps a Django session (``request.session`` or an engine ``SessionStore``
    opened by key), so storage, expiry and serialisation follow
    ``SESSION_ENGINE`` and the cache it points at.
    """

    def __init__(self, session: SessionBase):
        self.session = session
        self.logger = logger.bind(store="SessionAttributeStore")

    @property
    def session_id(self) -> Optional[str]:
        return self.session.session_key

    def ensure(self) -> str:
        """Return the session id, starting a new session when none is stored."""
        if not self.session.exists(self.session.session_key):
            self.session.create()
            self.logger.debug("Session created", session_id=self.session.session_key)
        return self.session.session_key

    def get(self, key: str, default: Any = None) -> Any:
        return self.session.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.session[key] = value
        self.logger.debug("Session attribute stored", session_id=self.session_id, key=key)

    def attribute_names(self) -> List[str]:
        return list(self.session.keys())
