"""Admin session context.

One AdminSessionRegistry exists per process. It is created by the app config
at startup and closed at interpreter exit. Each signed-in admin gets an
AdminSession that owns that admin's live order dashboard; closing the session
cancels the dashboard's subscription.
"""

import logging
import threading
from typing import Dict

from django.apps import apps

from orders.live import AdminLiveViewModel

logger = logging.getLogger(__name__)


class AdminSession:
    def __init__(self, user):
        self.user_id = user.pk
        self.email = user.email
        self.dashboard = AdminLiveViewModel().attach()

    @property
    def active(self) -> bool:
        return self.dashboard.attached

    def close(self) -> None:
        self.dashboard.detach()


class AdminSessionRegistry:
    def __init__(self):
        self._sessions: Dict[int, AdminSession] = {}
        self._lock = threading.Lock()

    def open(self, user) -> AdminSession:
        """Return the user's session, creating it on first use."""
        with self._lock:
            session = self._sessions.get(user.pk)
            if session is None or not session.active:
                session = AdminSession(user)
                self._sessions[user.pk] = session
                logger.info("Admin session opened for %s.", user.email or user.pk)
            return session

    def get(self, user):
        with self._lock:
            return self._sessions.get(user.pk)

    def close(self, user) -> None:
        with self._lock:
            session = self._sessions.pop(user.pk, None)
        if session is not None:
            session.close()
            logger.info("Admin session closed for %s.", session.email or session.user_id)

    def close_all(self) -> None:
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            session.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


def get_session_registry() -> AdminSessionRegistry:
    return apps.get_app_config("user_auth_app").sessions
