"""In-memory implementation of UserRepository.

Holds the authoritative list of users for the lifetime of the process.
Every operation runs under a single lock so concurrent requests cannot
race on id assignment or lose updates.
"""

import threading
from dataclasses import replace

from domain.model.user import User


class InMemoryUserRepository:
    def __init__(self, users: list[User] | None = None):
        self._lock = threading.Lock()
        self.store: list[User] = list(users or [])
        # Highest id ever issued; ids of deleted users are not handed out again.
        self._last_id = max((u.id for u in self.store), default=0)

    # ── write operations ─────────────────────────────────────

    def insert(self, name: str, email: str) -> User:
        with self._lock:
            current_max = max((u.id for u in self.store), default=0)
            self._last_id = max(self._last_id, current_max) + 1
            user = User(id=self._last_id, name=name, email=email)
            self.store.append(user)
            return replace(user)

    def update(self, user_id: int, name: str, email: str) -> User | None:
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return None
            user.rename(name, email)
            return replace(user)

    def remove(self, user_id: int) -> User | None:
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return None
            self.store.remove(user)
            return user

    # ── read operations ──────────────────────────────────────

    def list(self, offset: int, limit: int) -> list[User]:
        if offset < 0 or limit <= 0:
            return []
        with self._lock:
            return [replace(u) for u in self.store[offset:offset + limit]]

    def count(self) -> int:
        with self._lock:
            return len(self.store)

    def get_by_id(self, user_id: int) -> User | None:
        with self._lock:
            user = self._find(user_id)
            return replace(user) if user else None

    def _find(self, user_id: int) -> User | None:
        for user in self.store:
            if user.id == user_id:
                return user
        return None
