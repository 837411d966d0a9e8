from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import List, Optional


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str
    age: int


class InMemoryUserStore:
    """Thread-safe in-memory user collection.

    Storage semantics:
    - Records are kept in insertion order; updates replace in place.
    - Ids come from a counter starting at 1. It is never decremented, so ids
      freed by ``delete`` are not handed out again.
    - One lock guards both the list and the counter. Every operation holds it
      only for the scan/mutation and returns copies, so callers serialize
      results after the lock is released.

    Missing ids are reported as ``None`` / ``False`` rather than raised.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: List[User] = []
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list(self) -> List[User]:
        with self._lock:
            return list(self._users)

    def get(self, user_id: int) -> Optional[User]:
        with self._lock:
            for u in self._users:
                if u.id == user_id:
                    return u
        return None

    def create(self, *, name: str, email: str, age: int) -> User:
        with self._lock:
            user = User(id=self._next_id, name=name, email=email, age=age)
            self._next_id += 1
            self._users.append(user)
        return user

    def update(self, user_id: int, *, name: str, email: str, age: int) -> Optional[User]:
        with self._lock:
            for i, u in enumerate(self._users):
                if u.id == user_id:
                    updated = replace(u, name=name, email=email, age=age)
                    self._users[i] = updated
                    return updated
        return None

    def delete(self, user_id: int) -> bool:
        with self._lock:
            for i, u in enumerate(self._users):
                if u.id == user_id:
                    del self._users[i]
                    return True
        return False
