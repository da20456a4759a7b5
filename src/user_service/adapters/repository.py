from __future__ import annotations

import threading
from typing import List, Optional, Tuple

from user_service.domain.user import User

from .base import IRepository


class UserStore(IRepository):
    """In-memory owner of the user records and the id counter.

    Records keep insertion order. Ids are assigned by the store, start at 1
    and are never reused, even after a delete. Every public method holds
    ``_lock`` for its whole read-modify-write, so concurrent request
    handlers never interleave on the list or the counter.
    """

    def __init__(self) -> None:
        self._users: List[User] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def add(self, data: User) -> User:  # type: ignore[override]
        return self.add_user(data)

    def list(self) -> Tuple[User, ...]:  # type: ignore[override]
        return self.get_all_users()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def get_all_users(self) -> Tuple[User, ...]:
        with self._lock:
            return tuple(self._users)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._find(user_id)

    def add_user(self, candidate: User) -> User:
        with self._lock:
            user = candidate.with_id(self._next_id)
            self._next_id += 1
            self._users.append(user)
            return user

    def update_user(self, user_id: int, candidate: User) -> Optional[User]:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            user = self._users[index].with_contact(candidate.name, candidate.email)
            self._users[index] = user
            return user

    def delete_user(self, user_id: int) -> bool:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return False
            del self._users[index]
            return True

    # callers must hold _lock
    def _find(self, user_id: int) -> Optional[User]:
        index = self._index_of(user_id)
        return None if index is None else self._users[index]

    def _index_of(self, user_id: int) -> Optional[int]:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None
