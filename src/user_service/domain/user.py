from __future__ import annotations

from dataclasses import dataclass, replace

from .base import IDomain


@dataclass(frozen=True)
class User(IDomain):
    id: int
    name: str
    email: str

    def with_id(self, user_id: int) -> User:
        return replace(self, id=user_id)

    def with_contact(self, name: str, email: str) -> User:
        return replace(self, name=name, email=email)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }
