"""Roles carried in access tokens."""

from enum import Enum


class Role(Enum):
    USER = "user"
    SELLER = "seller"
    ADMIN = "admin"

    @classmethod
    def values(cls) -> list[str]:
        return [role.value for role in cls]
