"""Domain models for the example API."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from jsonbody import TRANSIENT


class Role(Enum):
    ADMIN = "admin"
    MEMBER = "member"


@dataclass
class User:
    userName: str
    email: str
    role: Role = Role.MEMBER
    age: int | None = None
    created_at: datetime = field(default_factory=datetime.now)
    # Never leaves the server
    password_hash: str = field(default="", metadata={TRANSIENT: True})


@dataclass
class UserPage:
    items: list[User]
    total: int
