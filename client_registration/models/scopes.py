"""Permission scopes an app may request when it registers.

Each scope has two spellings and they are NOT interchangeable:

  value / str(scope)  "read write follow"     what goes in the JSON body
  encode()            "read%20write%20follow" what goes in an authorize URL
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import unquote

from client_registration.core.errors import InvalidScopeError

_WORDS = ("read", "write", "follow")


class Scopes(Enum):
    ALL = "read write follow"
    FOLLOW = "follow"
    READ = "read"
    READ_FOLLOW = "read follow"
    READ_WRITE = "read write"
    WRITE = "write"
    WRITE_FOLLOW = "write follow"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> Scopes:
        return cls.READ

    def encode(self) -> str:
        return _ENCODED[self]

    @classmethod
    def parse(cls, text: str) -> Scopes:
        """Map either spelling (in any word order) back to a member."""
        words = frozenset(unquote(text).split())
        if not words or not words <= frozenset(_WORDS):
            raise InvalidScopeError(text)
        return _BY_WORDS[words]


_ENCODED: dict[Scopes, str] = {
    Scopes.ALL: "read%20write%20follow",
    Scopes.FOLLOW: "follow",
    Scopes.READ: "read",
    Scopes.READ_FOLLOW: "read%20follow",
    Scopes.READ_WRITE: "read%20write",
    Scopes.WRITE: "write",
    Scopes.WRITE_FOLLOW: "write%20follow",
}

_BY_WORDS: dict[frozenset[str], Scopes] = {
    frozenset(member.value.split()): member for member in Scopes
}
