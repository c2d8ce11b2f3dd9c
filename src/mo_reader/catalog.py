from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple


class Version(NamedTuple):
    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True)
class Catalog:
    """Decoded machine object: messages plus the revision and encoding used."""

    encoding: str
    version: Version
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy so the caller's dict cannot change us afterwards.
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))
        object.__setattr__(self, "version", Version(*self.version))

    def __len__(self) -> int:
        return len(self.messages)

    def __contains__(self, msgid: object) -> bool:
        return msgid in self.messages

    def get(self, msgid: str, default: str | None = None) -> str | None:
        return self.messages.get(msgid, default)

    def gettext(self, msgid: str) -> str:
        """Translation for ``msgid``, or ``msgid`` itself when untranslated."""
        return self.messages.get(msgid, msgid)
