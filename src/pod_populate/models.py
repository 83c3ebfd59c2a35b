from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FriendMode(str, Enum):
    """How friend references are turned into WebIDs."""

    LDBC = "ldbc"  # source dataset URIs, resolved through the correlation table
    SYNTHETIC = "synthetic"  # bare account names or absolute WebIDs


@dataclass(frozen=True, slots=True)
class PersonRecord:
    """Identity facts of one LDBC person."""

    id: str
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(slots=True)
class MergeResult:
    account: str
    ok: bool = False
    name_added: bool = False
    friends_added: int = 0
    error: str | None = None


@dataclass(slots=True)
class AccountOutcome:
    """What happened to one account during a run."""

    account: str
    source_id: str | None = None
    created: bool = False
    merged: bool = False
    friends_added: int = 0
    errors: list[str] = field(default_factory=list)


@dataclass(slots=True)
class RunReport:
    outcomes: list[AccountOutcome] = field(default_factory=list)

    def add(self, outcome: AccountOutcome) -> AccountOutcome:
        self.outcomes.append(outcome)
        return outcome

    @property
    def merged(self) -> int:
        return sum(1 for o in self.outcomes if o.merged)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.errors)
