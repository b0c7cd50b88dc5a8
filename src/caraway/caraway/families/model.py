from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Parent:
    """A facilitator (parent user) belonging to a family."""

    user_id: int
    username: str
    first_name: str
    last_name: str
    family_id: int

    @property
    def display_name(self) -> str:
        return self.first_name or self.username


@dataclass(frozen=True)
class Family:
    family_id: int
    family_name: str
    children: int
    parents: tuple[Parent, ...] = field(default_factory=tuple)
