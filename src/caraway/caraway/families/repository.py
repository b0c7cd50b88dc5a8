from __future__ import annotations

from typing import Optional, Protocol

from .model import Family


class FamilyRepository(Protocol):
    def get_with_parents(self, family_id: int) -> Optional[Family]:
        """Family row plus every user attached to it."""

        raise NotImplementedError
