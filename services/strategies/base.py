from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class SelectionStrategy(ABC):
    """Strategy interface for deriving a preset id from free text."""

    @abstractmethod
    def select(self, text: str) -> Optional[str]:
        """Return a preset id for the supplied text, or ``None`` to abstain."""
        raise NotImplementedError
