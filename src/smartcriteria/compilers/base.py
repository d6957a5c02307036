"""Base compiler interface.

Defines the contract every criteria compiler follows: `build` turns a
criteria element into a native predicate, `parse` turns a native predicate
back into a criteria element (or None when it cannot).
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from smartcriteria.diagnostics import Diagnostics
from smartcriteria.predicates import Predicate

__all__ = ("BaseCriteriaCompiler",)


class BaseCriteriaCompiler(ABC):
    """Abstract base class for criteria <-> predicate compilers."""

    @abstractmethod
    def build(self, element: Any, diagnostics: Optional[Diagnostics] = None) -> Predicate:
        """Convert a criteria element into a native predicate."""
        raise NotImplementedError

    @abstractmethod
    def parse(self, predicate: Predicate, diagnostics: Optional[Diagnostics] = None) -> Optional[Any]:
        """Convert a native predicate into a criteria element, or None."""
        raise NotImplementedError
