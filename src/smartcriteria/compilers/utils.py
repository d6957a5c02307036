"""Compiler utility functions.

Shape classification for subpredicates of a compound predicate, and the
unwrapping of the "none of" lowering.
"""

from enum import Enum
from typing import Optional, Tuple

from smartcriteria.constants import ComparisonOperator, LogicalType
from smartcriteria.diagnostics import Diagnostics
from smartcriteria.predicates import ComparisonPredicate, CompoundPredicate, Predicate

__all__ = ("SubpredicateShape", "classify_subpredicate", "criteria_subpredicates", "ensure_diagnostics")


class SubpredicateShape(str, Enum):
    LEAF = "leaf"
    SUBTREE = "subtree"
    CONTAINS_NOT_LEAF = "contains_not_leaf"
    UNRECOGNIZED = "unrecognized"


def ensure_diagnostics(diagnostics: Optional[Diagnostics]) -> Diagnostics:
    """Return the given sink, or a fresh logging-only one."""
    return diagnostics if diagnostics is not None else Diagnostics()


def is_contains_not(predicate: Predicate) -> bool:
    """True for NOT around a single CONTAINS comparison."""
    return (
        isinstance(predicate, CompoundPredicate)
        and predicate.logical_type == LogicalType.NOT
        and len(predicate.subpredicates) == 1
        and isinstance(predicate.subpredicates[0], ComparisonPredicate)
        and predicate.subpredicates[0].operator == ComparisonOperator.CONTAINS
    )


def classify_subpredicate(predicate: Predicate) -> SubpredicateShape:
    """Decide how a subpredicate is parsed before recursing into it."""
    if isinstance(predicate, CompoundPredicate):
        if is_contains_not(predicate):
            return SubpredicateShape.CONTAINS_NOT_LEAF
        return SubpredicateShape.SUBTREE
    if isinstance(predicate, ComparisonPredicate):
        return SubpredicateShape.LEAF
    return SubpredicateShape.UNRECOGNIZED


def criteria_subpredicates(compound: CompoundPredicate) -> Tuple[Predicate, ...]:
    """Return the subpredicates that become the tree's children.

    "None of" is written as NOT(OR(...)); for that shape the inner OR's
    children are returned. Any other compound yields its own children.
    """
    subpredicates = compound.subpredicates
    if compound.logical_type == LogicalType.NOT and len(subpredicates) == 1:
        inner = subpredicates[0]
        if isinstance(inner, CompoundPredicate) and inner.logical_type == LogicalType.OR:
            return inner.subpredicates
    return subpredicates
