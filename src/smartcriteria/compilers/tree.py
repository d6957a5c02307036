"""CriteriaTree (composite) compiler.

Transforms criteria trees into compound predicates and back. "None of" is
always written as NOT(OR(children)), the only shape the predicate editor
recognizes for it.
"""

from typing import List, Optional

from smartcriteria.constants import CriteriaCondition, LogicalType
from smartcriteria.diagnostics import Diagnostics
from smartcriteria.predicates import CompoundPredicate, Predicate
from smartcriteria.schema import CriteriaElement, CriteriaTree

from .base import BaseCriteriaCompiler
from .criteria import CriteriaCompiler, criteria_compiler
from .utils import SubpredicateShape, classify_subpredicate, criteria_subpredicates, ensure_diagnostics

__all__ = (
    "CriteriaTreeCompiler",
    "tree_compiler",
)


class CriteriaTreeCompiler(BaseCriteriaCompiler):
    """Compile criteria trees to and from compound predicates."""

    _CONDITION_MAP = {
        CriteriaCondition.ALL: LogicalType.AND,
        CriteriaCondition.ANY: LogicalType.OR,
        CriteriaCondition.NONE: LogicalType.NOT,
        CriteriaCondition.INVALID: LogicalType.AND,
    }

    _LOGICAL_MAP = {
        LogicalType.AND: CriteriaCondition.ALL,
        LogicalType.OR: CriteriaCondition.ANY,
        LogicalType.NOT: CriteriaCondition.NONE,
    }

    def __init__(self, leaf_compiler: Optional[CriteriaCompiler] = None) -> None:
        self.leaf_compiler = leaf_compiler or criteria_compiler

    def build(self, tree: CriteriaTree, diagnostics: Optional[Diagnostics] = None) -> CompoundPredicate:
        """Recursively transform a tree into a compound predicate."""
        diagnostics = ensure_diagnostics(diagnostics)
        logical_type = self._CONDITION_MAP.get(tree.condition, LogicalType.AND)
        subpredicates = tuple(self._build_element(element, diagnostics) for element in tree.criteria_tree)

        if tree.condition != CriteriaCondition.NONE:
            return CompoundPredicate(logical_type=logical_type, subpredicates=subpredicates)
        return CompoundPredicate(
            logical_type=LogicalType.NOT,
            subpredicates=(CompoundPredicate(logical_type=LogicalType.OR, subpredicates=subpredicates),),
        )

    def parse(self, predicate: Predicate, diagnostics: Optional[Diagnostics] = None) -> Optional[CriteriaTree]:
        """Recursively transform a compound predicate into a tree.

        Returns None when `predicate` is not a compound. Subpredicates that
        cannot be converted are reported and left out; their siblings are
        still parsed.
        """
        if not isinstance(predicate, CompoundPredicate):
            return None
        diagnostics = ensure_diagnostics(diagnostics)

        condition = self._LOGICAL_MAP.get(predicate.logical_type, CriteriaCondition.INVALID)
        elements: List[CriteriaElement] = []
        for subpredicate in criteria_subpredicates(predicate):
            element = self._parse_element(subpredicate, diagnostics)
            if element is None:
                diagnostics.warning(
                    f"Subpredicate {subpredicate} of compound predicate {predicate} is corrupted, "
                    "cannot be converted to a criteria element",
                    subpredicate=str(subpredicate),
                )
                continue
            elements.append(element)

        return CriteriaTree(condition=condition, criteria_tree=tuple(elements))

    def _build_element(self, element: CriteriaElement, diagnostics: Diagnostics) -> Predicate:
        if isinstance(element, CriteriaTree):
            return self.build(element, diagnostics)
        return self.leaf_compiler.build(element, diagnostics)

    def _parse_element(self, subpredicate: Predicate, diagnostics: Diagnostics) -> Optional[CriteriaElement]:
        shape = classify_subpredicate(subpredicate)
        if shape == SubpredicateShape.CONTAINS_NOT_LEAF:
            return self.leaf_compiler.parse(subpredicate.subpredicates[0], diagnostics, not_contains=True)
        if shape == SubpredicateShape.SUBTREE:
            return self.parse(subpredicate, diagnostics)
        if shape == SubpredicateShape.LEAF:
            return self.leaf_compiler.parse(subpredicate, diagnostics)
        return None


tree_compiler = CriteriaTreeCompiler()
