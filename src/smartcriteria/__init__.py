"""
smartcriteria: smart folder filter criteria and their bidirectional
compiler to native comparison/compound predicates.
"""

from .constants import ComparisonOperator, CriteriaCondition, CriteriaField, CriteriaOperator, LogicalType
from .diagnostics import Diagnostic, Diagnostics
from .predicates import ComparisonPredicate, CompoundPredicate, Predicate
from .schema import Criteria, CriteriaElement, CriteriaTree

__version__ = "0.1.0"

__all__ = [
    "Criteria",
    "CriteriaTree",
    "CriteriaElement",
    "CriteriaField",
    "CriteriaOperator",
    "CriteriaCondition",
    "ComparisonOperator",
    "LogicalType",
    "Predicate",
    "ComparisonPredicate",
    "CompoundPredicate",
    "Diagnostic",
    "Diagnostics",
]
