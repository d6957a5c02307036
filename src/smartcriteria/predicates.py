"""Native predicate object graph.

This is the representation shared with the predicate editor and the
evaluation engine: comparison predicates (left operand, operator, right
operand) and compound predicates (a logical connective over an ordered list
of subpredicates). Any other `Predicate` subclass is a shape the criteria
compilers do not understand.

Predicates are immutable and compose like query nodes:

- `p & q` is an AND compound, `p | q` an OR compound, `~p` a NOT compound.
- `str(p)` renders a readable format string.
- `p.to_dict()` returns a universal dict (`{"$and": [...]}`, `{field: {"$eq": value}}`).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import ComparisonOperator, LogicalType
from .dates import DateUnit

__all__ = (
    "Expression",
    "Predicate",
    "ComparisonPredicate",
    "RelativeDateComparison",
    "CompoundPredicate",
    "ConstantPredicate",
    "comparison",
    "compound",
)

_OP_KEYS = {
    ComparisonOperator.EQUAL_TO: "$eq",
    ComparisonOperator.NOT_EQUAL_TO: "$ne",
    ComparisonOperator.LESS_THAN: "$lt",
    ComparisonOperator.GREATER_THAN: "$gt",
    ComparisonOperator.LESS_THAN_OR_EQUAL_TO: "$lte",
    ComparisonOperator.GREATER_THAN_OR_EQUAL_TO: "$gte",
    ComparisonOperator.CONTAINS: "$contains",
    ComparisonOperator.BEGINS_WITH: "$beginswith",
    ComparisonOperator.ENDS_WITH: "$endswith",
    ComparisonOperator.LIKE: "$like",
    ComparisonOperator.MATCHES: "$matches",
    ComparisonOperator.IN: "$in",
}

_LOGICAL_KEYS = {
    LogicalType.AND: "$and",
    LogicalType.OR: "$or",
    LogicalType.NOT: "$not",
}


class Expression(BaseModel):
    """One side of a comparison: a constant value or a key path."""

    model_config = ConfigDict(frozen=True)

    constant_value: Optional[str] = None
    key_path: Optional[str] = None

    @model_validator(mode="after")
    def check_single_kind(self) -> "Expression":
        if (self.constant_value is None) == (self.key_path is None):
            raise ValueError("expression needs exactly one of constant_value or key_path")
        return self

    @classmethod
    def constant(cls, value: str) -> "Expression":
        return cls(constant_value=value)

    @classmethod
    def path(cls, key_path: str) -> "Expression":
        return cls(key_path=key_path)

    @property
    def text(self) -> str:
        """The constant value, falling back to the key path."""
        return self.constant_value if self.constant_value is not None else self.key_path

    def __str__(self) -> str:
        if self.constant_value is not None:
            return '"' + self.constant_value.replace('"', '\\"') + '"'
        return self.key_path


class Predicate(BaseModel):
    """Abstract base class of every native predicate.

    Subclasses implement `to_dict`; the base itself cannot be instantiated.
    """

    model_config = ConfigDict(frozen=True)

    def __and__(self, other: "Predicate") -> "CompoundPredicate":
        """Return a new predicate representing logical AND of two predicates."""
        return CompoundPredicate(logical_type=LogicalType.AND, subpredicates=(self, other))

    def __or__(self, other: "Predicate") -> "CompoundPredicate":
        """Return a new predicate representing logical OR of two predicates."""
        return CompoundPredicate(logical_type=LogicalType.OR, subpredicates=(self, other))

    def __invert__(self) -> "CompoundPredicate":
        """Return a NOT compound wrapping this predicate."""
        return CompoundPredicate(logical_type=LogicalType.NOT, subpredicates=(self,))

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Return the universal dict representation of this predicate."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self}>"


class ComparisonPredicate(Predicate):
    left: Expression
    operator: ComparisonOperator
    right: Expression

    def __str__(self) -> str:
        return f"{self.left} {self.operator.value} {self.right}"

    def to_dict(self) -> Dict[str, Any]:
        return {self.left.text: {_OP_KEYS[self.operator]: self.right.text}}


class RelativeDateComparison(ComparisonPredicate):
    """Comparison against a relative date such as "3 days".

    The right operand keeps the stored value string so the comparison parses
    back into the same criteria; `count` and `unit` carry the decoded value
    for evaluation.
    """

    count: int = Field(..., ge=0)
    unit: DateUnit


class CompoundPredicate(Predicate):
    logical_type: LogicalType
    subpredicates: Tuple[Predicate, ...] = ()

    def __str__(self) -> str:
        if self.logical_type == LogicalType.NOT:
            if len(self.subpredicates) == 1:
                return f"NOT ({self.subpredicates[0]})"
            return "NOT (" + " AND ".join(f"({p})" for p in self.subpredicates) + ")"
        if not self.subpredicates:
            return f"{self.logical_type.value} ()"
        return f" {self.logical_type.value} ".join(f"({p})" for p in self.subpredicates)

    def to_dict(self) -> Dict[str, Any]:
        key = _LOGICAL_KEYS[self.logical_type]
        if self.logical_type == LogicalType.NOT and len(self.subpredicates) == 1:
            return {key: self.subpredicates[0].to_dict()}
        return {key: [p.to_dict() for p in self.subpredicates]}


class ConstantPredicate(Predicate):
    """TRUEPREDICATE / FALSEPREDICATE."""

    value: bool = True

    def __str__(self) -> str:
        return "TRUEPREDICATE" if self.value else "FALSEPREDICATE"

    def to_dict(self) -> Dict[str, Any]:
        return {"$const": self.value}


def comparison(left: str, operator: ComparisonOperator, right: str) -> ComparisonPredicate:
    """Build a comparison between two constant operands."""
    return ComparisonPredicate(left=Expression.constant(left), operator=operator, right=Expression.constant(right))


def compound(logical_type: LogicalType, *subpredicates: Predicate) -> CompoundPredicate:
    return CompoundPredicate(logical_type=logical_type, subpredicates=subpredicates)
