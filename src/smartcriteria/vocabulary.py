"""Declarative field/operator table.

Every compiler that turns criteria into something executable (the native
predicate compiler here, a SQL WHERE compiler elsewhere) reads the same
table so that in-memory and persisted filtering agree on which operators a
field accepts and what each operator means.
"""

from typing import Dict, FrozenSet, Mapping, Optional

from .constants import (
    BOOLEAN_FIELDS,
    TEXT_FIELDS,
    ComparisonOperator,
    CriteriaField,
    CriteriaOperator,
)

__all__ = (
    "OPERATOR_COMPARISON_MAP",
    "FIELD_OPERATOR_TABLE",
    "UNKNOWN_FIELD_OPERATORS",
    "comparison_operator_for",
    "operators_for_field",
    "is_known_field",
    "valid_operators",
    "is_valid_operator",
)

# Criteria operator -> native comparison operator (build direction)
OPERATOR_COMPARISON_MAP: Dict[CriteriaOperator, ComparisonOperator] = {
    CriteriaOperator.EQUAL_TO: ComparisonOperator.EQUAL_TO,
    CriteriaOperator.NOT_EQUAL_TO: ComparisonOperator.NOT_EQUAL_TO,
    CriteriaOperator.LESS_THAN: ComparisonOperator.LESS_THAN,
    CriteriaOperator.GREATER_THAN: ComparisonOperator.GREATER_THAN,
    CriteriaOperator.LESS_THAN_OR_EQUAL_TO: ComparisonOperator.LESS_THAN_OR_EQUAL_TO,
    CriteriaOperator.GREATER_THAN_OR_EQUAL_TO: ComparisonOperator.GREATER_THAN_OR_EQUAL_TO,
    CriteriaOperator.CONTAINS: ComparisonOperator.CONTAINS,
    # negated by the leaf compiler
    CriteriaOperator.CONTAINS_NOT: ComparisonOperator.CONTAINS,
    CriteriaOperator.BEFORE: ComparisonOperator.LESS_THAN,
    CriteriaOperator.AFTER: ComparisonOperator.GREATER_THAN,
    CriteriaOperator.ON_OR_BEFORE: ComparisonOperator.LESS_THAN_OR_EQUAL_TO,
    CriteriaOperator.ON_OR_AFTER: ComparisonOperator.GREATER_THAN_OR_EQUAL_TO,
    CriteriaOperator.UNDER: ComparisonOperator.LESS_THAN,
    CriteriaOperator.NOT_UNDER: ComparisonOperator.GREATER_THAN_OR_EQUAL_TO,
}

_FOLDER_OPERATORS = {
    ComparisonOperator.EQUAL_TO: CriteriaOperator.EQUAL_TO,
    ComparisonOperator.NOT_EQUAL_TO: CriteriaOperator.NOT_EQUAL_TO,
}

_TEXT_OPERATORS = {
    ComparisonOperator.CONTAINS: CriteriaOperator.CONTAINS,
    ComparisonOperator.NOT_EQUAL_TO: CriteriaOperator.NOT_EQUAL_TO,
    ComparisonOperator.EQUAL_TO: CriteriaOperator.EQUAL_TO,
}

_DATE_OPERATORS = {
    ComparisonOperator.LESS_THAN: CriteriaOperator.BEFORE,
    ComparisonOperator.LESS_THAN_OR_EQUAL_TO: CriteriaOperator.ON_OR_BEFORE,
    ComparisonOperator.GREATER_THAN: CriteriaOperator.AFTER,
    ComparisonOperator.GREATER_THAN_OR_EQUAL_TO: CriteriaOperator.ON_OR_AFTER,
    ComparisonOperator.NOT_EQUAL_TO: CriteriaOperator.NOT_EQUAL_TO,
    ComparisonOperator.EQUAL_TO: CriteriaOperator.EQUAL_TO,
}

# "!= Yes" is kept parseable even though the editor never offers it
_BOOLEAN_OPERATORS = {
    ComparisonOperator.NOT_EQUAL_TO: CriteriaOperator.NOT_EQUAL_TO,
    ComparisonOperator.EQUAL_TO: CriteriaOperator.EQUAL_TO,
}

# Field -> native comparison operator -> criteria operator (parse direction)
FIELD_OPERATOR_TABLE: Dict[str, Mapping[ComparisonOperator, CriteriaOperator]] = {
    CriteriaField.FOLDER: _FOLDER_OPERATORS,
    CriteriaField.DATE: _DATE_OPERATORS,
    **{field: _TEXT_OPERATORS for field in TEXT_FIELDS},
    **{field: _BOOLEAN_OPERATORS for field in BOOLEAN_FIELDS},
}

UNKNOWN_FIELD_OPERATORS: Mapping[ComparisonOperator, CriteriaOperator] = {
    ComparisonOperator.EQUAL_TO: CriteriaOperator.EQUAL_TO,
}


def comparison_operator_for(operator_type: CriteriaOperator) -> Optional[ComparisonOperator]:
    """Return the native comparison operator for a criteria operator, if any."""
    return OPERATOR_COMPARISON_MAP.get(operator_type)


def is_known_field(field: str) -> bool:
    return field in FIELD_OPERATOR_TABLE


def operators_for_field(field: str) -> Mapping[ComparisonOperator, CriteriaOperator]:
    """Return the parse mapping for a field; unknown fields only accept equality."""
    return FIELD_OPERATOR_TABLE.get(field, UNKNOWN_FIELD_OPERATORS)


def valid_operators(field: str) -> FrozenSet[CriteriaOperator]:
    """Return every criteria operator that survives a round trip for `field`.

    `containsNot` is valid wherever `contains` is, since it is expressed as a
    negated contains comparison.
    """
    operators = set(operators_for_field(field).values())
    if CriteriaOperator.CONTAINS in operators:
        operators.add(CriteriaOperator.CONTAINS_NOT)
    return frozenset(operators)


def is_valid_operator(field: str, operator_type: CriteriaOperator) -> bool:
    return operator_type in valid_operators(field)
