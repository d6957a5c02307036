"""Criteria (leaf) compiler.

Builds one field/operator/value clause into a native comparison, and parses
a native comparison back into a clause.

Build canonicalizes two equivalent spellings so that the editor always sees
one of them:

- Date "is after yesterday" is written as Date == "today".
- "is not Yes" / "is not No" is written as == "No" / == "Yes".

"Does not contain" has no comparison operator of its own and is written as
NOT(field CONTAINS value).

Parse never fails on an operator a field does not support. It reports a
diagnostic and falls back to equalTo, so one odd clause cannot break a
whole smart folder.
"""

from typing import Optional

from smartcriteria.constants import (
    BOOLEAN_VALUES,
    NO,
    TODAY,
    YES,
    YESTERDAY,
    ComparisonOperator,
    CriteriaField,
    CriteriaOperator,
)
from smartcriteria.dates import RelativeDate, decode_relative_date
from smartcriteria.diagnostics import Diagnostics
from smartcriteria.exceptions import MalformedCriteriaValueError
from smartcriteria.predicates import (
    ComparisonPredicate,
    Expression,
    Predicate,
    RelativeDateComparison,
    comparison,
)
from smartcriteria.schema import Criteria
from smartcriteria.settings import settings as api_settings
from smartcriteria.vocabulary import comparison_operator_for, is_known_field, operators_for_field

from .base import BaseCriteriaCompiler
from .utils import ensure_diagnostics

__all__ = (
    "CriteriaCompiler",
    "criteria_compiler",
)


class CriteriaCompiler(BaseCriteriaCompiler):
    """Compile single criteria clauses to and from comparison predicates."""

    def build(self, criteria: Criteria, diagnostics: Optional[Diagnostics] = None) -> Predicate:
        """Convert a clause into a comparison, or NOT(comparison) for containsNot.

        Raises:
            MalformedCriteriaValueError: a Date value looks like "<count> <unit>"
                but the count is not a number, and the malformed date policy
                is "raise"
        """
        diagnostics = ensure_diagnostics(diagnostics)
        predicate = self._build_comparison(criteria, diagnostics)
        if criteria.operator_type == CriteriaOperator.CONTAINS_NOT:
            return ~predicate
        return predicate

    def parse(
        self,
        predicate: Predicate,
        diagnostics: Optional[Diagnostics] = None,
        not_contains: bool = False,
    ) -> Optional[Criteria]:
        """Convert a comparison into a clause.

        Args:
            predicate: the comparison to convert
            diagnostics: sink for fallback warnings
            not_contains: the comparison was found wrapped in NOT, so a
                CONTAINS operator means containsNot

        Returns:
            The clause, or None when `predicate` is not a comparison
        """
        if not isinstance(predicate, ComparisonPredicate):
            return None
        diagnostics = ensure_diagnostics(diagnostics)

        field = predicate.left.text
        value = predicate.right.text

        if not is_known_field(field):
            diagnostics.warning(f"Unknown field {field}", field=field)

        operator_type = operators_for_field(field).get(predicate.operator)
        if operator_type is None:
            operator_type = CriteriaOperator.EQUAL_TO
            diagnostics.warning(
                f"Predicate for {field} has unsuitable operator {predicate.operator.value}, "
                f"will default to {operator_type.value}",
                field=field,
                operator=predicate.operator.value,
            )
        elif operator_type == CriteriaOperator.CONTAINS and not_contains:
            operator_type = CriteriaOperator.CONTAINS_NOT

        return Criteria(field=field, operator_type=operator_type, value=value)

    def native_operator(
        self, operator_type: CriteriaOperator, diagnostics: Optional[Diagnostics] = None
    ) -> ComparisonOperator:
        """Return the comparison operator for a criteria operator, defaulting to ==."""
        operator = comparison_operator_for(operator_type)
        if operator is None:
            operator = ComparisonOperator.EQUAL_TO
            ensure_diagnostics(diagnostics).warning(
                f"No proper predicate conversion found for {operator_type}, defaulting to {operator.value}",
                operator=str(operator_type),
            )
        return operator

    def _build_comparison(self, criteria: Criteria, diagnostics: Diagnostics) -> ComparisonPredicate:
        field = criteria.field
        value = criteria.value
        operator_type = criteria.operator_type
        operator = self.native_operator(operator_type, diagnostics)

        if field == CriteriaField.DATE:
            relative = self._decode_date(criteria, diagnostics)
            if relative is not None:
                return RelativeDateComparison(
                    left=Expression.constant(field),
                    operator=operator,
                    right=Expression.constant(value),
                    count=relative.count,
                    unit=relative.unit,
                )

        if field == CriteriaField.DATE and operator_type == CriteriaOperator.AFTER and value == YESTERDAY:
            return comparison(field, ComparisonOperator.EQUAL_TO, TODAY)
        if operator_type == CriteriaOperator.NOT_EQUAL_TO and value in BOOLEAN_VALUES:
            return comparison(field, ComparisonOperator.EQUAL_TO, NO if value == YES else YES)
        return comparison(field, operator, value)

    def _decode_date(self, criteria: Criteria, diagnostics: Diagnostics) -> Optional[RelativeDate]:
        try:
            return decode_relative_date(criteria.value)
        except MalformedCriteriaValueError:
            if api_settings.CRITERIA_MALFORMED_DATE_POLICY != "fallback":
                raise
            diagnostics.error(
                f"Malformed criteria value {criteria.value!r}, compiling it as a plain comparison",
                field=criteria.field,
                value=criteria.value,
            )
            return None


criteria_compiler = CriteriaCompiler()
