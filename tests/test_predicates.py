"""Tests for the native predicate object graph."""

import pytest
from pydantic import ValidationError

from smartcriteria.constants import ComparisonOperator, LogicalType
from smartcriteria.predicates import (
    ComparisonPredicate,
    CompoundPredicate,
    ConstantPredicate,
    Expression,
    Predicate,
    comparison,
    compound,
)


class TestExpression:
    def test_constant(self):
        expression = Expression.constant("Subject")
        assert expression.constant_value == "Subject"
        assert expression.key_path is None
        assert expression.text == "Subject"
        assert str(expression) == '"Subject"'

    def test_path(self):
        expression = Expression.path("article.subject")
        assert expression.text == "article.subject"
        assert str(expression) == "article.subject"

    def test_needs_exactly_one_kind(self):
        with pytest.raises(ValidationError):
            Expression()
        with pytest.raises(ValidationError):
            Expression(constant_value="a", key_path="b")

    def test_quotes_are_escaped(self):
        assert str(Expression.constant('say "hi"')) == '"say \\"hi\\""'


class TestPredicateBase:
    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            Predicate()

    def test_subclass_without_to_dict_is_abstract(self):
        class Bare(Predicate):
            pass

        with pytest.raises(TypeError):
            Bare()


class TestComposition:
    def test_and(self):
        a = comparison("Read", ComparisonOperator.EQUAL_TO, "No")
        b = comparison("Flagged", ComparisonOperator.EQUAL_TO, "Yes")
        assert a & b == CompoundPredicate(logical_type=LogicalType.AND, subpredicates=(a, b))

    def test_or(self):
        a = comparison("Read", ComparisonOperator.EQUAL_TO, "No")
        b = comparison("Flagged", ComparisonOperator.EQUAL_TO, "Yes")
        assert (a | b).logical_type == LogicalType.OR

    def test_invert(self):
        a = comparison("Subject", ComparisonOperator.CONTAINS, "x")
        negated = ~a
        assert negated.logical_type == LogicalType.NOT
        assert negated.subpredicates == (a,)

    def test_predicates_are_immutable(self):
        a = comparison("Subject", ComparisonOperator.CONTAINS, "x")
        with pytest.raises(ValidationError):
            a.operator = ComparisonOperator.EQUAL_TO

    def test_compound_accepts_foreign_predicates(self):
        predicate = compound(LogicalType.AND, ConstantPredicate())
        assert isinstance(predicate.subpredicates[0], ConstantPredicate)


class TestFormatting:
    def test_comparison_str(self):
        assert str(comparison("Subject", ComparisonOperator.CONTAINS, "x")) == '"Subject" CONTAINS "x"'

    def test_compound_str(self):
        a = comparison("Read", ComparisonOperator.EQUAL_TO, "No")
        b = comparison("Date", ComparisonOperator.GREATER_THAN, "yesterday")
        assert str(a & b) == '("Read" == "No") AND ("Date" > "yesterday")'
        assert str(~(a | b)) == 'NOT (("Read" == "No") OR ("Date" > "yesterday"))'

    def test_constant_str(self):
        assert str(ConstantPredicate()) == "TRUEPREDICATE"
        assert str(ConstantPredicate(value=False)) == "FALSEPREDICATE"

    def test_repr(self):
        assert repr(comparison("Read", ComparisonOperator.EQUAL_TO, "No")) == '<ComparisonPredicate: "Read" == "No">'


class TestToDict:
    def test_comparison(self):
        assert comparison("Subject", ComparisonOperator.CONTAINS, "x").to_dict() == {"Subject": {"$contains": "x"}}

    def test_nested(self):
        a = comparison("Read", ComparisonOperator.EQUAL_TO, "No")
        b = comparison("Subject", ComparisonOperator.CONTAINS, "x")
        assert (a & ~b).to_dict() == {
            "$and": [
                {"Read": {"$eq": "No"}},
                {"$not": {"Subject": {"$contains": "x"}}},
            ]
        }

    def test_key_path_operand(self):
        predicate = ComparisonPredicate(
            left=Expression.path("Date"),
            operator=ComparisonOperator.LESS_THAN_OR_EQUAL_TO,
            right=Expression.constant("today"),
        )
        assert predicate.to_dict() == {"Date": {"$lte": "today"}}
