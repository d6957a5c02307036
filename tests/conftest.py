"""Pytest configuration and fixtures for criteria compiler tests."""

import pytest
from dotenv import load_dotenv

from smartcriteria.constants import ComparisonOperator, CriteriaCondition, CriteriaField, CriteriaOperator
from smartcriteria.diagnostics import Diagnostics
from smartcriteria.predicates import comparison
from smartcriteria.schema import Criteria, CriteriaTree

# Load environment variables
load_dotenv()


@pytest.fixture
def diagnostics():
    """A diagnostics sink that records without logging."""
    return Diagnostics(log=False)


@pytest.fixture
def unread():
    return Criteria(field=CriteriaField.READ, operator_type=CriteriaOperator.EQUAL_TO, value="No")


@pytest.fixture
def subject_contains():
    return Criteria(field=CriteriaField.SUBJECT, operator_type=CriteriaOperator.CONTAINS, value="python")


@pytest.fixture
def sample_tree(unread, subject_contains):
    """ANY of: unread, subject contains, NONE of (flagged, author does not contain)."""
    nested = CriteriaTree(
        condition=CriteriaCondition.NONE,
        criteria_tree=(
            Criteria(field=CriteriaField.FLAGGED, operator_type=CriteriaOperator.EQUAL_TO, value="Yes"),
            Criteria(field=CriteriaField.AUTHOR, operator_type=CriteriaOperator.CONTAINS_NOT, value="bot"),
        ),
    )
    return CriteriaTree(condition=CriteriaCondition.ANY, criteria_tree=(unread, subject_contains, nested))


@pytest.fixture
def unread_predicate():
    return comparison(CriteriaField.READ, ComparisonOperator.EQUAL_TO, "No")
