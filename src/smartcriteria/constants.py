"""
Closed vocabularies shared by the criteria models and compilers.
"""

from enum import Enum


class CriteriaField:
    SUBJECT = "Subject"
    AUTHOR = "Author"
    TEXT = "Text"
    FOLDER = "Folder"
    DATE = "Date"
    READ = "Read"
    FLAGGED = "Flagged"
    HAS_ENCLOSURE = "HasEnclosure"
    DELETED = "Deleted"


TEXT_FIELDS = (CriteriaField.SUBJECT, CriteriaField.AUTHOR, CriteriaField.TEXT)
BOOLEAN_FIELDS = (
    CriteriaField.READ,
    CriteriaField.FLAGGED,
    CriteriaField.HAS_ENCLOSURE,
    CriteriaField.DELETED,
)


class CriteriaOperator(str, Enum):
    """Operators a user can pick for a single criteria clause."""

    EQUAL_TO = "equalTo"
    NOT_EQUAL_TO = "notEqualTo"
    LESS_THAN = "lessThan"
    GREATER_THAN = "greaterThan"
    LESS_THAN_OR_EQUAL_TO = "lessThanOrEqualTo"
    GREATER_THAN_OR_EQUAL_TO = "greaterThanOrEqualTo"
    CONTAINS = "contains"
    CONTAINS_NOT = "containsNot"
    BEFORE = "before"
    AFTER = "after"
    ON_OR_BEFORE = "onOrBefore"
    ON_OR_AFTER = "onOrAfter"
    UNDER = "under"
    NOT_UNDER = "notUnder"


class CriteriaCondition(str, Enum):
    """Logical condition of a composite clause."""

    ALL = "all"
    ANY = "any"
    NONE = "none"
    INVALID = "invalid"


class ComparisonOperator(str, Enum):
    """Operators of a native comparison predicate."""

    EQUAL_TO = "=="
    NOT_EQUAL_TO = "!="
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_OR_EQUAL_TO = "<="
    GREATER_THAN_OR_EQUAL_TO = ">="
    CONTAINS = "CONTAINS"
    BEGINS_WITH = "BEGINSWITH"
    ENDS_WITH = "ENDSWITH"
    LIKE = "LIKE"
    MATCHES = "MATCHES"
    IN = "IN"


class LogicalType(str, Enum):
    """Connectives of a native compound predicate."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


# Absolute date values; never parsed as "<count> <unit>"
TODAY = "today"
YESTERDAY = "yesterday"
LAST_WEEK = "last week"
DATE_KEYWORDS = (TODAY, YESTERDAY, LAST_WEEK)

YES = "Yes"
NO = "No"
BOOLEAN_VALUES = (YES, NO)
