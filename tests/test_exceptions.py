"""Tests for exception formatting."""

from smartcriteria.exceptions import (
    CriteriaError,
    MalformedCriteriaValueError,
)


def test_message_only():
    error = CriteriaError("boom")
    assert str(error) == "boom"
    assert error.details == {}


def test_message_with_details():
    error = MalformedCriteriaValueError("malformed criteria value", value="x days")
    assert str(error) == "malformed criteria value (value='x days')"
    assert error.details == {"value": "x days"}


def test_details_only():
    assert str(CriteriaError(field="Date")) == "field='Date'"


def test_repr():
    error = MalformedCriteriaValueError("bad", value="1 x")
    assert repr(error) == "MalformedCriteriaValueError(message='bad', details={'value': '1 x'})"


def test_hierarchy():
    assert issubclass(MalformedCriteriaValueError, CriteriaError)
    assert CriteriaError.__subclasses__() == [MalformedCriteriaValueError]
