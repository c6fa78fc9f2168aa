"""Tests for the AssertionError failure record."""

import builtins

import pytest

from assertkit.error import AssertionError


def test_from_message_sets_message():
    err = AssertionError.from_message("oops")
    assert err.message == "oops"
    assert str(err) == "AssertionError : oops"


def test_from_message_has_no_optional_fields():
    err = AssertionError.from_message("oops")
    assert not hasattr(err, "actual")
    assert not hasattr(err, "expected")
    assert not hasattr(err, "operator")
    assert err.to_dict() == {"message": "oops"}


def test_from_record_copies_supplied_fields_only():
    err = AssertionError.from_record({"actual": None, "operator": "==", "message": None})
    assert err.has_field("actual")
    assert err.actual is None
    assert err.has_field("operator")
    assert not err.has_field("expected")
    assert err.to_dict() == {"message": None, "actual": None, "operator": "=="}


def test_message_always_present():
    err = AssertionError.from_record({"actual": 1})
    assert err.message is None


def test_render_without_message_uses_source():
    err = AssertionError.from_record(
        {"actual": [1, 2], "expected": {"a": "b"}, "operator": "deepEqual"}
    )
    assert str(err) == "AssertionError :  {'a': 'b'} deepEqual [1, 2]"


def test_render_missing_fields_as_undefined():
    err = AssertionError.from_record({"operator": "throws"})
    assert str(err) == "AssertionError :  undefined throws undefined"


def test_render_survives_broken_repr():
    class Broken:
        def __repr__(self):
            raise RuntimeError("no repr")

    err = AssertionError.from_record({"actual": Broken(), "expected": 1, "operator": "=="})
    rendered = str(err)
    assert rendered.startswith("AssertionError :  1 == <Broken object at")


def test_name_tag_and_builtin_catchability():
    err = AssertionError.from_message("oops")
    assert err.name == "AssertionError"
    assert isinstance(err, builtins.AssertionError)
    with pytest.raises(builtins.AssertionError):
        raise err


def test_stack_is_captured():
    err = AssertionError.from_message("oops")
    assert "test_stack_is_captured" in err.stack


def test_unknown_fields_rejected():
    with pytest.raises(TypeError, match="bogus"):
        AssertionError("m", bogus=1)
