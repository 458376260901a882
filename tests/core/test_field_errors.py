import pytest

from formkit.core.field_errors import FieldError, FieldValidationError, field_errors


class CustomFieldError(Exception):
    """Implements the capability without inheriting from formkit."""

    def __init__(self, field, issue):
        super().__init__(f"{field}: {issue}")
        self.field = field
        self.issue = issue

    def field_error(self):
        return self.field, self.issue


def test_groups_in_order_and_ignores_plain_errors():
    errors = [
        FieldValidationError("Email", "taken"),
        FieldValidationError("Email", "invalid"),
        RuntimeError("database unavailable"),
    ]
    assert field_errors(errors) == {"Email": ["taken", "invalid"]}


def test_duplicates_preserved():
    errors = [
        FieldValidationError("Address.Zip", "is required"),
        FieldValidationError("Address.Zip", "is required"),
    ]
    assert field_errors(errors) == {"Address.Zip": ["is required", "is required"]}


def test_multiple_fields():
    errors = [
        CustomFieldError("Email", "is already taken"),
        CustomFieldError("Address.Street1", "is required"),
        CustomFieldError("Address.Zip", "must be 5 digits"),
        CustomFieldError("Address.Zip", "is required"),
    ]
    assert field_errors(errors) == {
        "Email": ["is already taken"],
        "Address.Street1": ["is required"],
        "Address.Zip": ["must be 5 digits", "is required"],
    }


def test_empty():
    assert field_errors([]) == {}


def test_capability_check():
    assert isinstance(FieldValidationError("a", "b"), FieldError)
    assert isinstance(CustomFieldError("a", "b"), FieldError)
    assert not isinstance(ValueError("a"), FieldError)


def test_unwraps_cause_chain():
    outer = RuntimeError("save failed")
    outer.__cause__ = FieldValidationError("Email", "taken")
    assert field_errors([outer]) == {"Email": ["taken"]}


def test_unwraps_implicit_context():
    with pytest.raises(KeyError) as info:
        try:
            raise FieldValidationError("Name", "is required")
        except FieldValidationError:
            raise KeyError("lookup")
    assert field_errors([info.value]) == {"Name": ["is required"]}


def test_outermost_capable_error_wins():
    outer = FieldValidationError("Outer", "outer message")
    outer.__cause__ = FieldValidationError("Inner", "inner message")
    assert field_errors([outer]) == {"Outer": ["outer message"]}


def test_exception_group_members():
    group = ExceptionGroup(
        "validation",
        [FieldValidationError("A", "one"), ValueError("x"), FieldValidationError("B", "two")],
    )
    assert field_errors([group]) == {"A": ["one"], "B": ["two"]}


def test_field_validation_error_message():
    err = FieldValidationError("Email", "taken")
    assert str(err) == "Email: taken"
    assert err.field_error() == ("Email", "taken")
