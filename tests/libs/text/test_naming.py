import pytest

from formkit.libs.text.naming import from_camel_case


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Name", "Name"),
        ("Email", "Email"),
        ("Street1", "Street 1"),
        ("firstName", "first Name"),
        ("FirstName", "First Name"),
        ("UserID2", "User ID 2"),
        ("AddressLine2", "Address Line 2"),
        ("x_Ab1", "x_ Ab 1"),
        ("lower", "lower"),
        ("", ""),
    ],
)
def test_from_camel_case(name, expected):
    assert from_camel_case(name) == expected


@pytest.mark.parametrize(
    "name", ["Street1", "UserID2", "firstName", "AddressLine2", "x_Ab1"]
)
def test_from_camel_case_idempotent(name):
    once = from_camel_case(name)
    assert from_camel_case(once) == once


def test_from_camel_case_deterministic():
    assert from_camel_case("Street1") == from_camel_case("Street1")


def test_case_preserved():
    """Only spaces are inserted; letters keep their case."""
    out = from_camel_case("PostalCODE9")
    assert out.replace(" ", "") == "PostalCODE9"
