from formkit.core.selection import SelectionRegistry


def test_register_and_get():
    reg = SelectionRegistry()
    reg.register("State", {"California": "CA"})
    assert reg.get("State") == {"California": "CA"}
    assert "State" in reg
    assert reg.get("Missing") is None
    assert "Missing" not in reg


def test_register_overwrites():
    reg = SelectionRegistry()
    reg.register("State", {"California": "CA"})
    reg.register("State", {"Oregon": "OR"})
    assert reg.get("State") == {"Oregon": "OR"}


def test_register_copies_options():
    options = {"California": "CA"}
    reg = SelectionRegistry()
    reg.register("State", options)
    options["Oregon"] = "OR"
    assert reg.get("State") == {"California": "CA"}


def test_skip_and_unskip():
    reg = SelectionRegistry()
    reg.skip("Password")
    assert reg.is_skipped("Password")
    assert reg.skipped == frozenset({"Password"})
    reg.unskip("Password")
    assert not reg.is_skipped("Password")
    reg.unskip("Password")


def test_instances_are_independent():
    a, b = SelectionRegistry(), SelectionRegistry()
    a.register("State", {"California": "CA"})
    a.skip("Name")
    assert b.get("State") is None
    assert not b.is_skipped("Name")
