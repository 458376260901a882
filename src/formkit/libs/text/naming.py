"""
Conversion of identifier-style field names into human-readable labels.
"""

__all__ = ["from_camel_case"]

import re

_MATCH_FIRST_CAP = re.compile(r"([^A-Z])([A-Z][a-z][0-9]+)")
_MATCH_ALL_CAP = re.compile(r"([a-z0-9])([A-Z])")
_MATCH_NUMBERS = re.compile(r"([A-Za-z]+)([0-9]+)")


def from_camel_case(name: str) -> str:
    """Split a compound identifier into space separated words.

    The following boundaries receive a space, in order:

    * a non-uppercase character followed by ``Xy<digits>`` (``aBc1``)
    * a lowercase letter or digit followed by an uppercase letter
    * a run of letters followed by a run of digits

    Character case is never changed.

    Args:
        name: Field identifier such as ``"Street1"`` or ``"firstName"``.

    Returns:
        The label text, e.g. ``"Street 1"`` or ``"first Name"``.
    """
    label = _MATCH_FIRST_CAP.sub(r"\1 \2", name)
    label = _MATCH_ALL_CAP.sub(r"\1 \2", label)
    return _MATCH_NUMBERS.sub(r"\1 \2", label)
