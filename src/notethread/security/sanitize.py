"""Markup stripping for user-supplied text."""

import nh3


def sanitize_text(value: str) -> str:
    """Strip every tag from ``value``.

    The text inside ``script`` and ``style`` elements is dropped along with
    the tags; other elements keep their text.
    """
    return nh3.clean(value, tags=set(), attributes={})
