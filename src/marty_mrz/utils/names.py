"""
Name field handling for the MRZ.

The primary identifier (surnames) and the secondary identifier (given names)
are separated by a double filler ``<<``; tokens inside each identifier are
separated by a single filler.
"""

from __future__ import annotations

from collections.abc import Iterable

from marty_mrz.exceptions import InvalidFormatError

NAME_SEPARATOR = "<<"
TOKEN_SEPARATOR = "<"


def _tokens(identifier: str) -> tuple[str, ...]:
    return tuple(token for token in identifier.split(TOKEN_SEPARATOR) if token)


def split_name_field(name_field: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """
    Split an MRZ name field into surnames and given names.

    Args:
        name_field: Fixed-width name region, padded with fillers

    Returns:
        Tuple of (surnames, given_names)

    Raises:
        InvalidFormatError: If the primary identifier is empty
    """
    primary, _, secondary = name_field.partition(NAME_SEPARATOR)
    surnames = _tokens(primary)
    if not surnames:
        msg = f"Name field has no primary identifier: {name_field!r}"
        raise InvalidFormatError(msg, field_name="name")
    return surnames, _tokens(secondary)


def format_name_field(surnames: Iterable[str], given_names: Iterable[str], width: int) -> str:
    """
    Build a fixed-width MRZ name field.

    The result is truncated to ``width`` when the names do not fit, so the
    primary identifier takes precedence over the given names.
    """
    name_field = TOKEN_SEPARATOR.join(surnames)
    given = TOKEN_SEPARATOR.join(given_names)
    if given:
        name_field += NAME_SEPARATOR + given
    return name_field[:width].ljust(width, TOKEN_SEPARATOR)
