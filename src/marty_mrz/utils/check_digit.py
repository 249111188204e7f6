"""
Check digit computation and verification per ICAO Doc 9303 Part 3, section 4.9.
"""

from __future__ import annotations

import logging

from marty_mrz.exceptions import BadCheckDigitError, ExpectedDigitError, InvalidCharError

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"
_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class MRZChecksumValidator:
    """Checksum validation following ICAO Doc 9303 specifications."""

    # ICAO weight pattern: 7, 3, 1, 7, 3, 1, ...
    WEIGHT_PATTERN = (7, 3, 1)

    @staticmethod
    def character_value(char: str) -> int:
        """
        Numeric value of an MRZ character.

        Digits map to 0-9, letters A-Z to 10-35 and the filler to 0.

        Raises:
            InvalidCharError: If the character is outside the MRZ alphabet
        """
        if char == "<":
            return 0
        if len(char) == 1:
            if char in _DIGITS:
                return _DIGITS.index(char)
            if char in _LETTERS:
                return _LETTERS.index(char) + 10
        msg = f"Invalid character for check digit computation: {char!r}"
        raise InvalidCharError(msg)

    @classmethod
    def calculate_check_digit(cls, data: str) -> str:
        """
        Calculate check digit using ICAO algorithm.

        Args:
            data: Input string for checksum calculation

        Returns:
            Single digit checksum character
        """
        total = 0
        for i, char in enumerate(data):
            total += cls.character_value(char) * cls.WEIGHT_PATTERN[i % 3]
        return str(total % 10)

    @staticmethod
    def read_check_digit(mrz: str, position: int, field_name: str) -> str:
        """
        Read the check digit printed at ``position``.

        Raises:
            ExpectedDigitError: If the position does not hold an ASCII digit
        """
        char = mrz[position]
        if char not in _DIGITS:
            msg = f"Expected check digit for {field_name} at position {position}, found {char!r}"
            raise ExpectedDigitError(msg, field_name=field_name, position=position)
        return char

    @classmethod
    def verify(cls, data: str, mrz: str, position: int, field_name: str) -> None:
        """
        Verify that the check digit at ``position`` matches ``data``.

        Args:
            data: Characters covered by the check digit
            mrz: Full MRZ string holding the check digit
            position: Offset of the check digit in ``mrz``
            field_name: Field name used in error reporting

        Raises:
            ExpectedDigitError: If the check digit position is not a digit
            InvalidCharError: If ``data`` contains a non-MRZ character
            BadCheckDigitError: If the digits do not match
        """
        check_digit = cls.read_check_digit(mrz, position, field_name)
        calculated = cls.calculate_check_digit(data)
        if calculated != check_digit:
            logger.debug(
                "Check digit mismatch for %s: expected %s, found %s", field_name, calculated, check_digit
            )
            msg = f"Invalid {field_name} check digit: {data} -> {check_digit}"
            raise BadCheckDigitError(msg, field_name=field_name, position=position)
