"""
YYMMDD date decoding with century inference.
"""

from __future__ import annotations

from datetime import date

from marty_mrz.exceptions import InvalidBirthDateError, InvalidExpiryDateError, MRZException

MRZ_DATE_FORMAT = "%y%m%d"


class MRZDateNormalizer:
    """Date normalization with century inference and validation."""

    @staticmethod
    def infer_century(year_2digit: int, reference_year: int) -> int:
        """
        Resolve a two-digit year against ``reference_year``.

        The year is read as 20YY unless that lies after the reference year,
        in which case it belongs to the previous century.
        """
        full_year = 2000 + year_2digit
        if full_year > reference_year:
            full_year -= 100
        return full_year

    @classmethod
    def normalize_date(
        cls,
        date_str: str,
        reference_year: int,
        error_cls: type[MRZException],
        apply_window: bool = True,
    ) -> date:
        """
        Decode a YYMMDD date string.

        Args:
            date_str: Six characters taken from the MRZ
            reference_year: Year used for the century window
            error_cls: Exception raised when the value is not a valid date
            apply_window: When False the year is always read as 20YY

        Returns:
            The decoded calendar date
        """
        if len(date_str) != 6 or not all("0" <= char <= "9" for char in date_str):
            msg = f"Invalid date format: {date_str!r} (expected YYMMDD)"
            raise error_cls(msg)

        year_2digit = int(date_str[:2])
        month = int(date_str[2:4])
        day = int(date_str[4:6])

        if apply_window:
            full_year = cls.infer_century(year_2digit, reference_year)
        else:
            full_year = 2000 + year_2digit

        try:
            return date(full_year, month, day)
        except ValueError as exc:
            msg = f"Invalid date: {date_str} -> {full_year}/{month:02d}/{day:02d}"
            raise error_cls(msg) from exc

    @classmethod
    def birth_date(cls, date_str: str, reference_year: int) -> date:
        """Decode a date of birth."""
        return cls.normalize_date(date_str, reference_year, InvalidBirthDateError)

    @classmethod
    def expiry_date(cls, date_str: str, reference_year: int, apply_window: bool = True) -> date:
        """Decode a date of expiry."""
        return cls.normalize_date(date_str, reference_year, InvalidExpiryDateError, apply_window)

    @staticmethod
    def format_date(date_obj: date) -> str:
        """Format a date as YYMMDD for the MRZ."""
        return date_obj.strftime(MRZ_DATE_FORMAT)
