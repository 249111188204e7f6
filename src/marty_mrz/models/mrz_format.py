"""
MRZ layout models for the supported ICAO Doc 9303 document formats.

Offsets are zero-based positions into the joined MRZ string (all lines
concatenated without separators).
"""

from __future__ import annotations

from enum import Enum

FILLER = "<"


class MRZDocumentType(str, Enum):
    """MRZ document formats with their line geometry."""

    TD1 = "TD1"  # 3 lines, 30 chars each (identity cards)
    TD3 = "TD3"  # 2 lines, 44 chars each (passports)

    @property
    def line_count(self) -> int:
        """Number of lines in this document type."""
        return {"TD1": 3, "TD3": 2}[self.value]

    @property
    def line_length(self) -> int:
        """Number of characters per line in this document type."""
        return {"TD1": 30, "TD3": 44}[self.value]

    @property
    def total_length(self) -> int:
        """Total number of characters in this document type."""
        return self.line_count * self.line_length

    @classmethod
    def from_length(cls, length: int) -> MRZDocumentType | None:
        """Return the format whose joined length equals ``length``."""
        for document_type in cls:
            if document_type.total_length == length:
                return document_type
        return None


class TD3Layout:
    """Field offsets of the TD-3 (passport) MRZ, ICAO 9303 Part 4."""

    DOCUMENT_CODE = 0
    ISSUING_COUNTRY = slice(2, 5)
    NAME = slice(5, 43)
    DOCUMENT_NUMBER = slice(44, 53)
    DOCUMENT_NUMBER_CHECK = 53
    NATIONALITY = slice(54, 57)
    BIRTH_DATE = slice(57, 63)
    BIRTH_DATE_CHECK = 63
    GENDER = 64
    EXPIRY_DATE = slice(65, 71)
    EXPIRY_DATE_CHECK = 71
    OPTIONAL_DATA = slice(72, 86)
    OPTIONAL_DATA_CHECK = 86
    COMPOSITE_CHECK = 87
    COMPOSITE_SPANS = (slice(44, 54), slice(57, 64), slice(65, 87))

    DOCUMENT_CODES = frozenset("P")


class TD1Layout:
    """Field offsets of the TD-1 (identity card) MRZ, ICAO 9303 Part 5."""

    DOCUMENT_CODE = 0
    ISSUING_COUNTRY = slice(2, 5)
    DOCUMENT_NUMBER = slice(5, 14)
    DOCUMENT_NUMBER_CHECK = 14
    OPTIONAL_DATA_LINE1 = slice(15, 30)
    BIRTH_DATE = slice(30, 36)
    BIRTH_DATE_CHECK = 36
    GENDER = 37
    EXPIRY_DATE = slice(38, 44)
    EXPIRY_DATE_CHECK = 44
    NATIONALITY = slice(45, 48)
    OPTIONAL_DATA_LINE2 = slice(48, 59)
    COMPOSITE_CHECK = 59
    COMPOSITE_SPANS = (slice(5, 30), slice(30, 37), slice(38, 45), slice(48, 59))
    NAME = slice(60, 90)

    DOCUMENT_CODES = frozenset("IAC")
