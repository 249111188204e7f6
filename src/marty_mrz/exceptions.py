"""
Exceptions raised while parsing a Machine Readable Zone.

Every error derives from ``MRZException`` and carries a standardized
``MRZErrorCode``. Two errors compare equal when they share class and code,
so callers and tests can match on the error kind regardless of the message.
"""

from __future__ import annotations

from enum import Enum


class MRZErrorCode(str, Enum):
    """Standardized error codes for MRZ parsing failures."""

    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_DOCUMENT_TYPE = "INVALID_DOCUMENT_TYPE"
    INVALID_BIRTH_DATE = "INVALID_BIRTH_DATE"
    INVALID_EXPIRY_DATE = "INVALID_EXPIRY_DATE"
    EXPECTED_DIGIT = "EXPECTED_DIGIT"
    INVALID_CHAR = "INVALID_CHAR"
    BAD_CHECK_DIGIT = "BAD_CHECK_DIGIT"


class MRZException(Exception):
    """Base exception class for MRZ parsing errors."""

    error_code: MRZErrorCode = MRZErrorCode.INVALID_FORMAT
    default_message = "invalid MRZ"

    def __init__(
        self,
        message: str | None = None,
        field_name: str | None = None,
        position: int | None = None,
    ) -> None:
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.field_name = field_name
        self.position = position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MRZException):
            return NotImplemented
        return type(self) is type(other) and self.error_code == other.error_code

    def __hash__(self) -> int:
        return hash((type(self), self.error_code))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InvalidFormatError(MRZException):
    """Wrong length, characters outside the MRZ alphabet, or an unusable name field."""

    error_code = MRZErrorCode.INVALID_FORMAT
    default_message = "invalid MRZ format"


class InvalidDocumentTypeError(MRZException):
    """The document code is not recognized for the detected format."""

    error_code = MRZErrorCode.INVALID_DOCUMENT_TYPE
    default_message = "invalid document type"


class InvalidBirthDateError(MRZException):
    """The date of birth is not a valid YYMMDD date."""

    error_code = MRZErrorCode.INVALID_BIRTH_DATE
    default_message = "invalid date of birth"


class InvalidExpiryDateError(MRZException):
    """The date of expiry is not a valid YYMMDD date."""

    error_code = MRZErrorCode.INVALID_EXPIRY_DATE
    default_message = "invalid date of expiry"


class ExpectedDigitError(MRZException):
    """A check digit position does not hold an ASCII digit."""

    error_code = MRZErrorCode.EXPECTED_DIGIT
    default_message = "expected digit at location but found something else"


class InvalidCharError(MRZException):
    """A character outside the MRZ alphabet was weighted by the check digit algorithm."""

    error_code = MRZErrorCode.INVALID_CHAR
    default_message = "encountered an invalid character"


class BadCheckDigitError(MRZException):
    """A computed check digit does not match the one printed in the MRZ."""

    error_code = MRZErrorCode.BAD_CHECK_DIGIT
    default_message = "provided MRZ failed check digit verification"
