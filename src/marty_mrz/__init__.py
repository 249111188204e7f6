"""
Marty MRZ - parser for the Machine Readable Zone of ICAO Doc 9303 travel documents.

Decodes TD-3 passports and TD-1 identity cards from the joined MRZ text.
"""

__version__ = "0.1.0"

from .config import DEFAULT_CONFIG, MRZParserConfig
from .exceptions import (
    BadCheckDigitError,
    ExpectedDigitError,
    InvalidBirthDateError,
    InvalidCharError,
    InvalidDocumentTypeError,
    InvalidExpiryDateError,
    InvalidFormatError,
    MRZErrorCode,
    MRZException,
)
from .models import Document, Gender, IdentityCard, MRZDocumentType, Passport
from .utils import MRZFormatter, MRZParser, join_mrz_lines, parse, parse_unchecked

__all__ = [
    "DEFAULT_CONFIG",
    "BadCheckDigitError",
    "Document",
    "ExpectedDigitError",
    "Gender",
    "IdentityCard",
    "InvalidBirthDateError",
    "InvalidCharError",
    "InvalidDocumentTypeError",
    "InvalidExpiryDateError",
    "InvalidFormatError",
    "MRZDocumentType",
    "MRZErrorCode",
    "MRZException",
    "MRZFormatter",
    "MRZParser",
    "MRZParserConfig",
    "Passport",
    "join_mrz_lines",
    "parse",
    "parse_unchecked",
]
