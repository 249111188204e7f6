"""
MRZ parsing utilities.
"""

from .check_digit import MRZChecksumValidator
from .dates import MRZDateNormalizer
from .mrz_utils import MRZFormatter, MRZParser, join_mrz_lines, parse, parse_unchecked
from .names import format_name_field, split_name_field

__all__ = [
    "MRZChecksumValidator",
    "MRZDateNormalizer",
    "MRZFormatter",
    "MRZParser",
    "format_name_field",
    "join_mrz_lines",
    "parse",
    "parse_unchecked",
    "split_name_field",
]
