"""
Machine Readable Zone (MRZ) parsing and generation utilities.

Implements MRZ processing according to ICAO Doc 9303 Part 3, Part 4 (TD-3
passports) and Part 5 (TD-1 identity cards). The parser consumes the MRZ as a
single string with all lines concatenated and no separators.
"""

from __future__ import annotations

import logging
import re

from marty_mrz.config import DEFAULT_CONFIG, MRZParserConfig
from marty_mrz.exceptions import InvalidDocumentTypeError, InvalidFormatError, MRZException
from marty_mrz.models.document import Document, Gender, IdentityCard, Passport
from marty_mrz.models.mrz_format import FILLER, MRZDocumentType, TD1Layout, TD3Layout
from marty_mrz.utils.check_digit import MRZChecksumValidator
from marty_mrz.utils.dates import MRZDateNormalizer
from marty_mrz.utils.names import format_name_field, split_name_field

logger = logging.getLogger(__name__)

_VALID_MRZ = re.compile(r"[A-Z0-9<]+")


def _strip_fillers(value: str) -> str:
    return value.replace(FILLER, "")


def _width(field: slice) -> int:
    return field.stop - field.start


def join_mrz_lines(text: str) -> str:
    """
    Join the physical lines of an MRZ into the string expected by the parser.

    Surrounding whitespace is removed from every line; blank lines are skipped.
    """
    return "".join(line.strip() for line in text.splitlines() if line.strip())


class MRZParser:
    """Parser for Machine Readable Zone (MRZ) data according to ICAO Doc 9303."""

    def __init__(self, config: MRZParserConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    @staticmethod
    def classify(mrz: str) -> MRZDocumentType:
        """
        Validate the shape of an MRZ string and determine its format.

        Raises:
            InvalidFormatError: If the input has characters outside the MRZ
                alphabet or a length matching no supported format
        """
        if not isinstance(mrz, str) or not _VALID_MRZ.fullmatch(mrz):
            msg = "MRZ must consist only of A-Z, 0-9 and '<'"
            raise InvalidFormatError(msg)

        document_type = MRZDocumentType.from_length(len(mrz))
        if document_type is None:
            msg = f"Unsupported MRZ length: {len(mrz)}"
            raise InvalidFormatError(msg)
        return document_type

    def parse(self, mrz: str, check: bool | None = None) -> Document:
        """
        Parse a TD-3 or TD-1 MRZ string.

        Args:
            mrz: The joined MRZ lines (88 or 90 characters)
            check: Whether to verify check digits; defaults to the configuration

        Returns:
            Passport or IdentityCard

        Raises:
            MRZException: On the first validation failure
        """
        if check is None:
            check = self.config.check_digits

        document_type = self.classify(mrz)
        logger.debug("Parsing %s MRZ (check digits: %s)", document_type.value, check)

        try:
            if document_type is MRZDocumentType.TD3:
                return self._parse_td3(mrz, check)
            return self._parse_td1(mrz, check)
        except MRZException as exc:
            logger.debug(
                "Failed to parse %s MRZ: %s",
                document_type.value,
                exc,
                extra={
                    "mrz_error_code": exc.error_code.value,
                    "mrz_field": exc.field_name,
                    "mrz_position": exc.position,
                },
            )
            raise

    def _check_document_code(self, mrz: str, codes: frozenset[str]) -> None:
        document_code = mrz[0]
        if document_code not in codes:
            expected = ", ".join(sorted(codes))
            msg = f"Expected document type {expected}, found '{document_code}'"
            raise InvalidDocumentTypeError(msg, field_name="document code", position=0)

    def _parse_td3(self, mrz: str, check: bool) -> Passport:
        layout = TD3Layout
        self._check_document_code(mrz, layout.DOCUMENT_CODES)
        reference_year = self.config.current_year()

        country = _strip_fillers(mrz[layout.ISSUING_COUNTRY])
        surnames, given_names = split_name_field(mrz[layout.NAME])

        # The check digit covers the field including its fillers
        document_number_field = mrz[layout.DOCUMENT_NUMBER]
        if check:
            MRZChecksumValidator.verify(
                document_number_field, mrz, layout.DOCUMENT_NUMBER_CHECK, "document number"
            )

        nationality = _strip_fillers(mrz[layout.NATIONALITY])

        birth_field = mrz[layout.BIRTH_DATE]
        birth_date = MRZDateNormalizer.birth_date(birth_field, reference_year)
        if check:
            MRZChecksumValidator.verify(birth_field, mrz, layout.BIRTH_DATE_CHECK, "date of birth")

        gender = Gender.from_mrz(mrz[layout.GENDER])

        expiry_field = mrz[layout.EXPIRY_DATE]
        expiry_date = MRZDateNormalizer.expiry_date(
            expiry_field, reference_year, self.config.expiry_century_window
        )
        if check:
            MRZChecksumValidator.verify(expiry_field, mrz, layout.EXPIRY_DATE_CHECK, "date of expiry")
            MRZChecksumValidator.verify(
                mrz[layout.OPTIONAL_DATA], mrz, layout.OPTIONAL_DATA_CHECK, "optional data"
            )
            composite = "".join(mrz[span] for span in layout.COMPOSITE_SPANS)
            MRZChecksumValidator.verify(composite, mrz, layout.COMPOSITE_CHECK, "composite")

        return Passport(
            country=country,
            surnames=surnames,
            given_names=given_names,
            passport_number=_strip_fillers(document_number_field),
            nationality=nationality,
            birth_date=birth_date,
            gender=gender,
            expiry_date=expiry_date,
        )

    def _parse_td1(self, mrz: str, check: bool) -> IdentityCard:
        layout = TD1Layout
        self._check_document_code(mrz, layout.DOCUMENT_CODES)
        reference_year = self.config.current_year()

        # TD-1 nationality is reported from the issuing state field
        country = _strip_fillers(mrz[layout.ISSUING_COUNTRY])

        document_number_field = mrz[layout.DOCUMENT_NUMBER]
        if check:
            MRZChecksumValidator.verify(
                document_number_field, mrz, layout.DOCUMENT_NUMBER_CHECK, "document number"
            )

        birth_field = mrz[layout.BIRTH_DATE]
        birth_date = MRZDateNormalizer.birth_date(birth_field, reference_year)
        if check:
            MRZChecksumValidator.verify(birth_field, mrz, layout.BIRTH_DATE_CHECK, "date of birth")

        gender = Gender.from_mrz(mrz[layout.GENDER])

        expiry_field = mrz[layout.EXPIRY_DATE]
        expiry_date = MRZDateNormalizer.expiry_date(
            expiry_field, reference_year, self.config.expiry_century_window
        )
        if check:
            MRZChecksumValidator.verify(expiry_field, mrz, layout.EXPIRY_DATE_CHECK, "date of expiry")
            composite = "".join(mrz[span] for span in layout.COMPOSITE_SPANS)
            MRZChecksumValidator.verify(composite, mrz, layout.COMPOSITE_CHECK, "composite")

        surnames, given_names = split_name_field(mrz[layout.NAME])

        return IdentityCard(
            country=country,
            surnames=surnames,
            given_names=given_names,
            document_number=_strip_fillers(document_number_field),
            nationality=country,
            birth_date=birth_date,
            gender=gender,
            expiry_date=expiry_date,
        )


class MRZFormatter:
    """Formatter for Machine Readable Zone (MRZ) data according to ICAO Doc 9303."""

    @staticmethod
    def format_field(value: str, total_length: int, field_name: str | None = None) -> str:
        """
        Format a free alphanumeric field for the MRZ.

        Characters outside A-Z, 0-9 and the filler are dropped; the result is
        padded with fillers to ``total_length``.

        Raises:
            InvalidFormatError: If the cleaned value does not fit the field
        """
        cleaned = re.sub(r"[^A-Z0-9<]", "", value.upper())
        if len(cleaned) > total_length:
            msg = f"{field_name or 'Field'} too long: {len(cleaned)} > {total_length} characters"
            raise InvalidFormatError(msg, field_name=field_name)
        return cleaned.ljust(total_length, FILLER)

    @classmethod
    def generate_td3_mrz(cls, passport: Passport, optional_data: str = "") -> str:
        """
        Generate a TD-3 MRZ string (passport) with all check digits.

        Args:
            passport: Passport to encode
            optional_data: Personal number or other optional data (max 14 chars)

        Returns:
            The 88-character MRZ, both lines joined
        """
        calculate = MRZChecksumValidator.calculate_check_digit

        line1 = "P" + FILLER + cls.format_field(
            passport.country, _width(TD3Layout.ISSUING_COUNTRY), "issuing country"
        )
        # Position 43 closes line 1 and is always a filler
        line1 += format_name_field(passport.surnames, passport.given_names, _width(TD3Layout.NAME))
        line1 += FILLER

        document_number = cls.format_field(
            passport.passport_number, _width(TD3Layout.DOCUMENT_NUMBER), "document number"
        )
        document_check = calculate(document_number)
        birth_date = MRZDateNormalizer.format_date(passport.birth_date)
        birth_check = calculate(birth_date)
        expiry_date = MRZDateNormalizer.format_date(passport.expiry_date)
        expiry_check = calculate(expiry_date)
        optional = cls.format_field(optional_data, _width(TD3Layout.OPTIONAL_DATA), "optional data")
        optional_check = calculate(optional)

        composite_check = calculate(
            document_number
            + document_check
            + birth_date
            + birth_check
            + expiry_date
            + expiry_check
            + optional
            + optional_check
        )

        line2 = (
            document_number
            + document_check
            + cls.format_field(passport.nationality, _width(TD3Layout.NATIONALITY), "nationality")
            + birth_date
            + birth_check
            + passport.gender.value
            + expiry_date
            + expiry_check
            + optional
            + optional_check
            + composite_check
        )
        return line1 + line2

    @classmethod
    def generate_td1_mrz(
        cls, card: IdentityCard, optional_data: str = "", document_code: str = "I"
    ) -> str:
        """
        Generate a TD-1 MRZ string (identity card) with all check digits.

        Args:
            card: Identity card to encode
            optional_data: Optional data for line 1 (max 15 chars)
            document_code: One of I, A or C

        Returns:
            The 90-character MRZ, all three lines joined
        """
        if document_code not in TD1Layout.DOCUMENT_CODES:
            msg = f"Unsupported TD-1 document code: '{document_code}'"
            raise InvalidDocumentTypeError(msg, field_name="document code")

        calculate = MRZChecksumValidator.calculate_check_digit

        document_number = cls.format_field(
            card.document_number, _width(TD1Layout.DOCUMENT_NUMBER), "document number"
        )
        line1 = (
            document_code
            + FILLER
            + cls.format_field(card.country, _width(TD1Layout.ISSUING_COUNTRY), "issuing country")
            + document_number
            + calculate(document_number)
            + cls.format_field(optional_data, _width(TD1Layout.OPTIONAL_DATA_LINE1), "optional data")
        )

        birth_date = MRZDateNormalizer.format_date(card.birth_date)
        expiry_date = MRZDateNormalizer.format_date(card.expiry_date)
        line2 = (
            birth_date
            + calculate(birth_date)
            + card.gender.value
            + expiry_date
            + calculate(expiry_date)
            + cls.format_field(card.nationality, _width(TD1Layout.NATIONALITY), "nationality")
            + FILLER * _width(TD1Layout.OPTIONAL_DATA_LINE2)
        )

        partial = line1 + line2
        composite = "".join(partial[span] for span in TD1Layout.COMPOSITE_SPANS)
        line2 += calculate(composite)

        line3 = format_name_field(card.surnames, card.given_names, _width(TD1Layout.NAME))
        return line1 + line2 + line3


def parse(mrz: str, check: bool = True, *, config: MRZParserConfig | None = None) -> Document:
    """
    Parse a Machine Readable Zone, returning the corresponding travel document.

    Args:
        mrz: The joined MRZ lines (88 characters for TD-3, 90 for TD-1)
        check: Whether to verify the check digits
        config: Parser configuration, e.g. a fixed reference year

    Raises:
        MRZException: If the MRZ is invalid
    """
    return MRZParser(config).parse(mrz, check)


def parse_unchecked(mrz: str, *, config: MRZParserConfig | None = None) -> Document:
    """Parse a Machine Readable Zone without verifying any check digit."""
    return parse(mrz, check=False, config=config)
