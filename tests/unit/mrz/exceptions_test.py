import pytest

from marty_mrz import (
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

ERROR_CLASSES = [
    (InvalidFormatError, MRZErrorCode.INVALID_FORMAT, "invalid MRZ format"),
    (InvalidDocumentTypeError, MRZErrorCode.INVALID_DOCUMENT_TYPE, "invalid document type"),
    (InvalidBirthDateError, MRZErrorCode.INVALID_BIRTH_DATE, "invalid date of birth"),
    (InvalidExpiryDateError, MRZErrorCode.INVALID_EXPIRY_DATE, "invalid date of expiry"),
    (ExpectedDigitError, MRZErrorCode.EXPECTED_DIGIT, "expected digit at location but found something else"),
    (InvalidCharError, MRZErrorCode.INVALID_CHAR, "encountered an invalid character"),
    (BadCheckDigitError, MRZErrorCode.BAD_CHECK_DIGIT, "provided MRZ failed check digit verification"),
]


@pytest.mark.parametrize(("error_cls", "code", "message"), ERROR_CLASSES)
def test_error_defaults(error_cls, code, message):
    error = error_cls()
    assert isinstance(error, MRZException)
    assert error.error_code == code
    assert error.message == message
    assert str(error) == message
    assert error.field_name is None
    assert error.position is None


def test_error_equality_ignores_message():
    assert BadCheckDigitError("composite mismatch", field_name="composite") == BadCheckDigitError()
    assert hash(BadCheckDigitError("a")) == hash(BadCheckDigitError("b"))
    assert InvalidFormatError() != InvalidDocumentTypeError()
    assert InvalidFormatError() != "invalid MRZ format"


def test_errors_are_distinct():
    codes = {error_cls.error_code for error_cls, _, _ in ERROR_CLASSES}
    assert len(codes) == len(ERROR_CLASSES)


def test_error_context():
    error = ExpectedDigitError("bad check digit position", field_name="composite", position=87)
    assert error.field_name == "composite"
    assert error.position == 87
    assert repr(error) == "ExpectedDigitError('bad check digit position')"


def test_error_raised_and_matched():
    with pytest.raises(MRZException) as exc_info:
        raise InvalidCharError("'?' is not an MRZ character")
    assert exc_info.value == InvalidCharError()
    assert exc_info.value.error_code is MRZErrorCode.INVALID_CHAR
