"""
Travel document models produced by the MRZ parser.

These models follow the data elements of ICAO Doc 9303 Part 4 (TD-3) and
Part 5 (TD-1). A parsed MRZ is represented by the ``Document`` tagged union.
"""

from __future__ import annotations

import re
from datetime import date
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator

_CODE_PATTERN = re.compile(r"[A-Z0-9]{0,3}")
_TOKEN_PATTERN = re.compile(r"[A-Z0-9]+")


class Gender(str, Enum):
    """Gender as printed in the MRZ."""

    MALE = "M"
    FEMALE = "F"
    OTHER = "<"

    @classmethod
    def from_mrz(cls, char: str) -> Gender:
        """Map an MRZ sex character; fillers and unknown codes become OTHER."""
        if char == "M":
            return cls.MALE
        if char == "F":
            return cls.FEMALE
        return cls.OTHER


class TravelDocument(BaseModel):
    """Attributes shared by every supported travel document."""

    country: str = Field(..., max_length=3, description="Issuing state (ISO 3166-1 alpha-3)")
    surnames: tuple[str, ...] = Field(..., min_length=1, description="Primary identifier")
    given_names: tuple[str, ...] = Field(default=(), description="Secondary identifier")
    nationality: str = Field(..., max_length=3, description="Nationality (ISO 3166-1 alpha-3)")
    birth_date: date
    gender: Gender
    expiry_date: date

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("country", "nationality")
    @classmethod
    def validate_country_code(cls, v):
        if not _CODE_PATTERN.fullmatch(v):
            msg = "Country code must be at most 3 uppercase alphanumeric characters"
            raise ValueError(msg)
        return v

    @field_validator("surnames", "given_names")
    @classmethod
    def validate_name_tokens(cls, v):
        for token in v:
            if not _TOKEN_PATTERN.fullmatch(token):
                msg = f"Invalid name token: {token!r}"
                raise ValueError(msg)
        return v


class Passport(TravelDocument):
    """Passport decoded from a TD-3 MRZ."""

    kind: Literal["passport"] = "passport"
    passport_number: str = Field(..., max_length=9, description="Passport number")


class IdentityCard(TravelDocument):
    """Identity card decoded from a TD-1 MRZ."""

    kind: Literal["identity_card"] = "identity_card"
    document_number: str = Field(..., max_length=9, description="Document number")


Document = Annotated[Union[Passport, IdentityCard], Field(discriminator="kind")]
