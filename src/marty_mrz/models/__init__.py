"""
Data models for parsed Machine Readable Travel Documents.
"""

from .document import Document, Gender, IdentityCard, Passport
from .mrz_format import FILLER, MRZDocumentType, TD1Layout, TD3Layout

__all__ = [
    "FILLER",
    "Document",
    "Gender",
    "IdentityCard",
    "MRZDocumentType",
    "Passport",
    "TD1Layout",
    "TD3Layout",
]
