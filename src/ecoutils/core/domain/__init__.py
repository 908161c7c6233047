"""
Domain models and value objects.

Contains the immutable value types shared by the geo and formatting modules:
GeoPoint, ProjectedPoint, MaskKind, MaskedDocument, BrazilianBank.
"""

from ecoutils.core.domain.banks import (
    BRAZILIAN_BANKS,
    MANUAL_BANK_CODE,
    BrazilianBank,
    find_bank,
)
from ecoutils.core.domain.documents import MASK_MAX_DIGITS, MaskedDocument, MaskKind
from ecoutils.core.domain.geo import GeoPoint, ProjectedPoint

__all__ = [
    # Geo
    "GeoPoint",
    "ProjectedPoint",
    # Documents
    "MaskKind",
    "MaskedDocument",
    "MASK_MAX_DIGITS",
    # Banks
    "BrazilianBank",
    "BRAZILIAN_BANKS",
    "MANUAL_BANK_CODE",
    "find_bank",
]
