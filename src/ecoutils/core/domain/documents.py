"""
Documentos brasileiros: tipos de máscara e documento mascarado

MaskKind enumera as máscaras que um campo de formulário pode pedir.
MaskedDocument liga os dígitos canônicos à sua projeção formatada.

Os dígitos são sempre o valor canônico; a máscara é uma projeção sem perda.
"""

import re
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class MaskKind(str, Enum):
    """Tipo de máscara de entrada"""

    CPF = "cpf"
    CNPJ = "cnpj"
    CPF_CNPJ = "cpfCnpj"
    PHONE = "phone"


# Quantidade máxima de dígitos por tipo de máscara
MASK_MAX_DIGITS: Final[dict[MaskKind, int]] = {
    MaskKind.CPF: 11,
    MaskKind.CNPJ: 14,
    MaskKind.CPF_CNPJ: 14,
    MaskKind.PHONE: 11,
}


# =============================================================================
# MASKED DOCUMENT
# =============================================================================


class MaskedDocument(BaseModel):
    """
    Documento mascarado: dígitos canônicos + forma de exibição.

    Immutable (frozen=True). Criado por formatting.masks.mask_document.
    """

    kind: MaskKind = Field(..., description="Tipo de máscara aplicada")
    digits: str = Field(..., pattern=r"^[0-9]*$", description="Dígitos canônicos")
    masked: str = Field(..., description="Forma de exibição")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits_length(cls, v: str, info) -> str:
        """Dígitos não podem exceder o máximo do tipo"""
        if "kind" in info.data:
            max_digits = MASK_MAX_DIGITS[info.data["kind"]]
            if len(v) > max_digits:
                raise ValueError(
                    f"{info.data['kind'].value}: {len(v)} digits exceed maximum {max_digits}"
                )
        return v

    @field_validator("masked")
    @classmethod
    def validate_masked_matches_digits(cls, v: str, info) -> str:
        """A máscara só acrescenta pontuação: removê-la devolve os dígitos"""
        if "digits" in info.data:
            stripped = re.sub(r"[^0-9]", "", v)
            if stripped != info.data["digits"]:
                raise ValueError(f"masked value {v!r} does not match digits")
        return v
