"""
Máscaras progressivas: CPF, CNPJ, CPF/CNPJ, telefone

Aplicadas a cada tecla digitada em campos de formulário. Entrada parcial gera
máscara parcial, nunca erro: cada separador só entra quando já existem
dígitos suficientes depois dele.

Padrões:
    CPF       DDD.DDD.DDD-DD          (11 dígitos)
    CNPJ      DD.DDD.DDD/DDDD-DD      (14 dígitos)
    Telefone  (DD) DDDD-DDDD          (fixo, até 10 dígitos)
              (DD) DDDDD-DDDD         (celular, 11 dígitos)

INVARIANTE:
    unmask(mask_x(s)) == unmask(s)[:max_digits]
    A máscara nunca cria nem remove dígitos, só pontuação.
"""

import re
from collections.abc import Callable
from typing import Final

from ecoutils.core.domain.documents import MASK_MAX_DIGITS, MaskedDocument, MaskKind


# =============================================================================
# PATTERNS
# =============================================================================

_NON_DIGIT: Final[re.Pattern[str]] = re.compile(r"[^0-9]")

# Cada passo substitui só a primeira ocorrência, na ordem da lista
_CPF_STEPS: Final[tuple[tuple[re.Pattern[str], str], ...]] = (
    (re.compile(r"(\d{3})(\d)"), r"\1.\2"),
    (re.compile(r"(\d{3})(\d)"), r"\1.\2"),
    (re.compile(r"(\d{3})(\d{1,2})$"), r"\1-\2"),
)

_CNPJ_STEPS: Final[tuple[tuple[re.Pattern[str], str], ...]] = (
    (re.compile(r"(\d{2})(\d)"), r"\1.\2"),
    (re.compile(r"(\d{3})(\d)"), r"\1.\2"),
    (re.compile(r"(\d{3})(\d)"), r"\1/\2"),
    (re.compile(r"(\d{4})(\d{1,2})$"), r"\1-\2"),
)

_LANDLINE_STEPS: Final[tuple[tuple[re.Pattern[str], str], ...]] = (
    (re.compile(r"(\d{2})(\d)"), r"(\1) \2"),
    (re.compile(r"(\d{4})(\d{1,4})$"), r"\1-\2"),
)

_MOBILE_STEPS: Final[tuple[tuple[re.Pattern[str], str], ...]] = (
    (re.compile(r"(\d{2})(\d)"), r"(\1) \2"),
    (re.compile(r"(\d{5})(\d{1,4})$"), r"\1-\2"),
)

CPF_DIGITS: Final[int] = MASK_MAX_DIGITS[MaskKind.CPF]
CNPJ_DIGITS: Final[int] = MASK_MAX_DIGITS[MaskKind.CNPJ]
PHONE_DIGITS: Final[int] = MASK_MAX_DIGITS[MaskKind.PHONE]

# Até este número de dígitos o telefone é fixo
LANDLINE_MAX_DIGITS: Final[int] = 10


def _apply_steps(digits: str, steps: tuple[tuple[re.Pattern[str], str], ...]) -> str:
    for pattern, replacement in steps:
        digits = pattern.sub(replacement, digits, count=1)
    return digits


# =============================================================================
# MASKS
# =============================================================================


def unmask(value: str) -> str:
    """
    Remove a máscara, retornando apenas os dígitos (0-9).

    Examples:
        >>> unmask("123.456.789-01")
        '12345678901'
        >>> unmask("(11) 98765-4321")
        '11987654321'
    """
    return _NON_DIGIT.sub("", value)


def mask_cpf(value: str) -> str:
    """
    Máscara de CPF: 000.000.000-00

    Examples:
        >>> mask_cpf("12345678901")
        '123.456.789-01'
        >>> mask_cpf("1234")
        '123.4'
    """
    return _apply_steps(unmask(value)[:CPF_DIGITS], _CPF_STEPS)


def mask_cnpj(value: str) -> str:
    """
    Máscara de CNPJ: 00.000.000/0000-00

    Examples:
        >>> mask_cnpj("12345678000195")
        '12.345.678/0001-95'
    """
    return _apply_steps(unmask(value)[:CNPJ_DIGITS], _CNPJ_STEPS)


def mask_cpf_cnpj(value: str) -> str:
    """
    CPF ou CNPJ conforme a quantidade de dígitos.

    Até 11 dígitos → CPF; 12 ou mais → CNPJ.
    """
    if len(unmask(value)) <= CPF_DIGITS:
        return mask_cpf(value)
    return mask_cnpj(value)


def mask_phone(value: str) -> str:
    """
    Máscara de telefone: (00) 0000-0000 ou (00) 00000-0000

    Até 10 dígitos → fixo; 11 → celular (assinante com 9 dígitos).

    Examples:
        >>> mask_phone("1134567890")
        '(11) 3456-7890'
        >>> mask_phone("11987654321")
        '(11) 98765-4321'
    """
    digits = unmask(value)[:PHONE_DIGITS]
    if len(digits) <= LANDLINE_MAX_DIGITS:
        return _apply_steps(digits, _LANDLINE_STEPS)
    return _apply_steps(digits, _MOBILE_STEPS)


# =============================================================================
# DISPATCH
# =============================================================================

MASK_FUNCTIONS: Final[dict[MaskKind, Callable[[str], str]]] = {
    MaskKind.CPF: mask_cpf,
    MaskKind.CNPJ: mask_cnpj,
    MaskKind.CPF_CNPJ: mask_cpf_cnpj,
    MaskKind.PHONE: mask_phone,
}


def apply_mask(kind: MaskKind | str, value: str) -> str:
    """
    Aplica a máscara pedida pelo campo de formulário.

    Args:
        kind: MaskKind ou seu valor ("cpf", "cnpj", "cpfCnpj", "phone")
        value: Texto digitado

    Raises:
        ValueError: Se kind não for um tipo de máscara conhecido
    """
    try:
        mask_kind = MaskKind(kind)
    except ValueError:
        raise ValueError(f"Unknown mask kind: {kind!r}") from None

    return MASK_FUNCTIONS[mask_kind](value)


def mask_document(kind: MaskKind | str, value: str) -> MaskedDocument:
    """
    Dígitos canônicos + forma mascarada em um MaskedDocument.

    Raises:
        ValueError: Se kind não for um tipo de máscara conhecido
    """
    masked = apply_mask(kind, value)
    return MaskedDocument(kind=MaskKind(kind), digits=unmask(masked), masked=masked)
