"""
Formatting modules

Máscaras de documentos brasileiros, valores em reais (exibição e extenso)
e limpeza de payloads de formulário.
"""

from ecoutils.core.formatting.cleaning import clean_empty_values
from ecoutils.core.formatting.currency_format import (
    NOT_AVAILABLE,
    format_brl,
    parse_brl_input,
)
from ecoutils.core.formatting.currency_words import (
    VALOR_MUITO_ALTO,
    ZERO_REAIS,
    number_to_words_brl,
    split_reais_centavos,
    to_centavos,
)
from ecoutils.core.formatting.masks import (
    MASK_FUNCTIONS,
    apply_mask,
    mask_cnpj,
    mask_cpf,
    mask_cpf_cnpj,
    mask_document,
    mask_phone,
    unmask,
)

__all__ = [
    # Masks
    "MASK_FUNCTIONS",
    "apply_mask",
    "mask_cnpj",
    "mask_cpf",
    "mask_cpf_cnpj",
    "mask_document",
    "mask_phone",
    "unmask",
    # Currency words
    "VALOR_MUITO_ALTO",
    "ZERO_REAIS",
    "number_to_words_brl",
    "split_reais_centavos",
    "to_centavos",
    # Currency display
    "NOT_AVAILABLE",
    "format_brl",
    "parse_brl_input",
    # Cleaning
    "clean_empty_values",
]
