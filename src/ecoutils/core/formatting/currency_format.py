"""
Valores em reais para exibição: R$ 1.234,56

Formatação pt_BR via Babel (dados CLDR), a mesma saída que o
Intl.NumberFormat('pt-BR', {style: 'currency', currency: 'BRL'}) das telas.
O separador entre "R$" e o número é um espaço não separável (U+00A0).

Campos de valor digitados guardam só dígitos: "123456" → 1234.56.
"""

import math
from decimal import Decimal
from typing import Final

from babel.numbers import format_currency

from ecoutils.core.formatting.currency_words import to_centavos
from ecoutils.core.formatting.masks import unmask

BRL: Final[str] = "BRL"
BRL_LOCALE: Final[str] = "pt_BR"

# Exibido quando o valor não foi informado
NOT_AVAILABLE: Final[str] = "N/A"


def format_brl(value: int | float | Decimal | None) -> str:
    """
    Valor em reais no formato pt_BR.

    Arredonda ao centavo (half-up, simétrico para negativos), como
    number_to_words_brl. NaN é exibido como zero; None como NOT_AVAILABLE.

    Examples:
        >>> format_brl(1234.56)
        'R$\\xa01.234,56'
        >>> format_brl(None)
        'N/A'
    """
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, float) and math.isnan(value):
        value = 0

    amount = Decimal(to_centavos(abs(value))).scaleb(-2)
    if value < 0 and amount:
        amount = -amount
    return format_currency(amount, BRL, locale=BRL_LOCALE)


def parse_brl_input(text: str) -> Decimal:
    """
    Valor de um campo de moeda digitado: todos os dígitos, em centavos.

    "R$ 1.234,56" → Decimal("1234.56"); sem dígitos → Decimal("0.00").
    """
    digits = unmask(text)
    return Decimal(int(digits) if digits else 0).scaleb(-2)
