"""
Valor por extenso: Reais (BRL)

Converte um valor monetário não negativo em texto, para contratos e
documentos financeiros:

    1021.50 → "Mil e vinte e um reais e cinquenta centavos"

Decomposição recursiva por faixa de magnitude:
    0            ""
    1-9          unidades
    10-19        especiais (dez, onze, ..., dezenove)
    20-99        dezena [+ " e " + unidade]
    100          "cem"
    101-999      centena + " e " + resto
    mil          "mil" se quociente == 1, senão extenso(q) + " mil"
    milhão       "um milhão" se quociente == 1, senão extenso(q) + " milhões"
    >= 1 bilhão  fora de escopo → VALOR_MUITO_ALTO

BRL e português são premissas fixas, não configuração.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

UNIDADES: Final[tuple[str, ...]] = (
    "", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove",
)

DEZENAS: Final[tuple[str, ...]] = (
    "", "dez", "vinte", "trinta", "quarenta",
    "cinquenta", "sessenta", "setenta", "oitenta", "noventa",
)

ESPECIAIS: Final[tuple[str, ...]] = (
    "dez", "onze", "doze", "treze", "catorze",
    "quinze", "dezesseis", "dezessete", "dezoito", "dezenove",
)

CENTENAS: Final[tuple[str, ...]] = (
    "", "cento", "duzentos", "trezentos", "quatrocentos",
    "quinhentos", "seiscentos", "setecentos", "oitocentos", "novecentos",
)

ZERO_REAIS: Final[str] = "Zero reais"

# Resultado para valores a partir de 1 bilhão de reais
VALOR_MUITO_ALTO: Final[str] = "Valor muito alto"

MIL: Final[int] = 1_000
MILHAO: Final[int] = 1_000_000
BILHAO: Final[int] = 1_000_000_000


# =============================================================================
# DECOMPOSITION
# =============================================================================


def _converter(n: int) -> str:
    """Extenso de 0 <= n < BILHAO (0 → "")."""
    if n == 0:
        return ""
    if n < 10:
        return UNIDADES[n]
    if n < 20:
        return ESPECIAIS[n - 10]
    if n < 100:
        dezena, unidade = divmod(n, 10)
        return DEZENAS[dezena] + (f" e {UNIDADES[unidade]}" if unidade else "")
    if n == 100:
        return "cem"
    if n < MIL:
        centena, resto = divmod(n, 100)
        return CENTENAS[centena] + (f" e {_converter(resto)}" if resto else "")
    if n < MILHAO:
        milhares, resto = divmod(n, MIL)
        prefixo = "mil" if milhares == 1 else f"{_converter(milhares)} mil"
        return prefixo + (f" e {_converter(resto)}" if resto else "")

    milhoes, resto = divmod(n, MILHAO)
    prefixo = "um milhão" if milhoes == 1 else f"{_converter(milhoes)} milhões"
    return prefixo + (f" e {_converter(resto)}" if resto else "")


def to_centavos(value: int | float | Decimal) -> int:
    """Valor total em centavos, arredondado half-up."""
    if isinstance(value, Decimal):
        return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return math.floor(value * 100 + 0.5)


def split_reais_centavos(value: int | float | Decimal) -> tuple[int, int]:
    """
    Separa o valor em (reais, centavos), arredondando ao centavo (half-up).

    O arredondamento é sobre o valor total, não sobre a fração: 2.675 dá
    68 centavos (a fração 0.675 isolada daria 67) e 1.999 vira 2 reais.

    Examples:
        >>> split_reais_centavos(1021.5)
        (1021, 50)
        >>> split_reais_centavos(0.29)
        (0, 29)
        >>> split_reais_centavos(1.999)
        (2, 0)
    """
    return divmod(to_centavos(value), 100)


# =============================================================================
# PUBLIC API
# =============================================================================


def number_to_words_brl(value: int | float | Decimal) -> str:
    """
    Valor em reais por extenso.

    Args:
        value: Valor não negativo em reais

    Returns:
        Texto com só a primeira letra maiúscula. "Zero reais" para 0;
        VALOR_MUITO_ALTO quando a parte inteira passa de 999.999.999.

    Examples:
        >>> number_to_words_brl(1)
        'Um real'
        >>> number_to_words_brl(100)
        'Cem reais'
        >>> number_to_words_brl(0.5)
        'Cinquenta centavos'
    """
    reais, centavos = split_reais_centavos(value)

    if reais == 0 and centavos == 0:
        return ZERO_REAIS

    if reais >= BILHAO:
        logger.warning("Amount %s exceeds words conversion range", value)
        return VALOR_MUITO_ALTO

    partes: list[str] = []
    if reais > 0:
        partes.append(_converter(reais) + (" real" if reais == 1 else " reais"))
    if centavos > 0:
        partes.append(_converter(centavos) + (" centavo" if centavos == 1 else " centavos"))

    extenso = " e ".join(partes)
    return extenso[0].upper() + extenso[1:]
