"""
Testes do valor por extenso em reais

Verifica:
1. Zero, singular e plural (real/reais, centavo/centavos)
2. Faixas de magnitude: unidades, especiais, dezenas, centenas, mil, milhões
3. Formas irregulares ("cem", "mil", "um milhão")
4. Conjunção "e" entre faixas e entre reais/centavos
5. Arredondamento ao centavo (float e Decimal)
6. Sentinela para valores a partir de 1 bilhão
"""

import logging
from decimal import Decimal

import pytest

from ecoutils.core.formatting.currency_words import (
    VALOR_MUITO_ALTO,
    ZERO_REAIS,
    number_to_words_brl,
    split_reais_centavos,
    to_centavos,
)


# =============================================================================
# SPLIT
# =============================================================================


class TestSplitReaisCentavos:
    """Testes para split_reais_centavos"""

    def test_integer(self) -> None:
        assert split_reais_centavos(1021) == (1021, 0)

    def test_float_with_cents(self) -> None:
        assert split_reais_centavos(1021.50) == (1021, 50)

    def test_float_representation_error(self) -> None:
        """0.29 * 100 = 28.999... arredonda para 29"""
        assert split_reais_centavos(0.29) == (0, 29)

    def test_rounds_up_into_reais(self) -> None:
        """1.999 → 2 reais, não 1 real e 100 centavos"""
        assert split_reais_centavos(1.999) == (2, 0)

    def test_rounds_whole_amount_not_fraction(self) -> None:
        """2.675 * 100 == 267.5 → 68; a fração 0.675 isolada ficaria em 67"""
        assert split_reais_centavos(2.675) == (2, 68)

    def test_decimal(self) -> None:
        assert split_reais_centavos(Decimal("1021.50")) == (1021, 50)
        assert split_reais_centavos(Decimal("0.005")) == (0, 1)

    def test_to_centavos(self) -> None:
        assert to_centavos(2.675) == 268
        assert to_centavos(Decimal("2.675")) == 268
        assert to_centavos(0) == 0


# =============================================================================
# EXTENSO
# =============================================================================


class TestNumberToWordsBrl:
    """Testes para number_to_words_brl"""

    def test_zero(self) -> None:
        """Zero → "Zero reais" exatamente"""
        assert number_to_words_brl(0) == "Zero reais"
        assert number_to_words_brl(0.0) == ZERO_REAIS

    def test_below_half_centavo_is_zero(self) -> None:
        assert number_to_words_brl(0.001) == "Zero reais"

    def test_one_real_singular(self) -> None:
        assert number_to_words_brl(1) == "Um real"

    def test_plural(self) -> None:
        assert number_to_words_brl(2) == "Dois reais"
        assert number_to_words_brl(3) == "Três reais"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (10, "Dez reais"),
            (11, "Onze reais"),
            (14, "Catorze reais"),
            (19, "Dezenove reais"),
            (20, "Vinte reais"),
            (21, "Vinte e um reais"),
            (99, "Noventa e nove reais"),
        ],
    )
    def test_tens_and_specials(self, value: int, expected: str) -> None:
        assert number_to_words_brl(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (100, "Cem reais"),
            (101, "Cento e um reais"),
            (110, "Cento e dez reais"),
            (200, "Duzentos reais"),
            (999, "Novecentos e noventa e nove reais"),
        ],
    )
    def test_hundreds(self, value: int, expected: str) -> None:
        assert number_to_words_brl(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1000, "Mil reais"),
            (1001, "Mil e um reais"),
            (2000, "Dois mil reais"),
            (100_000, "Cem mil reais"),
            (
                123_456,
                "Cento e vinte e três mil e quatrocentos e cinquenta e seis reais",
            ),
        ],
    )
    def test_thousands(self, value: int, expected: str) -> None:
        assert number_to_words_brl(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1_000_000, "Um milhão reais"),
            (2_500_000, "Dois milhões e quinhentos mil reais"),
            (
                999_999_999,
                "Novecentos e noventa e nove milhões e novecentos e noventa e nove mil "
                "e novecentos e noventa e nove reais",
            ),
        ],
    )
    def test_millions(self, value: int, expected: str) -> None:
        assert number_to_words_brl(value) == expected

    def test_reais_and_centavos(self) -> None:
        assert number_to_words_brl(1021.50) == "Mil e vinte e um reais e cinquenta centavos"

    def test_half_centavo_rounds_up_on_total(self) -> None:
        assert number_to_words_brl(2.675) == "Dois reais e sessenta e oito centavos"
        assert number_to_words_brl(Decimal("2.675")) == "Dois reais e sessenta e oito centavos"

    def test_singular_centavo(self) -> None:
        assert number_to_words_brl(1.01) == "Um real e um centavo"
        assert number_to_words_brl(0.01) == "Um centavo"

    def test_only_centavos(self) -> None:
        """Sem reais: nem "zero reais" nem conjunção"""
        assert number_to_words_brl(0.5) == "Cinquenta centavos"
        assert number_to_words_brl(0.29) == "Vinte e nove centavos"

    def test_integer_amount_omits_centavos(self) -> None:
        assert "centavo" not in number_to_words_brl(1500.00)

    def test_decimal_input(self) -> None:
        assert number_to_words_brl(Decimal("1021.50")) == number_to_words_brl(1021.50)

    def test_only_first_letter_capitalized(self) -> None:
        result = number_to_words_brl(2_500_000.75)
        assert result[0].isupper()
        assert result[1:] == result[1:].lower()

    def test_billion_returns_sentinel(self, caplog) -> None:
        """>= 1 bilhão → sentinela, com aviso no log"""
        with caplog.at_level(logging.WARNING, logger="ecoutils.core.formatting.currency_words"):
            assert number_to_words_brl(1_000_000_000) == VALOR_MUITO_ALTO
        assert "exceeds words conversion range" in caplog.text

    def test_deterministic(self) -> None:
        assert number_to_words_brl(4321.09) == number_to_words_brl(4321.09)
