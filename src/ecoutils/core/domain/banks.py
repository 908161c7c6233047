"""
Bancos brasileiros: tabela de referência

Lista de bancos oferecida nos formulários de contrato (dados de pagamento).
Ordenada por nome; o código "000" indica preenchimento manual.
"""

import re
from typing import Final

from pydantic import BaseModel, Field


# Código usado quando o banco não está na lista
MANUAL_BANK_CODE: Final[str] = "000"


class BrazilianBank(BaseModel):
    """Banco (código COMPE de 3 dígitos + razão social)"""

    code: str = Field(..., pattern=r"^[0-9]{3}$", description="Código COMPE")
    name: str = Field(..., min_length=1, description="Nome do banco")

    model_config = {"frozen": True}


_BANKS_RAW: Final[tuple[tuple[str, str], ...]] = (
    ("001", "Banco do Brasil S.A."),
    ("003", "Banco da Amazônia S.A."),
    ("004", "Banco do Nordeste do Brasil S.A."),
    ("021", "BANESTES S.A. Banco do Estado do Espírito Santo"),
    ("033", "Banco Santander (Brasil) S.A."),
    ("041", "Banrisul - Banco do Estado do Rio Grande do Sul S.A."),
    ("047", "Banco do Estado de Sergipe S.A."),
    ("070", "BRB - Banco de Brasília S.A."),
    ("077", "Banco Inter S.A."),
    ("104", "Caixa Econômica Federal"),
    ("237", "Banco Bradesco S.A."),
    ("260", "Nu Pagamentos S.A. - Nubank"),
    ("341", "Itaú Unibanco S.A."),
    ("389", "Banco Mercantil do Brasil S.A."),
    ("399", "HSBC Bank Brasil S.A. - Banco Múltiplo"),
    ("422", "Banco Safra S.A."),
    ("655", "Banco Votorantim S.A."),
    ("735", "Banco Neon S.A."),
    ("745", "Banco Citibank S.A."),
    ("748", "Banco Cooperativo Sicredi S.A."),
    ("756", "Banco Cooperativo do Brasil S.A. - BANCOOB"),
    (MANUAL_BANK_CODE, "Outro (manual)"),
)

BRAZILIAN_BANKS: Final[tuple[BrazilianBank, ...]] = tuple(
    sorted(
        (BrazilianBank(code=code, name=name) for code, name in _BANKS_RAW),
        key=lambda bank: bank.name,
    )
)

_BANKS_BY_CODE: Final[dict[str, BrazilianBank]] = {bank.code: bank for bank in BRAZILIAN_BANKS}


def find_bank(code: str) -> BrazilianBank | None:
    """
    Busca banco pelo código COMPE.

    Aceita código sem zeros à esquerda ("1" → "001").

    Returns:
        BrazilianBank ou None se o código não estiver na tabela
    """
    digits = re.sub(r"[^0-9]", "", code)
    if not digits or len(digits) > 3:
        return None
    return _BANKS_BY_CODE.get(digits.zfill(3))
