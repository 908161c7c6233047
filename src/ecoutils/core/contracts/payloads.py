"""
Payloads de coordenadas: contratos JSON na fronteira com formulários e mapa

Formato de fio (JSON Schema Draft 2020-12, em schema/):
    geo_point        {lat, lng}
    projected_point  {easting, northing, zoneNum, zoneLetter}

Entrada: o payload é checado contra a schema antes de virar value object.
Saída: o value object é serializado (aliases camelCase) e checado antes de
sair. Todas as violações de um payload vêm juntas em ContractError.
"""

import json
import logging
from functools import lru_cache
from importlib import resources
from typing import Any, Final

from jsonschema import Draft202012Validator

from ecoutils.core.domain.geo import GeoPoint, ProjectedPoint

logger = logging.getLogger(__name__)


# =============================================================================
# CONTRACTS
# =============================================================================

GEO_POINT: Final[str] = "geo_point"
PROJECTED_POINT: Final[str] = "projected_point"

CONTRACTS: Final[tuple[str, ...]] = (GEO_POINT, PROJECTED_POINT)


class ContractError(ValueError):
    """Payload fora do contrato. errors: uma mensagem por violação."""

    def __init__(self, contract: str, errors: list[str]):
        self.contract = contract
        self.errors = errors
        super().__init__(f"{contract}: " + "; ".join(errors))


@lru_cache(maxsize=None)
def load_schema(contract: str) -> dict[str, Any]:
    """
    Schema empacotada do contrato, meta-validada na primeira leitura.

    Raises:
        ValueError: Contrato desconhecido
        jsonschema.SchemaError: Schema empacotada inválida
    """
    if contract not in CONTRACTS:
        raise ValueError(f"Unknown contract: {contract!r}")

    schema_file = resources.files(__package__) / "schema" / f"{contract}.json"
    schema = json.loads(schema_file.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)

    logger.debug("Loaded schema for contract %s", contract)
    return schema


@lru_cache(maxsize=None)
def _validator(contract: str) -> Draft202012Validator:
    return Draft202012Validator(load_schema(contract))


def contract_errors(contract: str, payload: Any) -> list[str]:
    """
    Violações do payload, ordenadas pelo caminho JSON do campo.

    Lista vazia quando o payload respeita o contrato.
    """
    errors = sorted(_validator(contract).iter_errors(payload), key=lambda e: e.json_path)
    return [f"{e.json_path}: {e.message}" for e in errors]


def check_contract(contract: str, payload: Any) -> None:
    """
    Raises:
        ContractError: Se houver qualquer violação
    """
    errors = contract_errors(contract, payload)
    if errors:
        raise ContractError(contract, errors)


# =============================================================================
# PARSE / DUMP
# =============================================================================


def parse_geo_point(payload: Any) -> GeoPoint:
    check_contract(GEO_POINT, payload)
    return GeoPoint.model_validate(payload)


def parse_projected_point(payload: Any) -> ProjectedPoint:
    """Aceita só o formato camelCase (zoneNum, zoneLetter)."""
    check_contract(PROJECTED_POINT, payload)
    return ProjectedPoint.model_validate(payload)


def dump_geo_point(point: GeoPoint) -> dict[str, Any]:
    """
    Raises:
        ContractError: Ponto fora de [-90, 90] / [-180, 180] (ex.: saída
            não validada de convert_utm_to_latlng longe da região)
    """
    payload = point.model_dump()
    check_contract(GEO_POINT, payload)
    return payload


def dump_projected_point(point: ProjectedPoint) -> dict[str, Any]:
    payload = point.model_dump(by_alias=True)
    check_contract(PROJECTED_POINT, payload)
    return payload
