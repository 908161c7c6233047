"""
Contract Module

Contratos JSON (JSON Schema) dos payloads de coordenadas.
"""

from .payloads import (
    CONTRACTS,
    GEO_POINT,
    PROJECTED_POINT,
    ContractError,
    check_contract,
    contract_errors,
    dump_geo_point,
    dump_projected_point,
    load_schema,
    parse_geo_point,
    parse_projected_point,
)

__all__ = [
    # Contracts
    "CONTRACTS",
    "GEO_POINT",
    "PROJECTED_POINT",
    "ContractError",
    # Functions
    "check_contract",
    "contract_errors",
    "load_schema",
    "parse_geo_point",
    "parse_projected_point",
    "dump_geo_point",
    "dump_projected_point",
]
