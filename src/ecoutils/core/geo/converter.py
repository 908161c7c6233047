"""
Geodetic Converter: aproximação planar regional

Conversão bidirecional entre coordenadas geográficas (lat/lng) e projetadas
(easting/northing + fuso) para a convenção regional fixa da aplicação:
Hemisfério Sul, faixa longitudinal de Minas Gerais.

NÃO é uma projeção elipsoidal. É um modelo linear de origem fixa:
- origem no meridiano/paralelo de referência (-45°, -20°)
- fator constante de metros por grau
- correção por cos(lat) no easting (convergência dos meridianos)

Precisão de exibição cartográfica, não de levantamento. Os valores já gravados
e exibidos pela aplicação foram produzidos com estas constantes; para uma
projeção UTM real ver ecoutils.core.geo.ellipsoidal.

FÓRMULAS:
    zone_num = floor((lng + 180) / 6) + 1
    easting  = false_easting + (lng - ref_lng) * m_lng * cos(lat)
    northing = (lat - ref_lat) * m_lat

    Inversa (latitude primeiro, pois northing só depende dela):
    lat = ref_lat + northing / m_lat
    lng = ref_lng + (easting - false_easting) / (m_lng * cos(lat))

INVARIANTES:
1. Round-trip: to_geographic(to_projected(p)) == p (tolerância float) na região
2. Fora da região calibrada o resultado é numérico, apenas impreciso
3. Sem estado, sem exceções para coordenadas fora de faixa
"""

import math
from dataclasses import dataclass
from typing import Any, Final

from ecoutils.core.contracts.payloads import (
    dump_geo_point,
    dump_projected_point,
    parse_geo_point,
    parse_projected_point,
)
from ecoutils.core.domain.geo import GeoPoint, ProjectedPoint


# =============================================================================
# CONSTANTS
# =============================================================================

# Largura do fuso UTM (graus)
UTM_ZONE_WIDTH_DEG: Final[float] = 6.0


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ProjectionConfig:
    """Constantes de calibração da aproximação planar.

    Os defaults reproduzem os dados já gravados pela aplicação.
    """

    # Paralelo de referência (graus)
    ref_lat: float = -20.0

    # Meridiano de referência (graus)
    ref_lng: float = -45.0

    # Falso leste no meridiano de referência (metros)
    false_easting: float = 500000.0

    # Metros por grau de latitude
    meters_per_degree_lat: float = 110574.0

    # Metros por grau de longitude no equador
    meters_per_degree_lng: float = 111320.0

    # Hemisfério da área atendida
    zone_letter: str = "S"


DEFAULT_PROJECTION_CONFIG: Final[ProjectionConfig] = ProjectionConfig()


# =============================================================================
# ZONE
# =============================================================================


def utm_zone_number(lng: float) -> int:
    """
    Número do fuso UTM de 6 graus para a longitude.

    Sem ajuste nas bordas: lng = -180 → 1, lng = 180 → 61.

    Examples:
        >>> utm_zone_number(-45.0)
        23
        >>> utm_zone_number(-180.0)
        1
        >>> utm_zone_number(180.0)
        61
    """
    return math.floor((lng + 180.0) / UTM_ZONE_WIDTH_DEG) + 1


# =============================================================================
# CONVERSIONS
# =============================================================================


def convert_latlng_to_utm(
    lat: float,
    lng: float,
    config: ProjectionConfig | None = None,
) -> ProjectedPoint:
    """
    Geográfica → projetada.

    Args:
        lat: Latitude (graus decimais)
        lng: Longitude (graus decimais)
        config: Constantes de calibração (default: DEFAULT_PROJECTION_CONFIG)

    Returns:
        ProjectedPoint(easting, northing, zone_num, zone_letter)
    """
    cfg = config or DEFAULT_PROJECTION_CONFIG

    cos_lat = math.cos(math.radians(lat))
    easting = cfg.false_easting + (lng - cfg.ref_lng) * cfg.meters_per_degree_lng * cos_lat
    northing = (lat - cfg.ref_lat) * cfg.meters_per_degree_lat

    return ProjectedPoint(
        easting=easting,
        northing=northing,
        zone_num=utm_zone_number(lng),
        zone_letter=cfg.zone_letter,
    )


def convert_utm_to_latlng(
    easting: float,
    northing: float,
    zone_num: int,
    zone_letter: str,
    config: ProjectionConfig | None = None,
) -> GeoPoint:
    """
    Projetada → geográfica (inversa algébrica de convert_latlng_to_utm).

    zone_num e zone_letter fazem parte do contrato mas não entram no cálculo:
    a aproximação usa uma origem fixa.

    Args:
        easting: Coordenada E (metros)
        northing: Coordenada N (metros)
        zone_num: Número do fuso
        zone_letter: Letra do hemisfério/banda
        config: Constantes de calibração (default: DEFAULT_PROJECTION_CONFIG)

    Returns:
        GeoPoint(lat, lng). Sem validação de faixa: fora da região o valor
        pode cair fora de [-90, 90] / [-180, 180].
    """
    cfg = config or DEFAULT_PROJECTION_CONFIG

    lat = cfg.ref_lat + northing / cfg.meters_per_degree_lat
    cos_lat = math.cos(math.radians(lat))
    lng = cfg.ref_lng + (easting - cfg.false_easting) / (cfg.meters_per_degree_lng * cos_lat)

    return GeoPoint.model_construct(lat=lat, lng=lng)


def to_projected(point: GeoPoint, config: ProjectionConfig | None = None) -> ProjectedPoint:
    """convert_latlng_to_utm para um GeoPoint"""
    return convert_latlng_to_utm(point.lat, point.lng, config)


def to_geographic(point: ProjectedPoint, config: ProjectionConfig | None = None) -> GeoPoint:
    """convert_utm_to_latlng para um ProjectedPoint"""
    return convert_utm_to_latlng(*point.as_args(), config=config)


# =============================================================================
# PAYLOADS
# =============================================================================


def project_payload(
    payload: dict[str, Any],
    config: ProjectionConfig | None = None,
) -> dict[str, Any]:
    """
    {lat, lng} → {easting, northing, zoneNum, zoneLetter}

    Raises:
        ContractError: Payload de entrada fora do contrato geo_point
    """
    return dump_projected_point(to_projected(parse_geo_point(payload), config))


def unproject_payload(
    payload: dict[str, Any],
    config: ProjectionConfig | None = None,
) -> dict[str, Any]:
    """
    {easting, northing, zoneNum, zoneLetter} → {lat, lng}

    Raises:
        ContractError: Entrada fora do contrato projected_point, ou resultado
            fora das faixas geográficas
    """
    return dump_geo_point(to_geographic(parse_projected_point(payload), config))
