"""
Ellipsoidal Converter: UTM WGS84 via pyproj

Alternativa de precisão à aproximação planar de converter.py, com o mesmo
contrato de entrada/saída (ProjectedPoint / GeoPoint) e a mesma propriedade
de round-trip. Não é compatível numericamente com os dados já gravados.

- CRS de destino: WGS84 / UTM zona N (EPSG:326NN) ou S (EPSG:327NN)
- Hemisfério: 'N' para lat >= 0, 'S' caso contrário
- Transformers cacheados por (fuso, hemisfério, sentido)
- Entradas não finitas (inf, nan) são rejeitadas com ProjectionError
- Longitude de saída reduzida a [-180, 180] (borda do antimeridiano)
"""

import logging
import math
from typing import Final

from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError

from ecoutils.core.domain.geo import GeoPoint, ProjectedPoint
from ecoutils.core.geo.converter import utm_zone_number

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

WGS84_EPSG: Final[int] = 4326

# Base dos códigos EPSG WGS84 / UTM
UTM_NORTH_EPSG_BASE: Final[int] = 32600
UTM_SOUTH_EPSG_BASE: Final[int] = 32700

UTM_ZONE_COUNT: Final[int] = 60


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ProjectionError(ValueError):
    """Falha do pyproj ao montar ou aplicar a transformação."""

    pass


# =============================================================================
# CONVERTER
# =============================================================================


def _fold_zone(zone_num: int) -> int:
    """Fuso no intervalo 1..60 (o fuso 61 de lng = 180 volta ao 1)."""
    return (zone_num - 1) % UTM_ZONE_COUNT + 1


def _utm_epsg(zone_num: int, zone_letter: str) -> int:
    base = UTM_NORTH_EPSG_BASE if zone_letter.upper() == "N" else UTM_SOUTH_EPSG_BASE
    return base + _fold_zone(zone_num)


def _wrap_longitude(lng: float) -> float:
    """Longitude em [-180, 180]; o pyproj pode devolver -180 - epsilon no fuso 1."""
    if lng < -180.0:
        return lng + 360.0
    if lng > 180.0:
        return lng - 360.0
    return lng


def _require_finite(*values: float) -> None:
    if not all(math.isfinite(v) for v in values):
        raise ProjectionError(f"Non-finite coordinate: {values}")


class EllipsoidalConverter:
    """
    Conversão UTM elipsoidal (WGS84) com cache de transformers.

    Seguro para uso concorrente: o cache só recebe objetos equivalentes.
    """

    def __init__(self):
        self._transformers: dict[tuple[int, str, str], Transformer] = {}
        self.wgs84 = CRS.from_epsg(WGS84_EPSG)

    def _get_transformer(self, zone_num: int, zone_letter: str, direction: str) -> Transformer:
        """
        Transformer cacheado.

        Args:
            zone_num: Número do fuso
            zone_letter: 'N' ou 'S'
            direction: "geo_to_utm" ou "utm_to_geo"
        """
        epsg = _utm_epsg(zone_num, zone_letter)
        cache_key = (_fold_zone(zone_num), zone_letter.upper(), direction)

        transformer = self._transformers.get(cache_key)
        if transformer is not None:
            return transformer

        utm_crs = CRS.from_epsg(epsg)
        if direction == "geo_to_utm":
            transformer = Transformer.from_crs(self.wgs84, utm_crs, always_xy=True)
        else:
            transformer = Transformer.from_crs(utm_crs, self.wgs84, always_xy=True)

        logger.debug("Created %s transformer for EPSG:%d", direction, epsg)
        self._transformers[cache_key] = transformer
        return transformer

    def to_projected(self, lat: float, lng: float) -> ProjectedPoint:
        """
        Geográfica → UTM.

        Returns:
            ProjectedPoint com zone_num = utm_zone_number(lng) e
            zone_letter 'N'/'S' conforme o sinal da latitude

        Raises:
            ProjectionError: Coordenada não finita ou recusada pelo pyproj
        """
        _require_finite(lat, lng)
        zone_num = utm_zone_number(lng)
        zone_letter = "N" if lat >= 0 else "S"
        transformer = self._get_transformer(zone_num, zone_letter, "geo_to_utm")

        try:
            easting, northing = transformer.transform(lng, lat, errcheck=True)
        except ProjError as e:
            raise ProjectionError(f"Projection failed for ({lat}, {lng}): {e}") from e

        return ProjectedPoint(
            easting=easting,
            northing=northing,
            zone_num=zone_num,
            zone_letter=zone_letter,
        )

    def to_geographic(
        self,
        easting: float,
        northing: float,
        zone_num: int,
        zone_letter: str,
    ) -> GeoPoint:
        """
        UTM → geográfica.

        zone_num 61 é tratado como o fuso 1; a longitude volta em [-180, 180].

        Raises:
            ProjectionError: Coordenada não finita ou fora do domínio da projeção
        """
        _require_finite(easting, northing)
        transformer = self._get_transformer(zone_num, zone_letter, "utm_to_geo")

        try:
            lng, lat = transformer.transform(easting, northing, errcheck=True)
        except ProjError as e:
            raise ProjectionError(
                f"Inverse projection failed for ({easting}, {northing}, {zone_num}{zone_letter}): {e}"
            ) from e

        return GeoPoint(lat=lat, lng=_wrap_longitude(lng))
