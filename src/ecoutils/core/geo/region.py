"""
Região atendida: contorno simplificado de Minas Gerais

Contorno usado pelos mapas (fonte: malha territorial IBGE, simplificada) e
região onde a aproximação planar de converter.py foi calibrada.

Geometria em shapely com eixos (x, y) = (lng, lat). Pontos sobre o
contorno contam como dentro (covers, não contains).
"""

from collections.abc import Sequence
from typing import Final, NamedTuple

from shapely.geometry import MultiPoint, Point, Polygon
from shapely.prepared import prep

from ecoutils.core.domain.geo import GeoPoint


class BoundingBox(NamedTuple):
    """Retângulo envolvente em graus decimais."""

    min_lat: float
    min_lng: float
    max_lat: float
    max_lng: float

    @classmethod
    def from_bounds(cls, bounds: tuple[float, float, float, float]) -> "BoundingBox":
        """A partir de geom.bounds do shapely: (minx, miny, maxx, maxy) = (lng, lat, lng, lat)."""
        min_lng, min_lat, max_lng, max_lat = bounds
        return cls(min_lat, min_lng, max_lat, max_lng)

    def contains(self, lat: float, lng: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lng <= lng <= self.max_lng


# Contorno fechado (primeiro ponto == último)
MINAS_GERAIS_OUTLINE: Final[tuple[GeoPoint, ...]] = tuple(
    GeoPoint(lat=lat, lng=lng)
    for lat, lng in (
        (-14.23, -44.02), (-14.8, -43.12), (-15.46, -41.35),
        (-16.92, -40.18), (-18.2, -39.85), (-19.7, -39.9),
        (-21.2, -40.8), (-22.4, -41.9), (-22.7, -44.5),
        (-22.9, -45.8), (-22.1, -46.7), (-21.3, -46.5),
        (-20.0, -47.4), (-18.8, -47.5), (-19.3, -50.5),
        (-18.0, -50.0), (-17.5, -47.8), (-16.0, -46.8),
        (-15.5, -45.3), (-14.23, -44.02),
    )
)


def to_polygon(points: Sequence[GeoPoint]) -> Polygon:
    """Polígono shapely (lng, lat); o fechamento é implícito."""
    return Polygon([(p.lng, p.lat) for p in points])


def bounding_box(points: Sequence[GeoPoint]) -> BoundingBox:
    """
    Retângulo envolvente de um conjunto de pontos.

    Raises:
        ValueError: Se points estiver vazio
    """
    if not points:
        raise ValueError("bounding_box requires at least one point")
    return BoundingBox.from_bounds(MultiPoint([(p.lng, p.lat) for p in points]).bounds)


def point_in_polygon(point: GeoPoint, polygon: Sequence[GeoPoint]) -> bool:
    """Ponto dentro do polígono ou sobre o contorno."""
    return to_polygon(polygon).covers(Point(point.lng, point.lat))


MINAS_GERAIS_POLYGON: Final[Polygon] = to_polygon(MINAS_GERAIS_OUTLINE)
MINAS_GERAIS_BBOX: Final[BoundingBox] = BoundingBox.from_bounds(MINAS_GERAIS_POLYGON.bounds)

_MINAS_GERAIS_PREPARED = prep(MINAS_GERAIS_POLYGON)


def is_in_minas_gerais(lat: float, lng: float) -> bool:
    """Ponto dentro do contorno simplificado de Minas Gerais (borda inclusa)."""
    return _MINAS_GERAIS_PREPARED.covers(Point(lng, lat))
