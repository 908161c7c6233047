"""
Geo modules

Conversão de coordenadas (aproximação planar regional e UTM elipsoidal)
e a região de Minas Gerais onde a aproximação foi calibrada.
"""

from ecoutils.core.geo.converter import (
    DEFAULT_PROJECTION_CONFIG,
    UTM_ZONE_WIDTH_DEG,
    ProjectionConfig,
    convert_latlng_to_utm,
    convert_utm_to_latlng,
    project_payload,
    to_geographic,
    to_projected,
    unproject_payload,
    utm_zone_number,
)
from ecoutils.core.geo.ellipsoidal import EllipsoidalConverter, ProjectionError
from ecoutils.core.geo.region import (
    MINAS_GERAIS_BBOX,
    MINAS_GERAIS_OUTLINE,
    MINAS_GERAIS_POLYGON,
    BoundingBox,
    bounding_box,
    is_in_minas_gerais,
    point_in_polygon,
    to_polygon,
)

__all__ = [
    # Converter Config
    "DEFAULT_PROJECTION_CONFIG",
    "ProjectionConfig",
    "UTM_ZONE_WIDTH_DEG",
    # Converter Functions
    "convert_latlng_to_utm",
    "convert_utm_to_latlng",
    "to_geographic",
    "to_projected",
    "utm_zone_number",
    # Converter Payloads
    "project_payload",
    "unproject_payload",
    # Ellipsoidal
    "EllipsoidalConverter",
    "ProjectionError",
    # Region
    "BoundingBox",
    "MINAS_GERAIS_BBOX",
    "MINAS_GERAIS_OUTLINE",
    "MINAS_GERAIS_POLYGON",
    "bounding_box",
    "is_in_minas_gerais",
    "point_in_polygon",
    "to_polygon",
]
