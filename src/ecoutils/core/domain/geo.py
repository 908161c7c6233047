"""
GeoPoint / ProjectedPoint: Value objects de coordenadas

Representações usadas pelos mapas e relatórios:
- GeoPoint: coordenada geográfica (latitude/longitude, graus decimais)
- ProjectedPoint: coordenada projetada (easting/northing em metros + zona)

ProjectedPoint é sempre derivado de um GeoPoint e nunca é a fonte da verdade.
No formato de troca (JSON) os campos da zona usam camelCase: zoneNum, zoneLetter.
"""

from pydantic import BaseModel, Field


# =============================================================================
# GEOGRAPHIC
# =============================================================================


class GeoPoint(BaseModel):
    """
    Ponto geográfico (graus decimais, datum implícito WGS84/SIRGAS 2000).

    Immutable (frozen=True).
    """

    lat: float = Field(..., ge=-90, le=90, description="Latitude em graus decimais")
    lng: float = Field(..., ge=-180, le=180, description="Longitude em graus decimais")

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[float, float]:
        """(lat, lng)"""
        return (self.lat, self.lng)


# =============================================================================
# PROJECTED
# =============================================================================


class ProjectedPoint(BaseModel):
    """
    Ponto projetado (UTM ou aproximação planar regional).

    Immutable (frozen=True). Aceita tanto zone_num quanto zoneNum na entrada;
    model_dump(by_alias=True) produz o formato camelCase dos registros.
    """

    easting: float = Field(..., description="Coordenada E (metros)")
    northing: float = Field(..., description="Coordenada N (metros)")
    zone_num: int = Field(..., alias="zoneNum", description="Número do fuso UTM")
    zone_letter: str = Field(
        ..., alias="zoneLetter", min_length=1, max_length=1, description="Hemisfério/banda"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def as_args(self) -> tuple[float, float, int, str]:
        """
        Argumentos na ordem de convert_utm_to_latlng:

            convert_utm_to_latlng(*projected.as_args())
        """
        return (self.easting, self.northing, self.zone_num, self.zone_letter)
