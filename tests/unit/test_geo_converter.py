"""
Testes do conversor geodésico (aproximação planar regional)

Verifica:
1. Fórmula do fuso UTM, inclusive nas bordas (-180 → 1, 180 → 61)
2. Origem e fatores de escala da aproximação
3. Round-trip lat/lng → projetada → lat/lng em Minas Gerais (1e-6)
4. Inversa independente de zone_num/zone_letter
5. Totalidade fora da região calibrada (sem exceção)
6. Configuração customizada
"""

import math

import pytest

from ecoutils.core.domain import GeoPoint, ProjectedPoint
from ecoutils.core.geo.converter import (
    DEFAULT_PROJECTION_CONFIG,
    ProjectionConfig,
    convert_latlng_to_utm,
    convert_utm_to_latlng,
    to_geographic,
    to_projected,
    utm_zone_number,
)
from ecoutils.core.geo.region import is_in_minas_gerais


# Cidades de Minas Gerais (lat, lng)
MG_POINTS = [
    (-19.9167, -43.9345),  # Belo Horizonte
    (-18.9186, -48.2772),  # Uberlândia
    (-16.7350, -43.8617),  # Montes Claros
    (-21.7642, -43.3496),  # Juiz de Fora
    (-18.8513, -41.9555),  # Governador Valadares
    (-20.0, -45.0),  # origem da aproximação
]


# =============================================================================
# ZONE
# =============================================================================


class TestUtmZoneNumber:
    """Testes para utm_zone_number"""

    def test_minas_gerais_zones(self) -> None:
        """Minas Gerais fica nos fusos 22, 23 e 24"""
        assert utm_zone_number(-50.5) == 22
        assert utm_zone_number(-45.0) == 23
        assert utm_zone_number(-41.0) == 24

    def test_band_boundaries(self) -> None:
        """O limite oeste pertence ao fuso"""
        assert utm_zone_number(-48.0) == 23
        assert utm_zone_number(-48.0001) == 22
        assert utm_zone_number(-42.0) == 24

    def test_antimeridian_edges(self) -> None:
        """Sem ajuste nas bordas: -180 → 1, 180 → 61"""
        assert utm_zone_number(-180.0) == 1
        assert utm_zone_number(180.0) == 61

    def test_greenwich(self) -> None:
        assert utm_zone_number(0.0) == 31


# =============================================================================
# FORWARD
# =============================================================================


class TestConvertLatLngToUtm:
    """Testes para convert_latlng_to_utm"""

    def test_reference_origin(self) -> None:
        """Na origem: easting = falso leste, northing = 0"""
        result = convert_latlng_to_utm(-20.0, -45.0)
        assert result.easting == pytest.approx(500000.0)
        assert result.northing == pytest.approx(0.0, abs=1e-9)
        assert result.zone_num == 23
        assert result.zone_letter == "S"

    def test_one_degree_offsets(self) -> None:
        """1° de lat = 110574 m; 1° de lng = 111320 m × cos(lat)"""
        result = convert_latlng_to_utm(-21.0, -44.0)
        expected_easting = 500000.0 + 111320.0 * math.cos(math.radians(-21.0))
        assert result.easting == pytest.approx(expected_easting)
        assert result.northing == pytest.approx(-110574.0)

    def test_returns_projected_point(self) -> None:
        result = convert_latlng_to_utm(-19.9167, -43.9345)
        assert isinstance(result, ProjectedPoint)

    def test_zone_letter_fixed_south(self) -> None:
        """Letra fixa da área atendida, mesmo ao norte do equador"""
        assert convert_latlng_to_utm(5.0, -60.0).zone_letter == "S"

    def test_zone_edge_at_180(self) -> None:
        assert convert_latlng_to_utm(-20.0, 180.0).zone_num == 61
        assert convert_latlng_to_utm(-20.0, -180.0).zone_num == 1

    def test_outside_region_still_numeric(self) -> None:
        """Fora da região calibrada: resultado impreciso, sem exceção"""
        result = convert_latlng_to_utm(60.0, 150.0)
        assert math.isfinite(result.easting)
        assert math.isfinite(result.northing)

    def test_wire_shape(self) -> None:
        """model_dump(by_alias=True) produz o formato dos registros"""
        data = convert_latlng_to_utm(-20.0, -45.0).model_dump(by_alias=True)
        assert set(data) == {"easting", "northing", "zoneNum", "zoneLetter"}


# =============================================================================
# INVERSE
# =============================================================================


class TestConvertUtmToLatLng:
    """Testes para convert_utm_to_latlng"""

    def test_reference_origin(self) -> None:
        result = convert_utm_to_latlng(500000.0, 0.0, 23, "S")
        assert result.lat == pytest.approx(-20.0)
        assert result.lng == pytest.approx(-45.0)

    def test_zone_arguments_ignored(self) -> None:
        """A aproximação usa origem fixa: fuso e letra não alteram o resultado"""
        a = convert_utm_to_latlng(612345.0, -98765.0, 23, "S")
        b = convert_utm_to_latlng(612345.0, -98765.0, 1, "N")
        assert a.lat == b.lat
        assert a.lng == b.lng

    def test_returns_geo_point(self) -> None:
        assert isinstance(convert_utm_to_latlng(500000.0, 0.0, 23, "S"), GeoPoint)

    def test_out_of_range_result_not_validated(self) -> None:
        """Sem validação de faixa na saída"""
        result = convert_utm_to_latlng(500000.0, 200 * 110574.0, 23, "S")
        assert result.lat == pytest.approx(180.0)


# =============================================================================
# ROUND-TRIP
# =============================================================================


class TestRoundTrip:
    """Round-trip na região de Minas Gerais"""

    @pytest.mark.parametrize("lat, lng", MG_POINTS)
    def test_points_inside_minas_gerais(self, lat: float, lng: float) -> None:
        assert is_in_minas_gerais(lat, lng)

    @pytest.mark.parametrize("lat, lng", MG_POINTS)
    def test_latlng_round_trip(self, lat: float, lng: float) -> None:
        projected = convert_latlng_to_utm(lat, lng)
        result = convert_utm_to_latlng(
            projected.easting,
            projected.northing,
            projected.zone_num,
            projected.zone_letter,
        )
        assert result.lat == pytest.approx(lat, abs=1e-6)
        assert result.lng == pytest.approx(lng, abs=1e-6)

    @pytest.mark.parametrize("lat, lng", MG_POINTS)
    def test_value_object_round_trip(self, lat: float, lng: float) -> None:
        point = GeoPoint(lat=lat, lng=lng)
        result = to_geographic(to_projected(point))
        assert result.lat == pytest.approx(point.lat, abs=1e-6)
        assert result.lng == pytest.approx(point.lng, abs=1e-6)

    def test_unpacking_projected_point(self) -> None:
        projected = convert_latlng_to_utm(-19.9167, -43.9345)
        result = convert_utm_to_latlng(*projected.as_args())
        assert result.lat == pytest.approx(-19.9167, abs=1e-6)


# =============================================================================
# CONFIG
# =============================================================================


class TestProjectionConfig:
    """Testes de configuração"""

    def test_defaults(self) -> None:
        cfg = DEFAULT_PROJECTION_CONFIG
        assert cfg.ref_lat == -20.0
        assert cfg.ref_lng == -45.0
        assert cfg.false_easting == 500000.0
        assert cfg.meters_per_degree_lat == 110574.0
        assert cfg.meters_per_degree_lng == 111320.0
        assert cfg.zone_letter == "S"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_PROJECTION_CONFIG.ref_lat = 0.0  # type: ignore[misc]

    def test_custom_origin(self) -> None:
        cfg = ProjectionConfig(ref_lat=0.0, ref_lng=0.0, false_easting=0.0, zone_letter="N")
        result = convert_latlng_to_utm(0.0, 1.0, cfg)
        assert result.easting == pytest.approx(111320.0)
        assert result.northing == pytest.approx(0.0)
        assert result.zone_letter == "N"

        back = convert_utm_to_latlng(*result.as_args(), config=cfg)
        assert back.lat == pytest.approx(0.0, abs=1e-9)
        assert back.lng == pytest.approx(1.0)
