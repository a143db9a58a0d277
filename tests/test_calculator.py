import pytest

from ecofly.domain import get_airport
from ecofly.services.calculator import (
    EMISSION_FACTOR,
    MISSING_AIRPORTS_MESSAGE,
    RouteInputError,
    calculate_route,
    estimate_emissions_kg,
    haversine_km,
)


@pytest.mark.parametrize(
    "lat, lon",
    [(0.0, 0.0), (27.6966, 85.3592), (-33.9461, 151.1772), (89.9, -179.9)],
)
def test_distance_to_self_is_zero(lat, lon):
    assert haversine_km(lat, lon, lat, lon) == pytest.approx(0.0, abs=1e-9)


def test_distance_is_symmetric():
    a = (51.47, -0.4543)
    b = (40.6413, -73.7781)

    assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a))


def test_distance_kathmandu_to_heathrow():
    ktm = get_airport("KTM")
    lhr = get_airport("LHR")

    distance = haversine_km(ktm.latitude, ktm.longitude, lhr.latitude, lhr.longitude)

    assert distance == pytest.approx(7382, rel=0.01)


def test_quarter_meridian_matches_sphere_radius():
    distance = haversine_km(0.0, 0.0, 90.0, 0.0)

    assert distance == pytest.approx(6371.0 * 3.141592653589793 / 2)


def test_out_of_range_coordinates_do_not_raise():
    assert haversine_km(120.0, 400.0, -95.0, -200.0) >= 0


def test_emissions_are_linear():
    assert estimate_emissions_kg(0) == 0
    assert estimate_emissions_kg(1000) == pytest.approx(115.0)
    for distance in (1.5, 250.0, 7382.0):
        assert estimate_emissions_kg(2 * distance) == pytest.approx(
            2 * estimate_emissions_kg(distance)
        )
    assert EMISSION_FACTOR == 0.115


def test_calculate_route_combines_distance_and_emissions():
    ktm = get_airport("KTM")
    pkr = get_airport("PKR")

    result = calculate_route(ktm, pkr)

    assert result.origin == ktm
    assert result.destination == pkr
    assert result.distance_km > 0
    assert result.emissions_kg == pytest.approx(result.distance_km * EMISSION_FACTOR)


def test_calculate_route_logs_airport_labels(caplog):
    with caplog.at_level("DEBUG", logger="ecofly"):
        calculate_route(get_airport("KTM"), get_airport("LHR"))

    assert get_airport("LHR").label == "Heathrow Airport (LHR)"
    assert "Tribhuvan International Airport (KTM) -> Heathrow Airport (LHR)" in caplog.text


def test_calculate_route_same_airport_is_zero():
    ktm = get_airport("KTM")

    result = calculate_route(ktm, ktm)

    assert result.distance_km == pytest.approx(0.0, abs=1e-9)
    assert result.emissions_kg == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("origin_code, destination_code", [("KTM", None), (None, "LHR"), (None, None)])
def test_calculate_route_requires_both_airports(origin_code, destination_code):
    with pytest.raises(RouteInputError) as excinfo:
        calculate_route(get_airport(origin_code), get_airport(destination_code))

    assert excinfo.value.message == MISSING_AIRPORTS_MESSAGE
