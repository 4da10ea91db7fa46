import numpy as np
import pytest

from Environment.atmosphere import ExponentialAtmosphere
from Environment.planet import Planet
from Software.config import SoftwareConfig
from Software.guidance import AscentPath, DefaultAscentPath, ScheduledAscentPath


@pytest.fixture
def air_planet():
    return Planet(name="Kerbin", radius=600_000.0, grav_parameter=3.5316e12, rotation_period=21_549.425,
                  atmosphere=ExponentialAtmosphere(depth=70_000.0))


@pytest.fixture
def vacuum_planet():
    return Planet(name="Mun", radius=200_000.0, grav_parameter=6.5138e10, rotates=False)


def test_base_ascent_path_is_abstract():
    with pytest.raises(NotImplementedError):
        AscentPath().flight_path_angle(0.0)


def test_default_path_phases():
    path = DefaultAscentPath(turn_start_altitude=1_000.0, turn_end_altitude=11_000.0,
                             turn_end_angle_deg=10.0, turn_shape_exponent=1.0)
    assert path.flight_path_angle(0.0) == 0.0
    assert path.flight_path_angle(999.0) == 0.0
    # Linear shape: halfway through the turn is halfway between 90 and 10 deg
    assert path.pitch_deg(6_000.0) == pytest.approx(50.0)
    assert path.flight_path_angle(6_000.0) == pytest.approx(np.radians(40.0))
    assert path.pitch_deg(50_000.0) == 10.0
    assert path.flight_path_angle(50_000.0) == pytest.approx(np.radians(80.0))


def test_default_path_is_monotonic():
    path = DefaultAscentPath(turn_start_altitude=500.0, turn_end_altitude=30_000.0)
    altitudes = np.linspace(0.0, 40_000.0, 200)
    angles = [path.flight_path_angle(h) for h in altitudes]
    assert all(b >= a for a, b in zip(angles, angles[1:]))
    assert angles[-1] == pytest.approx(np.pi / 2)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(turn_start_altitude=1000.0, turn_end_altitude=1000.0),
        dict(turn_start_altitude=0.0, turn_end_altitude=1000.0, turn_end_angle_deg=95.0),
        dict(turn_start_altitude=0.0, turn_end_altitude=1000.0, turn_shape_exponent=0.0),
    ],
)
def test_default_path_rejects_bad_parameters(kwargs):
    with pytest.raises(ValueError):
        DefaultAscentPath(**kwargs)


def test_default_path_scales_with_atmosphere(air_planet):
    path = DefaultAscentPath.from_planet(air_planet, SoftwareConfig())
    assert path.turn_start_altitude == pytest.approx(0.02 * 70_000.0)
    assert path.turn_end_altitude == pytest.approx(0.85 * 70_000.0)


def test_default_path_vacuum_defaults(vacuum_planet):
    sw_config = SoftwareConfig(vacuum_turn_start_altitude_m=200.0, vacuum_turn_end_altitude_m=8_000.0)
    path = DefaultAscentPath.from_planet(vacuum_planet, sw_config)
    assert path.turn_start_altitude == 200.0
    assert path.turn_end_altitude == 8_000.0


def test_scheduled_path_interpolates_and_holds():
    path = ScheduledAscentPath([[10_000.0, 45.0], [0.0, 90.0], [20_000.0, 0.0]])
    assert path.pitch_deg(-50.0) == 90.0
    assert path.pitch_deg(5_000.0) == pytest.approx(67.5)
    assert path.flight_path_angle(15_000.0) == pytest.approx(np.radians(67.5))
    assert path.flight_path_angle(99_000.0) == pytest.approx(np.pi / 2)


def test_scheduled_path_requires_points():
    with pytest.raises(ValueError):
        ScheduledAscentPath([])


def test_software_config_path_modes(air_planet):
    assert isinstance(SoftwareConfig().create_ascent_path(air_planet), DefaultAscentPath)
    scheduled = SoftwareConfig(ascent_path_mode="Scheduled").create_ascent_path(air_planet)
    assert isinstance(scheduled, ScheduledAscentPath)
    assert scheduled.pitch_deg(0.0) == 90.0
    with pytest.raises(ValueError, match="Unknown ascent path mode"):
        SoftwareConfig(ascent_path_mode="closed_loop").create_ascent_path(air_planet)
