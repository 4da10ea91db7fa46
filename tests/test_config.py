import pytest

from Environment.atmosphere import AtmosphereModel, ExponentialAtmosphere
from Environment.config import EnvironmentConfig
from Hardware.config import HardwareConfig
from Logging.config import LoggingConfig
from Main.config import SimulationConfig
from Software.config import SoftwareConfig


def test_environment_defaults():
    cfg = EnvironmentConfig()
    assert cfg.body_name == "Kerbin"
    assert cfg.body_radius_m == 600_000.0
    assert cfg.body_mu == 3.5316e12
    assert cfg.atmosphere_model == "exponential"
    assert cfg.G0 == 9.80665
    assert len(cfg.mach_cd_map) > 0


def test_environment_creates_planet():
    planet = EnvironmentConfig().create_planet()
    assert planet.name == "Kerbin"
    assert planet.radius == 600_000.0
    assert planet.rotates
    assert isinstance(planet.atmosphere, ExponentialAtmosphere)
    assert planet.atmosphere_depth == 70_000.0


def test_environment_atmosphere_choices():
    assert EnvironmentConfig(atmosphere_model="none").create_atmosphere_model() is None
    msis = EnvironmentConfig(atmosphere_model="US76_MSIS", atmosphere_switch_alt_m=90_000.0).create_atmosphere_model()
    assert isinstance(msis, AtmosphereModel)
    assert msis.h_switch == 90_000.0
    with pytest.raises(ValueError, match="Unknown atmosphere model"):
        EnvironmentConfig(atmosphere_model="jupiter").create_atmosphere_model()


def test_earth_preset():
    cfg = EnvironmentConfig.earth()
    assert cfg.body_name == "Earth"
    assert cfg.body_mu == 3.986_004_418e14
    planet = cfg.create_planet()
    assert isinstance(planet.atmosphere, AtmosphereModel)
    assert planet.atmosphere.depth == 1_000_000.0


def test_environment_aerodynamics_uses_cd_map():
    cfg = EnvironmentConfig(reference_area_m2=2.5)
    aero = cfg.create_aerodynamics_model()
    assert aero.reference_area == 2.5
    assert aero.cd_model.cd(0.0) == pytest.approx(cfg.mach_cd_map[0][1])
    assert aero.cd_model.cd(100.0) == pytest.approx(cfg.mach_cd_map[-1][1])


def test_hardware_defaults():
    cfg = HardwareConfig()
    engine = cfg.create_engine(EnvironmentConfig())
    assert engine.thrust_vac == cfg.engine_thrust_vac
    assert engine.isp_sl == cfg.engine_isp_sl
    assert engine.min_throttle == cfg.engine_min_throttle
    sepratron = cfg.create_sepratron_engine(EnvironmentConfig())
    assert sepratron.min_throttle == 1.0


def test_software_defaults():
    cfg = SoftwareConfig()
    assert cfg.ascent_path_mode == "default"
    assert cfg.max_acceleration_mps2 == 20.0
    assert cfg.pitch_schedule[0] == [0.0, 90.0]


def test_simulation_and_logging_defaults():
    sim = SimulationConfig()
    assert sim.departure_altitude_m == 0.0
    assert sim.target_altitude_m == 80_000.0
    assert sim.integrator == "rk4"
    assert sim.main_dt_s > 0.0

    log = LoggingConfig(save_log=False)
    assert log.log_filename == "ascent_log.txt"
    assert log.save_log is False
    assert log.print_summary is True
