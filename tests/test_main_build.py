import pytest

import main
from main import main_orchestrator, print_summary, run_simulation_and_get_log
from Environment.aerodynamics import Aerodynamics
from Environment.config import EnvironmentConfig
from Hardware.config import HardwareConfig
from Logging.config import LoggingConfig
from Main.config import SimulationConfig
from Main.integrators import RK4, VelocityVerlet
from Main.simulation import Simulation
from Main.telemetry import Logger
from Software.config import SoftwareConfig
from Software.guidance import DefaultAscentPath


def short_sim_config(**kwargs):
    return SimulationConfig(main_duration_s=1.0, main_dt_s=0.5, **kwargs)


def test_orchestrator_defaults():
    sim, state0, log_config = main_orchestrator()

    assert isinstance(sim, Simulation)
    assert isinstance(sim.integrator, RK4)
    assert isinstance(sim.context.aerodynamics, Aerodynamics)
    assert isinstance(sim.context.ascent_path, DefaultAscentPath)
    assert isinstance(log_config, LoggingConfig)

    hw = HardwareConfig()
    assert state0.m == pytest.approx(hw.tank_dry_mass + hw.tank_prop_mass + hw.engine_dry_mass + hw.capsule_mass)
    assert state0.max_acceleration == SoftwareConfig().max_acceleration_mps2
    assert state0.altitude == pytest.approx(0.0)
    assert state0.vx == pytest.approx(sim.context.planet.angular_velocity * sim.context.planet.radius)
    assert set(sim.context.nodes) == set(sim.rocket.parts)


@pytest.mark.parametrize("name, expected", [("rk4", RK4), ("RK", RK4), ("verlet", VelocityVerlet),
                                            ("velocity_verlet", VelocityVerlet)])
def test_orchestrator_integrator_selection(name, expected):
    sim, _, _ = main_orchestrator(sim_config=SimulationConfig(integrator=name))
    assert isinstance(sim.integrator, expected)


def test_orchestrator_unknown_integrator():
    with pytest.raises(ValueError, match="Unknown integrator"):
        main_orchestrator(sim_config=SimulationConfig(integrator="euler"))


def test_create_integrator_returns_fresh_instances():
    first = main.create_integrator("vv")
    second = main.create_integrator("VV")
    assert isinstance(first, VelocityVerlet)
    assert first is not second


def test_vacuum_body_has_no_aerodynamics():
    env = EnvironmentConfig(body_name="Mun", body_radius_m=200_000.0, body_mu=6.5138e10,
                            body_rotation_period_s=138_984.38, atmosphere_model="none")
    sim, _, _ = main_orchestrator(env_config=env)
    assert sim.context.planet.atmosphere is None
    assert sim.context.aerodynamics is None


def test_short_run_and_summary(capsys):
    sim, state0, _ = main_orchestrator(sim_config=short_sim_config())
    log = run_simulation_and_get_log(sim, state0)

    assert log.cutoff_reason == "duration_elapsed"
    assert len(log) == 3
    assert log.altitude[-1] > 0.0
    assert log.m[-1] < log.m[0]

    print_summary(log, sim)
    out = capsys.readouterr().out
    assert "=== Simulation summary ===" in out
    assert "Cutoff reason: duration_elapsed" in out
    assert "Periapsis altitude" in out


def test_summary_of_empty_log(capsys):
    sim, _, _ = main_orchestrator(sim_config=short_sim_config())
    log = Logger()
    log.cutoff_reason = "duration_elapsed"
    print_summary(log, sim)
    out = capsys.readouterr().out
    assert "Steps: 0" in out
    assert "Final altitude" not in out


def test_main_saves_log(tmp_path, monkeypatch, capsys):
    log_file = tmp_path / "ascent_log.txt"
    original = main.main_orchestrator

    def short_orchestrator():
        return original(sim_config=short_sim_config(), log_config=LoggingConfig(log_filename=str(log_file)))

    monkeypatch.setattr(main, "main_orchestrator", short_orchestrator)
    main.main()

    out = capsys.readouterr().out
    assert "Cutoff reason" in out
    assert f"Saved simulation log to {log_file}" in out
    assert len(log_file.read_text().splitlines()) == 1 + 3
