"""
Entry point to run a simple end-to-end powered ascent.

This builds the planet/atmosphere/aero/vehicle stack, runs a fixed-step
integration of the ascent state, and prints a short summary. Defaults
describe a small single-stage lifter leaving a Kerbin-sized body.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from Environment.config import EnvironmentConfig
from Environment.planet import orbital_elements_from_state

from Hardware.config import HardwareConfig

from Software.config import SoftwareConfig

from Main.context import AscentContext
from Main.integrators import Integrator, RK4, VelocityVerlet
from Main.simulation import Simulation
from Main.state import State
from Main.config import SimulationConfig

from Logging.config import LoggingConfig
from Logging.generate_logs import save_log_to_txt


INTEGRATORS = {
    "rk4": RK4,
    "runge-kutta": RK4,
    "rk": RK4,
    "velocity_verlet": VelocityVerlet,
    "verlet": VelocityVerlet,
    "vv": VelocityVerlet,
}


def create_integrator(name: str) -> Integrator:
    try:
        return INTEGRATORS[str(name).lower()]()
    except KeyError:
        raise ValueError(f"Unknown integrator '{name}'. Expected 'rk4' or 'velocity_verlet'.") from None


def main_orchestrator(
    env_config: Optional[EnvironmentConfig] = None,
    hw_config: Optional[HardwareConfig] = None,
    sw_config: Optional[SoftwareConfig] = None,
    sim_config: Optional[SimulationConfig] = None,
    log_config: Optional[LoggingConfig] = None,
):
    # 1. Instantiate all config objects if not provided
    env_config = env_config or EnvironmentConfig()
    hw_config = hw_config or HardwareConfig()
    sw_config = sw_config or SoftwareConfig()
    sim_config = sim_config or SimulationConfig()
    log_config = log_config or LoggingConfig()

    # 2. Instantiate core components using factory methods from configs
    planet = env_config.create_planet()
    aero = env_config.create_aerodynamics_model() if planet.atmosphere is not None else None
    rocket = hw_config.create_rocket(env_config)
    ascent_path = sw_config.create_ascent_path(planet)

    context = AscentContext(
        planet=planet,
        ascent_path=ascent_path,
        nodes=rocket.create_nodes(),
        aerodynamics=aero,
    )

    sim = Simulation(
        context=context,
        rocket=rocket,
        sim_config=sim_config,
        integrator=create_integrator(sim_config.integrator),
    )

    state0 = sim.initial_state(max_acceleration=sw_config.max_acceleration_mps2)

    return sim, state0, log_config


def run_simulation_and_get_log(sim: Simulation, state0: State):
    """Runs the simulation and returns the log."""
    return sim.run(state0, sim.sim_config.main_duration_s, sim.sim_config.main_dt_s)


def print_summary(log, sim: Simulation):
    """Prints a summary of the simulation results."""
    def format_dist(val_km):
        if val_km is None:
            return "n/a"
        if np.isinf(val_km):
            return "inf"
        return f"{val_km:.2f}"

    planet = sim.context.planet
    print("\n=== Simulation summary ===")
    print(f"Cutoff reason: {log.cutoff_reason}")
    print(f"Steps: {len(log.t_sim)}")
    if not log.t_sim:
        return

    a, rp, ra = orbital_elements_from_state(log.x[-1], log.y[-1], log.vx[-1], log.vy[-1], planet.grav_parameter)
    rp_alt_km = (rp - planet.radius) / 1000.0 if rp is not None else None
    ra_alt_km = (ra - planet.radius) / 1000.0 if ra is not None and not np.isinf(ra) else ra

    print(f"Final sim time  : {log.t_sim[-1]:.1f} s")
    print(f"Final altitude  : {log.altitude[-1] / 1000.0:.2f} km")
    print(f"Final speed     : {log.speed[-1]:.1f} m/s")
    print(f"Final mass      : {log.m[-1]:.1f} kg")
    print(f"Final throttle  : {log.throttle[-1]:.3f}")
    print(f"Max altitude    : {max(log.altitude) / 1000.0:.2f} km")
    print(f"Max Mach        : {max(log.mach):.2f}")
    print(f"Propellant used : {log.m[0] - log.m[-1]:.1f} kg")
    if a is not None and not np.isinf(a):
        print(f"Semi-major axis : {a / 1000:.2f} km")
    print(f"Periapsis altitude: {format_dist(rp_alt_km)} km")
    print(f"Apoapsis altitude : {format_dist(ra_alt_km)} km")


def main():
    sim, state0, log_config = main_orchestrator()
    log = run_simulation_and_get_log(sim, state0)
    if log_config.print_summary:
        print_summary(log, sim)
    if log_config.save_log:
        save_log_to_txt(log, log_config.log_filename)


if __name__ == "__main__":
    main()
