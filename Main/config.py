"""
Configuration for the main simulation loop and its termination conditions.
"""

from dataclasses import dataclass


@dataclass
class SimulationConfig:
    # --- Departure ---
    departure_altitude_m: float = 0.0

    # --- Target ---
    target_altitude_m: float | None = 80_000.0  # Stop once above this altitude

    # --- Simulation Config ---
    main_duration_s: float = 600.0
    main_dt_s: float = 0.1
    integrator: str = "rk4"

    # --- Tolerances ---
    surface_contact_tol_m: float = 1e-6  # altitude treated as resting on the surface
