"""
Simulation glue: engine refresh, telemetry and the fixed-step integration loop.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from Hardware.rocket import Rocket
from .context import AscentContext
from .integrators import Integrator, RK4
from .state import State
from .telemetry import Logger
from .config import SimulationConfig


class Simulation:
    def __init__(
        self,
        context: AscentContext,
        rocket: Rocket,
        sim_config: SimulationConfig,
        integrator: Optional[Integrator] = None,
    ):
        self.context = context
        self.rocket = rocket
        self.sim_config = sim_config
        self.integrator = integrator or RK4()

        # Store relevant config values to avoid passing the whole object around
        self.target_altitude_m = sim_config.target_altitude_m
        self.surface_contact_tol_m = sim_config.surface_contact_tol_m
        self.burnout_mass = rocket.burnout_mass()

    def initial_state(self, forward: Optional[np.ndarray] = None, max_acceleration: float = 0.0) -> State:
        """Vehicle on the pad (or at the departure altitude) with full tanks."""
        if forward is None:
            forward = np.array([0.0, 1.0, 0.0])
        return State.at_departure(
            self.context,
            self.sim_config.departure_altitude_m,
            forward,
            m=self.rocket.total_mass(),
            max_acceleration=max_acceleration,
        )

    def run(self, state0: State, duration: float, dt: float) -> Logger:
        """
        March the trajectory forward from t = 0 to ``duration`` with fixed
        step ``dt``.

        The engine set is refreshed once per step, before any derivative is
        evaluated; the integrator's sub-steps all share that snapshot.
        """
        if dt <= 0.0:
            raise ValueError(f"Time step must be positive, got {dt}")

        logger = Logger()
        t_sim = 0.0
        state = state0

        while t_sim <= duration:
            state.update_engines()
            deriv = state.derivative()

            pressure, density, mach = state.flight_conditions()
            altitude = state.altitude
            extras = {
                "altitude": altitude,
                "v_surf": state.v_surf,
                "mach": mach,
                "pressure": pressure,
                "rho": density,
                "active_engines": len(state.active_engines),
            }
            logger.record(t_sim, state, deriv, extras)

            # --- TERMINATION CHECKS ---
            if self.target_altitude_m is not None and altitude >= self.target_altitude_m:
                logger.cutoff_reason = "target_altitude"
                break

            if t_sim > 0.0 and altitude <= self.surface_contact_tol_m:
                logger.cutoff_reason = "surface_contact"
                break

            # Stop before the next step would burn past the ascent propellant.
            if deriv.dm < 0.0 and state.m + dt * deriv.dm <= self.burnout_mass:
                logger.cutoff_reason = "propellant_depleted"
                break

            state = self.integrator.step(state, dt, k1=deriv)
            t_sim += dt

        if not logger.cutoff_reason:
            logger.cutoff_reason = "duration_elapsed"
        return logger
