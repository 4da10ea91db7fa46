"""
Numerical integrators for the ascent state.

Both schemes are built only from ``State.derivative``, ``State.increment``
and ``weighted_sum``, so the surface-collision correction applies to every
intermediate stage as well as to the final result.
"""

from __future__ import annotations

from typing import Optional

from .state import DState, State, weighted_sum


class Integrator:
    def step(self, state: State, dt: float, k1: Optional[DState] = None) -> State:
        """
        Advance ``state`` by ``dt``. ``k1`` may carry the derivative at
        ``state`` when the caller has already evaluated it.
        """
        raise NotImplementedError


class RK4(Integrator):
    def step(self, state: State, dt: float, k1: Optional[DState] = None) -> State:
        """Classic 4th-order Runge-Kutta step for (x, y, vx, vy, m)."""
        if k1 is None:
            k1 = state.derivative()

        # k2 at (t + dt/2, state + dt/2 * k1)
        k2 = state.increment(k1, 0.5 * dt).derivative()
        # k3 at (t + dt/2, state + dt/2 * k2)
        k3 = state.increment(k2, 0.5 * dt).derivative()
        # k4 at (t + dt, state + dt * k3)
        k4 = state.increment(k3, dt).derivative()

        delta = weighted_sum([(1.0 / 6.0, k1), (2.0 / 6.0, k2), (2.0 / 6.0, k3), (1.0 / 6.0, k4)])
        return state.increment(delta, dt)


class VelocityVerlet(Integrator):
    def step(self, state: State, dt: float, k1: Optional[DState] = None) -> State:
        """
        Velocity Verlet step.

          * Position uses the start-of-step acceleration:
                r_{n+1} = r_n + v_n * dt + 0.5 * a_n * dt^2
          * The acceleration is re-evaluated at the predicted state and the
            velocity is corrected with the average:
                v_{n+1} = v_n + 0.5 * (a_n + a_{n+1}) * dt
          * Mass uses a simple explicit step: m_{n+1} = m_n + m_dot_n * dt

        This assumes dm/dt varies slowly over a single time step, which is
        reasonable for standard rocket engines with small dt.
        """
        a_n = k1 if k1 is not None else state.derivative()

        drift = DState(
            vx=a_n.vx + 0.5 * dt * a_n.ax,
            vy=a_n.vy + 0.5 * dt * a_n.ay,
            ax=a_n.ax,
            ay=a_n.ay,
            dm=a_n.dm,
        )
        predicted = state.increment(drift, dt)
        a_next = predicted.derivative()

        corrected = DState(
            vx=drift.vx,
            vy=drift.vy,
            ax=0.5 * (a_n.ax + a_next.ax),
            ay=0.5 * (a_n.ay + a_next.ay),
            dm=a_n.dm,
        )
        return state.increment(corrected, dt)
