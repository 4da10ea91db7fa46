"""
Engine model: thrust and propellant flow as functions of throttle and the
surrounding air.
"""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np


class ThrustProvider:
    """
    Capability interface for any component that turns propellant into thrust.

    Parts expose their thrust-producing components through an explicit
    ``engines`` collection; anything placed there must implement both methods.
    """

    def thrust(self, throttle: float, pressure: float, mach: float, density: float) -> float:
        raise NotImplementedError

    def fuel_flow(self, density: float, mach: float, throttle: float) -> float:
        raise NotImplementedError


@dataclass
class Engine(ThrustProvider):
    thrust_vac: float
    isp_vac: float
    isp_sl: float
    p_sl: float = 101325.0
    g0: float = 9.80665
    min_throttle: float = 0.0  # flow fraction delivered at throttle 0
    mach_curve: Optional[List[List[float]]] = None     # [[mach, multiplier], ...]
    density_curve: Optional[List[List[float]]] = None  # [[rho, multiplier], ...]

    def __post_init__(self):
        if self.thrust_vac < 0.0:
            raise ValueError("thrust_vac must be non-negative")
        if self.isp_vac <= 0.0 or self.isp_sl < 0.0:
            raise ValueError("isp_vac must be positive and isp_sl non-negative")
        if self.p_sl <= 0.0:
            raise ValueError("p_sl must be positive")
        if not 0.0 <= self.min_throttle <= 1.0:
            raise ValueError("min_throttle must lie in [0, 1]")

    @property
    def max_fuel_flow(self) -> float:
        """Propellant mass flow [kg/s] at full throttle with neutral curves."""
        return self.thrust_vac / (self.isp_vac * self.g0)

    def isp(self, p_amb: float) -> float:
        """
        Specific impulse [s] at ambient pressure ``p_amb``.

        We interpolate linearly between sea-level (p = p_sl) and vacuum
        (p = 0) performance; pressure is clamped to [0, p_sl].
        """
        p = float(np.clip(p_amb, 0.0, self.p_sl))
        # Fraction of "vacuum-ness": 0 at sea level, 1 in vacuum
        f_vac = 1.0 - p / self.p_sl
        return self.isp_sl + f_vac * (self.isp_vac - self.isp_sl)

    @staticmethod
    def _curve(points: Optional[List[List[float]]], x: float) -> float:
        if not points:
            return 1.0
        table = np.asarray(sorted(points, key=lambda p: p[0]), dtype=float)
        return float(np.interp(x, table[:, 0], table[:, 1]))

    def fuel_flow(self, density: float, mach: float, throttle: float) -> float:
        """Propellant mass flow [kg/s], positive while burning."""
        throttle = float(np.clip(throttle, 0.0, 1.0))
        flow_fraction = self.min_throttle + throttle * (1.0 - self.min_throttle)
        return (
            self.max_fuel_flow
            * flow_fraction
            * self._curve(self.mach_curve, mach)
            * self._curve(self.density_curve, density)
        )

    def thrust(self, throttle: float, pressure: float, mach: float, density: float) -> float:
        """Thrust magnitude [N]: mass flow times effective exhaust velocity."""
        return self.fuel_flow(density, mach, throttle) * self.isp(pressure) * self.g0
