"""
Aerodynamics module: drag-only force model over the vehicle's part list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence, Union

import numpy as np


def mach_dependent_cd(mach: float, mach_cd_map: Sequence[Sequence[float]]) -> float:
    """
    A representative drag coefficient (Cd) curve for a generic launch vehicle,
    based on the Mach number. This captures the characteristic transonic drag
    rise and subsequent decrease in the supersonic regime. Values outside the
    table are held at the end points.
    """
    table = np.asarray(mach_cd_map, dtype=float)
    return float(np.interp(mach, table[:, 0], table[:, 1]))


class CdModel:
    """
    Drag coefficient model. Accepts either a constant value or a callable
    returning Cd as a function of Mach number.
    """

    def __init__(self, value_or_callable: Union[float, Callable[[float], float]] = 2.0):
        self.value_or_callable = value_or_callable

    def cd(self, mach: float) -> float:
        if callable(self.value_or_callable):
            return float(self.value_or_callable(mach))
        return float(self.value_or_callable)


@dataclass
class Aerodynamics:
    cd_model: CdModel
    reference_area: Optional[float] = None  # fallback if the parts carry no drag area

    def drag_force(self, parts: Iterable[Any], planet: Any, velocity: np.ndarray, altitude: float) -> np.ndarray:
        """Compute the aerodynamic drag force on the vehicle.

        Assumptions
        -----------
        - Zero angle of attack: drag acts purely opposite to ``velocity``,
          which must already be relative to the surrounding air.
        - The reference area is the sum of each part's ``drag_area``; when
          that is zero the constant ``reference_area`` is used instead.
        - ``planet`` provides ``properties(altitude)`` and
          ``speed_of_sound(pressure, density)``.

        Returns a force vector with the same shape as ``velocity``.
        """
        v = np.asarray(velocity, dtype=float)
        v_mag = np.linalg.norm(v)
        if v_mag == 0.0:
            return np.zeros_like(v)

        props = planet.properties(max(0.0, altitude))
        rho = float(props.rho)
        if rho <= 0.0:
            return np.zeros_like(v)

        a = planet.speed_of_sound(float(props.p), rho)
        mach = v_mag / a if a > 0.0 else 0.0
        cd = self.cd_model.cd(mach)

        A = float(sum(getattr(part, "drag_area", 0.0) for part in parts))
        if A <= 0.0 and self.reference_area is not None:
            A = float(self.reference_area)

        if A <= 0.0 or cd <= 0.0:
            return np.zeros_like(v)

        q = 0.5 * rho * v_mag ** 2
        return -q * cd * A * v / v_mag
