"""
Celestial body model: central gravity, rigid rotation and atmosphere access
in the planar ascent frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np

from Environment.atmosphere import AtmosphereProperties, VACUUM


@dataclass
class Planet:
    """Read-only description of the body the vehicle departs from.

    The ascent plane is the body's equatorial plane, origin at the body
    centre. A rotating body spins clockwise in that frame, so the rigid
    rotation velocity at ``(x, y)`` is ``(y * omega, -x * omega)``.
    """
    name: str
    radius: float
    grav_parameter: float
    rotation_period: float = 0.0
    rotates: bool = True
    atmosphere: Optional[Any] = None
    air_gamma: float = 1.4

    def __post_init__(self):
        if self.radius <= 0.0:
            raise ValueError(f"Planet radius must be positive, got {self.radius}")
        if self.grav_parameter < 0.0:
            raise ValueError("Gravitational parameter must be non-negative")
        if self.rotates and self.rotation_period <= 0.0:
            raise ValueError("A rotating planet needs a positive rotation_period")

    @property
    def angular_velocity(self) -> float:
        """Rotation rate [rad/s]; zero for a non-rotating body."""
        if not self.rotates:
            return 0.0
        return 2.0 * np.pi / self.rotation_period

    @property
    def atmosphere_depth(self) -> float:
        if self.atmosphere is None:
            return 0.0
        return float(getattr(self.atmosphere, "depth", 0.0))

    def properties(self, altitude: float) -> AtmosphereProperties:
        if self.atmosphere is None:
            return VACUUM
        return self.atmosphere.properties(altitude)

    def pressure(self, altitude: float) -> float:
        return float(self.properties(altitude).p)

    def density(self, altitude: float) -> float:
        return float(self.properties(altitude).rho)

    def speed_of_sound(self, pressure: float, density: float) -> float:
        """Speed of sound [m/s] of an ideal gas at the given state.

        Returns 0 in vacuum so callers can treat it as "no Mach number".
        """
        if pressure <= 0.0 or density <= 0.0:
            return 0.0
        return float(np.sqrt(self.air_gamma * pressure / density))

    def rotation_velocity(self, x: float, y: float) -> Tuple[float, float]:
        """Velocity of a point at (x, y) that co-rotates with the body."""
        omega = self.angular_velocity
        return y * omega, -x * omega

    def gravity_accel(self, x: float, y: float) -> Tuple[float, float]:
        """Central gravitational acceleration at (x, y)."""
        r2 = x * x + y * y
        if r2 == 0.0:
            raise ValueError("gravity_accel is undefined at r = 0")
        r = np.sqrt(r2)
        g = -self.grav_parameter / r2
        return g * x / r, g * y / r


def orbital_elements_from_state(
    x: float, y: float, vx: float, vy: float, mu: float
) -> Tuple[float | None, float | None, float | None]:
    """
    Semi-major axis, periapsis radius and apoapsis radius of the planar
    trajectory through (x, y) with velocity (vx, vy).

    Returns None for elements that are undefined (radial trajectories) and
    (None, None, None) for non-physical results.
    """
    r_vec = np.array([x, y, 0.0], dtype=float)
    v_vec = np.array([vx, vy, 0.0], dtype=float)
    r_norm = np.linalg.norm(r_vec)
    v_norm = np.linalg.norm(v_vec)

    epsilon = (v_norm**2 / 2.0) - (mu / r_norm)
    if epsilon == 0:  # Parabolic
        a = np.inf
    else:
        a = -mu / (2 * epsilon)

    h_vec = np.cross(r_vec, v_vec)
    h_norm = np.linalg.norm(h_vec)
    if h_norm == 0:  # Radial trajectory
        return a, None, None

    e_vec = (np.cross(v_vec, h_vec) / mu) - (r_vec / r_norm)
    e = np.linalg.norm(e_vec)

    if e < 1:
        rp = a * (1 - e)
        ra = a * (1 + e)
    elif e == 1:
        rp = h_norm**2 / mu / 2.0
        ra = np.inf
    else:
        rp = h_norm**2 / (mu * (1 + e))
        ra = np.inf

    if np.isinf(a) or np.isnan(a) or rp < 0 or ra < 0:
        return None, None, None

    return a, rp, ra
