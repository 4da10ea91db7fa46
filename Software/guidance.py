from __future__ import annotations
from typing import List, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from Environment.planet import Planet
    from .config import SoftwareConfig


class AscentPath:
    """
    Open-loop ascent profile as a function of altitude only.

    ``flight_path_angle(altitude)`` returns the tilt of the thrust vector away
    from the local vertical, in radians, toward the direction of the body's
    rotation (0 = straight up, pi/2 = horizontal).
    """

    def flight_path_angle(self, altitude: float) -> float:
        raise NotImplementedError


class DefaultAscentPath(AscentPath):
    """
    Classic gravity-turn shape.

    Below ``turn_start_altitude`` the vehicle climbs vertically. Between the
    start and end altitudes the pitch above the horizon follows
    ``90 - f**turn_shape_exponent * (90 - turn_end_angle_deg)`` where ``f`` is
    the fractional progress through the turn. Above the end altitude the pitch
    is held at ``turn_end_angle_deg``.
    """

    def __init__(
        self,
        turn_start_altitude: float,
        turn_end_altitude: float,
        turn_end_angle_deg: float = 0.0,
        turn_shape_exponent: float = 0.4,
    ):
        if turn_end_altitude <= turn_start_altitude:
            raise ValueError("turn_end_altitude must be above turn_start_altitude")
        if not 0.0 <= turn_end_angle_deg <= 90.0:
            raise ValueError("turn_end_angle_deg must lie in [0, 90]")
        if turn_shape_exponent <= 0.0:
            raise ValueError("turn_shape_exponent must be positive")
        self.turn_start_altitude = turn_start_altitude
        self.turn_end_altitude = turn_end_altitude
        self.turn_end_angle_deg = turn_end_angle_deg
        self.turn_shape_exponent = turn_shape_exponent

    @classmethod
    def from_planet(cls, planet: Planet, sw_config: SoftwareConfig) -> "DefaultAscentPath":
        """Scale the turn to the body's atmosphere, or use the vacuum defaults."""
        depth = planet.atmosphere_depth
        if depth > 0.0:
            start = sw_config.turn_start_atmosphere_fraction * depth
            end = sw_config.turn_end_atmosphere_fraction * depth
        else:
            start = sw_config.vacuum_turn_start_altitude_m
            end = sw_config.vacuum_turn_end_altitude_m
        return cls(
            turn_start_altitude=start,
            turn_end_altitude=end,
            turn_end_angle_deg=sw_config.turn_end_angle_deg,
            turn_shape_exponent=sw_config.turn_shape_exponent,
        )

    def pitch_deg(self, altitude: float) -> float:
        """Pitch above the local horizon [deg]."""
        if altitude < self.turn_start_altitude:
            return 90.0
        if altitude > self.turn_end_altitude:
            return self.turn_end_angle_deg
        progress = (altitude - self.turn_start_altitude) / (self.turn_end_altitude - self.turn_start_altitude)
        pitch = 90.0 - progress ** self.turn_shape_exponent * (90.0 - self.turn_end_angle_deg)
        return float(np.clip(pitch, self.turn_end_angle_deg, 90.0))

    def flight_path_angle(self, altitude: float) -> float:
        return float(np.radians(90.0 - self.pitch_deg(altitude)))


class ScheduledAscentPath(AscentPath):
    """
    Interpolates a pitch schedule given as [altitude_m, pitch_deg] pairs.
    Pitch is degrees above the local horizon (90 = vertical). Outside the
    schedule the first/last pitch is held.
    """

    def __init__(self, points: Sequence[Sequence[float]]):
        if not points:
            raise ValueError("ScheduledAscentPath needs at least one point")
        sorted_points = sorted(points, key=lambda p: p[0])
        self.altitudes = np.array([p[0] for p in sorted_points], dtype=float)
        self.pitches_deg = np.array([p[1] for p in sorted_points], dtype=float)

    def pitch_deg(self, altitude: float) -> float:
        return float(np.interp(altitude, self.altitudes, self.pitches_deg))

    def flight_path_angle(self, altitude: float) -> float:
        return float(np.radians(90.0 - self.pitch_deg(altitude)))
