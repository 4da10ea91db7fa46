"""
Configuration for the software components (ascent path, acceleration target).
"""

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING

from Environment.planet import Planet

if TYPE_CHECKING:
    from Software.guidance import AscentPath


@dataclass
class SoftwareConfig:
    # --- Ascent Path ---
    # "default" (gravity-turn shape) or "scheduled" (pitch_schedule table)
    ascent_path_mode: str = "default"

    # Gravity turn, scaled to the atmosphere depth when the body has one
    turn_start_atmosphere_fraction: float = 0.02
    turn_end_atmosphere_fraction: float = 0.85
    vacuum_turn_start_altitude_m: float = 500.0
    vacuum_turn_end_altitude_m: float = 30_000.0
    turn_end_angle_deg: float = 0.0
    turn_shape_exponent: float = 0.4

    # Pitch schedule (altitude [m], deg above horizon) for "scheduled" mode
    pitch_schedule: list = dataclasses.field(
        default_factory=lambda: [
            [0.0, 90.0],        # Vertical clear of the pad
            [1_500.0, 85.0],    # Start of the turn
            [10_000.0, 60.0],
            [30_000.0, 30.0],
            [60_000.0, 0.0],    # Horizontal near the edge of the atmosphere
        ]
    )

    # --- Throttle ---
    # Target thrust acceleration; throttle is resolved to hold it.
    max_acceleration_mps2: float = 20.0

    def create_ascent_path(self, planet: Planet) -> "AscentPath":
        from Software.guidance import DefaultAscentPath, ScheduledAscentPath  # Local import
        mode = self.ascent_path_mode.lower()
        if mode == "default":
            return DefaultAscentPath.from_planet(planet, self)
        if mode == "scheduled":
            return ScheduledAscentPath(self.pitch_schedule)
        raise ValueError(f"Unknown ascent path mode '{self.ascent_path_mode}'. Expected 'default' or 'scheduled'.")
