"""
Configuration for the environment models (planet, atmosphere, aerodynamics).
"""

import dataclasses
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from Environment.planet import Planet
from Environment.atmosphere import AtmosphereModel, ExponentialAtmosphere

# Use TYPE_CHECKING to avoid circular imports for type hints
if TYPE_CHECKING:
    from Environment.aerodynamics import Aerodynamics


@dataclass
class EnvironmentConfig:
    # --- Central Body (Kerbin-like defaults) ---
    body_name: str = "Kerbin"
    body_radius_m: float = 600_000.0
    body_mu: float = 3.5316e12                  # [m^3/s^2]
    body_rotation_period_s: float = 21_549.425  # sidereal [s]
    body_rotates: bool = True

    # --- Atmosphere ---
    # "exponential" (generic bodies), "us76_msis" (Earth) or "none" (vacuum)
    atmosphere_model: str = "exponential"
    atmosphere_depth_m: float = 70_000.0
    atmosphere_scale_height_m: float = 5_000.0
    atmosphere_temperature_k: float = 288.15
    # US76 -> NRLMSIS switch and MSIS inputs (us76_msis only)
    atmosphere_switch_alt_m: float = 86_000.0
    atmosphere_f107: float | None = None
    atmosphere_f107a: float | None = None
    atmosphere_ap: float | None = None
    launch_lat_deg: float = 0.0
    launch_lon_deg: float = 0.0

    # Physics Constants
    G0: float = 9.80665
    P_SL: float = 101325.0
    air_gamma: float = 1.4
    air_gas_constant: float = 287.05

    # Drag Map (Transonic Rise)
    mach_cd_map: list = dataclasses.field(
        default_factory=lambda: [
            [0.5, 0.245],
            [0.8, 0.281],
            [1.0, 0.508],
            [1.2, 0.733],
            [1.5, 0.645],
            [2.0, 0.568],
            [3.0, 0.513],
            [4.0, 0.495],
            [5.0, 0.478],
            [7.5, 0.428],
            [10.0, 0.341]
        ]
    )
    reference_area_m2: Optional[float] = None

    @classmethod
    def earth(cls) -> "EnvironmentConfig":
        """Earth constants with the US76 / NRLMSIS atmosphere."""
        return cls(
            body_name="Earth",
            body_radius_m=6_371_000.0,
            body_mu=3.986_004_418e14,
            body_rotation_period_s=86_164.0905,
            body_rotates=True,
            atmosphere_model="us76_msis",
            atmosphere_depth_m=1_000_000.0,
        )

    def create_atmosphere_model(self):
        model = self.atmosphere_model.lower()
        if model == "exponential":
            return ExponentialAtmosphere(
                p_sl=self.P_SL,
                scale_height=self.atmosphere_scale_height_m,
                temperature=self.atmosphere_temperature_k,
                depth=self.atmosphere_depth_m,
                gas_constant=self.air_gas_constant,
            )
        if model == "us76_msis":
            return AtmosphereModel(
                h_switch=self.atmosphere_switch_alt_m,
                f107=self.atmosphere_f107,
                f107a=self.atmosphere_f107a,
                ap=self.atmosphere_ap,
                lat_deg=self.launch_lat_deg,
                lon_deg=self.launch_lon_deg,
                depth=self.atmosphere_depth_m,
            )
        if model == "none":
            return None
        raise ValueError(
            f"Unknown atmosphere model '{self.atmosphere_model}'. "
            "Expected 'exponential', 'us76_msis' or 'none'."
        )

    def create_planet(self) -> Planet:
        return Planet(
            name=self.body_name,
            radius=self.body_radius_m,
            grav_parameter=self.body_mu,
            rotation_period=self.body_rotation_period_s,
            rotates=self.body_rotates,
            atmosphere=self.create_atmosphere_model(),
            air_gamma=self.air_gamma,
        )

    def create_aerodynamics_model(self) -> "Aerodynamics":
        # Local import for construction
        from Environment.aerodynamics import Aerodynamics, CdModel, mach_dependent_cd
        cd_model = CdModel(lambda mach: mach_dependent_cd(mach, self.mach_cd_map))
        return Aerodynamics(cd_model=cd_model, reference_area=self.reference_area_m2)
