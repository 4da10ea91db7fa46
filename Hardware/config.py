"""
Configuration for vehicle hardware (engines, tanks, capsule, sepratrons).
"""

from dataclasses import dataclass
from typing import List, TYPE_CHECKING

from Hardware.engine import Engine
from Hardware.part import Part
from Environment.config import EnvironmentConfig

if TYPE_CHECKING:
    from Hardware.rocket import Rocket


@dataclass
class HardwareConfig:
    # --- Vehicle Specifications (small single-stage lifter) ---

    # MAIN ENGINE (LV-T45 class liquid engine)
    engine_thrust_vac: float = 215_000.0
    engine_isp_vac: float = 320.0
    engine_isp_sl: float = 250.0
    engine_min_throttle: float = 0.0
    engine_dry_mass: float = 1_500.0
    engine_count: int = 1

    # TANK
    tank_dry_mass: float = 1_000.0
    tank_prop_mass: float = 8_000.0

    # CAPSULE / PAYLOAD
    capsule_mass: float = 840.0

    # SEPRATRONS (small solid motors, never counted as ascent propulsion)
    sepratron_count: int = 0
    sepratron_thrust_vac: float = 18_000.0
    sepratron_isp_vac: float = 154.0
    sepratron_isp_sl: float = 118.0
    sepratron_dry_mass: float = 12.5
    sepratron_prop_mass: float = 60.0

    # Aero / Dimensions
    drag_area_m2: float = 1.227  # pi * (1.25 / 2)^2 for a 1.25 m stack

    def create_engine(self, env_config: EnvironmentConfig) -> Engine:
        return Engine(
            thrust_vac=self.engine_thrust_vac,
            isp_vac=self.engine_isp_vac,
            isp_sl=self.engine_isp_sl,
            p_sl=env_config.P_SL,
            g0=env_config.G0,
            min_throttle=self.engine_min_throttle,
        )

    def create_sepratron_engine(self, env_config: EnvironmentConfig) -> Engine:
        return Engine(
            thrust_vac=self.sepratron_thrust_vac,
            isp_vac=self.sepratron_isp_vac,
            isp_sl=self.sepratron_isp_sl,
            p_sl=env_config.P_SL,
            g0=env_config.G0,
            min_throttle=1.0,  # solids cannot throttle
        )

    def create_parts(self, env_config: EnvironmentConfig) -> List[Part]:
        capsule = Part(name="capsule", dry_mass=self.capsule_mass, drag_area=self.drag_area_m2)
        tank = Part(name="tank", dry_mass=self.tank_dry_mass, propellant_mass=self.tank_prop_mass)
        parts = [capsule, tank]
        for i in range(self.engine_count):
            parts.append(Part(
                name=f"engine_{i}",
                dry_mass=self.engine_dry_mass,
                engines=[self.create_engine(env_config)],
                fuel_sources=[tank],
            ))
        for i in range(self.sepratron_count):
            parts.append(Part(
                name=f"sepratron_{i}",
                dry_mass=self.sepratron_dry_mass,
                propellant_mass=self.sepratron_prop_mass,
                engines=[self.create_sepratron_engine(env_config)],
                is_sepratron=True,
            ))
        return parts

    def create_rocket(self, env_config: EnvironmentConfig) -> "Rocket":
        from Hardware.rocket import Rocket  # Local import
        return Rocket(parts=self.create_parts(env_config), hw_config=self)
