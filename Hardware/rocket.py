"""
Vehicle model: the set of parts flown on one trajectory.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .part import Node, Part
from .config import HardwareConfig


class Rocket:
    """
    Single-stage vehicle assembled from parts.

    Assumptions
    -----------
    * The overall vehicle mass is carried in State.m and is updated by the
      integrator using the mass-flow rate from the engines.
    * Part propellant masses describe the vehicle at launch; they decide
      which engines have a reachable feed, not how much fuel is left.
    * Staging events are not modelled; every part stays attached.
    """

    def __init__(self, parts: List[Part], hw_config: Optional[HardwareConfig] = None):
        if not parts:
            raise ValueError("Rocket expects at least one part.")
        self.parts = list(parts)
        self.hw_config = hw_config

    def total_mass(self) -> float:
        return sum(p.total_mass() for p in self.parts)

    def dry_mass(self) -> float:
        return sum(p.dry_mass for p in self.parts)

    def propellant_mass(self) -> float:
        return sum(p.propellant_mass for p in self.parts)

    def burnout_mass(self) -> float:
        """
        Mass left once the ascent engines run dry. Sepratrons never fire
        during ascent, so their propellant stays on board.
        """
        return self.total_mass() - sum(p.propellant_mass for p in self.parts if not p.is_sepratron)

    def create_nodes(self) -> Dict[Part, Node]:
        """Return the part -> node mapping used by the engine scan."""
        return {part: Node(part) for part in self.parts}
