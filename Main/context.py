"""
Shared read-only context referenced by every State of one trajectory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from Environment.planet import Planet
    from Environment.aerodynamics import Aerodynamics
    from Hardware.part import Node, Part
    from Software.guidance import AscentPath


@dataclass(frozen=True, eq=False)
class AscentContext:
    planet: Planet
    ascent_path: AscentPath
    nodes: Mapping[Part, Node]
    aerodynamics: Optional[Aerodynamics] = None

    @property
    def parts(self) -> list:
        return list(self.nodes.keys())
