"""
Vehicle part graph: parts, their staging/feed nodes and the engine wrappers
handed to the state's engine cache.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from Hardware.engine import ThrustProvider


@dataclass(eq=False)
class Part:
    """
    A structural part of the vehicle.

    Parts hash by identity so they can key the node mapping. ``engines`` is
    the explicit collection of thrust-producing components on the part;
    ``fuel_sources`` lists other parts it draws propellant from.
    """
    name: str
    dry_mass: float
    propellant_mass: float = 0.0
    drag_area: float = 0.0
    engines: List[ThrustProvider] = field(default_factory=list)
    is_sepratron: bool = False
    activated: bool = True
    fuel_sources: List["Part"] = field(default_factory=list)

    def total_mass(self) -> float:
        return self.dry_mass + self.propellant_mass


class Node:
    """Staging and feed view of a single part within the current vehicle."""

    def __init__(self, part: Part):
        self.part = part

    @property
    def is_sepratron(self) -> bool:
        return self.part.is_sepratron

    def feed_parts(self, nodes: Dict[Part, "Node"]) -> List[Part]:
        """Parts this node can draw propellant from that are still attached."""
        candidates = [self.part] + list(self.part.fuel_sources)
        return [p for p in candidates if p in nodes]

    def has_propellant(self, nodes: Dict[Part, "Node"]) -> bool:
        return any(p.propellant_mass > 0.0 for p in self.feed_parts(nodes))

    def is_active_engine(self, nodes: Dict[Part, "Node"]) -> bool:
        return bool(self.part.engines) and self.part.activated and self.has_propellant(nodes)


class EngineWrapper:
    """One engine component together with the feed context of its node."""

    def __init__(self, engine: ThrustProvider, node: Node, nodes: Dict[Part, Node]):
        self.engine = engine
        self.node = node
        self.feed_parts = node.feed_parts(nodes)

    @property
    def part(self) -> Part:
        return self.node.part

    def thrust(self, throttle: float, pressure: float, mach: float, density: float) -> float:
        return self.engine.thrust(throttle, pressure, mach, density)

    def fuel_flow(self, density: float, mach: float, throttle: float) -> float:
        return self.engine.fuel_flow(density, mach, throttle)
