"""
State container and time derivative for planar powered ascent.

A State advances by copy: ``increment`` returns a new snapshot and leaves
the receiver untouched, so integrators can branch sub-steps from one
state. Two calls write to the receiver: ``update_engines`` refreshes the
engine cache, and ``derivative`` stores the throttle it resolved.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterable, List, Tuple, TYPE_CHECKING

import numpy as np

from Hardware.part import EngineWrapper

if TYPE_CHECKING:
    from Environment.planet import Planet
    from Hardware.part import Part
    from Main.context import AscentContext

# Keeps thrust/drag curve lookups inside their tabulated range.
MACH_CEILING = 25.0


@dataclass
class DState:
    vx: float = 0.0
    vy: float = 0.0
    ax: float = 0.0
    ay: float = 0.0
    dm: float = 0.0
    # Acceleration without gravity, for telemetry
    ax_nograv: float = 0.0
    ay_nograv: float = 0.0


def weighted_sum(terms: Iterable[Tuple[float, DState]]) -> DState:
    """Component-wise sum of ``weight * derivative`` over (weight, DState) pairs."""
    names = [f.name for f in dataclasses.fields(DState)]
    totals = dict.fromkeys(names, 0.0)
    for weight, delta in terms:
        for name in names:
            totals[name] += weight * getattr(delta, name)
    return DState(**totals)


@dataclass
class State:
    context: AscentContext = dataclasses.field(repr=False)
    x: float
    y: float
    vx: float
    vy: float
    m: float
    throttle: float = 1.0
    max_acceleration: float = 0.0
    forward: np.ndarray = dataclasses.field(default_factory=lambda: np.array([0.0, 1.0, 0.0]), repr=False)
    active_engines: Tuple[EngineWrapper, ...] = dataclasses.field(default=(), repr=False)
    min_thrust: float = 0.0
    max_thrust: float = 0.0

    @classmethod
    def at_departure(
        cls,
        context: AscentContext,
        departure_altitude: float,
        forward: np.ndarray,
        m: float,
        max_acceleration: float = 0.0,
    ) -> "State":
        """
        Vehicle resting at ``departure_altitude`` above the point (0, R),
        moving with the body's surface.
        """
        planet = context.planet
        y = planet.radius + departure_altitude
        return cls(
            context=context,
            x=0.0,
            y=y,
            vx=y * planet.angular_velocity,
            vy=0.0,
            m=m,
            throttle=1.0,
            max_acceleration=max_acceleration,
            forward=np.asarray(forward, dtype=float),
        )

    # ------------------------------------------------------------------
    # Derived kinematics
    # ------------------------------------------------------------------
    @property
    def planet(self) -> Planet:
        return self.context.planet

    @property
    def r(self) -> float:
        return float(np.sqrt(self.x * self.x + self.y * self.y))

    @property
    def r2(self) -> float:
        return self.x * self.x + self.y * self.y

    @property
    def altitude(self) -> float:
        return self.r - self.planet.radius

    @property
    def u_x(self) -> float:
        return self.x / self.r

    @property
    def u_y(self) -> float:
        return self.y / self.r

    @property
    def v_surf_x(self) -> float:
        return self.vx - self.u_y * self.planet.angular_velocity * self.r

    @property
    def v_surf_y(self) -> float:
        return self.vy + self.u_x * self.planet.angular_velocity * self.r

    @property
    def v_surf(self) -> float:
        return float(np.hypot(self.v_surf_x, self.v_surf_y))

    @property
    def pressure(self) -> float:
        return self.planet.pressure(self.altitude)

    @property
    def atm_density(self) -> float:
        return self.planet.density(self.altitude)

    @property
    def mach_number(self) -> float:
        return self.flight_conditions()[2]

    def flight_conditions(self) -> Tuple[float, float, float]:
        """Return (pressure, density, mach) from one atmosphere query."""
        props = self.planet.properties(self.altitude)
        pressure = float(props.p)
        density = float(props.rho)
        sound_speed = self.planet.speed_of_sound(pressure, density)
        if sound_speed <= 0.0:
            return pressure, density, 0.0
        mach = min(self.v_surf / sound_speed, MACH_CEILING)
        return pressure, density, mach

    # ------------------------------------------------------------------
    # Engine cache
    # ------------------------------------------------------------------
    def update_engines(self) -> List[Part]:
        """
        Rescan the part graph for active engines and refresh the cached
        thrust bounds at the current flight conditions.

        Sepratrons never count. Returns the parts found active.
        """
        nodes = self.context.nodes
        active_parts = []
        engines = []
        for node in nodes.values():
            if node.is_active_engine(nodes) and not node.is_sepratron:
                engines.extend(EngineWrapper(engine, node, nodes) for engine in node.part.engines)
                active_parts.append(node.part)
        self.active_engines = tuple(engines)

        pressure, density, mach = self.flight_conditions()
        self.min_thrust = sum(e.thrust(0.0, pressure, mach, density) for e in engines)
        self.max_thrust = sum(e.thrust(1.0, pressure, mach, density) for e in engines)
        return active_parts

    # ------------------------------------------------------------------
    # Dynamics
    # ------------------------------------------------------------------
    def increment(self, delta: DState, dt: float) -> "State":
        """
        Return a copy advanced by ``dt * delta``.

        A result on or below the surface is projected radially onto it and
        given the surface's rotation velocity.
        """
        res = dataclasses.replace(
            self,
            forward=self.forward.copy(),
            x=self.x + dt * delta.vx,
            y=self.y + dt * delta.vy,
            vx=self.vx + dt * delta.ax,
            vy=self.vy + dt * delta.ay,
            m=self.m + dt * delta.dm,
        )
        planet = res.planet
        if res.r2 <= planet.radius * planet.radius:
            r = res.r
            if r == 0.0:
                res.x, res.y = 0.0, planet.radius
            else:
                res.x *= planet.radius / r
                res.y *= planet.radius / r
            res.vx, res.vy = planet.rotation_velocity(res.x, res.y)
        return res

    def derivative(self) -> DState:
        """
        Time derivative of (x, y, vx, vy, m) at this state.

        A massless state does not raise: its accelerations come out
        non-finite.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._derivative()

    def _derivative(self) -> DState:
        res = DState(vx=self.vx, vy=self.vy)
        planet = self.planet
        # numpy scalar so m == 0 gives inf/nan instead of ZeroDivisionError
        m = np.float64(self.m)

        r = self.r
        altitude = r - planet.radius
        u_x = self.x / r
        u_y = self.y / r

        theta = np.arctan2(u_x, u_y)
        thrust_direction = theta + self.context.ascent_path.flight_path_angle(altitude)

        # gravity
        grav_acc = -planet.grav_parameter / (r * r)

        # drag
        v_surf_x = self.v_surf_x
        v_surf_y = self.v_surf_y
        v_surf = float(np.hypot(v_surf_x, v_surf_y))
        drag_acc = 0.0
        aero = self.context.aerodynamics
        if aero is not None:
            drag_force = aero.drag_force(self.context.parts, planet, np.array([0.0, v_surf]), altitude)
            drag_acc = np.linalg.norm(drag_force) / m

        # throttle
        desired_thrust = self.max_acceleration * self.m
        if self.max_thrust != self.min_thrust:
            throttle = (desired_thrust - self.min_thrust) / (self.max_thrust - self.min_thrust)
        else:
            throttle = 1.0
        self.throttle = float(np.clip(throttle, 0.0, 1.0))

        pressure, density, mach = self.flight_conditions()

        # Effective thrust
        F = sum(e.thrust(self.throttle, pressure, mach, density) for e in self.active_engines)

        # Propellant mass variation
        res.dm = -float(sum(e.fuel_flow(density, mach, self.throttle) for e in self.active_engines))

        res.ax_nograv = F / m * np.sin(thrust_direction)
        res.ay_nograv = F / m * np.cos(thrust_direction)
        if v_surf != 0.0:
            res.ax_nograv -= drag_acc * v_surf_x / v_surf
            res.ay_nograv -= drag_acc * v_surf_y / v_surf
        res.ax = res.ax_nograv + grav_acc * u_x
        res.ay = res.ay_nograv + grav_acc * u_y

        return res
