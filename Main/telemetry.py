"""
Minimal in-memory logger for trajectories.
"""

from typing import Any, Dict

import numpy as np


class Logger:
    """
    Minimal in-memory logger for trajectories.
    """

    def __init__(self):
        self.t_sim = []
        self.x = []
        self.y = []
        self.vx = []
        self.vy = []
        self.m = []
        self.altitude = []
        self.speed = []
        self.v_surf = []
        self.mach = []
        self.throttle = []
        self.pressure = []
        self.rho = []
        self.thrust_accel = []
        self.mdot = []
        self.active_engines = []
        self.cutoff_reason = ""

    def record(self, t_sim: float, state: Any, deriv: Any, extras: Dict[str, Any]):
        self.t_sim.append(float(t_sim))
        self.x.append(float(state.x))
        self.y.append(float(state.y))
        self.vx.append(float(state.vx))
        self.vy.append(float(state.vy))
        self.m.append(float(state.m))
        self.speed.append(float(np.hypot(state.vx, state.vy)))
        self.throttle.append(float(state.throttle))
        self.thrust_accel.append(float(np.hypot(deriv.ax_nograv, deriv.ay_nograv)))
        self.mdot.append(float(deriv.dm))
        self.altitude.append(float(extras.get("altitude", 0.0)))
        self.v_surf.append(float(extras.get("v_surf", 0.0)))
        self.mach.append(float(extras.get("mach", 0.0)))
        self.pressure.append(float(extras.get("pressure", 0.0)))
        self.rho.append(float(extras.get("rho", 0.0)))
        self.active_engines.append(int(extras.get("active_engines", 0)))

    def __len__(self) -> int:
        return len(self.t_sim)
