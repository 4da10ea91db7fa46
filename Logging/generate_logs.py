"""
Functions for saving simulation logs.
"""
from __future__ import annotations

from Main.telemetry import Logger

LOG_HEADER = (
    "# t_sim_s,alt_m,speed_mps,v_surf_mps,mass_kg,throttle,thrust_accel_mps2,"
    "mdot_kgps,pressure_Pa,rho_kgpm3,mach,active_engines,pos_x_m,pos_y_m,vel_x_mps,vel_y_mps\n"
)


def save_log_to_txt(log: Logger, filename: str):
    """Write simulation states to a text (CSV-style) file for analysis."""
    with open(filename, "w") as f:
        f.write(LOG_HEADER)
        for i in range(len(log.t_sim)):
            f.write(
                f"{log.t_sim[i]:.3f},{log.altitude[i]:.3f},{log.speed[i]:.3f},{log.v_surf[i]:.3f},"
                f"{log.m[i]:.3f},{log.throttle[i]:.4f},{log.thrust_accel[i]:.4f},{log.mdot[i]:.6f},"
                f"{log.pressure[i]:.3f},{log.rho[i]:.6e},{log.mach[i]:.3f},{log.active_engines[i]},"
                f"{log.x[i]:.3f},{log.y[i]:.3f},{log.vx[i]:.3f},{log.vy[i]:.3f}\n"
            )
    print(f"Saved simulation log to {filename}")
