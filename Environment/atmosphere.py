"""
Atmosphere models for the ascent body.

Every model exposes ``properties(altitude, t=None)`` and a ``depth`` above
which the body is treated as vacuum. ``ExponentialAtmosphere`` suits generic
bodies; ``AtmosphereModel`` stacks US76 under NRLMSIS 2.1 for Earth.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np
import ussa1976
import pymsis

# Dry air: R / M with R = 8.314462618 J/(mol*K) and M = 0.0289644 kg/mol
DRY_AIR_GAS_CONSTANT = 8.314462618 / 0.0289644

# Quiet-sun inputs used when no space weather is configured
MSIS_EPOCH = np.datetime64("2000-01-01T00:00")
DEFAULT_F107 = 150.0
DEFAULT_AP = 4.0


@dataclass(frozen=True)
class AtmosphereProperties:
    """Density [kg/m^3], static pressure [Pa] and temperature [K]."""
    rho: float
    p: float
    T: float


VACUUM = AtmosphereProperties(rho=0.0, p=0.0, T=0.0)


class AtmosphereModel:
    """
    Earth atmosphere: US Standard Atmosphere 1976 below ``h_switch``,
    NRLMSIS 2.1 from there up to ``depth``.

    ``f107``, ``f107a`` and ``ap`` feed NRLMSIS; left as None they fall back
    to quiet-sun values so no space-weather download is ever needed.
    ``lat_deg``/``lon_deg`` fix the sub-vehicle point the thermosphere is
    sampled at.
    """

    def __init__(self, h_switch: float = 86000,
                 f107: float | None = None,
                 f107a: float | None = None,
                 ap: float | None = None,
                 lat_deg: float = 0.0,
                 lon_deg: float = 0.0,
                 depth: float = 1_000_000.0):
        self.h_switch = h_switch
        self.f107 = f107
        self.f107a = f107a
        self.ap = ap
        self.lat_deg = lat_deg
        self.lon_deg = lon_deg
        self.depth = depth

    def properties(self, altitude: float, t: float | None = None) -> AtmosphereProperties:
        """``t`` is simulation time [s]; only the NRLMSIS layer uses it."""
        # Integrator noise can put the vehicle a hair below zero
        altitude = max(0.0, altitude)
        if altitude >= self.depth:
            return VACUUM
        if altitude < self.h_switch:
            return self._us76_properties(altitude)
        return self._nrlmsis_properties(altitude, t)

    def _us76_properties(self, altitude: float) -> AtmosphereProperties:
        # ussa1976 tabulates 0 - 1000 km
        z = np.array([float(np.clip(altitude, 0.0, 1_000_000.0))])
        ds = ussa1976.compute(z=z, variables=["t", "p", "rho"])
        return AtmosphereProperties(
            rho=float(ds["rho"][0]),
            p=float(ds["p"][0]),
            T=float(ds["t"][0]),
        )

    def _msis_inputs(self, t: float | None):
        date = MSIS_EPOCH if t is None else MSIS_EPOCH + np.timedelta64(int(t), "s")
        f107 = DEFAULT_F107 if self.f107 is None else float(self.f107)
        f107a = DEFAULT_F107 if self.f107a is None else float(self.f107a)
        ap = DEFAULT_AP if self.ap is None else float(self.ap)
        return date, f107, f107a, np.full((1, 7), ap)

    def _nrlmsis_properties(self, altitude: float, t: float | None = None) -> AtmosphereProperties:
        date, f107, f107a, aps = self._msis_inputs(t)
        alt_km = float(np.clip(altitude / 1000.0, 0.0, 1000.0))

        result = np.squeeze(pymsis.calculate(
            date,
            np.array([float(self.lon_deg)]),
            np.array([float(self.lat_deg)]),
            np.array([alt_km]),
            np.array([f107]),
            np.array([f107a]),
            aps,
        ))
        rho = float(result[pymsis.Variable.MASS_DENSITY])
        T = float(result[pymsis.Variable.TEMPERATURE])
        # NRLMSIS reports no pressure; close it with the dry-air ideal gas law
        return AtmosphereProperties(rho=rho, p=rho * DRY_AIR_GAS_CONSTANT * T, T=T)


class ExponentialAtmosphere:
    """Isothermal exponential atmosphere for bodies without tabulated data.

    Pressure falls off as ``p_sl * exp(-h / scale_height)`` and density
    follows from the ideal gas law at a constant temperature. At and above
    ``depth`` the body is vacuum.
    """

    def __init__(self, p_sl: float = 101325.0,
                 scale_height: float = 5000.0,
                 temperature: float = 288.15,
                 depth: float = 70_000.0,
                 gas_constant: float = 287.05):
        if scale_height <= 0.0:
            raise ValueError("scale_height must be positive")
        if temperature <= 0.0 or gas_constant <= 0.0:
            raise ValueError("temperature and gas_constant must be positive")
        self.p_sl = p_sl
        self.scale_height = scale_height
        self.temperature = temperature
        self.depth = depth
        self.gas_constant = gas_constant

    def properties(self, altitude: float, t: float | None = None) -> AtmosphereProperties:
        altitude = max(0.0, altitude)
        if altitude >= self.depth or self.p_sl <= 0.0:
            return AtmosphereProperties(rho=0.0, p=0.0, T=self.temperature)
        p = self.p_sl * np.exp(-altitude / self.scale_height)
        rho = p / (self.gas_constant * self.temperature)
        return AtmosphereProperties(rho=float(rho), p=float(p), T=self.temperature)
