"""
Empirical constants of the room air model.

All entry points of the package accept an optional `settings` argument. When
omitted, `DEFAULT_SETTINGS` is used.
"""
import dataclasses
from dataclasses import dataclass, field
import numpy as np
from roomair import Quantity

Q_ = Quantity


@dataclass(frozen=True)
class Settings:
    """Groups the constants used in the calculations.

    Attributes
    ----------
    V_T:
        Terminal velocity that defines the throw of a jet (EN 16798, DIN 1946).
    Tu:
        Turbulence intensity used in the draught rate formula. The default
        value is typical for mixing ventilation.
    rho:
        Mass density of air used in the pressure drop formula.
    g:
        Gravitational acceleration.
    k_core:
        Ratio of the core length of a jet to its reference diameter.
    k_coanda:
        Ratio of the throw of a jet attached to the ceiling to the throw of the
        same jet in free space.
    k_spread:
        Ratio of the vertical standard deviation of the velocity profile below
        a ceiling jet to the horizontal distance from the terminal.
    Z_occ:
        Height of the upper boundary of the occupied zone.
    Z_ref:
        Reference heights at which the occupied zone is scanned.
    Z_nozzle:
        Reference height at which the centerline of a nozzle jet is evaluated.
    n_grid:
        Number of scan positions along the length and along the width of the
        room when the occupied zone is scanned.
    DR_max:
        Draught rate limit (category II).
    v_limits:
        Upper velocity limits of comfort categories I, II and III.
    d_wall:
        A terminal closer to a wall than this distance is considered to be
        near the wall (directivity of the sound source).
    dx_grid:
        Default grid spacing of the heatmaps.
    Z_listener:
        Default height of the heatmap plane.
    """
    V_T: Quantity = field(default_factory=lambda: Q_(0.20, 'm / s'))
    Tu: Quantity = field(default_factory=lambda: Q_(40, 'pct'))
    rho: Quantity = field(default_factory=lambda: Q_(1.2, 'kg / m**3'))
    g: Quantity = field(default_factory=lambda: Q_(9.81, 'm / s**2'))
    k_core: float = 5.0
    k_coanda: float = float(np.sqrt(2.0))
    k_spread: float = 0.12
    Z_occ: Quantity = field(default_factory=lambda: Q_(1.8, 'm'))
    Z_ref: Quantity = field(default_factory=lambda: Q_([0.1, 1.0, 1.8], 'm'))
    Z_nozzle: Quantity = field(default_factory=lambda: Q_(1.5, 'm'))
    n_grid: int = 10
    DR_max: Quantity = field(default_factory=lambda: Q_(15, 'pct'))
    v_limits: Quantity = field(default_factory=lambda: Q_([0.15, 0.20, 0.25], 'm / s'))
    d_wall: Quantity = field(default_factory=lambda: Q_(0.5, 'm'))
    dx_grid: Quantity = field(default_factory=lambda: Q_(0.5, 'm'))
    Z_listener: Quantity = field(default_factory=lambda: Q_(1.2, 'm'))

    def replace(self, **changes) -> 'Settings':
        """Returns a copy of the settings with the given attributes changed."""
        return dataclasses.replace(self, **changes)


DEFAULT_SETTINGS = Settings()
