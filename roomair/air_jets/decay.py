"""
CENTERLINE VELOCITY DECAY OF TERMINAL JETS

A decay law maps the distance from the terminal to the magnitude of the jet
centerline velocity. Within the core length of the jet the velocity equals
the exit velocity. Beyond the core length the velocity decays in inverse
proportion to the distance (compact and radial jets) or to the square root of
the distance (planar jets from slots).

References
----------
[1] Awbi, H. B. (2003). Ventilation of Buildings. Taylor & Francis. sec. 6.2
"""
from dataclasses import dataclass
import numpy as np
from roomair import Quantity

Q_ = Quantity


@dataclass(frozen=True)
class LinearDecay:
    """Velocity decay `U_x = K1 * U_o * d_o / x` of compact and radial jets.

    Attributes
    ----------
    K1:
        Dynamic characteristic (throw constant) of the terminal.
    U_o:
        Exit velocity in m/s.
    d_o:
        Reference diameter of the jet in m.
    x_core:
        Core length of the jet in m.
    """
    K1: float
    U_o: float
    d_o: float
    x_core: float


@dataclass(frozen=True)
class SqrtSlotDecay:
    """Velocity decay `U_x = K1 * U_o * sqrt(b_o / x)` of planar jets.

    Attributes
    ----------
    K1:
        Dynamic characteristic (throw constant) of the terminal.
    U_o:
        Exit velocity in m/s.
    b_o:
        Slot width in m.
    x_core:
        Core length of the jet in m.
    """
    K1: float
    U_o: float
    b_o: float
    x_core: float


DecayLaw = LinearDecay | SqrtSlotDecay


def evaluate_m(law: DecayLaw, x: float | np.ndarray) -> float | np.ndarray:
    """Returns the centerline velocity in m/s at distance `x` in m. Accepts
    scalars and numpy arrays.
    """
    x = np.asarray(x, dtype=float)
    # avoid division by zero inside the core where the result is not used
    x_safe = np.where(x > law.x_core, x, max(law.x_core, 1.e-12))
    match law:
        case LinearDecay():
            U_x = law.K1 * law.U_o * law.d_o / x_safe
        case SqrtSlotDecay():
            U_x = law.K1 * law.U_o * np.sqrt(law.b_o / x_safe)
        case _:
            raise TypeError(f"unknown decay law {law!r}")
    U_x = np.where(x <= law.x_core, law.U_o, U_x)
    U_x = np.maximum(U_x, 0.0)
    if U_x.ndim == 0:
        return float(U_x)
    return U_x


def evaluate(law: DecayLaw, x: Quantity) -> Quantity:
    """Returns the jet centerline velocity at a distance `x` from the
    terminal. `x` may be a single distance or an array of distances.
    """
    U_x = evaluate_m(law, x.to('m').magnitude)
    return Q_(U_x, 'm / s')
