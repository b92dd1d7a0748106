"""
SOUND PROPAGATION IN A ROOM

Point-source model with a direct field and a diffuse (reverberant) field
correction.

References
----------
[1] VDI 3803 Part 1 (2020), DIN EN 12354-5 (2009), ISO 3744 (2010).
[2] Long, M. (2014). Architectural Acoustics. Academic Press. ch. 8.
"""
import numpy as np
from roomair import Quantity
from roomair.definitions import Mounting
from roomair.settings import Settings, DEFAULT_SETTINGS
from roomair.room import Room
from roomair.catalog import get_default_surfaces

Q_ = Quantity

A_min = Q_(0.5, 'm**2')


def absorption_area(room: Room) -> Quantity:
    """Returns the equivalent sound absorption area of the room, i.e. the sum
    of the surface areas multiplied by their absorption coefficients. If the
    room has no surfaces assigned, the default surfaces of the room type are
    taken. The result is not less than 0.5 m².
    """
    surfaces = room.surfaces or get_default_surfaces(room.room_type)
    A_floor = room.L * room.B
    A_walls_NS = 2 * room.L * room.H
    A_walls_EW = 2 * room.B * room.H
    A = (
        A_floor * surfaces.floor
        + A_floor * surfaces.ceiling
        + A_walls_NS * surfaces.walls_NS
        + A_walls_EW * surfaces.walls_EW
    ).to('m**2')
    return max(A, A_min)


def sound_pressure_level(L_w: float, r: Quantity, Q: float, A: Quantity) -> float:
    """Returns the sound pressure level in dB(A) at distance `r` from a source
    with sound power level `L_w` in a room with absorption area `A`.

    Parameters
    ----------
    L_w:
        Sound power level of the source in dB(A).
    r:
        Distance between source and receiver. Distances smaller than 0.1 m
        are taken as 0.1 m.
    Q:
        Directivity factor of the source (see `directivity_factor()`).
    A:
        Equivalent absorption area of the room (see `absorption_area()`).
    """
    r = np.maximum(r.to('m').magnitude, 0.1)
    A = A.to('m**2').magnitude
    L_p = L_w + 10 * np.log10(Q / (4 * np.pi * r ** 2) + 4 / A)
    if np.ndim(L_p) == 0:
        return float(L_p)
    return L_p


def directivity_factor(
    mounting: Mounting,
    position: Quantity,
    room: Room,
    settings: Settings | None = None
) -> float:
    """Returns the directivity factor of a sound source depending on its
    mounting position: 2 in the middle of the ceiling, 4 near one wall and 8 in
    a corner. A wall-mounted source has directivity factor 4.
    """
    settings = settings or DEFAULT_SETTINGS
    x, _, z = position.to('m').magnitude
    d_wall = settings.d_wall.to('m').magnitude
    near_wall_x = abs(x) > room.L.magnitude / 2 - d_wall
    near_wall_z = abs(z) > room.B.magnitude / 2 - d_wall
    match mounting:
        case Mounting.CEILING:
            if near_wall_x and near_wall_z:
                return 8.0
            if near_wall_x or near_wall_z:
                return 4.0
            return 2.0
        case Mounting.WALL:
            return 4.0
        case _:
            return 2.0


def sum_levels(levels) -> float:
    """Returns the energetic sum of sound levels in dB. Returns -inf if
    `levels` is empty.
    """
    levels = np.asarray(levels, dtype=float)
    if levels.size == 0:
        return float('-inf')
    return float(10 * np.log10(np.sum(10 ** (levels / 10))))
