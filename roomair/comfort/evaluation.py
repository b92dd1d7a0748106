"""
THERMAL COMFORT EVALUATION OF THE OCCUPIED ZONE

Worst-case air velocity in the occupied zone, draught rate and classification
in comfort categories, combined with the sound level limit of the room type.

References
----------
[1] ISO 7730 (2005). Ergonomics of the thermal environment.
[2] EN 16798-1 (2019). Energy performance of buildings - Ventilation for
    buildings - Part 1.
[3] DIN 1946-2. Ventilation and air conditioning - Technical health
    requirements.
"""
from dataclasses import dataclass
from enum import StrEnum
import numpy as np
import pandas as pd
from roomair import Quantity
from roomair.settings import Settings, DEFAULT_SETTINGS
from roomair.room import Room
from roomair.catalog import get_room_type_limit
from roomair.air_jets import sum_sound_levels
from roomair.jet_field import OutletPlacement, velocity_field
from roomair.logging import ModuleLogger

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.ERROR)

Q_ = Quantity


class ComfortCategory(StrEnum):
    I = 'I'
    II = 'II'
    III = 'III'
    FAIL = 'FAIL'


class SamplingMethod(StrEnum):
    GRID = 'grid'
    TERMINAL = 'terminal'


# comfort categories of EN 16798-1
CATEGORIES = pd.DataFrame({
    'category': ['I', 'II', 'III'],
    'v_max': [0.15, 0.20, 0.25],    # m/s
    'DR_max': [10, 15, 25],         # %
    'T_min': [23.5, 23.0, 22.0],    # °C
    'T_max': [25.5, 26.0, 27.0]     # °C
})
CATEGORIES.set_index('category', inplace=True)


@dataclass
class ComfortResult:
    """Groups the results of the comfort evaluation.

    Attributes
    ----------
    v_occ_max:
        Worst-case air velocity in the occupied zone.
    velocity_category:
        Comfort category of `v_occ_max`.
    draught_rate:
        Draught rate at `v_occ_max` and room air temperature.
    draught_rate_ok:
        True if the draught rate is below the category II limit.
    L_total:
        Total sound power level of all terminals in dB(A).
    L_limit:
        Sound level limit of the room type in dB(A).
    sound_compliant:
        True if `L_total` does not exceed `L_limit`.
    sound_margin:
        `L_limit - L_total` in dB(A).
    overall_category:
        FAIL if either the velocity or the sound level fails, else the velocity
        category.
    sampling:
        GRID if `v_occ_max` was found by scanning the superposed velocity
        field of the supply terminals, TERMINAL if it is the largest
        occupied-zone estimate of the individual supply terminals.
    """
    v_occ_max: Quantity
    velocity_category: ComfortCategory
    draught_rate: Quantity
    draught_rate_ok: bool
    L_total: float
    L_limit: float
    sound_compliant: bool
    sound_margin: float
    overall_category: ComfortCategory
    sampling: SamplingMethod = SamplingMethod.TERMINAL

    def __str__(self) -> str:
        out = [
            f"velocity in occupied zone: {self.v_occ_max.to('m / s'):~P.3f} "
            f"(category {self.velocity_category})",
            f"draught rate: {self.draught_rate.to('pct'):~P.1f}",
            f"sound level: {self.L_total:.1f} dB(A) (limit {self.L_limit:.0f} dB(A))",
            f"overall category: {self.overall_category}"
        ]
        return '\n'.join(out)


def draught_rate(
    T_loc: Quantity,
    v: Quantity,
    Tu: Quantity | None = None
) -> Quantity:
    """Returns the draught rate, i.e. the predicted percentage of people
    dissatisfied due to draught (ISO 7730).

    Parameters
    ----------
    T_loc:
        Local air temperature.
    v:
        Local mean air velocity.
    Tu: optional
        Local turbulence intensity. Default is 40 %.

    Returns
    -------
    Draught rate limited to the range 0 - 100 %. Zero at air velocities of
    0.05 m/s or less.
    """
    Tu = Tu if Tu is not None else DEFAULT_SETTINGS.Tu
    T_loc = T_loc.to('degC').m
    v = v.to('m / s').m
    Tu = Tu.to('pct').m
    if v <= 0.05:
        return Q_(0.0, 'pct')
    DR = (34.0 - T_loc) * (v - 0.05) ** 0.62 * (0.37 * v * Tu + 3.14)
    DR = min(max(DR, 0.0), 100.0)
    return Q_(DR, 'pct')


def get_velocity_category(
    v: Quantity,
    settings: Settings | None = None
) -> ComfortCategory:
    """Returns the comfort category of air velocity `v`. A velocity equal to
    the limit of a category belongs to that category.
    """
    settings = settings or DEFAULT_SETTINGS
    v = v.to('m / s').m
    v_I, v_II, v_III = settings.v_limits.to('m / s').m
    if v <= v_I:
        return ComfortCategory.I
    if v <= v_II:
        return ComfortCategory.II
    if v <= v_III:
        return ComfortCategory.III
    return ComfortCategory.FAIL


def _occupied_zone_points(room: Room, settings: Settings) -> np.ndarray:
    # centres of a n x n grid of cells over the floor at each reference height
    n = settings.n_grid
    L, B = room.L.to('m').m, room.B.to('m').m
    x = -L / 2 + (np.arange(n) + 0.5) * L / n
    z = -B / 2 + (np.arange(n) + 0.5) * B / n
    y = settings.Z_ref.to('m').m
    xx, yy, zz = np.meshgrid(x, y, z, indexing='ij')
    return np.stack([xx.ravel(), yy.ravel(), zz.ravel()], axis=-1)


def worst_case_velocity(
    placements: list[OutletPlacement],
    room: Room,
    settings: Settings | None = None
) -> tuple[Quantity, SamplingMethod]:
    """Returns the maximum air velocity in the occupied zone caused by the
    supply terminals, and the sampling method used.

    With two or more supply terminals, the superposed velocity field of the
    supply terminals is scanned over the occupied zone. Otherwise, the largest
    occupied-zone estimate of the single-jet model is returned (0 without
    supply terminals). Exhaust terminals are not taken into account.
    """
    settings = settings or DEFAULT_SETTINGS
    supply = [p for p in placements if p.is_supply]
    if len(supply) >= 2 and room.L.m > 0 and room.B.m > 0:
        points = _occupied_zone_points(room, settings)
        v = velocity_field(Q_(points, 'm'), supply, settings)
        v_max = float(np.max(np.linalg.norm(v.to('m / s').m, axis=1)))
        logger.debug(
            f"Occupied zone scanned at {points.shape[0]} points "
            f"({len(supply)} supply terminals): v_max = {v_max:.3f} m/s."
        )
        return Q_(v_max, 'm / s'), SamplingMethod.GRID
    v_max = max((p.jet.v_occ_max.to('m / s').m for p in supply), default=0.0)
    logger.debug(
        f"Occupied-zone velocity taken from the single-jet model "
        f"({len(supply)} supply terminals): v_max = {v_max:.3f} m/s."
    )
    return Q_(v_max, 'm / s'), SamplingMethod.TERMINAL


def evaluate_comfort(
    placements: list[OutletPlacement],
    room: Room,
    settings: Settings | None = None
) -> ComfortResult:
    """Evaluates the thermal comfort in the occupied zone and the sound level
    of all terminals in the room.

    Parameters
    ----------
    placements:
        The supply and exhaust terminals in the room.
    room:
        The room. The room air temperature is used as the local air
        temperature in the draught rate formula. The room type determines the
        sound level limit.
    settings: optional
        Constants of the room air model.

    Returns
    -------
    ComfortResult
    """
    settings = settings or DEFAULT_SETTINGS
    v_occ_max, sampling = worst_case_velocity(placements, room, settings)
    DR = draught_rate(room.T_r, v_occ_max, settings.Tu)
    velocity_category = get_velocity_category(v_occ_max, settings)

    # exhaust terminals also generate noise
    L_total = sum_sound_levels([p.L_w for p in placements])
    L_limit = get_room_type_limit(room.room_type).L_max
    sound_compliant = L_total <= L_limit

    if not sound_compliant or velocity_category is ComfortCategory.FAIL:
        overall_category = ComfortCategory.FAIL
    else:
        overall_category = velocity_category

    result = ComfortResult(
        v_occ_max=v_occ_max,
        velocity_category=velocity_category,
        draught_rate=DR,
        draught_rate_ok=DR < settings.DR_max,
        L_total=L_total,
        L_limit=L_limit,
        sound_compliant=sound_compliant,
        sound_margin=L_limit - L_total,
        overall_category=overall_category,
        sampling=sampling
    )
    logger.debug(
        f"Comfort evaluation: category {overall_category} "
        f"(velocity {velocity_category}, sound {L_total:.1f}/{L_limit:.0f} dB(A))."
    )
    return result
