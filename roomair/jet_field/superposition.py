"""
SUPERPOSITION OF THE VELOCITY FIELDS OF MULTIPLE AIR TERMINALS

The air velocity vector at a point in the room is the vector sum of the
contributions of all terminals. The magnitude of a contribution follows the
centerline decay law of the terminal jet at the distance between the terminal
and the point. Below a ceiling supply jet the magnitude is attenuated with a
gaussian profile in the vertical direction. The direction follows from the
family of the terminal (see `roomair.air_jets.families`). Exhaust terminals
are sinks: their contribution points towards the terminal.
"""
from dataclasses import dataclass, field
import numpy as np
from roomair import Quantity
from roomair.definitions import TerminalCategory, Mounting, SlotDirection, JetFamily
from roomair.settings import Settings, DEFAULT_SETTINGS
from roomair.room import Room
from roomair.air_jets import TerminalConfig, JetResult, compute_jet, get_family_model
from roomair.air_jets.decay import evaluate_m
from roomair.logging import ModuleLogger

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.ERROR)

Q_ = Quantity

r_min = 0.01       # m, points closer to a terminal are skipped
h_spread = 0.1     # m, horizontal distance beyond which the vertical profile applies
v_min = 0.001      # m/s, smaller contributions are skipped


@dataclass
class OutletPlacement:
    """An air terminal placed in the room together with its calculated jet.

    Attributes
    ----------
    position:
        Coordinates [x, y, z] of the terminal (see `roomair.Room` for the
        coordinate system).
    jet:
        Result of the single-jet model of the terminal.
    rotation: optional
        Rotation of the terminal about the vertical axis.
    mounting: optional
        Mounting position of the terminal.
    slot_direction: optional
        Discharge mode of a slot diffuser. If None, the discharge mode stored
        in `jet` is taken.
    """
    position: Quantity
    jet: JetResult
    rotation: Quantity = field(default_factory=lambda: Q_(0.0, 'rad'))
    mounting: Mounting = Mounting.CEILING
    slot_direction: SlotDirection | None = None

    def __post_init__(self):
        self.position = self.position.to('m')
        if self.slot_direction is None:
            self.slot_direction = self.jet.slot_direction

    @classmethod
    def create(
        cls,
        terminal: TerminalConfig,
        position: Quantity,
        room: Room,
        settings: Settings | None = None
    ) -> 'OutletPlacement':
        """Calculates the jet of `terminal` in `room` and places the terminal
        at `position`.
        """
        jet = compute_jet(terminal, room, settings)
        return cls(
            position=position,
            jet=jet,
            rotation=terminal.rotation,
            mounting=terminal.mounting,
            slot_direction=terminal.slot_direction
        )

    @property
    def type_key(self) -> str:
        return self.jet.type_key

    @property
    def category(self) -> TerminalCategory:
        return self.jet.category

    @property
    def family(self) -> JetFamily:
        return self.jet.family

    @property
    def L_w(self) -> float:
        return self.jet.L_w

    @property
    def is_supply(self) -> bool:
        return self.jet.category is TerminalCategory.SUPPLY


def _contribution(
    placement: OutletPlacement,
    points: np.ndarray,
    k_spread: float
) -> np.ndarray:
    # velocity vectors in m/s (shape (N, 3)) induced by one terminal
    offset = points - placement.position.magnitude
    dy = offset[:, 1]
    h = np.hypot(offset[:, 0], offset[:, 2])
    r = np.linalg.norm(offset, axis=1)
    speed = evaluate_m(placement.jet.decay, r)
    speed = np.atleast_1d(speed)
    if placement.is_supply and placement.mounting is Mounting.CEILING:
        sigma = np.where(h > h_spread, k_spread * h, 1.0)
        profile = np.exp(-dy ** 2 / (2 * sigma ** 2))
        speed = np.where(h > h_spread, speed * profile, speed)
    active = (r >= r_min) & (speed >= v_min)
    model = get_family_model(placement.family)
    direction = model.direction_at(
        offset,
        rotation=placement.rotation.to('rad').magnitude,
        slot_direction=placement.slot_direction
    )
    v = direction * np.where(active, speed, 0.0)[:, None]
    if placement.category is TerminalCategory.EXHAUST:
        return -v
    return v


def velocity_field(
    points: Quantity,
    placements: list[OutletPlacement],
    settings: Settings | None = None
) -> Quantity:
    """Returns the superposed air velocity vectors at the given points.

    Parameters
    ----------
    points:
        Array of point coordinates with shape (N, 3), or a single point with
        shape (3,).
    placements:
        The terminals in the room.
    settings: optional
        Constants of the room air model.

    Returns
    -------
    Quantity array of velocity vectors with the same shape as `points`.
    """
    settings = settings or DEFAULT_SETTINGS
    p = np.asarray(points.to('m').magnitude, dtype=float)
    single = p.ndim == 1
    p = np.atleast_2d(p)
    v = np.zeros_like(p)
    for placement in placements:
        v += _contribution(placement, p, settings.k_spread)
    if single:
        v = v[0]
    return Q_(v, 'm / s')


def velocity_vector_at(
    point: Quantity,
    placements: list[OutletPlacement],
    settings: Settings | None = None
) -> tuple[Quantity, Quantity]:
    """Returns the superposed air velocity vector at `point` and its
    magnitude. Without terminals, the velocity is zero.
    """
    v = velocity_field(point, placements, settings)
    v_mag = Q_(float(np.linalg.norm(v.magnitude)), 'm / s')
    return v, v_mag


def velocity_magnitude_at(
    point: Quantity,
    placements: list[OutletPlacement],
    settings: Settings | None = None
) -> Quantity:
    """Returns the magnitude of the superposed air velocity at `point`."""
    _, v_mag = velocity_vector_at(point, placements, settings)
    return v_mag
