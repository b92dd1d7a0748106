"""
JET FAMILIES

Each geometry family of air terminals (see `JetFamily`) is represented by a
`FamilyModel` that implements:
- the free-jet throw formula,
- the centerline velocity decay law,
- the direction of the air flow at a point around the terminal,
- an estimate of the maximum air velocity in the occupied zone.

The flow directions and the occupied-zone estimates are fixed geometric rules,
not the result of a flow simulation.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
import numpy as np
from roomair.definitions import JetFamily, SlotDirection
from roomair.logging import ModuleLogger
from .decay import DecayLaw, LinearDecay, SqrtSlotDecay, evaluate_m

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.ERROR)

DOWN = np.array([0.0, -1.0, 0.0])


@dataclass
class JetParameters:
    """Jet characteristics in SI units (m, m/s, rad) needed by the family
    models.

    Attributes
    ----------
    K1:
        Dynamic characteristic (throw constant) of the terminal.
    U_o:
        Exit velocity.
    d_o:
        Reference diameter.
    x_core:
        Core length.
    half_angle:
        Half spreading angle of the jet.
    b_o:
        Slot width (slot diffusers only).
    K_swirl:
        Velocity reduction coefficient of swirl diffusers.
    x_detach:
        Distance where a cold ceiling jet separates from the ceiling.
    slot_direction:
        Discharge mode of a slot diffuser.
    """
    K1: float
    U_o: float
    d_o: float
    x_core: float
    half_angle: float = 0.0
    b_o: float | None = None
    K_swirl: float | None = None
    x_detach: float | None = None
    slot_direction: SlotDirection | None = None


def linear_throw(jet: JetParameters, V_T: float) -> float:
    """Distance where the velocity `K1 * U_o * d_o / x` drops to `V_T`."""
    return jet.K1 * jet.U_o * jet.d_o / V_T


def linear_decay(jet: JetParameters) -> LinearDecay:
    return LinearDecay(K1=jet.K1, U_o=jet.U_o, d_o=jet.d_o, x_core=jet.x_core)


def normalize(x, y, z) -> np.ndarray:
    """Stacks the components into an array of unit vectors with shape (N, 3).
    Vectors shorter than 1 mm are replaced by a vector pointing straight down.
    """
    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=float),
        np.asarray(y, dtype=float),
        np.asarray(z, dtype=float)
    )
    v = np.stack([x, y, z], axis=-1)
    n = np.linalg.norm(v, axis=-1, keepdims=True)
    is_short = n < 1.e-3
    v = v / np.where(is_short, 1.0, n)
    return np.where(is_short, DOWN, v)


def horizontal_unit(offset: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Returns the components of the horizontal unit vector from the terminal
    to the points at `offset`, and the horizontal distance. The unit vector is
    zero for points within 1 cm of the vertical axis of the terminal.
    """
    dx, dz = offset[:, 0], offset[:, 2]
    h = np.hypot(dx, dz)
    h_safe = np.where(h > 0.01, h, 1.0)
    hx = np.where(h > 0.01, dx / h_safe, 0.0)
    hz = np.where(h > 0.01, dz / h_safe, 0.0)
    return hx, hz, h


class FamilyModel(ABC):
    family: JetFamily

    def throw_free(self, jet: JetParameters, V_T: float) -> float:
        """Returns the throw of the free jet to the terminal velocity `V_T`."""
        return linear_throw(jet, V_T)

    def decay_law(self, jet: JetParameters) -> DecayLaw:
        """Returns the centerline velocity decay law of the jet."""
        return linear_decay(jet)

    def direction_at(
        self,
        offset: np.ndarray,
        rotation: float = 0.0,
        slot_direction: SlotDirection | None = None
    ) -> np.ndarray:
        """Returns the unit vectors (shape (N, 3)) of the air flow leaving the
        terminal at the points `offset` (shape (N, 3)) relative to the
        terminal. Points right above or below the terminal get a vertical
        direction.
        """
        offset = np.atleast_2d(np.asarray(offset, dtype=float))
        d = self._direction(offset, rotation, slot_direction)
        dy = offset[:, 1]
        h = np.hypot(offset[:, 0], offset[:, 2])
        on_axis = (h < 0.01) & (np.abs(dy) > 0.01)
        vertical = np.zeros_like(d)
        vertical[:, 1] = np.where(dy > 0, 1.0, -1.0)
        return np.where(on_axis[:, None], vertical, d)

    @abstractmethod
    def _direction(
        self,
        offset: np.ndarray,
        rotation: float,
        slot_direction: SlotDirection | None
    ) -> np.ndarray:
        ...

    @abstractmethod
    def occupied_zone_velocity(
        self,
        jet: JetParameters,
        H: float,
        V_T: float,
        Z_occ: float,
        Z_nozzle: float
    ) -> float:
        """Returns an estimate of the maximum air velocity in the occupied
        zone caused by a single supply terminal.

        Parameters
        ----------
        jet:
            Jet characteristics.
        H:
            Height of the room.
        V_T:
            Terminal velocity.
        Z_occ:
            Height of the upper boundary of the occupied zone.
        Z_nozzle:
            Reference height for nozzle jets.
        """
        ...


class RadialFamily(FamilyModel):
    """Swirl diffusers and high-induction ceiling diffusers. The jet spreads
    radially along the ceiling and gradually descends.
    """
    family = JetFamily.RADIAL

    def _direction(self, offset, rotation, slot_direction):
        hx, hz, _ = horizontal_unit(offset)
        return normalize(hx, -0.15, hz)

    def occupied_zone_velocity(self, jet, H, V_T, Z_occ, Z_nozzle):
        dZ = H - Z_occ
        if dZ <= 0:
            logger.debug(
                f"Ceiling height {H:.2f} m does not exceed the occupied zone: "
                f"occupied-zone velocity = exit velocity."
            )
            return jet.U_o
        K_swirl = jet.K_swirl or 0.9
        # radius where the jet has either separated from the ceiling or
        # decayed to the terminal velocity
        r = max(1.0, jet.x_detach or linear_throw(jet, V_T))
        U_r = jet.K1 * jet.U_o * jet.d_o / r * K_swirl
        # gaussian velocity profile below the ceiling jet
        sigma = 0.1 * r
        v = U_r * np.exp(-dZ ** 2 / (2 * sigma ** 2))
        return max(0.0, float(v))


class PlanarFamily(FamilyModel):
    """Slot diffusers. The jet is approximately two-dimensional."""
    family = JetFamily.PLANAR

    @staticmethod
    def _slot_width(jet: JetParameters) -> float:
        if jet.b_o is None:
            raise ValueError('slot width of planar jet is not specified')
        return jet.b_o

    def throw_free(self, jet, V_T):
        b_o = self._slot_width(jet)
        return b_o * (jet.K1 * jet.U_o / V_T) ** 2

    def decay_law(self, jet):
        b_o = self._slot_width(jet)
        return SqrtSlotDecay(K1=jet.K1, U_o=jet.U_o, b_o=b_o, x_core=jet.x_core)

    def _direction(self, offset, rotation, slot_direction):
        n = offset.shape[0]
        slot_direction = slot_direction or SlotDirection.BIDIRECTIONAL
        if slot_direction is SlotDirection.VERTICAL:
            return np.tile(DOWN, (n, 1))
        if slot_direction is SlotDirection.UNIDIRECTIONAL:
            d = normalize(np.sin(rotation), -0.1, np.cos(rotation))
            return np.tile(d, (n, 1))
        # the slot lies along the x-axis when not rotated; air leaves at both
        # sides of the slot
        px, pz = -np.sin(rotation), np.cos(rotation)
        side = offset[:, 0] * px + offset[:, 2] * pz
        sign = np.where(side >= 0, 1.0, -1.0)
        return normalize(sign * px, -0.1, sign * pz)

    def occupied_zone_velocity(self, jet, H, V_T, Z_occ, Z_nozzle):
        dZ = H - Z_occ
        if dZ <= 0:
            return jet.U_o
        b_o = self._slot_width(jet)
        U_x = jet.K1 * jet.U_o * np.sqrt(b_o / max(dZ, 0.1))
        if jet.slot_direction is SlotDirection.VERTICAL:
            # the jet is blown straight down into the occupied zone
            return float(U_x)
        return float(0.5 * U_x)


class DirectedFamily(FamilyModel):
    """Nozzles. The compact jet is directed downward at an angle."""
    family = JetFamily.DIRECTED

    def _direction(self, offset, rotation, slot_direction):
        hx, hz, _ = horizontal_unit(offset)
        return normalize(0.5 * hx, -0.85, 0.5 * hz)

    def occupied_zone_velocity(self, jet, H, V_T, Z_occ, Z_nozzle):
        alpha = jet.half_angle or 0.1
        if H > 3.0:
            x = (H - Z_nozzle) / np.sin(alpha)
        else:
            x = 3.0
        return evaluate_m(linear_decay(jet), x)


class HemisphericalFamily(FamilyModel):
    """Plate valves. The air spreads in a wide cone below the terminal."""
    family = JetFamily.HEMISPHERICAL

    def _direction(self, offset, rotation, slot_direction):
        hx, hz, _ = horizontal_unit(offset)
        return normalize(0.4 * hx, -0.9, 0.4 * hz)

    def occupied_zone_velocity(self, jet, H, V_T, Z_occ, Z_nozzle):
        dZ = H - Z_occ
        if dZ <= 0:
            return jet.U_o
        return evaluate_m(linear_decay(jet), dZ)


class GrilleFamily(FamilyModel):
    """Ceiling grilles, used as exhaust terminals."""
    family = JetFamily.GRILLE

    def _direction(self, offset, rotation, slot_direction):
        hx, hz, _ = horizontal_unit(offset)
        return normalize(0.2 * hx, -0.95, 0.2 * hz)

    def occupied_zone_velocity(self, jet, H, V_T, Z_occ, Z_nozzle):
        return 0.0


class GenericFamily(FamilyModel):
    """Terminals without a specific flow pattern: the air flows radially
    away from the terminal in all directions.
    """
    family = JetFamily.GENERIC

    def _direction(self, offset, rotation, slot_direction):
        r = np.linalg.norm(offset, axis=1)
        r_safe = np.where(r > 0.0, r, 1.0)
        return normalize(offset[:, 0] / r_safe, offset[:, 1] / r_safe, offset[:, 2] / r_safe)

    def occupied_zone_velocity(self, jet, H, V_T, Z_occ, Z_nozzle):
        return 0.0


FAMILY_MODELS: dict[JetFamily, FamilyModel] = {
    model.family: model for model in (
        RadialFamily(),
        PlanarFamily(),
        DirectedFamily(),
        HemisphericalFamily(),
        GrilleFamily(),
        GenericFamily()
    )
}


def get_family_model(family: JetFamily) -> FamilyModel:
    return FAMILY_MODELS[family]
