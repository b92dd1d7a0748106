"""
SINGLE-JET MODEL OF AN AIR TERMINAL

Analytical calculation of the exit velocity, throw, Coanda attachment, thermal
detachment, pressure drop and sound power of a single supply or exhaust air
terminal.

References
----------
[1] VDI 3803 Part 1 (2020). Air-conditioning systems - Structural and
    technical principles.
[2] ASHRAE Handbook - Fundamentals (2021). Chapter 20: Space Air Diffusion.
[3] Awbi, H. B. (2003). Ventilation of Buildings. Taylor & Francis.
"""
from dataclasses import dataclass, field
import numpy as np
from roomair import Quantity
from roomair.definitions import TerminalCategory, Mounting, SlotDirection, JetFamily
from roomair.settings import Settings, DEFAULT_SETTINGS
from roomair.room import Room
from roomair.catalog import TerminalSize, get_type, effective_area
from roomair.logging import ModuleLogger
from .archimedes_number import archimedes_number, detachment_point
from .decay import DecayLaw
from .families import JetParameters, get_family_model, linear_throw, linear_decay

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.ERROR)

Q_ = Quantity

# reference distance of the catalog sound pressure level
r_ref = 3.0


@dataclass
class TerminalConfig:
    """Configuration of an air terminal.

    Attributes
    ----------
    type_key:
        Identifier of the terminal type in the catalog.
    size:
        Catalog data of the selected size (see `roomair.catalog.get_size()`).
    V_dot:
        Volume flow rate through the terminal.
    T_sup: optional
        Supply air temperature. If None (e.g. exhaust terminals), the supply air
        temperature is taken equal to the room air temperature.
    mounting: optional
        Mounting position of the terminal (ceiling or wall). If None, the
        default mounting position of the terminal type is used.
    rotation: optional
        Rotation of the terminal about the vertical axis (slot diffusers with
        a unidirectional or bidirectional discharge).
    slot_direction: optional
        Discharge mode of a slot diffuser.
    slot_length: optional
        Installed slot length of a slot diffuser. If None, the default slot
        length of the size is used.
    category: optional
        Supply (source) or exhaust (sink). If None, the category of the
        terminal type in the catalog is used.
    """
    type_key: str
    size: TerminalSize
    V_dot: Quantity
    T_sup: Quantity | None = None
    mounting: Mounting | None = None
    rotation: Quantity = field(default_factory=lambda: Q_(0.0, 'rad'))
    slot_direction: SlotDirection | None = None
    slot_length: Quantity | None = None
    category: TerminalCategory | None = None

    def __post_init__(self):
        terminal_type = get_type(self.type_key)
        if self.mounting is None:
            self.mounting = terminal_type.mounting if terminal_type else Mounting.CEILING
        if self.category is None:
            self.category = terminal_type.category if terminal_type else TerminalCategory.SUPPLY


@dataclass
class JetResult:
    """Groups the results of the single-jet model.

    Attributes
    ----------
    type_key:
        Identifier of the terminal type.
    family:
        Geometry family of the terminal jet.
    category:
        Supply or exhaust.
    U_o:
        Exit velocity.
    throw:
        Throw to the terminal velocity. For a jet attached to the ceiling
        this is the Coanda throw, else the free-jet throw. For an exhaust
        terminal this is the suction reach.
    throw_free:
        Free-jet throw.
    throw_coanda:
        Throw of the jet attached to the ceiling. None if there is no Coanda
        effect.
    suction_reach:
        Distance where the suction velocity of an exhaust terminal drops to
        the terminal velocity. None for supply terminals.
    x_core:
        Core length of the jet.
    half_angle:
        Half spreading angle of the jet.
    Ar:
        Archimedes number at the supply outlet.
    x_detach:
        Distance where a cold jet separates from the ceiling. None if the
        jet does not separate.
    L_w:
        A-weighted sound power level in dB(A).
    L_p_3m:
        A-weighted sound pressure level at 3 m in dB(A).
    dp:
        Pressure drop across the terminal.
    A_eff:
        Effective area of the terminal opening.
    v_occ_max:
        Estimated maximum air velocity in the occupied zone. Zero for
        exhaust terminals.
    decay:
        Centerline velocity decay law of the jet (see `air_jets.evaluate()`).
    slot_direction:
        Discharge mode of a slot diffuser, else None.
    """
    type_key: str
    family: JetFamily
    category: TerminalCategory
    U_o: Quantity
    throw: Quantity
    throw_free: Quantity
    throw_coanda: Quantity | None
    suction_reach: Quantity | None
    x_core: Quantity
    half_angle: Quantity
    Ar: float
    x_detach: Quantity | None
    L_w: float
    L_p_3m: float
    dp: Quantity
    A_eff: Quantity
    v_occ_max: Quantity
    decay: DecayLaw
    slot_direction: SlotDirection | None = None

    def __post_init__(self):
        self.u = {
            'U_o': ('m / s', 2),
            'throw': ('m', 2),
            'x_core': ('m', 2),
            'x_detach': ('m', 2),
            'dp': ('Pa', 1),
            'A_eff': ('m**2', 4),
            'v_occ_max': ('m / s', 3)
        }

    @property
    def is_exhaust(self) -> bool:
        return self.category is TerminalCategory.EXHAUST

    def __str__(self) -> str:
        throw_label = "suction reach" if self.is_exhaust else "throw"
        out = [
            f"terminal type: {self.type_key} ({self.category})",
            "exit velocity: "
            f"{self.U_o.to(self.u['U_o'][0]):~P.{self.u['U_o'][1]}f}",
            f"{throw_label}: "
            f"{self.throw.to(self.u['throw'][0]):~P.{self.u['throw'][1]}f}",
            "core length: "
            f"{self.x_core.to(self.u['x_core'][0]):~P.{self.u['x_core'][1]}f}",
            f"Archimedes number: {self.Ar:.4f}",
            f"sound power level: {self.L_w:.1f} dB(A)",
            f"sound pressure level at 3 m: {self.L_p_3m:.1f} dB(A)",
            "pressure drop: "
            f"{self.dp.to(self.u['dp'][0]):~P.{self.u['dp'][1]}f}",
            "effective area: "
            f"{self.A_eff.to(self.u['A_eff'][0]):~P.{self.u['A_eff'][1]}f}",
            "maximum velocity in occupied zone: "
            f"{self.v_occ_max.to(self.u['v_occ_max'][0]):~P.{self.u['v_occ_max'][1]}f}"
        ]
        if self.x_detach is not None:
            out.insert(
                5,
                "detachment point: "
                f"{self.x_detach.to(self.u['x_detach'][0]):~P.{self.u['x_detach'][1]}f}"
            )
        return '\n'.join(out)


def sound_power_level(size: TerminalSize, V_dot: Quantity) -> float:
    """Returns the sound power level in dB(A) at volume flow rate `V_dot`,
    which increases by 15 dB per doubling of the flow rate.
    """
    ratio = (V_dot / size.V_dot_ref).to('dimensionless').magnitude
    return size.L_w_ref + 50 * np.log10(ratio)


def sound_pressure_at_distance(L_w: float, r: Quantity, Q: float = 2.0) -> float:
    """Returns the sound pressure level in dB(A) of a point source with sound
    power level `L_w` at distance `r` in free field. `Q` is the directivity
    factor (2 for a source in the ceiling). Distances smaller than 0.1 m are
    taken as 0.1 m.
    """
    r = max(r.to('m').magnitude, 0.1)
    return L_w + 10 * np.log10(Q / (4 * np.pi * r ** 2))


def sum_sound_levels(levels: list[float]) -> float:
    """Returns the energetic sum in dB(A) of the sound levels. Returns 0 if
    `levels` is empty.
    """
    if len(levels) == 0:
        return 0.0
    return float(10 * np.log10(sum(10 ** (L / 10) for L in levels)))


def compute_jet(
    terminal: TerminalConfig,
    room: Room,
    settings: Settings | None = None
) -> JetResult:
    """Calculates the jet characteristics, pressure drop and sound power of a
    single air terminal.

    The input is not validated: the volume flow rate and the effective area
    must be positive. A zero effective area results in an infinite exit
    velocity.

    Parameters
    ----------
    terminal:
        Configuration of the air terminal.
    room:
        The room in which the terminal is installed.
    settings: optional
        Constants of the room air model. If None, `DEFAULT_SETTINGS` is used.

    Returns
    -------
    JetResult
    """
    settings = settings or DEFAULT_SETTINGS
    terminal_type = get_type(terminal.type_key)
    if terminal_type is not None:
        family = terminal_type.family
        coanda_capable = terminal_type.coanda
        zeta = terminal_type.zeta
    else:
        family = JetFamily.GENERIC
        coanda_capable = False
        zeta = 2.0
    category = terminal.category
    model = get_family_model(family)
    size = terminal.size

    A_eff = effective_area(terminal.type_key, size, terminal.slot_length)
    V_dot = terminal.V_dot.to('m**3 / s')
    U_o = Q_(np.divide(V_dot.magnitude, A_eff.magnitude), 'm / s')
    if size.d_o is not None:
        d_o = size.d_o.to('m')
    else:
        d_o = np.sqrt(4 * A_eff / np.pi).to('m')
    x_core = settings.k_core * d_o
    half_angle = size.half_angle.to('rad')

    jet = JetParameters(
        K1=size.K1,
        U_o=U_o.magnitude,
        d_o=d_o.magnitude,
        x_core=x_core.magnitude,
        half_angle=half_angle.magnitude,
        b_o=size.slot_width.to('m').magnitude if size.slot_width is not None else None,
        K_swirl=size.K_swirl,
        slot_direction=terminal.slot_direction
    )
    V_T = settings.V_T.to('m / s').magnitude

    L_w = sound_power_level(size, V_dot)
    L_p_3m = L_w - 20 * np.log10(r_ref) - 8
    dp = (0.5 * settings.rho * U_o ** 2 * zeta).to('Pa')

    if category is TerminalCategory.EXHAUST:
        # exhaust terminals create no free jet in the room; the suction
        # velocity decays like the velocity of a compact jet
        reach = Q_(linear_throw(jet, V_T), 'm')
        result = JetResult(
            type_key=terminal.type_key,
            family=family,
            category=category,
            U_o=U_o,
            throw=reach,
            throw_free=reach,
            throw_coanda=None,
            suction_reach=reach,
            x_core=x_core,
            half_angle=half_angle,
            Ar=0.0,
            x_detach=None,
            L_w=L_w,
            L_p_3m=L_p_3m,
            dp=dp,
            A_eff=A_eff,
            v_occ_max=Q_(0.0, 'm / s'),
            decay=linear_decay(jet)
        )
        logger.debug(
            f"Exhaust terminal '{terminal.type_key}': "
            f"U_o = {U_o:~P.2f}, suction reach = {reach:~P.2f}, "
            f"L_w = {L_w:.1f} dB(A)."
        )
        return result

    throw_free = Q_(model.throw_free(jet, V_T), 'm')
    # a vertical slot blows straight down and cannot attach to the ceiling
    has_coanda = (
        coanda_capable
        and terminal.mounting is Mounting.CEILING
        and not (
            family is JetFamily.PLANAR
            and terminal.slot_direction is SlotDirection.VERTICAL
        )
    )
    throw_coanda = settings.k_coanda * throw_free if has_coanda else None
    throw = throw_coanda if has_coanda else throw_free

    T_r = room.T_r.to('K')
    T_o = terminal.T_sup.to('K') if terminal.T_sup is not None else T_r
    Ar = archimedes_number(d_o, U_o, T_r, T_o, g=settings.g)

    x_detach = None
    if has_coanda and Ar > 0.01 and T_o < T_r:
        x_detach = detachment_point(throw_coanda, Ar)
        jet.x_detach = x_detach.to('m').magnitude

    v_occ_max = model.occupied_zone_velocity(
        jet,
        H=room.H.to('m').magnitude,
        V_T=V_T,
        Z_occ=settings.Z_occ.to('m').magnitude,
        Z_nozzle=settings.Z_nozzle.to('m').magnitude
    )
    result = JetResult(
        type_key=terminal.type_key,
        family=family,
        category=category,
        U_o=U_o,
        throw=throw,
        throw_free=throw_free,
        throw_coanda=throw_coanda,
        suction_reach=None,
        x_core=x_core,
        half_angle=half_angle,
        Ar=Ar,
        x_detach=x_detach,
        L_w=L_w,
        L_p_3m=L_p_3m,
        dp=dp,
        A_eff=A_eff,
        v_occ_max=Q_(v_occ_max, 'm / s'),
        decay=model.decay_law(jet),
        slot_direction=terminal.slot_direction
    )
    logger.debug(
        f"Supply terminal '{terminal.type_key}': "
        f"U_o = {U_o:~P.2f}, throw = {throw:~P.2f} "
        f"(Coanda: {has_coanda}), Ar = {Ar:.4f}, "
        f"v_occ_max = {result.v_occ_max:~P.3f}."
    )
    return result
