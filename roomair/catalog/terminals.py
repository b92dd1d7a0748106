"""
CATALOG OF AIR TERMINAL DEVICES

Engineering data of supply and exhaust air terminals per type and nominal size.
For each type, the sizes are held in a lookup table (`pandas.DataFrame`) with
one row per size. A size is retrieved by its position in the table
(`size index`).

References
----------
[1] VDI 3803 Part 1 (2020). Air-conditioning systems - Structural and
    technical principles.
[2] ASHRAE Handbook - Fundamentals (2021). Chapter 20: Space Air Diffusion.
[3] SCHAKO KG. Product catalogs DQJ-R-SR and DQJSLC.
"""
from dataclasses import dataclass
import math
import pandas as pd
from roomair import Quantity
from roomair.definitions import JetFamily, TerminalCategory, Mounting

Q_ = Quantity


@dataclass(frozen=True)
class TerminalSize:
    """Engineering data of one nominal size of an air terminal type.

    Attributes
    ----------
    name:
        Nominal size designation.
    K1:
        Dynamic characteristic (throw constant) of the terminal jet.
    half_angle:
        Half spreading angle of the jet.
    L_w_ref:
        A-weighted sound power level in dB(A) at the reference flow rate.
    V_dot_ref:
        Reference volume flow rate of the sound power level.
    V_dot_min, V_dot_max:
        Recommended range of the volume flow rate.
    V_dot_default:
        Default volume flow rate.
    induction_ratio:
        Ratio of induced room air flow to supply air flow.
    d_o:
        Reference diameter of the jet. None if the reference diameter must be
        derived from the effective area.
    A_eff:
        Effective area of the terminal opening. None for slot diffusers, of
        which the effective area depends on the installed slot length.
    K_swirl:
        Velocity reduction coefficient of swirl diffusers.
    slot_count:
        Number of slots (slot diffusers only).
    slot_width:
        Width of a single slot (slot diffusers only).
    slot_length_default:
        Default installed slot length (slot diffusers only).
    """
    name: str
    K1: float
    half_angle: Quantity
    L_w_ref: float
    V_dot_ref: Quantity
    V_dot_min: Quantity
    V_dot_max: Quantity
    V_dot_default: Quantity
    induction_ratio: float = 0.0
    d_o: Quantity | None = None
    A_eff: Quantity | None = None
    K_swirl: float | None = None
    slot_count: int | None = None
    slot_width: Quantity | None = None
    slot_length_default: Quantity | None = None


def _value(row: pd.Series, column: str, unit: str | None = None):
    # missing columns and empty cells both mean "not applicable"
    value = row.get(column)
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    if unit is None:
        return value
    return Q_(float(value), unit)


def _size_from_row(row: pd.Series) -> TerminalSize:
    slot_count = _value(row, 'slot_count')
    return TerminalSize(
        name=row['name'],
        K1=float(row['K1']),
        half_angle=Q_(float(row['half_angle']), 'deg'),
        L_w_ref=float(row['L_w_ref']),
        V_dot_ref=Q_(float(row['V_dot_ref']), 'm**3 / hr'),
        V_dot_min=Q_(float(row['V_dot_min']), 'm**3 / hr'),
        V_dot_max=Q_(float(row['V_dot_max']), 'm**3 / hr'),
        V_dot_default=Q_(float(row['V_dot_default']), 'm**3 / hr'),
        induction_ratio=float(row.get('induction_ratio', 0.0)),
        d_o=_value(row, 'd_o', 'm'),
        A_eff=_value(row, 'A_eff', 'm**2'),
        K_swirl=_value(row, 'K_swirl'),
        slot_count=int(slot_count) if slot_count is not None else None,
        slot_width=_value(row, 'slot_width', 'm'),
        slot_length_default=_value(row, 'slot_length_default', 'mm')
    )


@dataclass
class TerminalType:
    """An air terminal type with its lookup table of nominal sizes.

    Attributes
    ----------
    key:
        Identifier of the type.
    name_de, name_en:
        German and English designation.
    family:
        Geometry family of the terminal jet.
    category:
        Supply (air source) or exhaust (air sink).
    coanda:
        Indicates if the jet attaches to the ceiling when the terminal is
        ceiling-mounted.
    mounting:
        Default mounting position.
    zeta:
        Pressure loss coefficient of the terminal.
    sizes:
        Lookup table of the nominal sizes. Columns: `name`, `d_o` [m],
        `A_eff` [m²], `V_dot_min`, `V_dot_max`, `V_dot_default`, `V_dot_ref`
        [m³/h], `L_w_ref` [dB(A)], `K1`, `half_angle` [deg],
        `induction_ratio`, and optionally `K_swirl`, `slot_count`,
        `slot_width` [m], `slot_length_default` [mm].
    manufacturer:
        Manufacturer of the product, if the data are product specific.
    """
    key: str
    name_de: str
    name_en: str
    family: JetFamily
    category: TerminalCategory
    coanda: bool
    mounting: Mounting
    zeta: float
    sizes: pd.DataFrame
    manufacturer: str | None = None

    @property
    def n_sizes(self) -> int:
        return len(self.sizes.index)

    def get_size(self, index: int) -> TerminalSize | None:
        """Returns the size at position `index` in the lookup table, or None
        if there is no such size.
        """
        if index < 0 or index >= self.n_sizes:
            return None
        row = self.sizes.iloc[index]
        return _size_from_row(row)


def _swirl_sizes(K1: float, half_angle: float, induction_ratio: float) -> pd.DataFrame:
    return pd.DataFrame({
        'name': ['DN 200', 'DN 315', 'DN 400', 'DN 625'],
        'd_o': [0.200, 0.315, 0.400, 0.625],
        'A_eff': [0.016, 0.040, 0.064, 0.156],
        'V_dot_min': [100, 200, 300, 800],
        'V_dot_max': [200, 500, 800, 2000],
        'V_dot_default': [150, 350, 500, 1200],
        'L_w_ref': [30, 35, 39, 46],
        'V_dot_ref': [150, 350, 500, 1200],
        'K1': K1,
        'half_angle': half_angle,
        'induction_ratio': induction_ratio
    })


def _plate_valve_sizes(half_angle: float, induction_ratio: float) -> pd.DataFrame:
    return pd.DataFrame({
        'name': ['DN 125', 'DN 160', 'DN 200', 'DN 250'],
        'd_o': [0.125, 0.160, 0.200, 0.250],
        'A_eff': [0.008, 0.013, 0.020, 0.031],
        'V_dot_min': [30, 50, 80, 120],
        'V_dot_max': [80, 150, 250, 400],
        'V_dot_default': [50, 100, 150, 250],
        'L_w_ref': [20, 25, 30, 33],
        'V_dot_ref': [50, 100, 150, 250],
        'K1': 0.8,
        'half_angle': half_angle,
        'induction_ratio': induction_ratio
    })


swirl_sizes = _swirl_sizes(K1=1.0, half_angle=50, induction_ratio=12)
swirl_sizes['K_swirl'] = 0.9

plate_valve_sizes = _plate_valve_sizes(half_angle=80, induction_ratio=8)

slot_sizes = pd.DataFrame({
    'name': ['1-slot', '2-slot', '4-slot'],
    'slot_count': [1, 2, 4],
    'slot_width': [0.015, 0.015, 0.015],
    'slot_length_default': [1000, 1000, 1000],
    'V_dot_min': [50, 100, 200],
    'V_dot_max': [200, 400, 800],
    'V_dot_default': [100, 200, 400],
    'L_w_ref': [25, 30, 35],
    'V_dot_ref': [100, 200, 400],
    'K1': 1.2,
    'half_angle': 20,
    'induction_ratio': [4, 5, 6]
})

nozzle_sizes = pd.DataFrame({
    'name': ['DN 50', 'DN 75', 'DN 100', 'DN 150'],
    'd_o': [0.050, 0.075, 0.100, 0.150],
    'A_eff': [0.00196, 0.00442, 0.00785, 0.01767],
    'V_dot_min': [20, 50, 100, 200],
    'V_dot_max': [100, 200, 500, 1000],
    'V_dot_default': [50, 100, 250, 500],
    'L_w_ref': [27, 32, 37, 42],
    'V_dot_ref': [50, 100, 250, 500],
    'K1': 1.35,
    'half_angle': 12,
    'induction_ratio': 3
})

# k1 derived from the vmax diagrams of the manufacturer: k1 = vmax·x / (v0·d0)
dqj_supply_sizes = pd.DataFrame({
    'name': ['NW 310', 'NW 400', 'NW 500', 'NW 600', 'NW 625', 'NW 800'],
    'd_o': [0.290, 0.370, 0.470, 0.570, 0.573, 0.710],
    'A_eff': [0.028, 0.045, 0.072, 0.107, 0.110, 0.170],
    'V_dot_min': [100, 150, 200, 300, 300, 500],
    'V_dot_max': [500, 700, 1100, 1500, 1600, 2500],
    'V_dot_default': [250, 400, 600, 800, 900, 1400],
    'L_w_ref': [30, 32, 33, 35, 35, 40],
    'V_dot_ref': [200, 300, 500, 700, 750, 1200],
    'K1': 0.80,
    'half_angle': 45,
    'induction_ratio': 10,
    'K_swirl': 0.85
})

# high induction: faster velocity decay, so shorter throw than a standard swirl
dqjslc_supply_sizes = pd.DataFrame({
    'name': ['NW 125', 'NW 160', 'NW 200', 'NW 250', 'NW 315'],
    'd_o': [0.123, 0.158, 0.188, 0.248, 0.313],
    'A_eff': [0.0060, 0.0100, 0.0145, 0.0250, 0.0400],
    'V_dot_min': [30, 50, 70, 100, 200],
    'V_dot_max': [150, 250, 400, 600, 1000],
    'V_dot_default': [80, 130, 200, 300, 500],
    'L_w_ref': [25, 28, 30, 32, 35],
    'V_dot_ref': [80, 130, 200, 300, 500],
    'K1': 0.70,
    'half_angle': 50,
    'induction_ratio': 15,
    'K_swirl': 0.9
})

ceiling_grille_sizes = pd.DataFrame({
    'name': ['225x225', '325x325', '525x525'],
    'd_o': [0.225, 0.325, 0.525],
    'A_eff': [0.030, 0.063, 0.165],
    'V_dot_min': [50, 100, 200],
    'V_dot_max': [250, 500, 1000],
    'V_dot_default': [150, 300, 600],
    'L_w_ref': [25, 30, 35],
    'V_dot_ref': [150, 300, 600],
    'K1': 0.9,
    'half_angle': 45,
    'induction_ratio': 0
})

exhaust_swirl_sizes = _swirl_sizes(K1=0.9, half_angle=45, induction_ratio=0)

exhaust_plate_valve_sizes = _plate_valve_sizes(half_angle=45, induction_ratio=0)

dqj_exhaust_sizes = pd.DataFrame({
    'name': ['NW 310', 'NW 400', 'NW 500', 'NW 600', 'NW 625', 'NW 800'],
    'd_o': [0.290, 0.370, 0.470, 0.570, 0.573, 0.710],
    'A_eff': [0.033, 0.054, 0.087, 0.128, 0.130, 0.200],
    'V_dot_min': [100, 150, 200, 300, 300, 500],
    'V_dot_max': [600, 800, 1200, 1600, 1700, 2800],
    'V_dot_default': [300, 450, 650, 900, 950, 1500],
    'L_w_ref': [28, 30, 32, 34, 34, 38],
    'V_dot_ref': [250, 350, 550, 750, 800, 1300],
    'K1': 0.9,
    'half_angle': 45,
    'induction_ratio': 0
})

exhaust_slot_sizes = pd.DataFrame({
    'name': ['1-slot', '2-slot', '4-slot'],
    'slot_count': [1, 2, 4],
    'slot_width': [0.015, 0.015, 0.015],
    'slot_length_default': [1000, 1000, 1000],
    'd_o': [0.015, 0.030, 0.060],
    'A_eff': [0.015, 0.030, 0.060],
    'V_dot_min': [50, 100, 200],
    'V_dot_max': [200, 400, 800],
    'V_dot_default': [100, 200, 400],
    'L_w_ref': [25, 30, 35],
    'V_dot_ref': [100, 200, 400],
    'K1': 0.9,
    'half_angle': 45,
    'induction_ratio': 0
})


class TerminalCatalog:
    """Class for storing the air terminal types at runtime. User-defined
    types can be added with `register()`.
    """
    types: dict[str, TerminalType] = {}

    @classmethod
    def register(cls, terminal_type: TerminalType) -> None:
        """Adds `terminal_type` to the catalog. An existing type with the same
        key is replaced.
        """
        cls.types[terminal_type.key] = terminal_type

    @classmethod
    def get(cls, key: str) -> TerminalType | None:
        """Returns the terminal type with identifier `key`, or None if the
        catalog has no such type.
        """
        return cls.types.get(key)

    @classmethod
    def of_category(cls, category: TerminalCategory) -> list[TerminalType]:
        return [t for t in cls.types.values() if t.category is category]


for _terminal_type in [
    TerminalType(
        'swirl', 'Drallauslass', 'Swirl Diffuser',
        JetFamily.RADIAL, TerminalCategory.SUPPLY, True, Mounting.CEILING,
        2.0, swirl_sizes
    ),
    TerminalType(
        'plateValve', 'Tellerventil', 'Plate Valve',
        JetFamily.HEMISPHERICAL, TerminalCategory.SUPPLY, False, Mounting.CEILING,
        2.5, plate_valve_sizes
    ),
    TerminalType(
        'slot', 'Schlitzauslass', 'Slot Diffuser',
        JetFamily.PLANAR, TerminalCategory.SUPPLY, True, Mounting.CEILING,
        1.8, slot_sizes
    ),
    TerminalType(
        'nozzle', 'Düsenauslass', 'Nozzle Diffuser',
        JetFamily.DIRECTED, TerminalCategory.SUPPLY, False, Mounting.WALL,
        1.5, nozzle_sizes
    ),
    TerminalType(
        'dqjSupply', 'DQJ-R-SR Zuluft', 'DQJ-R-SR Supply',
        JetFamily.RADIAL, TerminalCategory.SUPPLY, True, Mounting.CEILING,
        2.2, dqj_supply_sizes, manufacturer='SCHAKO'
    ),
    TerminalType(
        'dqjslcSupply', 'DQJSLC Zuluft', 'DQJSLC Supply',
        JetFamily.RADIAL, TerminalCategory.SUPPLY, True, Mounting.CEILING,
        2.5, dqjslc_supply_sizes, manufacturer='SCHAKO'
    ),
    TerminalType(
        'ceilingGrille', 'Decken-Abluftgitter', 'Ceiling Exhaust Grille',
        JetFamily.GRILLE, TerminalCategory.EXHAUST, False, Mounting.CEILING,
        2.0, ceiling_grille_sizes
    ),
    TerminalType(
        'exhaustSwirl', 'Abluft-Drallauslass', 'Exhaust Swirl Diffuser',
        JetFamily.RADIAL, TerminalCategory.EXHAUST, False, Mounting.CEILING,
        2.0, exhaust_swirl_sizes
    ),
    TerminalType(
        'exhaustPlateValve', 'Abluft-Tellerventil', 'Exhaust Plate Valve',
        JetFamily.HEMISPHERICAL, TerminalCategory.EXHAUST, False, Mounting.CEILING,
        2.5, exhaust_plate_valve_sizes
    ),
    TerminalType(
        'dqjExhaust', 'DQJ-R-SR Abluft', 'DQJ-R-SR Exhaust',
        JetFamily.RADIAL, TerminalCategory.EXHAUST, False, Mounting.CEILING,
        2.0, dqj_exhaust_sizes, manufacturer='SCHAKO'
    ),
    TerminalType(
        'exhaustSlot', 'Abluft-Schlitzauslass', 'Exhaust Slot Diffuser',
        JetFamily.PLANAR, TerminalCategory.EXHAUST, False, Mounting.CEILING,
        1.8, exhaust_slot_sizes
    )
]:
    TerminalCatalog.register(_terminal_type)


def get_type(type_key: str) -> TerminalType | None:
    """Returns the supply or exhaust terminal type with identifier `type_key`,
    or None if the type is unknown.
    """
    return TerminalCatalog.get(type_key)


def get_size(type_key: str, index: int) -> TerminalSize | None:
    """Returns the size at position `index` of terminal type `type_key`, or
    None if either the type or the size is unknown. The caller must treat None
    as a configuration error.
    """
    terminal_type = TerminalCatalog.get(type_key)
    if terminal_type is None:
        return None
    return terminal_type.get_size(index)


def require_size(type_key: str, index: int) -> TerminalSize:
    """Same as `get_size()`, but raises a `LookupError` if the type or the size
    is not in the catalog.
    """
    size = get_size(type_key, index)
    if size is None:
        raise LookupError(f"terminal size {index} of type '{type_key}' not found")
    return size


def get_all_types() -> list[TerminalType]:
    """Returns all supply terminal types."""
    return TerminalCatalog.of_category(TerminalCategory.SUPPLY)


def get_all_exhaust_types() -> list[TerminalType]:
    """Returns all exhaust terminal types."""
    return TerminalCatalog.of_category(TerminalCategory.EXHAUST)


def is_slot(type_key: str, size: TerminalSize) -> bool:
    """Returns True if the effective area of the terminal depends on the
    installed slot length.
    """
    terminal_type = TerminalCatalog.get(type_key)
    return (
        terminal_type is not None
        and terminal_type.family is JetFamily.PLANAR
        and size.slot_count is not None
        and size.slot_width is not None
    )


def effective_area(
    type_key: str,
    size: TerminalSize,
    slot_length: Quantity | None = None
) -> Quantity:
    """Returns the effective area of the terminal opening.

    For slot diffusers the effective area is the number of slots times the
    slot width times the installed slot length. If `slot_length` is None, the
    default slot length of the size is taken. For all other types the
    effective area is read from the catalog.
    """
    if is_slot(type_key, size):
        if slot_length is None:
            slot_length = size.slot_length_default
        A_eff = size.slot_count * size.slot_width * slot_length
        return A_eff.to('m**2')
    return size.A_eff.to('m**2')


def register_type(terminal_type: TerminalType) -> None:
    """Adds a user-defined terminal type to the catalog."""
    TerminalCatalog.register(terminal_type)
