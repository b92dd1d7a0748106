from .pint_setup import UNITS, Quantity

from .definitions import (
    TerminalCategory,
    Mounting,
    SlotDirection,
    JetFamily
)

from .settings import Settings, DEFAULT_SETTINGS

from .room import Room, SurfaceAbsorption

from .catalog import (
    TerminalSize,
    TerminalType,
    TerminalCatalog,
    get_type,
    get_size,
    require_size,
    get_all_types,
    get_all_exhaust_types,
    effective_area,
    register_type,
    get_room_type_limit
)

from .air_jets import (
    TerminalConfig,
    JetResult,
    LinearDecay,
    SqrtSlotDecay,
    evaluate,
    compute_jet,
    sound_pressure_at_distance,
    sum_sound_levels
)

from .jet_field import (
    OutletPlacement,
    velocity_vector_at,
    velocity_magnitude_at,
    velocity_field
)

from .acoustics import (
    Heatmap,
    absorption_area,
    sound_pressure_level,
    directivity_factor,
    sum_levels,
    generate_sound_heatmap,
    generate_velocity_heatmap
)

from .comfort import (
    ComfortCategory,
    ComfortResult,
    SamplingMethod,
    draught_rate,
    get_velocity_category,
    evaluate_comfort,
    get_comfort_summary
)

from .balance import AirBalance, BalanceStatus, air_balance

from .tables import jet_results_table
