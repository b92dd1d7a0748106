from .decay import DecayLaw, LinearDecay, SqrtSlotDecay, evaluate
from .archimedes_number import archimedes_number, detachment_point
from .families import FamilyModel, JetParameters, get_family_model
from .jet_model import (
    TerminalConfig,
    JetResult,
    compute_jet,
    sound_power_level,
    sound_pressure_at_distance,
    sum_sound_levels
)
