from .room_acoustics import (
    absorption_area,
    sound_pressure_level,
    directivity_factor,
    sum_levels
)
from .heatmap import Heatmap, generate_sound_heatmap, generate_velocity_heatmap
