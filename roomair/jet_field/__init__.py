from .superposition import (
    OutletPlacement,
    velocity_field,
    velocity_vector_at,
    velocity_magnitude_at
)
