from .terminals import (
    TerminalSize,
    TerminalType,
    TerminalCatalog,
    get_type,
    get_size,
    require_size,
    get_all_types,
    get_all_exhaust_types,
    is_slot,
    effective_area,
    register_type
)

from .room_types import (
    RoomTypeLimit,
    get_room_type_limit,
    get_material_absorption,
    get_default_surfaces
)
