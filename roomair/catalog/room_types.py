"""
ROOM TYPES AND SURFACE MATERIALS

Sound level limits per room type (DIN 4109, VDI 2081) and default sound
absorption coefficients of the room surfaces.
"""
from dataclasses import dataclass
import pandas as pd
from roomair.room import SurfaceAbsorption


@dataclass(frozen=True)
class RoomTypeLimit:
    """Sound level limit of a room type.

    Attributes
    ----------
    key:
        Identifier of the room type.
    name_de, name_en:
        German and English designation.
    L_max:
        Maximum A-weighted sound level in dB(A).
    NC:
        Noise criterion rating.
    """
    key: str
    name_de: str
    name_en: str
    L_max: float
    NC: int


room_types = pd.DataFrame({
    'key': [
        'office', 'open_office', 'meeting_room', 'classroom',
        'hospital', 'restaurant', 'auditorium'
    ],
    'name_de': [
        'Einzelbüro', 'Großraumbüro', 'Besprechungsraum', 'Klassenzimmer',
        'Krankenhauszimmer', 'Restaurant', 'Hörsaal'
    ],
    'name_en': [
        'Private Office', 'Open Plan Office', 'Meeting Room', 'Classroom',
        'Hospital Room', 'Restaurant', 'Auditorium'
    ],
    'L_max': [35, 40, 35, 35, 30, 45, 30],  # dB(A)
    'NC': [30, 35, 30, 30, 25, 40, 25]
})
room_types.set_index('key', inplace=True)

DEFAULT_ROOM_TYPE = 'meeting_room'

surface_materials = pd.DataFrame({
    'key': ['concrete', 'plasterboard', 'acoustic_tile', 'carpet', 'glass', 'custom'],
    'name_de': [
        'Beton/Putz', 'Gipskarton', 'Akustikdecke', 'Teppichboden',
        'Fenster/Glas', 'Benutzerdefiniert'
    ],
    'name_en': [
        'Concrete/Plaster', 'Plasterboard', 'Acoustic Tile', 'Carpet',
        'Glass/Window', 'Custom'
    ],
    'alpha': [0.03, 0.08, 0.85, 0.30, 0.12, 0.10]
})
surface_materials.set_index('key', inplace=True)


def get_room_type_limit(room_type: str) -> RoomTypeLimit:
    """Returns the sound level limit of `room_type`. Unknown room types fall
    back to the limit of a meeting room.
    """
    if room_type not in room_types.index:
        room_type = DEFAULT_ROOM_TYPE
    row = room_types.loc[room_type]
    return RoomTypeLimit(
        key=room_type,
        name_de=row['name_de'],
        name_en=row['name_en'],
        L_max=float(row['L_max']),
        NC=int(row['NC'])
    )


def get_material_absorption(material: str) -> float:
    """Returns the sound absorption coefficient of a surface material."""
    try:
        alpha = surface_materials.loc[material, 'alpha']
    except KeyError:
        raise LookupError(f"surface material '{material}' not found")
    return float(alpha)


def get_default_surfaces(room_type: str) -> SurfaceAbsorption:
    """Returns the typical sound absorption coefficients of the room surfaces
    for the given room type.
    """
    match room_type:
        case 'office' | 'open_office':
            return SurfaceAbsorption(ceiling=0.85, floor=0.15, walls_NS=0.05, walls_EW=0.08)
        case 'meeting_room':
            return SurfaceAbsorption(ceiling=0.85, floor=0.30, walls_NS=0.05, walls_EW=0.08)
        case 'hospital':
            return SurfaceAbsorption(ceiling=0.70, floor=0.03, walls_NS=0.03, walls_EW=0.03)
        case 'restaurant':
            return SurfaceAbsorption(ceiling=0.50, floor=0.10, walls_NS=0.05, walls_EW=0.10)
        case _:
            return SurfaceAbsorption(ceiling=0.85, floor=0.20, walls_NS=0.05, walls_EW=0.05)
