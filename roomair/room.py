from dataclasses import dataclass, field
from roomair import Quantity

Q_ = Quantity


@dataclass
class SurfaceAbsorption:
    """Sound absorption coefficients of the room surfaces.

    Attributes
    ----------
    ceiling:
        Absorption coefficient of the ceiling.
    floor:
        Absorption coefficient of the floor.
    walls_NS:
        Absorption coefficient of the two walls along the length of the room.
    walls_EW:
        Absorption coefficient of the two walls along the width of the room.
    """
    ceiling: float
    floor: float
    walls_NS: float
    walls_EW: float


@dataclass
class Room:
    """Groups the information about the room in which the terminals are
    installed.

    The room is centered on the origin of the horizontal plane: the x-axis
    runs along the length and the z-axis along the width of the room. The
    y-axis is the height above the floor.

    Attributes
    ----------
    L:
        Length of the room.
    B:
        Width of the room.
    H:
        Height of the room.
    T_r:
        Room air temperature.
    room_type:
        Key of the room type, which determines the sound level limit and the
        default absorption of the room surfaces (see
        `roomair.catalog.room_types`).
    surfaces: optional
        Sound absorption coefficients of the room surfaces. If None, the
        defaults of the room type are used.
    """
    L: Quantity
    B: Quantity
    H: Quantity
    T_r: Quantity = field(default_factory=lambda: Q_(22, 'degC'))
    room_type: str = 'meeting_room'
    surfaces: SurfaceAbsorption | None = None

    def __post_init__(self) -> None:
        self.L = self.L.to('m')
        self.B = self.B.to('m')
        self.H = self.H.to('m')
        self.T_r = self.T_r.to('K')

    @property
    def V(self) -> Quantity:
        """Returns the volume of the room."""
        V = self.L * self.B * self.H
        return V

    @property
    def A(self) -> Quantity:
        """Returns the floor area of the room."""
        A = self.L * self.B
        return A
