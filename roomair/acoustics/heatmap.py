"""
HEATMAPS OF SOUND PRESSURE LEVEL AND AIR VELOCITY

The room is sampled on a horizontal plane at a given height. The grid starts
in the corner (-L/2, -B/2) of the room and has `ceil(L / spacing) + 1` columns
along the length and `ceil(B / spacing) + 1` rows along the width of the room.
"""
from dataclasses import dataclass
import numpy as np
import pandas as pd
from roomair import Quantity
from roomair.settings import Settings, DEFAULT_SETTINGS
from roomair.room import Room
from roomair.jet_field import OutletPlacement, velocity_field
from roomair.logging import ModuleLogger
from .room_acoustics import absorption_area, sound_pressure_level, directivity_factor

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.ERROR)

Q_ = Quantity


@dataclass
class Heatmap:
    """Values sampled on a horizontal grid in the room.

    Attributes
    ----------
    grid:
        2D-array with shape (rows, cols). Row index runs along the width
        (z-axis), column index along the length (x-axis) of the room.
    cols:
        Number of grid points along the length of the room.
    rows:
        Number of grid points along the width of the room.
    min:
        Smallest value in the grid.
    max:
        Largest value in the grid.
    spacing:
        Distance between neighbouring grid points.
    origin_x, origin_z:
        Coordinates of the first grid point.
    height:
        Height of the grid plane above the floor.
    unit:
        Unit of the grid values ('dB(A)' or 'm/s').
    """
    grid: np.ndarray
    cols: int
    rows: int
    min: float
    max: float
    spacing: Quantity
    origin_x: Quantity
    origin_z: Quantity
    height: Quantity
    unit: str = ''

    @property
    def x(self) -> Quantity:
        """Returns the x-coordinates of the grid columns."""
        x = self.origin_x.to('m').m + np.arange(self.cols) * self.spacing.to('m').m
        return Q_(x, 'm')

    @property
    def z(self) -> Quantity:
        """Returns the z-coordinates of the grid rows."""
        z = self.origin_z.to('m').m + np.arange(self.rows) * self.spacing.to('m').m
        return Q_(z, 'm')

    def to_frame(self) -> pd.DataFrame:
        """Returns the grid as a DataFrame with the z-coordinates (m) as index
        and the x-coordinates (m) as columns.
        """
        df = pd.DataFrame(
            self.grid,
            index=pd.Index(np.round(self.z.m, 3), name='z [m]'),
            columns=pd.Index(np.round(self.x.m, 3), name='x [m]')
        )
        return df


def _grid_points(
    room: Room,
    spacing: Quantity,
    height: Quantity
) -> tuple[np.ndarray, int, int]:
    L, B = room.L.to('m').m, room.B.to('m').m
    s = spacing.to('m').m
    cols = int(np.ceil(L / s)) + 1
    rows = int(np.ceil(B / s)) + 1
    x = -L / 2 + np.arange(cols) * s
    z = -B / 2 + np.arange(rows) * s
    zz, xx = np.meshgrid(z, x, indexing='ij')
    yy = np.full_like(xx, height.to('m').m)
    points = np.stack([xx.ravel(), yy.ravel(), zz.ravel()], axis=-1)
    return points, cols, rows


def _heatmap(
    grid: np.ndarray,
    cols: int,
    rows: int,
    room: Room,
    spacing: Quantity,
    height: Quantity,
    unit: str
) -> Heatmap:
    return Heatmap(
        grid=grid,
        cols=cols,
        rows=rows,
        min=float(grid.min()),
        max=float(grid.max()),
        spacing=spacing.to('m'),
        origin_x=-room.L.to('m') / 2,
        origin_z=-room.B.to('m') / 2,
        height=height.to('m'),
        unit=unit
    )


def generate_sound_heatmap(
    placements: list[OutletPlacement],
    room: Room,
    spacing: Quantity | None = None,
    height: Quantity | None = None,
    settings: Settings | None = None
) -> Heatmap:
    """Samples the total sound pressure level in dB(A) of all terminals on a
    horizontal grid. Without terminals all grid values are 0.

    Parameters
    ----------
    placements:
        The terminals in the room (supply and exhaust).
    room:
        The room.
    spacing: optional
        Grid spacing. Default is `settings.dx_grid` (0.5 m).
    height: optional
        Height of the listener plane. Default is `settings.Z_listener` (1.2 m).
    settings: optional
        Constants of the room air model.
    """
    settings = settings or DEFAULT_SETTINGS
    spacing = spacing if spacing is not None else settings.dx_grid
    height = height if height is not None else settings.Z_listener
    points, cols, rows = _grid_points(room, spacing, height)
    if placements:
        A = absorption_area(room)
        energy = np.zeros(points.shape[0])
        for placement in placements:
            r = np.linalg.norm(points - placement.position.to('m').m, axis=1)
            Q = directivity_factor(placement.mounting, placement.position, room, settings)
            L_p = sound_pressure_level(placement.L_w, Q_(r, 'm'), Q, A)
            energy += 10 ** (L_p / 10)
        values = 10 * np.log10(energy)
    else:
        values = np.zeros(points.shape[0])
    grid = values.reshape(rows, cols)
    logger.debug(
        f"Sound heatmap {rows} x {cols} at {height:~P.2f}: "
        f"{grid.min():.1f} - {grid.max():.1f} dB(A)."
    )
    return _heatmap(grid, cols, rows, room, spacing, height, 'dB(A)')


def generate_velocity_heatmap(
    placements: list[OutletPlacement],
    room: Room,
    spacing: Quantity | None = None,
    height: Quantity | None = None,
    settings: Settings | None = None
) -> Heatmap:
    """Samples the magnitude of the superposed air velocity in m/s of all
    terminals on a horizontal grid (see `roomair.jet_field.velocity_field()`).

    Parameters: see `generate_sound_heatmap()`.
    """
    settings = settings or DEFAULT_SETTINGS
    spacing = spacing if spacing is not None else settings.dx_grid
    height = height if height is not None else settings.Z_listener
    points, cols, rows = _grid_points(room, spacing, height)
    v = velocity_field(Q_(points, 'm'), placements, settings)
    values = np.linalg.norm(v.to('m / s').m, axis=1)
    grid = values.reshape(rows, cols)
    logger.debug(
        f"Velocity heatmap {rows} x {cols} at {height:~P.2f}: "
        f"{grid.min():.3f} - {grid.max():.3f} m/s."
    )
    return _heatmap(grid, cols, rows, room, spacing, height, 'm/s')
