"""Unit cube geometry used to build the player model."""

from __future__ import annotations

from itertools import cycle

VALUE = 0.5

_V = VALUE

# Per-vertex normals, four vertices per face.
VERTICES: tuple[float, ...] = (
    (0.0, 0.0, -1.0) * 4  # back
    + (0.0, 0.0, 1.0) * 4  # front
    + (-1.0, 0.0, 0.0) * 4  # left
    + (1.0, 0.0, 0.0) * 4  # right
    + (0.0, 1.0, 0.0) * 4  # top
    + (0.0, -1.0, 0.0) * 4  # bottom
)

_CUBE: tuple[float, ...] = (
    # back
    _V, _V, -_V, _V, -_V, -_V, -_V, -_V, -_V, -_V, _V, -_V,
    # front
    -_V, _V, _V, -_V, -_V, _V, _V, -_V, _V, _V, _V, _V,
    # left
    -_V, _V, -_V, -_V, -_V, -_V, -_V, -_V, _V, -_V, _V, _V,
    # right
    _V, _V, _V, _V, -_V, _V, _V, -_V, -_V, _V, _V, -_V,
    # top
    -_V, _V, -_V, -_V, _V, _V, _V, _V, _V, _V, _V, -_V,
    # bottom
    _V, -_V, -_V, _V, -_V, _V, -_V, -_V, _V, -_V, -_V, -_V,
)

_CUBE_INDICES: tuple[int, ...] = (
    0, 1, 2, 0, 2, 3, 4, 5, 6, 4, 6, 7, 8, 9, 10, 8, 10, 11,
    12, 13, 14, 12, 14, 15, 16, 17, 18, 16, 18, 19, 20, 21, 22, 20, 22, 23,
)

_MAX_INDEX = 0xFFFF


def get_square(
    multiply_x: float = 1.0,
    multiply_y: float = 1.0,
    multiply_z: float = 1.0,
    add_x: float = 0.0,
    add_y: float = 0.0,
    add_z: float = 0.0,
    enlarge: float = 1.0,
) -> list[float]:
    """Return the x, y, z coordinates of a scaled and shifted cube."""
    axes = cycle(((multiply_x, add_x), (multiply_y, add_y), (multiply_z, add_z)))
    return [value * enlarge * mul + add for value, (mul, add) in zip(_CUBE, axes)]


def get_square_indices(offset: int = 0) -> list[int]:
    """Return the triangle indices of a cube, shifted by ``offset``."""
    if offset < 0 or offset + max(_CUBE_INDICES) > _MAX_INDEX:
        raise ValueError(f"index offset out of range: {offset}")
    return [index + offset for index in _CUBE_INDICES]