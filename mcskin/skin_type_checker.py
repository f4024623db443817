"""Detection of the layout of a skin texture."""

from __future__ import annotations

import numpy as np
from PIL import Image

from .skin import SkinType

# Areas (x, y, w, h) in 64-pixel units that are empty on slim-arm skins.
_SLIM_AREAS = (
    (50, 16, 2, 4),
    (54, 20, 2, 12),
    (42, 48, 2, 4),
    (46, 52, 2, 12),
)


def get_skin_type(image: Image.Image) -> SkinType:
    """Return the layout of a skin bitmap."""
    width, height = image.size
    if width >= 64 and height >= 64 and width == height:
        return SkinType.NEW_SLIM if _is_slim_skin(image) else SkinType.NEW
    if width == height * 2:
        return SkinType.OLD
    return SkinType.UNKNOWN


def _is_slim_skin(image: Image.Image) -> bool:
    scale = image.size[0] // 64
    alpha = np.asarray(image.convert("RGBA"))[..., 3]
    return all(
        _area_transparent(alpha, x * scale, y * scale, w * scale, h * scale)
        for x, y, w, h in _SLIM_AREAS
    )


def _area_transparent(alpha: np.ndarray, x: int, y: int, w: int, h: int) -> bool:
    height, width = alpha.shape
    if x < 0 or y < 0 or x + w > width or y + h > height:
        return False
    return bool(np.all(alpha[y : y + h, x : x + w] == 0))