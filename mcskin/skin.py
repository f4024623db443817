"""Skin type definitions and loading/saving of skin images."""

from __future__ import annotations

import enum
import os
from typing import Union

import numpy as np
from PIL import Image

PathLike = Union[str, "os.PathLike[str]"]


class SkinType(enum.Enum):
    """Layout of a player skin texture."""

    OLD = 0
    """Pre-1.8 layout (width is twice the height)."""
    NEW = 1
    """1.8+ square layout with classic arms."""
    NEW_SLIM = 2
    """1.8+ square layout with slim arms."""
    UNKNOWN = 3
    """Anything that is not a recognised layout."""


def open_bitmap(path: PathLike) -> Image.Image:
    """Load an image file as an RGBA bitmap.

    Raises ``OSError`` when the file cannot be read or is not an image.
    """
    with Image.open(path) as img:
        return img.convert("RGBA")


def save_bitmap(image: Image.Image, path: PathLike) -> None:
    """Write a bitmap to ``path`` as PNG."""
    image.save(path, format="PNG")


def save_image(image: Union[Image.Image, np.ndarray], path: PathLike) -> None:
    """Write an image, or an array of pixels, to ``path`` as PNG."""
    if isinstance(image, np.ndarray):
        image = Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8))
    image.save(path, format="PNG")