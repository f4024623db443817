"""Texture (UV) coordinates of the player model parts."""

from __future__ import annotations

from collections.abc import Sequence

from .cube_model import SteveTexture
from .skin import SkinType

_HEAD_TEX = (
    32.0, 8.0, 32.0, 16.0, 24.0, 16.0, 24.0, 8.0,  # back
    8.0, 8.0, 8.0, 16.0, 16.0, 16.0, 16.0, 8.0,  # front
    0.0, 8.0, 0.0, 16.0, 8.0, 16.0, 8.0, 8.0,  # left
    16.0, 8.0, 16.0, 16.0, 24.0, 16.0, 24.0, 8.0,  # right
    8.0, 0.0, 8.0, 8.0, 16.0, 8.0, 16.0, 0.0,  # top
    24.0, 0.0, 24.0, 8.0, 16.0, 8.0, 16.0, 0.0,  # bottom
)

_LEG_ARM_TEX = (
    12.0, 4.0, 12.0, 16.0, 16.0, 16.0, 16.0, 4.0,
    4.0, 4.0, 4.0, 16.0, 8.0, 16.0, 8.0, 4.0,
    0.0, 4.0, 0.0, 16.0, 4.0, 16.0, 4.0, 4.0,
    8.0, 4.0, 8.0, 16.0, 12.0, 16.0, 12.0, 4.0,
    4.0, 0.0, 4.0, 4.0, 8.0, 4.0, 8.0, 0.0,
    12.0, 0.0, 12.0, 4.0, 8.0, 4.0, 8.0, 0.0,
)

_SLIM_ARM_TEX = (
    11.0, 4.0, 11.0, 16.0, 14.0, 16.0, 14.0, 4.0,
    4.0, 4.0, 4.0, 16.0, 7.0, 16.0, 7.0, 4.0,
    0.0, 4.0, 0.0, 16.0, 4.0, 16.0, 4.0, 4.0,
    7.0, 4.0, 7.0, 16.0, 10.0, 16.0, 10.0, 4.0,
    4.0, 0.0, 4.0, 4.0, 7.0, 4.0, 7.0, 0.0,
    10.0, 0.0, 10.0, 4.0, 7.0, 4.0, 7.0, 0.0,
)

_BODY_TEX = (
    24.0, 4.0, 24.0, 16.0, 16.0, 16.0, 16.0, 4.0,
    4.0, 4.0, 4.0, 16.0, 12.0, 16.0, 12.0, 4.0,
    0.0, 4.0, 0.0, 16.0, 4.0, 16.0, 4.0, 4.0,
    12.0, 4.0, 12.0, 16.0, 16.0, 16.0, 16.0, 4.0,
    4.0, 0.0, 4.0, 4.0, 12.0, 4.0, 12.0, 0.0,
    20.0, 0.0, 20.0, 4.0, 12.0, 4.0, 12.0, 0.0,
)

_CAPE_TEX = (
    11.0, 1.0, 11.0, 17.0, 1.0, 17.0, 1.0, 1.0,
    12.0, 1.0, 12.0, 17.0, 22.0, 17.0, 22.0, 1.0,
    11.0, 1.0, 11.0, 17.0, 12.0, 17.0, 12.0, 1.0,
    0.0, 1.0, 0.0, 17.0, 1.0, 17.0, 1.0, 1.0,
    1.0, 0.0, 1.0, 1.0, 11.0, 1.0, 11.0, 0.0,
    21.0, 0.0, 21.0, 1.0, 11.0, 1.0, 11.0, 0.0,
)


def get_tex(
    values: Sequence[float], skin_type: SkinType, offset_u: float, offset_v: float
) -> list[float]:
    """Shift pixel coordinates (u, v pairs) and normalise them to 0..1."""
    v_size = 32.0 if skin_type == SkinType.OLD else 64.0
    return [
        (value + offset_v) / v_size if i % 2 else (value + offset_u) / 64.0
        for i, value in enumerate(values)
    ]


def get_cap_tex(values: Sequence[float]) -> list[float]:
    """Normalise cape pixel coordinates to 0..1 for a 64x32 cape texture."""
    return [value / 32.0 if i % 2 else value / 64.0 for i, value in enumerate(values)]


def _arm_tex(skin_type: SkinType) -> Sequence[float]:
    return _SLIM_ARM_TEX if skin_type == SkinType.NEW_SLIM else _LEG_ARM_TEX


def get_steve_texture_top(skin_type: SkinType) -> SteveTexture:
    """Return the UVs of the outer layer."""
    tex = SteveTexture(head=get_tex(_HEAD_TEX, skin_type, 32.0, 0.0))
    if skin_type != SkinType.OLD:
        arm = _arm_tex(skin_type)
        tex.body = get_tex(_BODY_TEX, skin_type, 16.0, 32.0)
        tex.left_arm = get_tex(arm, skin_type, 48.0, 48.0)
        tex.right_arm = get_tex(arm, skin_type, 40.0, 32.0)
        tex.left_leg = get_tex(_LEG_ARM_TEX, skin_type, 0.0, 48.0)
        tex.right_leg = get_tex(_LEG_ARM_TEX, skin_type, 0.0, 32.0)
    return tex


def get_steve_texture(skin_type: SkinType) -> SteveTexture:
    """Return the UVs of the base layer and the cape."""
    tex = SteveTexture(
        head=get_tex(_HEAD_TEX, skin_type, 0.0, 0.0),
        body=get_tex(_BODY_TEX, skin_type, 16.0, 16.0),
        cape=get_cap_tex(_CAPE_TEX),
    )
    if skin_type == SkinType.OLD:
        tex.left_arm = get_tex(_LEG_ARM_TEX, skin_type, 40.0, 16.0)
        tex.right_arm = get_tex(_LEG_ARM_TEX, skin_type, 40.0, 16.0)
        tex.left_leg = get_tex(_LEG_ARM_TEX, skin_type, 0.0, 16.0)
        tex.right_leg = get_tex(_LEG_ARM_TEX, skin_type, 0.0, 16.0)
    else:
        arm = _arm_tex(skin_type)
        tex.left_arm = get_tex(arm, skin_type, 32.0, 48.0)
        tex.right_arm = get_tex(arm, skin_type, 40.0, 16.0)
        tex.left_leg = get_tex(_LEG_ARM_TEX, skin_type, 0.0, 16.0)
        tex.right_leg = get_tex(_LEG_ARM_TEX, skin_type, 16.0, 48.0)
    return tex