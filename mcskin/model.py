"""Construction of the player model geometry."""

from __future__ import annotations

from .cube import get_square, get_square_indices
from .cube_model import CubeModelItem, SteveModel
from .skin import SkinType

_TOP_ENLARGE = 1.125


def _item(mx: float, my: float, mz: float, enlarge: float = 1.0) -> CubeModelItem:
    return CubeModelItem(
        get_square(mx, my, mz, 0.0, 0.0, 0.0, enlarge), get_square_indices()
    )


def _arm_width(skin_type: SkinType) -> float:
    return 0.375 if skin_type == SkinType.NEW_SLIM else 0.5


def get_steve(skin_type: SkinType) -> SteveModel:
    """Return the base layer of the player model."""
    arm_width = _arm_width(skin_type)
    return SteveModel(
        head=_item(1.0, 1.0, 1.0),
        body=_item(1.0, 1.5, 0.5),
        left_arm=_item(arm_width, 1.5, 0.5),
        right_arm=_item(arm_width, 1.5, 0.5),
        left_leg=_item(0.5, 1.5, 0.5),
        right_leg=_item(0.5, 1.5, 0.5),
        cape=_item(1.25, 2.0, 0.1),
    )


def get_steve_top(skin_type: SkinType) -> SteveModel:
    """Return the outer layer of the player model.

    Old skins only have an outer layer for the head; no outer layer has a cape.
    """
    head = _item(1.0, 1.0, 1.0, _TOP_ENLARGE)
    if skin_type == SkinType.OLD:
        return SteveModel(head=head)
    arm_width = _arm_width(skin_type)
    return SteveModel(
        head=head,
        body=_item(1.0, 1.5, 0.5, _TOP_ENLARGE),
        left_arm=_item(arm_width, 1.5, 0.5, _TOP_ENLARGE),
        right_arm=_item(arm_width, 1.5, 0.5, _TOP_ENLARGE),
        left_leg=_item(0.5, 1.5, 0.5, _TOP_ENLARGE),
        right_leg=_item(0.5, 1.5, 0.5, _TOP_ENLARGE),
    )