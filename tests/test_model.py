import pytest

from mcskin.model import get_steve, get_steve_top
from mcskin.skin import SkinType

EPS = 1.1920929e-07
LIMBS = ("head", "body", "left_arm", "right_arm", "left_leg", "right_leg")


@pytest.mark.parametrize("skin_type", [SkinType.NEW, SkinType.OLD])
def test_get_steve_lengths(skin_type):
    steve = get_steve(skin_type)
    assert len(steve.head.point) == 36
    for name in LIMBS + ("cape",):
        assert len(getattr(steve, name).model) == 72


def test_get_steve_slim_skin():
    steve = get_steve(SkinType.NEW_SLIM)
    assert len(steve.head.model) == 72
    assert len(steve.left_arm.model) == 72
    assert len(steve.right_arm.model) == 72
    assert all(abs(a - b) < EPS for a, b in zip(steve.left_arm.model, steve.right_arm.model))
    assert abs(max(steve.left_arm.model[0::3]) - 0.1875) < EPS


def test_get_steve_arms_are_independent():
    steve = get_steve(SkinType.NEW)
    before = list(steve.right_arm.model)
    steve.left_arm.model[0] = 99.0
    assert list(steve.right_arm.model) == before
    assert steve.left_arm.model[0] == 99.0


@pytest.mark.parametrize("skin_type", [SkinType.NEW, SkinType.NEW_SLIM])
def test_get_steve_top_full(skin_type):
    steve = get_steve_top(skin_type)
    for name in LIMBS:
        assert len(getattr(steve, name).model) == 72
    assert steve.cape.model == []


def test_get_steve_top_old_skin():
    steve = get_steve_top(SkinType.OLD)
    assert len(steve.head.model) == 72
    for name in LIMBS[1:] + ("cape",):
        assert getattr(steve, name).model == []


def test_top_head_is_enlarged():
    steve = get_steve_top(SkinType.NEW)
    assert abs(max(steve.head.model) - 0.5625) < EPS


def test_body_dimensions():
    body = get_steve(SkinType.NEW).body.model
    assert abs(max(body[0::3]) - 0.5) < EPS
    assert abs(max(body[1::3]) - 0.75) < EPS
    assert abs(max(body[2::3]) - 0.25) < EPS


def test_leg_dimensions():
    leg = get_steve(SkinType.NEW).left_leg.model
    assert abs(max(leg[0::3]) - 0.25) < EPS
    assert abs(max(leg[1::3]) - 0.75) < EPS


def test_cape_dimensions():
    cape = get_steve(SkinType.NEW).cape.model
    assert abs(max(cape[0::3]) - 0.625) < EPS
    assert abs(max(cape[1::3]) - 1.0) < EPS
    assert abs(max(cape[2::3]) - 0.05) < EPS