from mcskin.cube_model import CubeModelItem, SteveModel, SteveTexture

PARTS = ("head", "body", "left_arm", "right_arm", "left_leg", "right_leg", "cape")


def test_cube_model_item_new():
    item = CubeModelItem([1.0, 2.0, 3.0], [0, 1, 2])
    assert item.model == [1.0, 2.0, 3.0]
    assert item.point == [0, 1, 2]


def test_cube_model_item_default():
    item = CubeModelItem()
    assert item.model == []
    assert item.point == []


def test_cube_model_item_defaults_not_shared():
    a = CubeModelItem()
    b = CubeModelItem()
    a.model.append(1.0)
    assert b.model == []


def test_steve_model_new():
    items = [CubeModelItem([float(i + 1)], [i]) for i in range(7)]
    steve = SteveModel(*items)
    assert steve.head.model == [1.0]
    assert steve.body.model == [2.0]
    assert steve.left_arm.model == [3.0]
    assert steve.right_arm.model == [4.0]
    assert steve.left_leg.model == [5.0]
    assert steve.right_leg.model == [6.0]
    assert steve.cape.model == [7.0]


def test_steve_texture_new():
    tex = SteveTexture()
    assert all(getattr(tex, name) == [] for name in PARTS)


def test_steve_texture_equality():
    assert SteveTexture(head=[0.5]) == SteveTexture(head=[0.5])
    assert SteveTexture(head=[0.5]) != SteveTexture()