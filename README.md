# mcskin

Building blocks for showing Minecraft player skins in 3D: loading skin
images and telling their layout, the cube geometry and UV coordinates of
the player model, a walking animation, and the camera and pose state that a
viewer keeps between frames.

## Installation

```
pip install mcskin
```

## Loading a skin and telling its type

```python
from mcskin.skin import SkinType, open_bitmap
from mcskin.skin_type_checker import get_skin_type

image = open_bitmap("steve.png")   # a Pillow image in RGBA mode
skin_type = get_skin_type(image)   # SkinType.OLD, NEW, NEW_SLIM or UNKNOWN
```

A square image at least 64 pixels wide is a new skin; it is a slim one when
the extra arm columns (scaled to the image size) are fully transparent. An
image twice as wide as it is high is an old skin. Anything else is unknown.

`open_bitmap` raises `OSError` when the file cannot be read as an image.
`save_bitmap` writes a Pillow image as PNG; `save_image` also accepts a
numpy array of pixels.

## Model geometry and UVs

```python
from mcskin.model import get_steve, get_steve_top
from mcskin.texture import get_steve_texture, get_steve_texture_top

body = get_steve(skin_type)            # base layer, including the cape
overlay = get_steve_top(skin_type)     # outer layer; only the head for old skins
uv = get_steve_texture(skin_type)
uv_top = get_steve_texture_top(skin_type)

print(len(body.head.model), len(body.head.point))   # 72 coordinates, 36 indices
```

Each part is a `CubeModelItem` holding 24 vertices (72 floats) and 36
triangle indices. `SteveModel` and `SteveTexture` group the seven parts:
head, body, both arms, both legs and cape. Slim skins get narrower arms.

Single cubes come from `mcskin.cube.get_square` (scale per axis, offset per
axis, overall enlargement) and `mcskin.cube.get_square_indices` (shifted by
an offset; `ValueError` if the indices would not fit in 16 bits).
`mcskin.cube.VERTICES` holds the per-vertex normals.

`mcskin.texture.get_tex` turns pixel coordinates into 0..1 UVs (V is
divided by 32 for old skins, by 64 otherwise); `get_cap_tex` does the same
for a 64×32 cape.

## Animation

```python
from mcskin.skin_animation import SkinAnimation

anim = SkinAnimation()
anim.run = True
anim.skin_type = skin_type
anim.tick(0.016)
print(anim.frame, anim.arm, anim.leg, anim.head, anim.cape)
```

The cycle is 120 frames long, one frame per 0.01 seconds. Setting `frame`
wraps it into the cycle. `reset()` returns to the resting pose, and
`close()` stops the animation, after which `tick` returns `False`.

## Viewer state

`mcskin.base_render.SkinRender` holds what a renderer needs between frames:

- mouse dragging: `pointer_pressed`, `pointer_moved` and `pointer_released`
  with `KeyType.LEFT` to rotate and `KeyType.RIGHT` to move the model;
  `pointer_wheel_changed` to zoom;
- direct control: `rotate`, `position`, `add_distance`, `reset_position`;
- settings as properties: `animation`, `skin_type`, `back_color`,
  `render_type`, `enable_cape`, `enable_top`, and the pose angles
  `arm_rotate`, `leg_rotate`, `head_rotate`;
- textures: `set_skin_tex` and `set_cape_tex` take a Pillow image or `None`;
  a skin that is not 64 pixels wide raises `SkinRenderError` with
  `ErrorType.INVALID_SKIN`;
- `tick(time)`: advances the animation, applies pending rotation and counts
  frames, passing the count to the FPS callback once per second.

Callbacks are given to the constructor (`error_callback`, `state_callback`,
`fps_callback`); the state callback receives `StateType.SKIN_LOADED` and
`StateType.CAPE_LOADED`.

```python
from mcskin.base_render import ModelPartType, SkinRender

with SkinRender(fps_callback=print) as render:
    render.skin_type = skin_type
    render.set_skin_tex(image)
    render.tick(0.016)
    head = render.get_matrix(ModelPartType.HEAD)   # 4x4 numpy array
```

`get_matrix` gives the transform of each body part and the cape, and the
projection (`PROJ`), view (`VIEW`) and model (`MODEL`) matrices. Leaving
the `with` block, or calling `close()`, stops the animation.

## What is not included

The package does not draw anything: there is no graphics-API backend, no
window and no viewer application. It supplies the geometry, UVs, textures,
matrices and state that such a renderer would feed to the GPU.

## Running the tests

```
pip install "mcskin[test]"
pytest
```