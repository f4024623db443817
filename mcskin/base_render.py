"""Renderer-independent state and camera/model maths of the skin viewer."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable, Sequence
from typing import Optional

import numpy as np
from PIL import Image

from .cube import VALUE
from .skin import SkinType
from .skin_animation import SkinAnimation

_SKIN_WIDTH = 64


class ErrorType(enum.Enum):
    """Kinds of renderer failure."""

    INVALID_SKIN = 0
    UNKNOWN_SKIN = 1
    RENDER_ERROR = 2
    TEXTURE_ERROR = 3


class StateType(enum.Enum):
    """Lifecycle notifications sent to the state callback."""

    INITIALIZED = 0
    SKIN_LOADED = 1
    CAPE_LOADED = 2
    RENDER_STARTED = 3
    RENDER_COMPLETED = 4
    DISPOSED = 5


class KeyType(enum.Enum):
    """Pointer buttons."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class ModelPartType(enum.Enum):
    """Parts and camera matrices that :meth:`SkinRender.get_matrix` knows."""

    HEAD = 0
    BODY = 1
    LEFT_ARM = 2
    RIGHT_ARM = 3
    LEFT_LEG = 4
    RIGHT_LEG = 5
    CAPE = 6
    PROJ = 7
    VIEW = 8
    MODEL = 9


class SkinRenderType(enum.Enum):
    """Anti-aliasing mode."""

    NORMAL = 0
    FXAA = 1
    MSAA = 2


class SkinRenderError(Exception):
    """Raised when the renderer rejects its input."""

    def __init__(self, error_type: ErrorType, message: str = "") -> None:
        super().__init__(message or error_type.name)
        self.error_type = error_type


def _vec(values: Sequence[float], size: int) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != (size,):
        raise ValueError(f"expected {size} components, got {array.shape}")
    return array


def _identity() -> np.ndarray:
    return np.identity(4)


def _translation(x: float, y: float, z: float) -> np.ndarray:
    m = _identity()
    m[:3, 3] = (x, y, z)
    return m


def _scale(x: float, y: float, z: float) -> np.ndarray:
    return np.diag((x, y, z, 1.0))


def _rotation_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = _identity()
    m[1:3, 1:3] = ((c, -s), (s, c))
    return m


def _rotation_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = _identity()
    m[0, 0], m[0, 2], m[2, 0], m[2, 2] = c, s, -s, c
    return m


def _rotation_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = _identity()
    m[0:2, 0:2] = ((c, -s), (s, c))
    return m


def _perspective_lh(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    h = 1.0 / math.tan(0.5 * fov_y)
    w = h / aspect
    r = far / (far - near)
    return np.array(
        (
            (w, 0.0, 0.0, 0.0),
            (0.0, h, 0.0, 0.0),
            (0.0, 0.0, r, -r * near),
            (0.0, 0.0, 1.0, 0.0),
        )
    )


def _look_at_rh(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    f = center - eye
    f = f / np.linalg.norm(f)
    s = np.cross(f, up)
    s = s / np.linalg.norm(s)
    u = np.cross(s, f)
    m = _identity()
    m[0, :3], m[0, 3] = s, -eye.dot(s)
    m[1, :3], m[1, 3] = u, -eye.dot(u)
    m[2, :3], m[2, 3] = -f, eye.dot(f)
    return m


class SkinRender:
    """View state of a skin renderer: textures, pose, camera and FPS counting.

    Matrices are 4x4 numpy arrays acting on column vectors.
    """

    def __init__(
        self,
        error_callback: Optional[Callable[[ErrorType], None]] = None,
        state_callback: Optional[Callable[[StateType], None]] = None,
        fps_callback: Optional[Callable[[int], None]] = None,
    ) -> None:
        self._enable_cape = False
        self._enable_top = False
        self.switch_model = False
        self.switch_skin = False
        self.switch_type = False
        self.switch_back = False
        self._animation = False

        self._render_type = SkinRenderType.NORMAL
        self._back_color = np.array([0.0, 0.0, 0.0, 1.0])
        self._skin_type = SkinType.UNKNOWN

        self.skin_tex: Optional[Image.Image] = None
        self.cape: Optional[Image.Image] = None

        self.time = 0.0
        self.fps = 0

        self.distance = 1.0
        self.rot_xy = np.zeros(2)
        self.diff_xy = np.zeros(2)
        self.xy = np.zeros(2)
        self.save_xy = np.zeros(2)
        self.last_xy = np.zeros(2)
        self.last = _identity()

        self.skin_animation = SkinAnimation()

        self.have_cape = False
        self.have_skin = False

        self._arm_rotate = np.zeros(3)
        self._leg_rotate = np.zeros(3)
        self._head_rotate = np.zeros(3)

        self.error_callback = error_callback
        self.state_callback = state_callback
        self.fps_callback = fps_callback

        self.width = 800
        self.height = 600

    # -- lifecycle ---------------------------------------------------------

    def close(self) -> None:
        """Stop the animation for good."""
        self.skin_animation.close()

    def __enter__(self) -> "SkinRender":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- properties --------------------------------------------------------

    @property
    def animation(self) -> bool:
        return self._animation

    @animation.setter
    def animation(self, value: bool) -> None:
        self.skin_animation.run = value
        self._animation = value

    @property
    def skin_type(self) -> SkinType:
        return self._skin_type

    @skin_type.setter
    def skin_type(self, value: SkinType) -> None:
        if self._skin_type != value:
            self.skin_animation.skin_type = value
            self.switch_model = True
            self._skin_type = value

    @property
    def back_color(self) -> np.ndarray:
        return self._back_color

    @back_color.setter
    def back_color(self, color: Sequence[float]) -> None:
        self._back_color = _vec(color, 4)
        self.switch_back = True

    @property
    def render_type(self) -> SkinRenderType:
        return self._render_type

    @render_type.setter
    def render_type(self, value: SkinRenderType) -> None:
        self._render_type = value
        self.switch_type = True

    @property
    def enable_cape(self) -> bool:
        return self._enable_cape

    @enable_cape.setter
    def enable_cape(self, value: bool) -> None:
        self._enable_cape = value
        self.switch_type = True

    @property
    def enable_top(self) -> bool:
        return self._enable_top

    @enable_top.setter
    def enable_top(self, value: bool) -> None:
        self._enable_top = value
        self.switch_type = True

    @property
    def arm_rotate(self) -> np.ndarray:
        return self._arm_rotate

    @arm_rotate.setter
    def arm_rotate(self, rotate: Sequence[float]) -> None:
        self._arm_rotate = _vec(rotate, 3)

    @property
    def leg_rotate(self) -> np.ndarray:
        return self._leg_rotate

    @leg_rotate.setter
    def leg_rotate(self, rotate: Sequence[float]) -> None:
        self._leg_rotate = _vec(rotate, 3)

    @property
    def head_rotate(self) -> np.ndarray:
        return self._head_rotate

    @head_rotate.setter
    def head_rotate(self, rotate: Sequence[float]) -> None:
        self._head_rotate = _vec(rotate, 3)

    # -- interaction -------------------------------------------------------

    def pointer_pressed(self, key_type: KeyType, point: Sequence[float]) -> None:
        """Start a drag: left rotates, right moves the model."""
        x, y = point
        if key_type == KeyType.LEFT:
            self.diff_xy = np.array([x, -y], dtype=float)
        elif key_type == KeyType.RIGHT:
            self.last_xy = np.array([x, y], dtype=float)

    def pointer_released(self, key_type: KeyType, point: Sequence[float]) -> None:
        """End a drag; a right drag keeps the model where it was moved."""
        if key_type == KeyType.RIGHT:
            self.save_xy = self.xy.copy()

    def pointer_moved(self, key_type: KeyType, point: Sequence[float]) -> None:
        """Continue a drag started with :meth:`pointer_pressed`."""
        x, y = point
        if key_type == KeyType.LEFT:
            self.rot_xy = np.array(
                [(y + self.diff_xy[0 + 1]) * 2.0, (x - self.diff_xy[0]) * 2.0]
            )
            self.diff_xy = np.array([x, -y], dtype=float)
        elif key_type == KeyType.RIGHT:
            self.xy = np.array(
                [
                    -(self.last_xy[0] - x) / 100.0 + self.save_xy[0],
                    (self.last_xy[1] - y) / 100.0 + self.save_xy[1],
                ]
            )

    def pointer_wheel_changed(self, is_post: bool) -> None:
        """Zoom in (``is_post``) or out by one step."""
        self.distance += 0.1 if is_post else -0.1

    def rotate(self, x: float, y: float) -> None:
        self.rot_xy = self.rot_xy + (x, y)

    def position(self, x: float, y: float) -> None:
        self.xy = self.xy + (x, y)

    def add_distance(self, x: float) -> None:
        self.distance += x

    # -- textures ----------------------------------------------------------

    def set_skin_tex(self, skin: Optional[Image.Image]) -> None:
        """Set the skin bitmap, or clear it with ``None``.

        Raises :class:`SkinRenderError` if the skin is not 64 pixels wide.
        """
        if skin is None:
            self.have_skin = False
            return
        if skin.size[0] != _SKIN_WIDTH:
            raise SkinRenderError(
                ErrorType.INVALID_SKIN, f"skin width must be {_SKIN_WIDTH}"
            )
        self.skin_tex = skin.copy()
        self.switch_skin = True
        self.have_skin = True
        self._on_state_change(StateType.SKIN_LOADED)

    def set_cape_tex(self, cape: Optional[Image.Image]) -> None:
        """Set the cape bitmap, or clear it with ``None``."""
        if cape is None:
            self.have_cape = False
            return
        self.cape = cape
        self.switch_skin = True
        self.have_cape = True
        self._on_state_change(StateType.CAPE_LOADED)

    # -- per frame ---------------------------------------------------------

    def reset_position(self) -> None:
        """Return the camera to its starting distance, offset and orientation."""
        self.distance = 1.0
        self.diff_xy = np.zeros(2)
        self.xy = np.zeros(2)
        self.save_xy = np.zeros(2)
        self.last_xy = np.zeros(2)
        self.last = _identity()

    def tick(self, time: float) -> None:
        """Advance by ``time`` seconds: animation, pending rotation and FPS count."""
        if self._animation:
            self.skin_animation.tick(time)
            self._head_rotate = self.skin_animation.head.copy()
            self._arm_rotate = self.skin_animation.arm.copy()
            self._leg_rotate = self.skin_animation.leg.copy()

        if self.rot_xy[0] != 0.0 or self.rot_xy[1] != 0.0:
            rot_x = _rotation_x(self.rot_xy[0] / 360.0)
            rot_y = _rotation_y(self.rot_xy[1] / 360.0)
            self.last = self.last @ rot_x @ rot_y
            self.rot_xy = np.zeros(2)

        self.fps += 1
        self.time += time
        if self.time >= 1.0:
            self.time -= 1.0
            self._on_fps_update(self.fps)
            self.fps = 0

    def get_matrix(self, part_type: ModelPartType) -> np.ndarray:
        """Return the transform of a model part, or a camera matrix."""
        enable = self._animation
        arm_width = 1.375 if self._skin_type == SkinType.NEW_SLIM else 1.5
        anim = self.skin_animation

        if part_type == ModelPartType.HEAD:
            rot = anim.head if enable else self._head_rotate
            return (
                _translation(0.0, VALUE, 0.0)
                @ _rotation_z(rot[0] / 360.0)
                @ _rotation_x(rot[1] / 360.0)
                @ _rotation_y(rot[2] / 360.0)
                @ _translation(0.0, VALUE * 1.5, 0.0)
            )
        if part_type in (ModelPartType.LEFT_ARM, ModelPartType.RIGHT_ARM):
            rot = anim.arm if enable else self._arm_rotate
            sign = 1.0 if part_type == ModelPartType.LEFT_ARM else -1.0
            return (
                _translation(sign * VALUE / 2.0, -(arm_width * VALUE), 0.0)
                @ _rotation_z(sign * rot[0] / 360.0)
                @ _rotation_x(sign * rot[1] / 360.0)
                @ _translation(
                    sign * (arm_width * VALUE - VALUE / 2.0), arm_width * VALUE, 0.0
                )
            )
        if part_type in (ModelPartType.LEFT_LEG, ModelPartType.RIGHT_LEG):
            rot = anim.leg if enable else self._leg_rotate
            sign = 1.0 if part_type == ModelPartType.LEFT_LEG else -1.0
            return (
                _translation(0.0, -1.5 * VALUE, 0.0)
                @ _rotation_z(sign * rot[0] / 360.0)
                @ _rotation_x(sign * rot[1] / 360.0)
                @ _translation(sign * VALUE * 0.5, -VALUE * 1.5, 0.0)
            )
        if part_type == ModelPartType.PROJ:
            return _perspective_lh(math.pi / 4.0, self.width / self.height, 0.1, 10.0)
        if part_type == ModelPartType.VIEW:
            return _look_at_rh(
                np.array([0.0, 0.0, 7.0]),
                np.zeros(3),
                np.array([0.0, 1.0, 0.0]),
            )
        if part_type == ModelPartType.MODEL:
            return (
                self.last
                @ _translation(self.xy[0], self.xy[1], 0.0)
                @ _scale(self.distance, self.distance, self.distance)
            )
        if part_type == ModelPartType.CAPE:
            cape_rot = 11.8 + anim.cape if enable else 6.3
            return (
                _translation(0.0, -2.0 * VALUE, -VALUE * 0.1)
                @ _rotation_x(cape_rot * math.pi / 180.0)
                @ _translation(0.0, 1.6 * VALUE, -VALUE * 0.5)
            )
        return _identity()

    # -- notifications -----------------------------------------------------

    def _on_error(self, error: ErrorType) -> None:
        if self.error_callback is not None:
            self.error_callback(error)

    def _on_state_change(self, state: StateType) -> None:
        if self.state_callback is not None:
            self.state_callback(state)

    def _on_fps_update(self, fps: int) -> None:
        if self.fps_callback is not None:
            self.fps_callback(fps)