"""Walking animation of the player model."""

from __future__ import annotations

import numpy as np

from .skin import SkinType

FRAME_COUNT = 120
_HALF = 60
_FRAME_TIME = 0.01


def _initial_arm() -> np.ndarray:
    return np.array([40.0, 0.0, 0.0])


class SkinAnimation:
    """Animated rotations (in degrees) of arms, legs, head and cape."""

    def __init__(self) -> None:
        self._frame = 0
        self._count = 0.0
        self._closed = False
        self.run = False
        self.skin_type = SkinType.UNKNOWN
        self.arm = _initial_arm()
        self.leg = np.zeros(3)
        self.head = np.zeros(3)
        self.cape = 0.0

    @property
    def frame(self) -> int:
        """Current animation frame, in ``0..FRAME_COUNT``."""
        return self._frame

    @frame.setter
    def frame(self, value: int) -> None:
        self._frame = value % FRAME_COUNT

    def close(self) -> None:
        """Stop the animation for good."""
        self.run = False
        self._closed = True

    def tick(self, time: float) -> bool:
        """Advance by ``time`` seconds; return False once the animation is closed."""
        if self.run:
            self._count += time
            while self._count > _FRAME_TIME:
                self._count -= _FRAME_TIME
                self._frame += 1
            if self._frame >= FRAME_COUNT:
                self._frame = 0
            self._apply_frame(float(self._frame))
        return not self._closed

    def _apply_frame(self, frame: float) -> None:
        if frame <= _HALF:
            self.arm[1] = frame * 6.0 - 180.0
            self.leg[1] = 90.0 - frame * 3.0
            self.cape = frame / 10.0
            head = frame - 30.0
        else:
            self.cape = 6.0 - (frame - _HALF) / 10.0
            self.arm[1] = 540.0 - frame * 6.0
            self.leg[1] = frame * 3.0 - 270.0
            head = 90.0 - frame
        if self.skin_type == SkinType.NEW_SLIM:
            self.head[2] = 0.0
            self.head[0] = head
        else:
            self.head[0] = 0.0
            self.head[2] = head

    def reset(self) -> None:
        """Return to the first frame and the resting pose."""
        self._frame = 0
        self._count = 0.0
        self._closed = False
        self.arm = _initial_arm()
        self.leg = np.zeros(3)
        self.head = np.zeros(3)
        self.cape = 0.0