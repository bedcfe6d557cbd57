"""Frame-based sprite animations over a sprite sheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from saffron2d.randomness import Color
from saffron2d.transform import Rect, Transform
from saffron2d.vector import Vector2

_TEXCOORD_NUDGE = 0.0001


@dataclass(frozen=True)
class IntRect:
    """An integer rectangle locating one frame in a sprite sheet."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


def _white() -> Color:
    return Color(255, 255, 255, 255)


@dataclass
class Vertex:
    """A point of a textured quad."""

    position: Vector2 = field(default_factory=Vector2)
    color: Color = field(default_factory=_white)
    tex_coords: Vector2 = field(default_factory=Vector2)


class Animation:
    """An ordered list of frames taken from one sprite sheet."""

    def __init__(self, sprite_sheet: Any = None) -> None:
        self.sprite_sheet = sprite_sheet
        self._frames: list[IntRect] = []

    def add_frame(self, rect: IntRect) -> None:
        self._frames.append(rect)

    def frame(self, index: int) -> IntRect:
        return self._frames[index]

    def __len__(self) -> int:
        return len(self._frames)


def _micros(seconds: float) -> int:
    return round(seconds * 1_000_000)


class AnimatedSprite:
    """Steps through an animation's frames as time passes; times are in seconds."""

    def __init__(self, frame_time: float = 0.2, paused: bool = False, looped: bool = True) -> None:
        self._animation: Animation | None = None
        self._frame_time = 0.0
        self.frame_time = frame_time
        self._current_time = 0.0
        self._current_frame = 0
        self._paused = paused
        self.looped = looped
        self.texture: Any = None
        self.vertices = [Vertex() for _ in range(4)]
        self.transform = Transform()

    @property
    def frame_time(self) -> float:
        return self._frame_time

    @frame_time.setter
    def frame_time(self, value: float) -> None:
        if _micros(value) <= 0:
            raise ValueError(f"frame time must be positive: {value}")
        self._frame_time = value

    @property
    def animation(self) -> Animation | None:
        return self._animation

    @property
    def current_frame(self) -> int:
        return self._current_frame

    def set_animation(self, animation: Animation) -> None:
        """Switch to ``animation`` and show its first frame."""
        self._animation = animation
        self.texture = animation.sprite_sheet
        self._current_frame = 0
        self.set_frame(0)

    def play(self, animation: Animation | None = None) -> None:
        """Resume playing, switching to ``animation`` first if it differs."""
        if animation is not None and self._animation is not animation:
            self.set_animation(animation)
        self._paused = False

    def pause(self) -> None:
        self._paused = True

    def stop(self) -> None:
        """Pause and rewind to the first frame."""
        self._paused = True
        self._current_frame = 0
        self.set_frame(0)

    def set_color(self, color: Color) -> None:
        for vertex in self.vertices:
            vertex.color = color

    def local_bounds(self) -> Rect:
        """Size of the current frame, with its origin at zero."""
        if self._animation is None:
            raise ValueError("no animation set")
        rect = self._animation.frame(self._current_frame)
        return Rect(0.0, 0.0, float(abs(rect.width)), float(abs(rect.height)))

    def global_bounds(self) -> Rect:
        return self.transform.transform_rect(self.local_bounds())

    def is_playing(self) -> bool:
        return not self._paused

    def set_frame(self, new_frame: int, reset_time: bool = True) -> None:
        """Set the quad's geometry and texture coordinates to ``new_frame``."""
        if self._animation is not None:
            rect = self._animation.frame(new_frame)
            width, height = float(rect.width), float(rect.height)
            self.vertices[0].position = Vector2(0.0, 0.0)
            self.vertices[1].position = Vector2(0.0, height)
            self.vertices[2].position = Vector2(width, height)
            self.vertices[3].position = Vector2(width, 0.0)

            left = float(rect.left) + _TEXCOORD_NUDGE
            right = left + width
            top = float(rect.top)
            bottom = top + height
            self.vertices[0].tex_coords = Vector2(left, top)
            self.vertices[1].tex_coords = Vector2(left, bottom)
            self.vertices[2].tex_coords = Vector2(right, bottom)
            self.vertices[3].tex_coords = Vector2(right, top)

        if reset_time:
            self._current_time = 0.0

    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time``, moving at most one frame."""
        if self._paused or self._animation is None:
            return
        self._current_time += delta_time
        if self._current_time < self._frame_time:
            return
        # Keep the remainder past the frame boundary.
        self._current_time = (_micros(self._current_time) % _micros(self._frame_time)) / 1_000_000

        if self._current_frame + 1 < len(self._animation):
            self._current_frame += 1
        elif not self.looped:
            self._paused = True
        else:
            self._current_frame = 0

        self.set_frame(self._current_frame, False)