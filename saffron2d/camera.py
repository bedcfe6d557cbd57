"""A 2D camera mapping world space to screen space by pan, zoom and rotation."""

from __future__ import annotations

from typing import Any, Callable, Union

from saffron2d import clock
from saffron2d.subscriber_list import SubscriberList
from saffron2d.transform import Rect, Transform
from saffron2d.vector import Vector2

FollowTarget = Union[Vector2, Callable[[], Vector2]]

_MIN_ZOOM = 0.9
_MAX_ZOOM = 3.0


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(value, upper))


class Camera:
    """Holds a view transform and updates it from per-frame input.

    ``input_source`` is called once per :meth:`update` and must return an
    object with these attributes:

    * ``pan`` -- true while dragging the view (both mouse buttons down)
    * ``swipe`` -- mouse movement since the last frame, a :class:`Vector2`
    * ``scroll`` -- vertical scroll amount this frame
    * ``rotate_left`` / ``rotate_right`` -- true while a rotate key is held
    * ``reset_pressed`` -- true on the frame the reset key went down

    Without an input source only following and scroll-free zoom apply.
    ``zoom_changed`` is invoked with the ratio of new to old zoom whenever
    :meth:`set_zoom` changes it; ``reset`` after :meth:`reset_transformation`.
    """

    def __init__(self, input_source: Callable[[], Any] | None = None,
                 frame_time: Callable[[], float] = clock.frame_time) -> None:
        self._input_source = input_source
        self._frame_time = frame_time
        self._enabled = True

        self._transform = Transform()
        self._position_transform = Transform()
        self._rotation_transform = Transform()
        self._zoom_transform = Transform()

        self._position = Vector2(0.0, 0.0)
        self._rotation = 0.0
        self._rps = 0.2  # rotations per second
        self._zoom = Vector2(1.0, 1.0)
        self._viewport_size = Vector2(0.0, 0.0)

        self._follow: FollowTarget | None = None

        self.reset = SubscriberList()
        self.zoom_changed = SubscriberList()

    # -- per-frame --------------------------------------------------------

    def update(self) -> None:
        """Apply following, panning, zooming, rotating and reset for one frame."""
        if not self._enabled:
            return

        dt = self._frame_time()
        state = self._input_source() if self._input_source is not None else None

        if self._follow is not None:
            self.set_center(self._follow_position())
        elif state is not None and state.pan:
            delta = state.swipe
            if delta.length_sq() > 0.0:
                delta = self._rotation_transform.inverse().transform_point(delta)
                delta = self._zoom_transform.inverse().transform_point(delta)
                delta = delta * -1.0
                self.apply_movement(delta)

        scroll = state.scroll if state is not None else 0.0
        self.apply_zoom(scroll / 100.0 + 1.0)

        angle = 0.0
        if state is not None:
            if state.rotate_left:
                angle += self._rps * 360.0 * dt
            if state.rotate_right:
                angle -= self._rps * 360.0 * dt
        self.apply_rotation(angle)

        if state is not None and state.reset_pressed:
            self.reset_transformation()

    # -- enabling ---------------------------------------------------------

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    # -- relative changes -------------------------------------------------

    def apply_movement(self, offset: Vector2) -> None:
        self.set_center(self._position + offset)

    def apply_zoom(self, factor: float) -> None:
        self._zoom = self._zoom * factor
        self._zoom_transform.scale(Vector2(factor, factor))
        self._update_transform()

    def apply_rotation(self, angle: float) -> None:
        self.set_rotation(self._rotation + angle)

    # -- absolute changes -------------------------------------------------

    def set_center(self, center: Vector2) -> None:
        self._position = center
        self._position_transform = Transform().translate(self._position)
        self._update_transform()

    def set_zoom(self, zoom: float) -> None:
        """Set the zoom level; zero is ignored."""
        if zoom == 0.0:
            return
        self.zoom_changed.invoke(zoom / self._zoom.x)
        self._zoom = Vector2(zoom, zoom)
        self._zoom_transform = Transform().scale(self._zoom, self._zoom)
        self._update_transform()

    def set_rotation(self, angle: float) -> None:
        self._rotation = angle
        self._rotation_transform = Transform().rotate(self._rotation)
        self._update_transform()

    def follow(self, target: FollowTarget) -> None:
        """Keep the camera centred on a point or on what a callable returns."""
        self._follow = target

    def unfollow(self) -> None:
        self._follow = None

    def _follow_position(self) -> Vector2:
        target = self._follow
        return target() if callable(target) else target

    # -- coordinate conversion --------------------------------------------

    def screen_to_world(self, value: Vector2 | Rect) -> Vector2 | Rect:
        """Map a point or rectangle from screen space to world space."""
        inverse = self._transform.inverse()
        if isinstance(value, Rect):
            return inverse.transform_rect(value)
        return inverse.transform_point(value)

    def world_to_screen(self, value: Vector2 | Rect) -> Vector2 | Rect:
        """Map a point or rectangle from world space to screen space."""
        if isinstance(value, Rect):
            return self._transform.transform_rect(value)
        return self._transform.transform_point(value)

    # -- state ------------------------------------------------------------

    @property
    def transform(self) -> Transform:
        return self._transform

    @transform.setter
    def transform(self, transform: Transform) -> None:
        self._transform = transform

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def zoom(self) -> float:
        return self._zoom.x

    @property
    def rotation_speed(self) -> float:
        return self._rps

    @property
    def viewport_size(self) -> Vector2:
        return self._viewport_size

    def viewport(self) -> tuple[Vector2, Vector2]:
        """World-space top-left and bottom-right corners of the visible area."""
        inverse = self._transform.inverse()
        top_left = Vector2(0.0, 0.0)
        bottom_right = Vector2(self._viewport_size.x, self._viewport_size.y)
        return inverse.transform_point(top_left), inverse.transform_point(bottom_right)

    def offset(self) -> Vector2:
        """Screen-space centre of the viewport."""
        return self._viewport_size / 2.0

    def set_viewport_size(self, viewport_size: Vector2) -> None:
        self._viewport_size = viewport_size

    def set_rotation_speed(self, rps: float) -> None:
        self._rps = rps

    def cap_zoom_level(self) -> None:
        """Clamp the zoom factors into the allowed range."""
        self._zoom = Vector2(_clamp(self._zoom.x, _MIN_ZOOM, _MAX_ZOOM),
                             _clamp(self._zoom.y, _MIN_ZOOM, _MAX_ZOOM))

    def reset_transformation(self) -> None:
        """Return to the origin with no rotation and unit zoom."""
        self.set_center(Vector2(0.0, 0.0))
        self.set_rotation(0.0)
        self.set_zoom(1.0)

        self._position_transform = Transform()
        self._rotation_transform = Transform()
        self._zoom_transform = Transform()

        self.reset.invoke()

    def _update_transform(self) -> None:
        transform = Transform()
        transform.translate(self.offset())
        transform.scale(self._zoom)
        transform.rotate(self._rotation)
        transform.translate(-self._position)
        self._transform = transform