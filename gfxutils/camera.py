"""First-person camera driven by movement flags and mouse motion."""

from __future__ import annotations

import math

from .mat4 import Mat4
from .vec3 import Vec3


class Camera:
    """Free-flying camera defined by a position, yaw and pitch in degrees."""

    def __init__(
        self,
        position: Vec3,
        move_speed: float = 0.015,
        mouse_sens: float = 0.15,
        world_up: Vec3 = Vec3(0.0, 1.0, 0.0),
    ) -> None:
        self.position = position
        self.move_speed = move_speed
        self.mouse_sens = mouse_sens
        self.world_up = world_up
        self.yaw = -90.0
        self.pitch = 0.0
        self._moving_front = False
        self._moving_back = False
        self._moving_left = False
        self._moving_right = False
        self._mouse_enabled = False
        self._last_mouse: tuple[float, float] | None = None
        self._update_direction()

    def _update_direction(self) -> None:
        yaw, pitch = math.radians(self.yaw), math.radians(self.pitch)
        self.direction = Vec3.normalize(Vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ))
        self.right = Vec3.normalize(Vec3.cross(self.direction, self.world_up))
        self.up = Vec3.normalize(Vec3.cross(self.right, self.direction))

    def move_front(self, active: bool) -> None:
        self._moving_front = active

    def move_back(self, active: bool) -> None:
        self._moving_back = active

    def move_right(self, active: bool) -> None:
        self._moving_right = active

    def move_left(self, active: bool) -> None:
        self._moving_left = active

    def enable_mouse(self) -> None:
        self._mouse_enabled = True

    def disable_mouse(self) -> None:
        self._mouse_enabled = False
        self._last_mouse = None

    def mouse_move(self, x: float, y: float) -> None:
        """Turn the camera by the mouse offset since the previous event."""
        if not self._mouse_enabled:
            return
        if self._last_mouse is None:
            self._last_mouse = (x, y)
            return
        last_x, last_y = self._last_mouse
        self._last_mouse = (x, y)
        self.yaw += (x - last_x) * self.mouse_sens
        self.pitch += (last_y - y) * self.mouse_sens
        self.pitch = max(-89.0, min(89.0, self.pitch))
        self._update_direction()

    def update_position(self) -> None:
        """Advance one step in every direction currently flagged."""
        if self._moving_front:
            self.position = self.position + self.direction * self.move_speed
        if self._moving_back:
            self.position = self.position - self.direction * self.move_speed
        if self._moving_right:
            self.position = self.position + self.right * self.move_speed
        if self._moving_left:
            self.position = self.position - self.right * self.move_speed

    def view_matrix(self) -> Mat4:
        return Mat4.look_at(self.position, self.position + self.direction, self.up)