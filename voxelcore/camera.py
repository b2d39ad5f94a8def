"""Perspective camera with view/projection matrices and frustum culling.

Matrices are 4x4 numpy arrays indexed ``[column][row]``, so ``m[3]`` is the
translation column. To transform a column vector ``v`` use ``m.T @ v``.
Rotations are unit quaternions given as ``(w, x, y, z)``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

Quaternion = tuple[float, float, float, float]

_IDENTITY_ROTATION: Quaternion = (1.0, 0.0, 0.0, 0.0)


def _vec3(value: Iterable[float]) -> np.ndarray:
    return np.asarray(tuple(value), dtype=np.float64).reshape(3)


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def _rotate(q: Quaternion, v: np.ndarray) -> np.ndarray:
    w, x, y, z = q
    axis = np.array([x, y, z], dtype=np.float64)
    uv = np.cross(axis, v)
    uuv = np.cross(axis, uv)
    return v + 2.0 * (w * uv + uuv)


def _perspective_fov_rh_zo(fov: float, width: float, height: float, near: float, far: float) -> np.ndarray:
    if width <= 0 or height <= 0 or fov <= 0:
        raise ValueError("width, height and fov must be positive")
    h = math.cos(0.5 * fov) / math.sin(0.5 * fov)
    w = h * height / width
    result = np.zeros((4, 4), dtype=np.float64)
    result[0][0] = w
    result[1][1] = h
    result[2][2] = far / (near - far)
    result[2][3] = -1.0
    result[3][2] = -(far * near) / (far - near)
    return result


def _look_at_rh(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    result = np.identity(4, dtype=np.float64)
    result[0][0], result[1][0], result[2][0] = s
    result[0][1], result[1][1], result[2][1] = u
    result[0][2], result[1][2], result[2][2] = -f
    result[3][0] = -float(np.dot(s, eye))
    result[3][1] = -float(np.dot(u, eye))
    result[3][2] = float(np.dot(f, eye))
    return result


class Plane:
    """A plane ``a*x + b*y + c*z + d = 0`` whose normal points to the inside."""

    def __init__(self, components: Iterable[float]) -> None:
        self.components = np.asarray(tuple(components), dtype=np.float64).reshape(4)

    @classmethod
    def from_points(cls, p0: Iterable[float], p1: Iterable[float], p2: Iterable[float]) -> Plane:
        """The plane through three points, normal along ``(p1 - p0) x (p2 - p0)``."""
        a, b, c = _vec3(p0), _vec3(p1), _vec3(p2)
        n = _normalize(np.cross(b - a, c - a))
        return cls((n[0], n[1], n[2], -float(np.dot(n, a))))

    @property
    def normal(self) -> np.ndarray:
        return self.components[:3].copy()

    def distance(self, p: Iterable[float]) -> float:
        """Signed distance of a point from the plane."""
        return float(np.dot(self.components[:3], _vec3(p)) + self.components[3])

    def test_aabb(self, origin: Iterable[float], extent: Iterable[float]) -> bool:
        """Whether any part of the box ``[origin, origin + extent]`` lies on the inner side."""
        corner = _vec3(origin) + np.where(self.components[:3] >= 0, _vec3(extent), 0.0)
        return self.distance(corner) >= 0

    def __repr__(self) -> str:
        return f"Plane({tuple(float(c) for c in self.components)})"


@dataclass
class Frustum:
    """Six inward-facing planes bounding the visible volume."""

    near: Plane
    far: Plane
    left: Plane
    right: Plane
    top: Plane
    bottom: Plane

    def __iter__(self) -> Iterator[Plane]:
        return iter((self.near, self.far, self.left, self.right, self.top, self.bottom))

    def test_aabb(self, origin: Iterable[float], extent: Iterable[float]) -> bool:
        """Whether the box may be visible (it is not wholly outside any plane)."""
        o, e = _vec3(origin), _vec3(extent)
        return all(plane.test_aabb(o, e) for plane in self)


class Camera:
    """A right-handed perspective camera with a [0, 1] depth range and flipped Y."""

    def __init__(self, width: int, height: int, fov: float, near_plane: float, far_plane: float) -> None:
        self._width = width
        self._height = height
        self._fov = fov
        self._near_plane = near_plane
        self._far_plane = far_plane
        self._position = np.zeros(3, dtype=np.float64)
        self._rotation: Quaternion = _IDENTITY_ROTATION
        self._create_projection_matrix()
        self._create_view_matrix()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def fov(self) -> float:
        """Vertical field of view in radians."""
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self._fov = value
        self._create_projection_matrix()

    @property
    def near_plane(self) -> float:
        return self._near_plane

    @near_plane.setter
    def near_plane(self, value: float) -> None:
        self._near_plane = value
        self._create_projection_matrix()

    @property
    def far_plane(self) -> float:
        return self._far_plane

    @far_plane.setter
    def far_plane(self, value: float) -> None:
        self._far_plane = value
        self._create_projection_matrix()

    @property
    def position(self) -> tuple[float, float, float]:
        return tuple(float(c) for c in self._position)  # type: ignore[return-value]

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self._position = _vec3(value)
        self._create_view_matrix()

    @property
    def rotation(self) -> Quaternion:
        return self._rotation

    @rotation.setter
    def rotation(self, value: Iterable[float]) -> None:
        w, x, y, z = (float(c) for c in value)
        self._rotation = (w, x, y, z)
        self._create_view_matrix()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view_matrix.copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection_matrix.copy()

    @property
    def frustum(self) -> Frustum:
        return self._frustum

    def set_size(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._create_projection_matrix()

    def _create_projection_matrix(self) -> None:
        matrix = _perspective_fov_rh_zo(
            self._fov, float(self._width), float(self._height), self._near_plane, self._far_plane
        )
        matrix[1][1] *= -1  # flip Y for a top-left origin
        self._projection_matrix = matrix

    def _create_view_matrix(self) -> None:
        right = _rotate(self._rotation, np.array([1.0, 0.0, 0.0]))
        up = _rotate(self._rotation, np.array([0.0, 1.0, 0.0]))
        forward = _rotate(self._rotation, np.array([0.0, 0.0, -1.0]))
        self._view_matrix = _look_at_rh(self._position, self._position + forward, up)
        self._frustum = self._create_frustum(forward, up, right)

    def _create_frustum(self, forward: np.ndarray, up: np.ndarray, right: np.ndarray) -> Frustum:
        aspect = self._width / self._height
        tan_half = math.tan(self._fov / 2)

        near_height = 2 * tan_half * self._near_plane
        near_width = near_height * aspect
        far_height = 2 * tan_half * self._far_plane
        far_width = far_height * aspect

        far_center = self._position + self._far_plane * forward
        near_center = self._position + self._near_plane * forward

        far_bottom_left = far_center - up * (far_height / 2) - right * (far_width / 2)
        far_bottom_right = far_bottom_left + right * far_width
        far_top_left = far_bottom_left + up * far_height
        far_top_right = far_bottom_right + up * far_height

        near_bottom_left = near_center - up * (near_height / 2) - right * (near_width / 2)
        near_bottom_right = near_bottom_left + right * near_width
        near_top_left = near_bottom_left + up * near_height
        near_top_right = near_bottom_right + up * near_height

        return Frustum(
            near=Plane.from_points(near_bottom_right, near_bottom_left, near_top_right),
            far=Plane.from_points(far_bottom_left, far_bottom_right, far_top_left),
            left=Plane.from_points(near_bottom_left, far_bottom_left, near_top_left),
            right=Plane.from_points(far_bottom_right, near_bottom_right, far_top_right),
            top=Plane.from_points(near_top_right, near_top_left, far_top_right),
            bottom=Plane.from_points(near_bottom_left, near_bottom_right, far_bottom_left),
        )