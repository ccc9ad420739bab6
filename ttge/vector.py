"""Small fixed-size float vectors with element-wise arithmetic."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Vector1", "Vector2", "Vector3", "Vector4"]

_Scalar = (int, float)


@dataclass(slots=True)
class Vector1:
    """A one-component vector."""

    x: float = 0.0

    def __add__(self, other: Vector1) -> Vector1:
        if not isinstance(other, Vector1):
            return NotImplemented
        return Vector1(self.x + other.x)

    def __sub__(self, other: Vector1) -> Vector1:
        if not isinstance(other, Vector1):
            return NotImplemented
        return Vector1(self.x - other.x)

    def __mul__(self, scalar: float) -> Vector1:
        if not isinstance(scalar, _Scalar):
            return NotImplemented
        return Vector1(self.x * scalar)

    def __truediv__(self, scalar: float) -> Vector1:
        if not isinstance(scalar, _Scalar):
            return NotImplemented
        return Vector1(self.x / scalar)


@dataclass(slots=True)
class Vector2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, _Scalar):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, _Scalar):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)


@dataclass(slots=True)
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, _Scalar):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, _Scalar):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)


@dataclass(slots=True)
class Vector4:
    """A four-component vector; ``w`` defaults to 1."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __mul__(self, scalar: float) -> Vector4:
        if not isinstance(scalar, _Scalar):
            return NotImplemented
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __truediv__(self, scalar: float) -> Vector4:
        if not isinstance(scalar, _Scalar):
            return NotImplemented
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)