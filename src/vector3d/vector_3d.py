"""Generic three-component vector model.

``Vector3D[int]`` and ``Vector3D[float]`` pin the element type; the bare
``Vector3D`` accepts either per component. Arithmetic follows Python's numeric
promotion, and numeric edge cases are never trapped: division by zero gives
IEEE ``inf``/``nan`` components instead of raising.
"""

import math
import numbers
from typing import Generic, TypeVar, cast

import msgpack
import numpy as np
from pydantic import BaseModel, ConfigDict

from .constants import DEFAULT_SEPARATOR, SKIP_VALIDATION, Axis

T = TypeVar("T", int, float)


def _divide(a: float, b: float) -> float:
    # IEEE-754 semantics: x/0 -> +-inf, 0/0 -> nan
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.true_divide(a, b))


def _vector(x: float, y: float, z: float) -> "Vector3D":
    # Components computed from validated vectors are stored as-is
    return Vector3D.model_construct(x=x, y=y, z=z)


class Vector3D(BaseModel, Generic[T]):
    model_config = ConfigDict(validate_default=True)

    x: T = 0
    y: T = 0
    z: T = 0

    @classmethod
    def from_components(cls, x: T, y: T, z: T) -> "Vector3D[T]":
        return cls(x=x, y=y, z=z)

    # Component access

    def components(self) -> tuple[T, T, T]:
        return (self.x, self.y, self.z)

    def component(self, axis: Axis | str) -> T:
        return cast(T, getattr(self, Axis(axis).value))

    def set_component(self, axis: Axis | str, value: T) -> None:
        """Replace one component. The value is stored without validation."""
        setattr(self, Axis(axis).value, value)

    def set_x(self, value: T) -> None:
        self.x = value

    def set_y(self, value: T) -> None:
        self.y = value

    def set_z(self, value: T) -> None:
        self.z = value

    # Derived scalars

    def module(self) -> float:
        """Euclidean length, always returned as a float."""
        return math.sqrt(float(self.x * self.x + self.y * self.y + self.z * self.z))

    def direction(self) -> "Vector3D[float]":
        """Unit vector along this one.

        A zero-length vector gives ``nan`` components rather than an error.
        """
        return self / self.module()

    # Operators

    def __add__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return _vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return _vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: "Vector3D | float") -> "Vector3D":
        # vector * vector is the Hadamard product, not the dot product
        if isinstance(other, Vector3D):
            return _vector(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, numbers.Real):
            return _vector(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3D":
        if isinstance(other, numbers.Real):
            return _vector(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: "Vector3D | float") -> "Vector3D[float]":
        if isinstance(other, Vector3D):
            return _vector(
                _divide(self.x, other.x),
                _divide(self.y, other.y),
                _divide(self.z, other.z),
            )
        if isinstance(other, numbers.Real):
            return _vector(_divide(self.x, other), _divide(self.y, other), _divide(self.z, other))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        # Exact comparison, no tolerance; nan components never compare equal
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __str__(self) -> str:
        return DEFAULT_SEPARATOR.join(str(c) for c in self.components())

    # Serialization

    def to_bytes(self) -> bytes:
        return cast(bytes, msgpack.packb(self.model_dump()))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Vector3D[T]":
        if SKIP_VALIDATION:
            return cls.model_construct(**msgpack.unpackb(data))
        return cls.model_validate(msgpack.unpackb(data))
