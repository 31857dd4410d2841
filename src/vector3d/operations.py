"""Products and distances between two Vector3D values."""

from .vector_3d import Vector3D, _vector


def scalar_product(a: Vector3D, b: Vector3D) -> float:
    """Dot product: the sum of the Hadamard product's components, as a float."""
    c = a * b
    return float(c.x + c.y + c.z)


def cross_product(a: Vector3D, b: Vector3D) -> Vector3D:
    return _vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def distance(a: Vector3D, b: Vector3D) -> float:
    """Cartesian distance between two points."""
    return (a - b).module()
