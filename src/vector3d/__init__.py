"""Generic three-component vector value type with arithmetic, geometry and text I/O."""

from .config import FormatConfig, VectorConfig
from .constants import Axis
from .operations import cross_product, distance, scalar_product
from .stream import format_vector, parse_vector, read_vector, write_vector
from .vector_3d import Vector3D

__all__ = [
    "Axis",
    "FormatConfig",
    "Vector3D",
    "VectorConfig",
    "cross_product",
    "distance",
    "format_vector",
    "parse_vector",
    "read_vector",
    "scalar_product",
    "write_vector",
]
