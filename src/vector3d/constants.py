"""Shared constants for the Vector3D model and its text format."""

import os
from enum import StrEnum

DEFAULT_SEPARATOR = ", "
SKIP_VALIDATION = os.getenv("SKIP_VALIDATION", "0") == "1"


class Axis(StrEnum):
    X = "x"
    Y = "y"
    Z = "z"
