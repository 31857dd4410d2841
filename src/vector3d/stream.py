"""Text stream output and input for Vector3D.

Output is ``"x, y, z"`` with no trailing newline. Input reads three tokens in
order x, y, z. By default commas count as delimiters, so the output format
reads back directly; set ``FormatConfig.accept_commas`` to ``False`` for
whitespace-only tokens.

Parse failures surface as Python's own ``ValueError`` (pydantic's
``ValidationError``) and exhausted input as ``EOFError``. The target vector
is not modified when reading fails.
"""

import io
import logging
from typing import TextIO, TypeVar

from .config import FormatConfig
from .constants import Axis
from .vector_3d import Vector3D

logger = logging.getLogger(__name__)

StreamT = TypeVar("StreamT", bound=TextIO)


def format_vector(vector: Vector3D, config: FormatConfig | None = None) -> str:
    config = config or FormatConfig()
    return config.separator.join(str(c) for c in vector.components())


def write_vector(stream: StreamT, vector: Vector3D, config: FormatConfig | None = None) -> StreamT:
    """Write the vector's components to a text stream, without a newline."""
    stream.write(format_vector(vector, config))
    return stream


def _read_token(stream: TextIO, delimiters: str) -> str:
    chars: list[str] = []
    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace() or ch in delimiters:
            if chars:
                break
            continue
        chars.append(ch)

    if not chars:
        raise EOFError("Unexpected end of input while reading a vector component")
    return "".join(chars)


def read_vector(stream: StreamT, vector: Vector3D, config: FormatConfig | None = None) -> StreamT:
    """Read three components from a text stream into ``vector``.

    Args:
        stream: Text stream positioned before the x component.
        vector: Vector whose components are overwritten. Tokens are coerced
            to its element type, so ``Vector3D[int]`` rejects ``"1.5"``.
        config: Tokenization options; defaults to ``FormatConfig()``.

    Returns:
        The same stream, so reads can be chained.

    Raises:
        ValueError: If a token is not a number of the element type.
        EOFError: If the stream ends before three tokens are read.
    """
    config = config or FormatConfig()
    delimiters = "," if config.accept_commas else ""

    tokens = {axis.value: _read_token(stream, delimiters) for axis in Axis}
    parsed = type(vector).model_validate(tokens)

    for axis in Axis:
        vector.set_component(axis, parsed.component(axis))

    logger.debug(f"Read vector ({vector}) from tokens {list(tokens.values())}")
    return stream


def parse_vector(
    text: str,
    model: type[Vector3D] = Vector3D,
    config: FormatConfig | None = None,
) -> Vector3D:
    """Build a new ``model`` instance from its text form."""
    vector = model()
    read_vector(io.StringIO(text), vector, config)
    return vector
