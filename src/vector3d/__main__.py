"""Command-line entry point evaluating a single vector operation."""

import argparse
import logging
import operator
import sys
from collections.abc import Callable

from .config import FormatConfig, VectorConfig
from .operations import cross_product, distance, scalar_product
from .stream import parse_vector, write_vector
from .vector_3d import Vector3D

logger = logging.getLogger(__name__)

UNARY_OPERATIONS = ("module", "direction")

VECTOR_OPERATIONS: dict[str, Callable[[Vector3D, Vector3D], Vector3D | float | bool]] = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
    "divide": operator.truediv,
    "equals": operator.eq,
    "dot": scalar_product,
    "cross": cross_product,
    "distance": distance,
}

BINARY_OPERATIONS = ("scale", *VECTOR_OPERATIONS)

ELEMENT_MODELS: dict[str, type[Vector3D]] = {
    "int": Vector3D[int],
    "float": Vector3D[float],
}


def _parse_scalar(text: str, element: str | None) -> float:
    if element == "int":
        return int(text)
    if element == "float":
        return float(text)
    try:
        return int(text)
    except ValueError:
        return float(text)


def _is_scalar(text: str) -> bool:
    return len(text.replace(",", " ").split()) == 1


def evaluate(
    operation: str,
    a: Vector3D,
    b_text: str | None,
    model: type[Vector3D],
    element: str | None,
    fmt: FormatConfig,
) -> Vector3D | float | bool:
    """Apply ``operation`` to ``a`` and the (unparsed) second operand."""
    if operation == "module":
        return a.module()
    if operation == "direction":
        return a.direction()

    if b_text is None:
        raise ValueError(f"Operation '{operation}' needs a second operand")

    if operation == "scale":
        return _parse_scalar(b_text, element) * a
    if operation == "divide" and _is_scalar(b_text):
        return a / _parse_scalar(b_text, element)

    if operation not in VECTOR_OPERATIONS:
        raise ValueError(f"Unknown operation: {operation}")

    b = parse_vector(b_text, model, fmt)
    return VECTOR_OPERATIONS[operation](a, b)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Three-component vector calculator")
    parser.add_argument("--config", type=str, help="Path to config.yaml")
    parser.add_argument("--element", choices=sorted(ELEMENT_MODELS), help="Element type of the vectors")
    parser.add_argument("operation", choices=UNARY_OPERATIONS + BINARY_OPERATIONS)
    parser.add_argument("a", help='First vector, e.g. "1 2 3" or "1, 2, 3"')
    parser.add_argument("b", nargs="?", help="Second vector, or a scalar for scale/divide")
    args = parser.parse_args(argv)

    # Load configuration
    config = VectorConfig.from_yaml(args.config)

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    model = ELEMENT_MODELS.get(args.element, Vector3D)

    try:
        a = parse_vector(args.a, model, config.format)
        result = evaluate(args.operation, a, args.b, model, args.element, config.format)
    except (ValueError, EOFError) as e:
        logger.error(f"Failed to evaluate '{args.operation}': {e}")
        return 1

    logger.debug(f"{args.operation} -> {result!r}")
    if isinstance(result, Vector3D):
        write_vector(sys.stdout, result, config.format)
        sys.stdout.write("\n")
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
