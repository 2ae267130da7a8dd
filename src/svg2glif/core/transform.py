"""Affine transforms for the SVG node tree.

Transforms are fontTools ``Transform`` values (a, b, c, d, e, f), which are
immutable and default to the identity. A point maps as::

    x' = a*x + c*y + e
    y' = b*x + d*y + f
"""

import math
import re

from fontTools.misc.transform import Identity, Transform

from svg2glif.exceptions import MalformedTransformError

IDENTITY: Transform = Identity

_FUNCTION_RE = re.compile(
    r"\s*(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^()]*)\)\s*(?:,\s*)?"
)
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

# Accepted argument counts per transform function
_ARITY: dict[str, tuple[int, ...]] = {
    "matrix": (6,),
    "translate": (1, 2),
    "scale": (1, 2),
    "rotate": (1, 3),
    "skewX": (1,),
    "skewY": (1,),
}


def compose(parent: Transform, child: Transform) -> Transform:
    """Compose a parent transform with a child transform.

    The child is applied first, then the parent, matching nested SVG
    elements: ``compose(P, C) == P · C``.

    Args:
        parent: Transform inherited from the enclosing elements
        child: Transform declared on the element itself

    Returns:
        The effective transform of the element
    """
    return parent.transform(child)


def apply_transform(transform: Transform, x: float, y: float) -> tuple[float, float]:
    """Map a source-space point through a transform.

    Args:
        transform: Affine transform to apply
        x: Source X coordinate
        y: Source Y coordinate

    Returns:
        Transformed (x, y)
    """
    tx, ty = transform.transformPoint((x, y))
    return tx, ty


def parse_transform(value: str) -> Transform:
    """Parse an SVG ``transform`` attribute into a single transform.

    Supports ``matrix``, ``translate``, ``scale``, ``rotate`` (with an
    optional center) and ``skewX``/``skewY``. Functions are composed left to
    right, so ``translate(10) scale(2)`` scales first and translates second.
    An empty attribute is the identity.

    Args:
        value: Attribute text

    Returns:
        Composed transform

    Raises:
        MalformedTransformError: If the text is not a valid transform list
    """
    result = IDENTITY
    pos = 0
    end = len(value.rstrip())

    while pos < end:
        match = _FUNCTION_RE.match(value, pos)
        if match is None:
            raise MalformedTransformError(value, f"unexpected text '{value[pos:end].strip()}'")

        name, raw_args = match.group(1), match.group(2)
        args = _parse_arguments(value, name, raw_args)
        result = result.transform(_function_transform(name, args))
        pos = match.end()

    return result


def _parse_arguments(value: str, name: str, raw_args: str) -> list[float]:
    tokens = [t for t in re.split(r"[\s,]+", raw_args.strip()) if t]
    for token in tokens:
        if not _NUMBER_RE.fullmatch(token):
            raise MalformedTransformError(value, f"invalid number '{token}' in {name}()")

    if len(tokens) not in _ARITY[name]:
        expected = " or ".join(str(n) for n in _ARITY[name])
        raise MalformedTransformError(
            value, f"{name}() takes {expected} arguments, got {len(tokens)}"
        )
    return [float(t) for t in tokens]


def _function_transform(name: str, args: list[float]) -> Transform:
    if name == "matrix":
        return Transform(*args)

    if name == "translate":
        tx = args[0]
        ty = args[1] if len(args) > 1 else 0.0
        return IDENTITY.translate(tx, ty)

    if name == "scale":
        sx = args[0]
        sy = args[1] if len(args) > 1 else sx
        return IDENTITY.scale(sx, sy)

    if name == "rotate":
        angle = math.radians(args[0])
        if len(args) == 3:
            cx, cy = args[1], args[2]
            return IDENTITY.translate(cx, cy).rotate(angle).translate(-cx, -cy)
        return IDENTITY.rotate(angle)

    if name == "skewX":
        return Transform(1, 0, math.tan(math.radians(args[0])), 1, 0, 0)

    # skewY
    return Transform(1, math.tan(math.radians(args[0])), 0, 1, 0, 0)
