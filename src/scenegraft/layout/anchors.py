"""Anchor names for placing nodes within their parent's bounds.

An anchor name is made of underscore-separated tokens, one per axis at most:

- X: ``left`` / ``right``
- Y: ``bottom`` / ``top``
- Z: ``back`` / ``front``

Axes without a token sit at the centre, so ``center``, ``bottom_center``
and ``bottom_front_left`` are all valid. The parent's origin is its bottom
centre.
"""

import numpy as np

# token -> (axis, normalized position)
ANCHOR_TOKENS: dict[str, tuple[int, float]] = {
    "left": (0, 0.0),
    "right": (0, 1.0),
    "bottom": (1, 0.0),
    "top": (1, 1.0),
    "back": (2, 0.0),
    "front": (2, 1.0),
}


def parse_anchor(name: str) -> tuple[float, float, float]:
    """Convert an anchor name to normalized (0-1) coordinates.

    Raises:
        ValueError: Unknown token, or two tokens for the same axis
    """
    norm = [0.5, 0.5, 0.5]
    seen: set[int] = set()
    for token in name.lower().split("_"):
        if token == "center":
            continue
        if token not in ANCHOR_TOKENS:
            raise ValueError(f"Unknown anchor '{name}': unexpected '{token}'")
        axis, value = ANCHOR_TOKENS[token]
        if axis in seen:
            raise ValueError(f"Unknown anchor '{name}': axis given twice")
        seen.add(axis)
        norm[axis] = value
    return norm[0], norm[1], norm[2]


def resolve_anchor(name: str, container_size: np.ndarray) -> np.ndarray:
    """Convert an anchor to coordinates within a container.

    Args:
        name: The anchor name
        container_size: The size of the container [width, height, depth]

    Returns:
        Coordinates [x, y, z] relative to the container's bottom centre
    """
    norm_pos = np.array(parse_anchor(name), dtype=np.float64)
    size = np.asarray(container_size, dtype=np.float64)

    # X and Z are centred on the origin, Y starts at the bottom
    return np.array([
        (norm_pos[0] - 0.5) * size[0],
        norm_pos[1] * size[1],
        (norm_pos[2] - 0.5) * size[2],
    ])
