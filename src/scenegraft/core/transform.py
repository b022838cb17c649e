"""Transform class used as a node's layout metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

import numpy as np
from numpy.typing import NDArray


@dataclass(eq=False)
class Transform:
    """Represents a 3D placement with translation, rotation, and scale.

    Rotation is stored as Euler angles (XYZ order) in radians. A node's
    transform is treated as an opaque value by the splicing code: it is only
    ever copied, never inspected.
    """

    translation: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(3, dtype=np.float64)
    )
    rotation: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(3, dtype=np.float64)
    )
    scale: NDArray[np.float64] = field(
        default_factory=lambda: np.ones(3, dtype=np.float64)
    )

    def __post_init__(self) -> None:
        self.translation = np.asarray(self.translation, dtype=np.float64)
        self.rotation = np.asarray(self.rotation, dtype=np.float64)
        self.scale = np.asarray(self.scale, dtype=np.float64)

    @classmethod
    def from_degrees(
        cls,
        translation=None,
        rotation=None,
        scale=None,
    ) -> Self:
        """Create a Transform with the rotation given in degrees.

        Any component left as None takes its identity value.
        """
        transform = cls()
        if translation is not None:
            transform.translation = np.asarray(translation, dtype=np.float64)
        if rotation is not None:
            transform.rotation = np.radians(np.asarray(rotation, dtype=np.float64))
        if scale is not None:
            transform.scale = np.asarray(scale, dtype=np.float64)
        return transform

    def copy(self) -> Self:
        """Create a deep copy of this transform."""
        return Transform(
            translation=self.translation.copy(),
            rotation=self.rotation.copy(),
            scale=self.scale.copy(),
        )

    def is_identity(self) -> bool:
        return (
            not self.translation.any()
            and not self.rotation.any()
            and bool(np.all(self.scale == 1.0))
        )

    def __repr__(self) -> str:
        parts = []
        if self.translation.any():
            parts.append(f"translation={self.translation.tolist()}")
        if self.rotation.any():
            parts.append(f"rotation={np.degrees(self.rotation).round(3).tolist()}deg")
        if not np.all(self.scale == 1.0):
            parts.append(f"scale={self.scale.tolist()}")
        return f"Transform({', '.join(parts)})"
