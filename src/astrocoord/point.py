"""
astrocoord.point — Indexed Point Storage
==========================================

A fixed-size float64 record with indexed read/write.  Representations and
differentials keep their components here; nothing above this layer touches
the numpy buffer directly.
"""

import numpy as np
from numpy.typing import NDArray

from .utils import FLOAT_DTYPE, N_COMPONENTS, as_component, check_index


class Point:
    """Fixed-size numeric record with ``component(i)`` / ``set_component(i, x)``."""

    __slots__ = ("_values",)

    def __init__(self, values=None, size: int = N_COMPONENTS):
        if values is None:
            self._values = np.zeros(size, dtype=FLOAT_DTYPE)
            return
        values = [as_component(v) for v in values]
        if len(values) != size:
            raise ValueError(f"Point expects {size} components, got {len(values)}")
        self._values = np.array(values, dtype=FLOAT_DTYPE)

    def component(self, index: int) -> float:
        return float(self._values[check_index(index, len(self._values))])

    def set_component(self, index: int, value) -> None:
        self._values[check_index(index, len(self._values))] = as_component(value)

    def copy(self) -> "Point":
        new = Point.__new__(Point)
        new._values = self._values.copy()
        return new

    def as_array(self) -> NDArray:
        """Independent (N,) float64 copy of the components."""
        return self._values.copy()

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return (float(v) for v in self._values)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._values, other._values))

    def __repr__(self) -> str:
        return f"Point({', '.join(repr(v) for v in self)})"


def get(point: Point, index: int) -> float:
    """Read component ``index`` of ``point``."""
    return point.component(index)


def set_(point: Point, index: int, value) -> None:
    """Write component ``index`` of ``point``."""
    point.set_component(index, value)
