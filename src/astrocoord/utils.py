"""
astrocoord.utils — Foundational Utilities
===========================================

Constants, process-wide configuration, and component coercion helpers.
"""

import os
from numbers import Real

import numpy as np


# ── Storage Constants ───────────────────────────────────────────────────────
N_COMPONENTS = 3                # lat/lon/dist and their time derivatives
FLOAT_DTYPE = np.float64

# ── Configuration ───────────────────────────────────────────────────────────
#
#  ASTROCOORD_DEFAULT_ANGLE_UNIT: unit of unsubscripted representation,
#  differential and frame classes ("degree" or "radian").  Read once at import.

DEFAULT_ANGLE_UNIT_ENV = "ASTROCOORD_DEFAULT_ANGLE_UNIT"
DEFAULT_ANGLE_UNIT_NAME = os.environ.get(DEFAULT_ANGLE_UNIT_ENV, "degree").strip().lower() or "degree"


# ── Component Helpers ───────────────────────────────────────────────────────

def as_component(value) -> float:
    """Coerce a single numeric component to float.

    Only the type is checked: NaN, infinities, negative distances and
    out-of-range angles pass through untouched.
    """
    if (isinstance(value, (bool, np.complexfloating))
            or not isinstance(value, (Real, np.number))):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")
    return float(value)


def check_index(index, size: int) -> int:
    """Validate a component index against a storage size."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise IndexError(f"Component index must be an int, got {type(index).__name__}")
    if not 0 <= index < size:
        raise IndexError(f"Component index {index} out of range [0, {size})")
    return int(index)


def format_components(names, values) -> str:
    """Render ``name=value`` pairs for reprs."""
    return ", ".join(f"{n}={v!r}" for n, v in zip(names, values))
