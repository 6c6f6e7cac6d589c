"""
astrocoord — Celestial Reference Frames from Reusable Building Blocks
=======================================================================

Named celestial coordinate frames (Galactic, ICRS, Ecliptic, ...) composed
from a small set of position representations and velocity differentials::

    Angle-unit tags      Degree, Radian
          │
    Representations      SphericalRepresentation[U], CartesianRepresentation
    Differentials        SphericalCosLatDifferential[U], CartesianDifferential
          │
    Frame[R, D]          generic binding, validated when specialized
          │
    Named frames         Galactic[RU, DU], ICRS, FK5, CIRS, Ecliptic, ...

Quick Start
-----------
::

    >>> from astrocoord import Galactic, Degree, Radian
    >>> g = Galactic(10.0, 20.0, 100.0, 0.5, 0.3, 15.0)
    >>> g.get_b(), g.get_pm_l_cosb()
    (10.0, 0.3)
    >>> Galactic[Degree, Radian].angle_units()
    (<class 'astrocoord.units.Degree'>, <class 'astrocoord.units.Radian'>)

Values are stored exactly as given.  The angle-unit tags record how they
are to be read; nothing here converts units, checks ranges, or transforms
between frames.
"""

import logging

from .exceptions import FrameCompositionError, MotionNotSetError

from .units import (
    AngleUnit, Degree, Radian, degree, radian,
    angle_unit, is_angle_unit, DEFAULT_ANGLE_UNIT,
)

from .point import Point

from .representation import (
    BaseRepresentation,
    SphericalRepresentation,
    CartesianRepresentation,
    is_representation_type,
)

from .differential import (
    BaseDifferential,
    SphericalCosLatDifferential,
    CartesianDifferential,
    is_differential_type,
)

from .frames import (
    Frame, NamedFrame,
    Galactic, ICRS, FK5, CIRS, Ecliptic, Supergalactic, AltAz,
    FRAMES, get_frame,
)

from .utils import N_COMPONENTS, DEFAULT_ANGLE_UNIT_ENV

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # ── Errors ──
    "FrameCompositionError", "MotionNotSetError",
    # ── Angle units ──
    "AngleUnit", "Degree", "Radian", "degree", "radian",
    "angle_unit", "is_angle_unit", "DEFAULT_ANGLE_UNIT",
    # ── Storage ──
    "Point", "N_COMPONENTS",
    # ── Representations ──
    "BaseRepresentation", "SphericalRepresentation", "CartesianRepresentation",
    "is_representation_type",
    # ── Differentials ──
    "BaseDifferential", "SphericalCosLatDifferential", "CartesianDifferential",
    "is_differential_type",
    # ── Frames ──
    "Frame", "NamedFrame",
    "Galactic", "ICRS", "FK5", "CIRS", "Ecliptic", "Supergalactic", "AltAz",
    "FRAMES", "get_frame",
    # ── Configuration ──
    "DEFAULT_ANGLE_UNIT_ENV",
]
