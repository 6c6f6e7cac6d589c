"""
astrocoord.frames — Generic Frames and Named Celestial Frames
===============================================================

A frame binds one representation type (position) and one differential
type (motion).  Named frames wrap a bound ``Frame`` and expose its
components under the names astronomers use for that coordinate system.

Composition
-----------
::

    Frame[R, D]                 generic binding, checked when specialized
      └── Galactic[RU, DU]      wraps Frame[Spherical[RU], SphericalCosLat[DU]]

``Frame[R, D]`` rejects, at specialization time, any ``R`` that is not a
``BaseRepresentation`` subclass, any ``D`` that is not a ``BaseDifferential``
subclass, and any pair whose component counts differ.  Named frame classes
are validated when their ``class`` statement runs, so an invalid composition
never produces a usable type.

Named Frames
------------
=============  ==================  =====================================
Frame          Position            Motion
=============  ==================  =====================================
Galactic       b, l, distance      pm_b, pm_l_cosb, radial_velocity
ICRS/FK5/CIRS  dec, ra, distance   pm_dec, pm_ra_cosdec, radial_velocity
Ecliptic       lat, lon, distance  pm_lat, pm_lon_coslat, radial_velocity
Supergalactic  sgb, sgl, distance  pm_sgb, pm_sgl_cossgb, radial_velocity
AltAz          alt, az, distance   pm_alt, pm_az_cosalt, radial_velocity
=============  ==================  =====================================

Both angle units default to degrees; ``Galactic[Degree, Radian]`` keeps
positions in degrees and proper motions in radians.  Values are stored as
given: no unit conversion, no range checks.

Motion is optional.  A frame built without a differential reports
``has_motion == False`` and raises ``MotionNotSetError`` on any motion read.
The first single-component motion write attaches a zero differential;
``set_differential`` attaches a whole one.
"""

import logging
from typing import Generic, Optional, Tuple, TypeVar

import numpy as np
from numpy.typing import NDArray

from .differential import BaseDifferential, SphericalCosLatDifferential, is_differential_type
from .exceptions import FrameCompositionError, MotionNotSetError
from .representation import BaseRepresentation, SphericalRepresentation, is_representation_type
from .units import DEFAULT_ANGLE_UNIT, AngleUnit, is_angle_unit
from .utils import format_components

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseRepresentation)
D = TypeVar("D", bound=BaseDifferential)
RU = TypeVar("RU", bound=AngleUnit)
DU = TypeVar("DU", bound=AngleUnit)

_FRAME_SPECIALIZATIONS: dict = {}
_NAMED_SPECIALIZATIONS: dict = {}


# ════════════════════════════════════════════════════════════════════════════
#  Generic Frame
# ════════════════════════════════════════════════════════════════════════════

def specialize_frame(representation, differential) -> type:
    """Return the cached ``Frame[representation, differential]`` class."""
    if not is_representation_type(representation):
        raise FrameCompositionError(
            f"Invalid representation class: {representation!r} does not derive "
            f"from BaseRepresentation")
    if not is_differential_type(differential):
        raise FrameCompositionError(
            f"Invalid differential class: {differential!r} does not derive "
            f"from BaseDifferential")
    if representation.n_components != differential.n_components:
        raise FrameCompositionError(
            f"{differential.__name__} has {differential.n_components} components, "
            f"{representation.__name__} has {representation.n_components}")

    key = (representation, differential)
    cls = _FRAME_SPECIALIZATIONS.get(key)
    if cls is None:
        name = f"Frame[{representation.__name__}, {differential.__name__}]"
        cls = type(name, (Frame,), {
            "__module__": __name__,
            "__qualname__": name,
            "__slots__": (),
            "representation_type": representation,
            "differential_type": differential,
        })
        _FRAME_SPECIALIZATIONS[key] = cls
        logger.debug("Specialized %s", name)
    return cls


def _adopt(value, root: type, target: type, role: str):
    """Copy ``value`` into a fresh ``target`` after checking it can be bound."""
    if not isinstance(value, root):
        raise FrameCompositionError(
            f"Argument is expected to be a {role} class, got {type(value).__name__}")
    if not target.is_compatible(type(value)):
        raise FrameCompositionError(
            f"Frame is bound to {target.__name__}, got {type(value).__name__} "
            f"(encodings and angle units are never converted)")
    return target(*value.components())


class Frame(Generic[R, D]):
    """One position encoding plus an optional motion encoding.

    Must be specialized before use::

        Frame[SphericalRepresentation[Degree], SphericalCosLatDifferential[Radian]]
    """

    __slots__ = ("_data", "_motion")

    representation_type: Optional[type] = None
    differential_type: Optional[type] = None

    def __class_getitem__(cls, params):
        if isinstance(params, tuple) and any(isinstance(p, TypeVar) for p in params):
            return super().__class_getitem__(params)
        if cls.representation_type is not None:
            raise FrameCompositionError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple) or len(params) != 2:
            raise FrameCompositionError(
                "Frame[...] takes exactly a representation and a differential")
        return specialize_frame(*params)

    def __init__(self, data: Optional[R] = None, motion: Optional[D] = None):
        if self.representation_type is None:
            raise FrameCompositionError(
                "Frame must be specialized as Frame[Representation, Differential]")
        if data is None:
            self._data = self.representation_type()
        else:
            self._data = _adopt(data, BaseRepresentation, self.representation_type, "representation")
        self._motion = None
        if motion is not None:
            self.set_differential(motion)

    # ── Position ──

    def get_data(self) -> R:
        """The owned representation (not a copy)."""
        return self._data

    def set_data(self, data: R) -> None:
        self._data = _adopt(data, BaseRepresentation, self.representation_type, "representation")

    # ── Motion ──

    @property
    def has_motion(self) -> bool:
        return self._motion is not None

    def get_differential(self) -> D:
        """The owned differential (not a copy).

        Raises ``MotionNotSetError`` if the frame was built without motion.
        """
        if self._motion is None:
            raise MotionNotSetError(f"{type(self).__name__} has no motion set")
        return self._motion

    def set_differential(self, motion: D) -> None:
        self._motion = _adopt(motion, BaseDifferential, self.differential_type, "differential")

    def clear_differential(self) -> None:
        self._motion = None

    # ── Values ──

    def to_array(self) -> NDArray:
        """Position components, followed by motion components when set."""
        if self._motion is None:
            return self._data.as_array()
        return np.concatenate([self._data.as_array(), self._motion.as_array()])

    def copy(self):
        new = type(self).__new__(type(self))
        new._data = self._data.copy()
        new._motion = None if self._motion is None else self._motion.copy()
        return new

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, Frame):
            return NotImplemented
        return (type(self) is type(other)
                and self._data == other._data
                and self._motion == other._motion)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(data={self._data!r}, motion={self._motion!r})"


# ════════════════════════════════════════════════════════════════════════════
#  Named Frames
# ════════════════════════════════════════════════════════════════════════════

def _name_accessors(getter, setter, name: str, part: str):
    getter.__name__, setter.__name__ = f"get_{name}", f"set_{name}"
    getter.__qualname__, setter.__qualname__ = getter.__name__, setter.__name__
    getter.__doc__ = f"Return the {name} component of the {part}."
    setter.__doc__ = f"Overwrite the {name} component of the {part}."
    getter._component_accessor = setter._component_accessor = True
    return getter, setter


def position_accessors(index: int, name: str):
    """Getter/setter pair bound to position component ``index``."""

    def getter(self) -> float:
        return self._frame.get_data().component(index)

    def setter(self, value: float) -> None:
        self._frame.get_data().set_component(index, value)

    return _name_accessors(getter, setter, name, "position")


def motion_accessors(index: int, name: str):
    """Getter/setter pair bound to motion component ``index``.

    Reads raise ``MotionNotSetError`` until motion exists.  The first write
    on a frame without motion attaches a zero differential and then sets
    the component.
    """

    def getter(self) -> float:
        return self._frame.get_differential().component(index)

    def setter(self, value: float) -> None:
        frame = self._frame
        if frame.has_motion:
            frame.get_differential().set_component(index, value)
            return
        motion = frame.differential_type()
        motion.set_component(index, value)
        frame.set_differential(motion)

    return _name_accessors(getter, setter, name, "motion")


def _bind_units(named: type, rep_unit, diff_unit) -> type:
    """``Frame`` specialization for ``named`` with the given angle units."""
    rep, diff = named.representation_family, named.differential_family
    if not is_representation_type(rep):
        raise FrameCompositionError(
            f"{named.__name__}.representation_family must derive from "
            f"BaseRepresentation, got {rep!r}")
    if not is_differential_type(diff):
        raise FrameCompositionError(
            f"{named.__name__}.differential_family must derive from "
            f"BaseDifferential, got {diff!r}")
    if rep.angular:
        rep = rep[rep_unit]
    if diff.angular:
        diff = diff[diff_unit]
    return specialize_frame(rep, diff)


class NamedFrame(Generic[RU, DU]):
    """Wraps a ``Frame`` and renames its components.

    Subclasses set ``representation_family``, ``differential_family``,
    ``position_names`` and ``motion_names``, and declare their accessors with
    ``position_accessors`` / ``motion_accessors``.

    Constructors::

        F()                         zero position, no motion
        F(representation)           copy of the representation, no motion
        F(lat, lon, dist)
        F(lat, lon, dist, d_lat, d_lon_coslat, d_dist)
        F(representation, differential)
        F(other)                    copy of another F of the same binding
    """

    __slots__ = ("_frame",)

    representation_family: Optional[type] = None
    differential_family: Optional[type] = None
    position_names: Tuple[str, ...] = ()
    motion_names: Tuple[str, ...] = ()
    frame_type: Optional[type] = None
    _named_family: Optional[type] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "_named_family" in cls.__dict__:
            return
        cls._named_family = cls
        for attr, value in cls.__dict__.items():
            if getattr(value, "_component_accessor", False):
                value.__qualname__ = f"{cls.__qualname__}.{attr}"
        if cls.representation_family is None and cls.differential_family is None:
            return
        cls.frame_type = _bind_units(cls, DEFAULT_ANGLE_UNIT, DEFAULT_ANGLE_UNIT)
        rep, diff = cls.frame_type.representation_type, cls.frame_type.differential_type
        if len(cls.position_names) != rep.n_components or len(cls.motion_names) != diff.n_components:
            raise FrameCompositionError(
                f"{cls.__name__} must name {rep.n_components} position and "
                f"{diff.n_components} motion components")

    def __class_getitem__(cls, params):
        if not isinstance(params, tuple):
            params = (params, params)
        if any(isinstance(p, TypeVar) for p in params):
            return super().__class_getitem__(params)
        if cls.frame_type is None:
            raise FrameCompositionError(f"{cls.__name__} is abstract and takes no units")
        if cls._named_family is not cls:
            raise FrameCompositionError(f"{cls.__name__} is already specialized")
        if len(params) != 2:
            raise FrameCompositionError(
                f"{cls.__name__}[...] takes a representation unit and a differential unit")
        if not (cls.representation_family.angular or cls.differential_family.angular):
            raise FrameCompositionError(
                f"{cls.__name__} has no angular components and takes no angle units")
        for unit in params:
            if not is_angle_unit(unit):
                raise FrameCompositionError(
                    f"{cls.__name__}[...] expects Degree or Radian, got {unit!r}")

        key = (cls,) + params
        specialized = _NAMED_SPECIALIZATIONS.get(key)
        if specialized is None:
            frame_type = _bind_units(cls, *params)
            name = f"{cls.__name__}[{params[0].__name__}, {params[1].__name__}]"
            specialized = type(cls)(name, (cls,), {
                "__module__": cls.__module__,
                "__qualname__": name,
                "__slots__": (),
                "_named_family": cls,
                "frame_type": frame_type,
            })
            _NAMED_SPECIALIZATIONS[key] = specialized
            logger.debug("Specialized %s as %s", name, frame_type.__name__)
        return specialized

    def __init__(self, *args):
        frame_type = self.frame_type
        if frame_type is None:
            raise FrameCompositionError(f"{type(self).__name__} is abstract")
        rep_type, diff_type = frame_type.representation_type, frame_type.differential_type

        if len(args) == 0:
            self._frame = frame_type()
        elif len(args) == 1 and isinstance(args[0], NamedFrame):
            other = args[0]
            if type(other).frame_type is not frame_type or other._named_family is not self._named_family:
                raise FrameCompositionError(
                    f"Cannot copy {type(other).__name__} into {type(self).__name__} "
                    f"(frame transforms are not provided)")
            motion = other.get_differential() if other.has_motion else None
            self._frame = frame_type(other.get_data(), motion)
        elif len(args) == 1:
            if args[0] is None:
                raise FrameCompositionError(
                    f"{type(self).__name__}(x) expects a representation, got None")
            self._frame = frame_type(args[0])
        elif len(args) == 2:
            self._frame = frame_type(*args)
        elif len(args) == rep_type.n_components:
            self._frame = frame_type(rep_type(*args))
        elif len(args) == rep_type.n_components + diff_type.n_components:
            split = rep_type.n_components
            self._frame = frame_type(rep_type(*args[:split]), diff_type(*args[split:]))
        else:
            raise TypeError(
                f"{type(self).__name__}() takes 0, 1, 2, {rep_type.n_components} or "
                f"{rep_type.n_components + diff_type.n_components} positional "
                f"arguments but {len(args)} were given")

    @classmethod
    def angle_units(cls) -> Tuple[Optional[type], Optional[type]]:
        """(position unit, motion unit) of this binding."""
        return (cls.frame_type.representation_type.angle_unit,
                cls.frame_type.differential_type.angle_unit)

    @property
    def frame(self) -> Frame:
        return self._frame

    @property
    def has_motion(self) -> bool:
        return self._frame.has_motion

    def get_data(self):
        return self._frame.get_data()

    def get_differential(self):
        return self._frame.get_differential()

    def set_data(self, data) -> None:
        self._frame.set_data(data)

    def set_differential(self, motion) -> None:
        self._frame.set_differential(motion)

    def to_array(self) -> NDArray:
        return self._frame.to_array()

    def copy(self):
        return type(self)(self)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, NamedFrame):
            return NotImplemented
        return self._named_family is other._named_family and self._frame == other._frame

    def __repr__(self) -> str:
        text = format_components(self.position_names, self.get_data().components())
        if self.has_motion:
            text += ", " + format_components(self.motion_names, self.get_differential().components())
        return f"{type(self).__name__}({text})"


class Galactic(NamedFrame[RU, DU]):
    """Galactic coordinates: latitude b, longitude l, distance.

    Motion is (pm_b, pm_l_cosb, radial_velocity) where pm_l_cosb already
    includes the cos(b) factor.
    """

    __slots__ = ()

    representation_family = SphericalRepresentation
    differential_family = SphericalCosLatDifferential
    position_names = ("b", "l", "distance")
    motion_names = ("pm_b", "pm_l_cosb", "radial_velocity")

    get_b, set_b = position_accessors(0, "b")
    get_l, set_l = position_accessors(1, "l")
    get_distance, set_distance = position_accessors(2, "distance")
    get_pm_b, set_pm_b = motion_accessors(0, "pm_b")
    get_pm_l_cosb, set_pm_l_cosb = motion_accessors(1, "pm_l_cosb")
    get_radial_velocity, set_radial_velocity = motion_accessors(2, "radial_velocity")


class _Equatorial(NamedFrame[RU, DU]):
    """Declination, right ascension, distance; shared by ICRS, FK5 and CIRS."""

    __slots__ = ()

    representation_family = SphericalRepresentation
    differential_family = SphericalCosLatDifferential
    position_names = ("dec", "ra", "distance")
    motion_names = ("pm_dec", "pm_ra_cosdec", "radial_velocity")

    get_dec, set_dec = position_accessors(0, "dec")
    get_ra, set_ra = position_accessors(1, "ra")
    get_distance, set_distance = position_accessors(2, "distance")
    get_pm_dec, set_pm_dec = motion_accessors(0, "pm_dec")
    get_pm_ra_cosdec, set_pm_ra_cosdec = motion_accessors(1, "pm_ra_cosdec")
    get_radial_velocity, set_radial_velocity = motion_accessors(2, "radial_velocity")


class ICRS(_Equatorial[RU, DU]):
    """International Celestial Reference System."""

    __slots__ = ()


class FK5(_Equatorial[RU, DU]):
    """Fifth Fundamental Catalogue system (J2000 equinox)."""

    __slots__ = ()


class CIRS(_Equatorial[RU, DU]):
    """Celestial Intermediate Reference System."""

    __slots__ = ()


class Ecliptic(NamedFrame[RU, DU]):
    __slots__ = ()

    representation_family = SphericalRepresentation
    differential_family = SphericalCosLatDifferential
    position_names = ("lat", "lon", "distance")
    motion_names = ("pm_lat", "pm_lon_coslat", "radial_velocity")

    get_lat, set_lat = position_accessors(0, "lat")
    get_lon, set_lon = position_accessors(1, "lon")
    get_distance, set_distance = position_accessors(2, "distance")
    get_pm_lat, set_pm_lat = motion_accessors(0, "pm_lat")
    get_pm_lon_coslat, set_pm_lon_coslat = motion_accessors(1, "pm_lon_coslat")
    get_radial_velocity, set_radial_velocity = motion_accessors(2, "radial_velocity")


class Supergalactic(NamedFrame[RU, DU]):
    __slots__ = ()

    representation_family = SphericalRepresentation
    differential_family = SphericalCosLatDifferential
    position_names = ("sgb", "sgl", "distance")
    motion_names = ("pm_sgb", "pm_sgl_cossgb", "radial_velocity")

    get_sgb, set_sgb = position_accessors(0, "sgb")
    get_sgl, set_sgl = position_accessors(1, "sgl")
    get_distance, set_distance = position_accessors(2, "distance")
    get_pm_sgb, set_pm_sgb = motion_accessors(0, "pm_sgb")
    get_pm_sgl_cossgb, set_pm_sgl_cossgb = motion_accessors(1, "pm_sgl_cossgb")
    get_radial_velocity, set_radial_velocity = motion_accessors(2, "radial_velocity")


class AltAz(NamedFrame[RU, DU]):
    """Horizontal coordinates: altitude, azimuth, distance."""

    __slots__ = ()

    representation_family = SphericalRepresentation
    differential_family = SphericalCosLatDifferential
    position_names = ("alt", "az", "distance")
    motion_names = ("pm_alt", "pm_az_cosalt", "radial_velocity")

    get_alt, set_alt = position_accessors(0, "alt")
    get_az, set_az = position_accessors(1, "az")
    get_distance, set_distance = position_accessors(2, "distance")
    get_pm_alt, set_pm_alt = motion_accessors(0, "pm_alt")
    get_pm_az_cosalt, set_pm_az_cosalt = motion_accessors(1, "pm_az_cosalt")
    get_radial_velocity, set_radial_velocity = motion_accessors(2, "radial_velocity")


# ════════════════════════════════════════════════════════════════════════════
#  Frame Registry
# ════════════════════════════════════════════════════════════════════════════

FRAMES = {
    "galactic": Galactic,
    "icrs": ICRS,
    "fk5": FK5,
    "cirs": CIRS,
    "ecliptic": Ecliptic,
    "supergalactic": Supergalactic,
    "altaz": AltAz,
}


def get_frame(name: str) -> type:
    """Look up a named frame class by (case-insensitive) name."""
    key = name.lower().replace("-", "").replace("_", "")
    if key not in FRAMES:
        raise ValueError(f"Unknown frame {name!r}. Valid: {sorted(FRAMES)}")
    return FRAMES[key]
