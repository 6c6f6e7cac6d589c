"""
astrocoord.representation — Position Encodings
================================================

A representation is a fixed-order tuple of numeric components describing
*where* something is.  Every concrete representation derives from
``BaseRepresentation``; that membership is what ``Frame[R, D]`` checks when
it is specialized.

Angle Units
-----------
Angular encodings are specialized on a unit tag at the type level::

    SphericalRepresentation[Degree]     # lat/lon stored in degrees
    SphericalRepresentation[Radian]     # lat/lon stored in radians

Each specialization is a cached subclass carrying ``angle_unit`` as a class
attribute, so instances hold nothing but their components.  The tag only
records how values are meant to be read; no conversion is ever applied.

Component Order
---------------
  - SphericalRepresentation : (lat, lon, distance)
  - CartesianRepresentation : (x, y, z)
"""

import logging
from typing import Generic, Optional, Tuple, TypeVar

from numpy.typing import NDArray

from .exceptions import FrameCompositionError
from .point import Point
from .units import DEFAULT_ANGLE_UNIT, AngleUnit, is_angle_unit
from .utils import N_COMPONENTS, format_components

logger = logging.getLogger(__name__)

U = TypeVar("U", bound=AngleUnit)

# (family, unit) -> specialized subclass
_UNIT_SPECIALIZATIONS: dict = {}


def specialize_unit(family: type, unit) -> type:
    """Return the cached ``family[unit]`` subclass, creating it on first use."""
    if not getattr(family, "angular", False):
        raise FrameCompositionError(
            f"{family.__name__} has no angular components and takes no angle unit")
    if family._family is not family:
        raise FrameCompositionError(
            f"{family.__name__} is already specialized on {family.angle_unit.__name__}")
    if not is_angle_unit(unit):
        raise FrameCompositionError(
            f"{family.__name__}[...] expects Degree or Radian, got {unit!r}")

    key = (family, unit)
    cls = _UNIT_SPECIALIZATIONS.get(key)
    if cls is None:
        name = f"{family.__name__}[{unit.__name__}]"
        cls = type(family)(name, (family,), {
            "__module__": family.__module__,
            "__qualname__": name,
            "__slots__": (),
            "angle_unit": unit,
            "_family": family,
        })
        _UNIT_SPECIALIZATIONS[key] = cls
        logger.debug("Specialized %s on %s", family.__name__, unit.__name__)
    return cls


# ════════════════════════════════════════════════════════════════════════════
#  Shared Component Machinery
# ════════════════════════════════════════════════════════════════════════════

class ComponentEncoding:
    """Fixed-order numeric components stored in a ``Point``.

    Shared by representations and differentials.  Subclasses name their
    components; angular subclasses set ``angular = True`` to accept a unit tag.
    """

    __slots__ = ("_point",)

    component_names: Tuple[str, ...] = ()
    n_components = N_COMPONENTS
    angular = False
    angle_unit: Optional[type] = None
    _family: Optional[type] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "_family" not in cls.__dict__:
            cls._family = cls
        if cls.component_names and len(cls.component_names) != cls.n_components:
            raise FrameCompositionError(
                f"{cls.__name__} names {len(cls.component_names)} components, "
                f"expected {cls.n_components}")

    def __class_getitem__(cls, unit):
        if isinstance(unit, TypeVar) and issubclass(cls, Generic):
            return super().__class_getitem__(unit)
        return specialize_unit(cls, unit)

    def __init__(self, *values):
        if not self.component_names:
            raise TypeError(f"{type(self).__name__} is a capability root; "
                            f"instantiate a concrete encoding instead")
        self._point = Point(values or None, size=self.n_components)

    @classmethod
    def family(cls) -> type:
        """The unspecialized class this type was derived from."""
        return cls._family

    @classmethod
    def is_compatible(cls, other: type) -> bool:
        """Same encoding family and same angle unit: values copy verbatim."""
        return (isinstance(other, type) and issubclass(other, ComponentEncoding)
                and other._family is cls._family
                and other.angle_unit is cls.angle_unit)

    def component(self, index: int) -> float:
        return self._point.component(index)

    def set_component(self, index: int, value) -> None:
        self._point.set_component(index, value)

    def components(self) -> Tuple[float, ...]:
        return tuple(self._point)

    def as_array(self) -> NDArray:
        return self._point.as_array()

    def copy(self):
        new = type(self).__new__(type(self))
        new._point = self._point.copy()
        return new

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, ComponentEncoding):
            return NotImplemented
        return type(self).is_compatible(type(other)) and self._point == other._point

    def __repr__(self) -> str:
        return f"{type(self).__name__}({format_components(self.component_names, self.components())})"


# ════════════════════════════════════════════════════════════════════════════
#  Representations
# ════════════════════════════════════════════════════════════════════════════

class BaseRepresentation(ComponentEncoding):
    """Capability root for position encodings."""

    __slots__ = ()

    def get_point(self) -> Point:
        """The owned storage (not a copy)."""
        return self._point


def is_representation_type(obj) -> bool:
    return isinstance(obj, type) and issubclass(obj, BaseRepresentation) and bool(obj.component_names)


class SphericalRepresentation(BaseRepresentation, Generic[U]):
    """(lat, lon, distance); the two angles are read in ``angle_unit``."""

    __slots__ = ()

    component_names = ("lat", "lon", "distance")
    angular = True
    angle_unit = DEFAULT_ANGLE_UNIT

    def __init__(self, lat: float = 0.0, lon: float = 0.0, distance: float = 0.0):
        super().__init__(lat, lon, distance)

    def get_lat(self) -> float:
        return self._point.component(0)

    def get_lon(self) -> float:
        return self._point.component(1)

    def get_dist(self) -> float:
        return self._point.component(2)

    def set_lat(self, lat: float) -> None:
        self._point.set_component(0, lat)

    def set_lon(self, lon: float) -> None:
        self._point.set_component(1, lon)

    def set_dist(self, distance: float) -> None:
        self._point.set_component(2, distance)

    def set_lat_lon_dist(self, lat: float, lon: float, distance: float) -> None:
        for index, value in enumerate((lat, lon, distance)):
            self._point.set_component(index, value)

    def get_lat_lon_dist(self) -> Tuple[float, float, float]:
        return self.components()


class CartesianRepresentation(BaseRepresentation):
    """(x, y, z); no angular components, so no unit parameter."""

    __slots__ = ()

    component_names = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z)

    def get_x(self) -> float:
        return self._point.component(0)

    def get_y(self) -> float:
        return self._point.component(1)

    def get_z(self) -> float:
        return self._point.component(2)

    def set_x(self, x: float) -> None:
        self._point.set_component(0, x)

    def set_y(self, y: float) -> None:
        self._point.set_component(1, y)

    def set_z(self, z: float) -> None:
        self._point.set_component(2, z)

    def set_x_y_z(self, x: float, y: float, z: float) -> None:
        for index, value in enumerate((x, y, z)):
            self._point.set_component(index, value)

    def get_x_y_z(self) -> Tuple[float, float, float]:
        return self.components()
