"""
astrocoord.differential — Velocity Encodings
==============================================

A differential holds the time derivatives of a representation's
components.  It is specialized on its own angle unit, independently of the
representation it is later paired with in a frame.

Component Order
---------------
  - SphericalCosLatDifferential : (d_lat, d_lon·cos(lat), d_distance)
  - CartesianDifferential       : (d_x, d_y, d_z)
"""

from typing import Generic, Tuple

from .point import Point
from .representation import U, ComponentEncoding
from .units import DEFAULT_ANGLE_UNIT


class BaseDifferential(ComponentEncoding):
    """Capability root for velocity encodings."""

    __slots__ = ()

    def get_differential(self) -> Point:
        """The owned storage (not a copy)."""
        return self._point


def is_differential_type(obj) -> bool:
    return isinstance(obj, type) and issubclass(obj, BaseDifferential) and bool(obj.component_names)


class SphericalCosLatDifferential(BaseDifferential, Generic[U]):
    """Proper motion in latitude, proper motion in longitude times cos(lat),
    and the rate of change of distance."""

    __slots__ = ()

    component_names = ("d_lat", "d_lon_coslat", "d_distance")
    angular = True
    angle_unit = DEFAULT_ANGLE_UNIT

    def __init__(self, dlat: float = 0.0, dlon_coslat: float = 0.0, ddist: float = 0.0):
        super().__init__(dlat, dlon_coslat, ddist)

    def get_dlat(self) -> float:
        return self._point.component(0)

    def get_dlon_coslat(self) -> float:
        return self._point.component(1)

    def get_ddist(self) -> float:
        return self._point.component(2)

    def set_dlat(self, dlat: float) -> None:
        self._point.set_component(0, dlat)

    def set_dlon_coslat(self, dlon_coslat: float) -> None:
        self._point.set_component(1, dlon_coslat)

    def set_ddist(self, ddist: float) -> None:
        self._point.set_component(2, ddist)

    def set_dlat_dlon_coslat_ddist(self, dlat: float, dlon_coslat: float, ddist: float) -> None:
        for index, value in enumerate((dlat, dlon_coslat, ddist)):
            self._point.set_component(index, value)

    def get_dlat_dlon_coslat_ddist(self) -> Tuple[float, float, float]:
        return self.components()


class CartesianDifferential(BaseDifferential):
    __slots__ = ()

    component_names = ("d_x", "d_y", "d_z")

    def __init__(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0):
        super().__init__(dx, dy, dz)

    def get_dx(self) -> float:
        return self._point.component(0)

    def get_dy(self) -> float:
        return self._point.component(1)

    def get_dz(self) -> float:
        return self._point.component(2)

    def set_dx(self, dx: float) -> None:
        self._point.set_component(0, dx)

    def set_dy(self, dy: float) -> None:
        self._point.set_component(1, dy)

    def set_dz(self, dz: float) -> None:
        self._point.set_component(2, dz)

    def set_dx_dy_dz(self, dx: float, dy: float, dz: float) -> None:
        for index, value in enumerate((dx, dy, dz)):
            self._point.set_component(index, value)

    def get_dx_dy_dz(self) -> Tuple[float, float, float]:
        return self.components()
