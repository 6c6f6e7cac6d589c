"""
astrocoord.units — Angle-Unit Tags
====================================

Marker classes selecting how stored angles are interpreted.  Tags are used
as class-level parameters (``SphericalRepresentation[Radian]``) and carry
no data; nothing in the library converts between them.
"""

from .utils import DEFAULT_ANGLE_UNIT_NAME


class AngleUnit:
    """Root of the angle-unit tags.  Never instantiated."""

    symbol = ""

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a unit tag and cannot be instantiated")


class Degree(AngleUnit):
    symbol = "deg"


class Radian(AngleUnit):
    symbol = "rad"


# lowercase spellings
degree = Degree
radian = Radian

_UNIT_NAMES = {
    "degree": Degree, "degrees": Degree, "deg": Degree,
    "radian": Radian, "radians": Radian, "rad": Radian,
}


def is_angle_unit(obj) -> bool:
    """True for a concrete unit tag class (``Degree`` or ``Radian``)."""
    return isinstance(obj, type) and issubclass(obj, AngleUnit) and obj is not AngleUnit


def angle_unit(unit) -> type:
    """Resolve a unit name or tag to the tag class."""
    if is_angle_unit(unit):
        return unit
    if isinstance(unit, str):
        try:
            return _UNIT_NAMES[unit.strip().lower()]
        except KeyError:
            pass
    raise ValueError(f"Unknown angle unit {unit!r}. Valid: {sorted(_UNIT_NAMES)}")


DEFAULT_ANGLE_UNIT = angle_unit(DEFAULT_ANGLE_UNIT_NAME)
