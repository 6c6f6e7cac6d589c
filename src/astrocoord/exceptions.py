"""
astrocoord.exceptions — Library Error Types
=============================================
"""


class FrameCompositionError(TypeError):
    """A type was bound where a representation or differential is required.

    Raised when a generic is specialized (``Frame[R, D]``, ``Galactic[Degree]``),
    when a named frame class is defined, or when a constructor receives a
    building block that does not match the frame's binding.
    """


class MotionNotSetError(LookupError):
    """Motion was read from a frame that was built without a differential."""
