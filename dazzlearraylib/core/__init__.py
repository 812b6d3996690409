"""Core abstractions for DazzleArrayLib.

This module contains the array interface and the three traversal
iterators built on top of it.
"""

from .array import StridedArray, SliceOutOfBoundsError
from .axes import AxisIterator
from .flat import FlatIterator
from .axis_view import AxisViewIterator, AxisOutOfBoundsError

__all__ = [
    "StridedArray",
    "SliceOutOfBoundsError",
    "AxisIterator",
    "FlatIterator",
    "AxisViewIterator",
    "AxisOutOfBoundsError",
]
