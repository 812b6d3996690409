"""Concrete StridedArray implementations for DazzleArrayLib."""

from .buffer import BufferArray, contiguous_strides
from .numpy_array import NumpyArray

__all__ = [
    'BufferArray',
    'contiguous_strides',
    'NumpyArray',
]
