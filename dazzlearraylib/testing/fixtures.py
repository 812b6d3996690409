"""Test fixtures for DazzleArrayLib consumers.

These helpers build arrays with known contents, including non-contiguous
views, and compute the element order a correct traversal must produce.
"""

import itertools
from typing import Any, List, Sequence, Tuple

from ..adapters.buffer import BufferArray


def arange_array(shape: Sequence[int], start: int = 1) -> BufferArray:
    """Build a contiguous array holding ``start, start + 1, ...`` row-major.

    Example:
        >>> arange_array((2, 3)).to_list()
        [1, 2, 3, 4, 5, 6]
    """
    size = 1
    for extent in shape:
        size *= extent
    return BufferArray.from_values(range(start, start + size), shape)


def transposed_array(shape: Sequence[int], start: int = 1) -> BufferArray:
    """Build a non-contiguous view of logical shape ``shape``.

    The view is the transpose of a contiguous array of the reversed shape,
    so its strides increase from axis 0 to the last axis.
    """
    return arange_array(tuple(reversed(shape)), start).transpose()


def row_major_indices(shape: Sequence[int]) -> List[Tuple[int, ...]]:
    """List every index of ``shape`` in the order flat traversal visits them."""
    return list(itertools.product(*(range(extent) for extent in shape)))


class ArrayTestHelper:
    """Reference checks for any StridedArray implementation.

    Computes expected traversal results through ``get`` alone, independent
    of the iterators under test.

    Example:
        helper = ArrayTestHelper(array)
        assert list(array.flat()) == helper.expected_flat()
    """

    def __init__(self, array):
        """Initialize with the array to check.

        Args:
            array: StridedArray implementation
        """
        self._array = array

    def expected_flat(self) -> List[Any]:
        """Elements in row-major order, looked up one index at a time."""
        return [self._array.get(index) for index in row_major_indices(self._array.shape())]

    def expected_slab(self, axis: int, position: int) -> List[Any]:
        """Elements with ``axis`` fixed to ``position``, row-major."""
        return [
            self._array.get(index)
            for index in row_major_indices(self._array.shape())
            if index[axis] == position
        ]

    def expected_slab_shape(self, axis: int) -> Tuple[int, ...]:
        """Shape every slab along ``axis`` must have."""
        shape = list(self._array.shape())
        shape[axis] = 1
        return tuple(shape)
