"""Axis metadata traversal for DazzleArrayLib."""

from typing import Iterator, Sequence, Tuple


class AxisIterator:
    """Yields the (extent, stride) pair of every axis, axis 0 first.

    The shape and stride sequences are borrowed, not copied. The iterator is
    side-effect free: building a new one from the same pair always yields
    the same pairs.
    """

    def __init__(self, shape: Sequence[int], strides: Sequence[int]):
        """Initialize the iterator.

        Args:
            shape: Extent of every axis
            strides: Stride of every axis, same length as ``shape``
        """
        self._shape = shape
        self._strides = strides
        self._axis = 0

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return self

    def __next__(self) -> Tuple[int, int]:
        if self._axis >= len(self._shape):
            raise StopIteration

        pair = (self._shape[self._axis], self._strides[self._axis])
        self._axis += 1
        return pair

    def __len__(self) -> int:
        return max(len(self._shape) - self._axis, 0)
