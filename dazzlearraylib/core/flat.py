"""Flat (row-major) traversal for DazzleArrayLib.

Walks a D-dimensional index counter like an odometer: the last axis turns
fastest and carries into the more significant axes. The iterator never
checks the counter against the total size; the array's ``get`` returning
None once axis 0 overflows is what ends the traversal.
"""

from typing import Any, List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .array import StridedArray


class FlatIterator:
    """Yields every element of an array exactly once in row-major order.

    Axis 0 varies slowest and axis D-1 fastest. Construction always
    succeeds. The iterator is single-pass; build a new one to traverse again.

    Example:
        >>> array = BufferArray.from_values([1, 2, 3, 4, 5, 6], (2, 3))
        >>> list(FlatIterator(array))
        [1, 2, 3, 4, 5, 6]
    """

    def __init__(self, array: 'StridedArray'):
        """Initialize the iterator.

        Args:
            array: Array to traverse (borrowed, never mutated)
        """
        self.array = array
        self._shape = array.shape()
        self._indices: List[int] = [0] * len(self._shape)
        self._exhausted = False

    @property
    def indices(self) -> Tuple[int, ...]:
        """Index of the next element to look up."""
        return tuple(self._indices)

    def _increment_indices(self) -> None:
        """Advance the counter by one element, carrying toward axis 0.

        Axis 0 is never reset, so after the last element it holds its
        extent and every later lookup is out of bounds.
        """
        axis = len(self._indices) - 1
        while axis >= 0:
            self._indices[axis] += 1
            if axis == 0 or self._indices[axis] < self._shape[axis]:
                return
            self._indices[axis] = 0
            axis -= 1

    def __iter__(self) -> 'FlatIterator':
        return self

    def __next__(self) -> Any:
        if self._exhausted:
            raise StopIteration

        item = self.array.get(self._indices)
        self._increment_indices()

        if item is None:
            self._exhausted = True
            raise StopIteration

        # A 0-d array has no axis to overflow
        if not self._indices:
            self._exhausted = True

        return item
