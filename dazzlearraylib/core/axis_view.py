"""Axis-slab traversal for DazzleArrayLib.

An AxisViewIterator fixes one axis to successive single positions and
yields the resulting views, leaving every other axis at full extent. With
axis 0 on a 2-D array this walks the rows; with axis 1, the columns.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .array import StridedArray


class AxisOutOfBoundsError(IndexError):
    """Raised when an axis index is not valid for the array's dimensionality."""
    pass


class AxisViewIterator:
    """Yields one view per position along a fixed axis.

    For an array of shape ``(s0, ..., s_{D-1})`` and axis ``a`` the iterator
    yields ``s_a`` views. Each keeps all D axes and has extent 1 along
    ``a``. Views are produced lazily through ``array.slice`` and share data
    with the source array.
    """

    def __init__(self, array: 'StridedArray', axis: int):
        """Initialize the iterator.

        Args:
            array: Array to slice (borrowed, never mutated)
            axis: Axis to fix, in ``range(array.ndim)``

        Raises:
            AxisOutOfBoundsError: If axis is negative or not below ndim
        """
        ndim = len(array.shape())
        if not 0 <= axis < ndim:
            raise AxisOutOfBoundsError(f"Axis out of bound: {axis} >= {ndim}")

        self.array = array
        self._axis = axis
        self._position = 0

        self._ranges: List[range] = []
        for extent, _ in array.axes():
            self._ranges.append(range(0, extent))

        # Nothing to slice when the array holds no element at all
        if any(len(r) == 0 for r in self._ranges):
            self._count = 0
        else:
            self._count = len(self._ranges[axis])

    @property
    def axis(self) -> int:
        """The fixed axis."""
        return self._axis

    @property
    def position(self) -> int:
        """Position along the axis of the next view."""
        return self._position

    def __iter__(self) -> 'AxisViewIterator':
        return self

    def __next__(self) -> 'StridedArray':
        if self._position >= self._count:
            raise StopIteration

        self._ranges[self._axis] = range(self._position, self._position + 1)
        view = self.array.slice(tuple(self._ranges))
        self._position += 1
        return view

    def __len__(self) -> int:
        return self._count - self._position
