"""StridedArray abstraction for DazzleArrayLib.

The StridedArray is the only thing the traversal core knows about an array.
It describes a fixed-dimensionality view over a (possibly non-contiguous)
buffer through four primitives: shape, strides, single-element access and
sub-range slicing. Storage, ownership and construction belong to the
concrete adapters.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from .axes import AxisIterator
from .flat import FlatIterator
from .axis_view import AxisViewIterator


class SliceOutOfBoundsError(IndexError):
    """Raised when a slice range does not fit inside the array's extents."""
    pass


class StridedArray(ABC):
    """Abstract base class for strided, fixed-dimensionality array views.

    Implementations expose the array interface consumed by the traversal
    iterators. The number of axes (``ndim``) is fixed once an array has been
    constructed; ``shape()`` and ``strides()`` must stay stable for as long as
    any traversal borrows the array.

    Traversals never mutate an array. Mutating an array (or its backing
    buffer) while a traversal is in flight is unsupported and leaves the
    traversal in an undefined state.
    """

    @abstractmethod
    def shape(self) -> Tuple[int, ...]:
        """Return the extent of every axis, axis 0 first.

        Returns:
            Tuple of ``ndim`` non-negative extents
        """
        pass

    @abstractmethod
    def strides(self) -> Tuple[int, ...]:
        """Return the buffer step of every axis, counted in elements.

        Returns:
            Tuple of ``ndim`` strides
        """
        pass

    @abstractmethod
    def get(self, indices: Sequence[int]) -> Optional[Any]:
        """Get the element at a D-dimensional index.

        Must never raise for out-of-range indices; flat traversal relies on
        ``None`` to detect the end of the array.

        Args:
            indices: One index per axis

        Returns:
            The element, or None if any index is out of bounds for its axis
        """
        pass

    @abstractmethod
    def slice(self, ranges: Sequence[range]) -> 'StridedArray':
        """Return a non-copying view restricted to the given ranges.

        Args:
            ranges: One unit-step ``range`` per axis

        Returns:
            StridedArray sharing data with this array

        Raises:
            SliceOutOfBoundsError: If a range exceeds its axis extent or the
                number of ranges differs from ``ndim``
        """
        pass

    # Traversal entry points

    def flat(self) -> FlatIterator:
        """Iterate over every element in row-major order."""
        return FlatIterator(self)

    def axes(self) -> AxisIterator:
        """Iterate over the (extent, stride) pair of every axis."""
        return AxisIterator(self.shape(), self.strides())

    def axis_view(self, axis: int) -> AxisViewIterator:
        """Iterate over the slabs obtained by fixing ``axis`` to each position.

        Raises:
            AxisOutOfBoundsError: If ``axis`` is not in ``range(ndim)``
        """
        return AxisViewIterator(self, axis)

    # Derived helpers

    @property
    def ndim(self) -> int:
        """Number of axes."""
        return len(self.shape())

    @property
    def size(self) -> int:
        """Total number of elements (product of all extents)."""
        total = 1
        for extent, _ in self.axes():
            total *= extent
        return total

    def is_contiguous(self) -> bool:
        """Check whether the view is laid out contiguously in row-major order.

        Axes of extent 1 are ignored, and an empty array counts as
        contiguous, matching numpy's C_CONTIGUOUS flag.
        """
        pairs = list(self.axes())
        if any(extent == 0 for extent, _ in pairs):
            return True

        expected = 1
        for extent, stride in reversed(pairs):
            if extent != 1:
                if stride != expected:
                    return False
                expected *= extent
        return True

    def to_list(self) -> List[Any]:
        """Materialise the flat traversal into a list."""
        return list(self.flat())

    def __iter__(self) -> Iterator[Any]:
        return self.flat()

    def __len__(self) -> int:
        """Extent of axis 0.

        Raises:
            TypeError: For a 0-d array, which has no axis 0 (as in numpy)
        """
        shape = self.shape()
        if not shape:
            raise TypeError("len() of a 0-d array")
        return shape[0]

    def __bool__(self) -> bool:
        """True when the array holds at least one element."""
        return self.size > 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(shape={self.shape()}, strides={self.strides()})"
