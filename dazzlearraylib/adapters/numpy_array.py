"""numpy adapter for DazzleArrayLib.

Exposes a ``numpy.ndarray`` (owned array or any view of one) through the
StridedArray interface without copying data. numpy reports strides in
bytes; the adapter converts them to element strides.
"""

import logging
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from ..core.array import StridedArray, SliceOutOfBoundsError

logger = logging.getLogger(__name__)


class NumpyArray(StridedArray):
    """StridedArray backed by a numpy ndarray.

    Elements are returned as Python scalars. Negative indices are treated as
    out of bounds instead of wrapping around.

    Example:
        >>> data = np.arange(1, 7).reshape(2, 3)
        >>> NumpyArray(data.T).to_list()
        [1, 4, 2, 5, 3, 6]
    """

    def __init__(self, data: np.ndarray):
        """Wrap an ndarray.

        Args:
            data: Array to expose; it is referenced, not copied

        Raises:
            ValueError: If a byte stride is not a whole number of elements,
                as in a field view of a structured array
        """
        if not isinstance(data, np.ndarray):
            data = np.asarray(data)
        if data.dtype == object:
            logger.debug("Wrapping object ndarray; None elements end flat traversal early")
        self._data = data

        itemsize = data.itemsize or 1
        strides = []
        for axis, (extent, stride) in enumerate(zip(data.shape, data.strides)):
            # The stride of an axis with at most one position is never followed
            if extent > 1 and stride % itemsize != 0:
                raise ValueError(
                    f"Axis {axis}: byte stride {stride} is not a multiple of "
                    f"itemsize {itemsize}"
                )
            strides.append(stride // itemsize)
        self._strides = tuple(strides)

    def to_numpy(self) -> np.ndarray:
        """Return the wrapped ndarray."""
        return self._data

    def shape(self) -> Tuple[int, ...]:
        return self._data.shape

    def strides(self) -> Tuple[int, ...]:
        return self._strides

    def get(self, indices: Sequence[int]) -> Optional[Any]:
        shape = self._data.shape
        if len(indices) != len(shape):
            return None
        for index, extent in zip(indices, shape):
            if not 0 <= index < extent:
                return None
        return self._data.item(tuple(indices))

    def slice(self, ranges: Sequence[range]) -> 'NumpyArray':
        shape = self._data.shape
        if len(ranges) != len(shape):
            raise SliceOutOfBoundsError(
                f"Expected {len(shape)} ranges, got {len(ranges)}"
            )

        selection = []
        for axis, (bounds, extent) in enumerate(zip(ranges, shape)):
            if bounds.step != 1:
                raise SliceOutOfBoundsError(
                    f"Axis {axis}: only unit-step ranges are supported, got {bounds}"
                )
            if bounds.start < 0 or bounds.stop > extent or bounds.start > bounds.stop:
                raise SliceOutOfBoundsError(
                    f"Axis {axis}: range({bounds.start}, {bounds.stop}) "
                    f"exceeds extent {extent}"
                )
            selection.append(slice(bounds.start, bounds.stop))

        # The trailing Ellipsis keeps 0-d results as views, not numpy scalars
        return NumpyArray(self._data[tuple(selection) + (Ellipsis,)])
