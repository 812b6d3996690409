"""Sequence-backed strided array for DazzleArrayLib.

BufferArray is the reference StridedArray: a shape, element strides and a
start offset laid over any indexable Python sequence. Slicing and
transposing produce new BufferArray views over the same buffer, so owned
arrays and views of them go through exactly the same code.
"""

import logging
from typing import Any, Optional, Sequence, Tuple

from ..core.array import StridedArray, SliceOutOfBoundsError

logger = logging.getLogger(__name__)


def contiguous_strides(shape: Sequence[int]) -> Tuple[int, ...]:
    """Compute row-major element strides for a shape.

    Args:
        shape: Extent of every axis

    Returns:
        Strides where the last axis steps by 1
    """
    strides = [0] * len(shape)
    step = 1
    for axis in range(len(shape) - 1, -1, -1):
        strides[axis] = step
        step *= max(shape[axis], 1)
    return tuple(strides)


class BufferArray(StridedArray):
    """Strided view over a flat sequence.

    ``None`` is reserved by ``get`` to mean "out of bounds", so buffers must
    not contain None elements.

    Example:
        >>> array = BufferArray.from_values([1, 2, 3, 4, 5, 6], (2, 3))
        >>> array.strides()
        (3, 1)
        >>> [row.to_list() for row in array.axis_view(0)]
        [[1, 2, 3], [4, 5, 6]]
    """

    def __init__(self,
                 buffer: Sequence[Any],
                 shape: Sequence[int],
                 strides: Optional[Sequence[int]] = None,
                 offset: int = 0):
        """Create a view over ``buffer``.

        Args:
            buffer: Backing storage, shared and never copied
            shape: Extent of every axis
            strides: Element stride of every axis (row-major when None)
            offset: Buffer position of the element at index (0, ..., 0)

        Raises:
            ValueError: If shape and strides disagree in length, an extent is
                negative, or a reachable element falls outside the buffer
        """
        shape = tuple(int(extent) for extent in shape)
        if strides is None:
            strides = contiguous_strides(shape)
        strides = tuple(int(stride) for stride in strides)

        if len(shape) != len(strides):
            raise ValueError(
                f"shape and strides must have the same length, "
                f"got {len(shape)} and {len(strides)}"
            )
        if any(extent < 0 for extent in shape):
            raise ValueError(f"Extents cannot be negative: {shape}")

        self._buffer = buffer
        self._shape = shape
        self._strides = strides
        self._offset = offset

        self._check_bounds()

    @classmethod
    def from_values(cls, values: Sequence[Any], shape: Sequence[int]) -> 'BufferArray':
        """Create a contiguous array owning a copy of ``values``.

        Args:
            values: Elements in row-major order
            shape: Extent of every axis

        Raises:
            ValueError: If the number of values does not match the shape
        """
        buffer = tuple(values)
        expected = 1
        for extent in shape:
            expected *= extent
        if len(buffer) != expected:
            raise ValueError(
                f"Cannot build shape {tuple(shape)} from {len(buffer)} values"
            )
        return cls(buffer, shape)

    def _check_bounds(self) -> None:
        """Verify that every reachable offset lies inside the buffer."""
        if any(extent == 0 for extent in self._shape):
            return

        low = high = self._offset
        for extent, stride in zip(self._shape, self._strides):
            span = (extent - 1) * stride
            if span < 0:
                low += span
            else:
                high += span

        if low < 0 or high >= len(self._buffer):
            raise ValueError(
                f"View shape={self._shape} strides={self._strides} "
                f"offset={self._offset} does not fit a buffer of "
                f"{len(self._buffer)} elements"
            )

    @property
    def buffer(self) -> Sequence[Any]:
        """The shared backing sequence."""
        return self._buffer

    @property
    def offset(self) -> int:
        """Buffer position of the first element."""
        return self._offset

    def shape(self) -> Tuple[int, ...]:
        return self._shape

    def strides(self) -> Tuple[int, ...]:
        return self._strides

    def get(self, indices: Sequence[int]) -> Optional[Any]:
        if len(indices) != len(self._shape):
            return None

        position = self._offset
        for index, extent, stride in zip(indices, self._shape, self._strides):
            if not 0 <= index < extent:
                return None
            position += index * stride
        return self._buffer[position]

    def slice(self, ranges: Sequence[range]) -> 'BufferArray':
        if len(ranges) != len(self._shape):
            raise SliceOutOfBoundsError(
                f"Expected {len(self._shape)} ranges, got {len(ranges)}"
            )

        offset = self._offset
        shape = []
        for axis, (selection, extent, stride) in enumerate(
                zip(ranges, self._shape, self._strides)):
            if selection.step != 1:
                raise SliceOutOfBoundsError(
                    f"Axis {axis}: only unit-step ranges are supported, got {selection}"
                )
            if selection.start < 0 or selection.stop > extent or selection.start > selection.stop:
                raise SliceOutOfBoundsError(
                    f"Axis {axis}: range({selection.start}, {selection.stop}) "
                    f"exceeds extent {extent}"
                )
            shape.append(selection.stop - selection.start)
            if selection.stop > selection.start:
                offset += selection.start * stride

        return BufferArray(self._buffer, shape, self._strides, offset)

    def transpose(self, axes: Optional[Sequence[int]] = None) -> 'BufferArray':
        """Return a view with permuted axes.

        Args:
            axes: New order of the axes (reversed when None)

        Raises:
            ValueError: If axes is not a permutation of ``range(ndim)``
        """
        ndim = len(self._shape)
        if axes is None:
            axes = tuple(range(ndim - 1, -1, -1))
        if sorted(axes) != list(range(ndim)):
            raise ValueError(f"{tuple(axes)} is not a permutation of {ndim} axes")

        logger.debug(f"Transposing view of shape {self._shape} with axes {tuple(axes)}")
        return BufferArray(
            self._buffer,
            [self._shape[axis] for axis in axes],
            [self._strides[axis] for axis in axes],
            self._offset,
        )
