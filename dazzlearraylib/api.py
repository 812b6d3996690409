"""High-level API for DazzleArrayLib.

This module provides simple, functional interfaces for common array
traversals. These functions wrap the iterator classes and the
ExecutionPlan for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .core.array import StridedArray
from .core.axes import AxisIterator
from .core.flat import FlatIterator
from .core.axis_view import AxisViewIterator
from .config import TraversalConfig, TraversalKind, LimitConfig
from .planning import ExecutionPlan


def flat(array: StridedArray) -> FlatIterator:
    """Iterate over every element of ``array`` in row-major order.

    Example:
        >>> array = BufferArray.from_values([1, 2, 3, 4, 5, 6], (2, 3))
        >>> list(flat(array))
        [1, 2, 3, 4, 5, 6]
    """
    return FlatIterator(array)


def axes(shape: Sequence[int], strides: Sequence[int]) -> AxisIterator:
    """Iterate over (extent, stride) pairs, axis 0 first."""
    return AxisIterator(shape, strides)


def axis_view(array: StridedArray, axis: int) -> AxisViewIterator:
    """Iterate over the slabs of ``array`` along ``axis``.

    Raises:
        AxisOutOfBoundsError: If axis is not in ``range(array.ndim)``
    """
    return AxisViewIterator(array, axis)


def traverse_array(
    array: StridedArray,
    kind: Union[TraversalKind, str] = TraversalKind.FLAT,
    axis: Optional[int] = None,
    max_items: Optional[int] = None,
    progress_callback: Optional[Callable[[int, Optional[int]], None]] = None,
    progress_interval: int = 100,
) -> Iterator[Any]:
    """Simple interface for any traversal.

    The plan is validated eagerly, so configuration errors and invalid
    axes surface at call time rather than on first iteration.

    Args:
        array: Array to traverse
        kind: What to yield (flat, axes, axis_view)
        axis: Axis to fix when kind is axis_view
        max_items: Stop after this many items
        progress_callback: Called as ``callback(items_processed, total)``
        progress_interval: Report progress every N items

    Returns:
        Iterator over the traversal's items

    Raises:
        ValueError: If kind is unknown
        TraversalConfigError: If the configuration is invalid
        AxisOutOfBoundsError: If axis is not below ndim

    Example:
        >>> for row in traverse_array(array, kind="axis_view", axis=0):
        ...     print(row.to_list())
    """
    config = TraversalConfig(
        kind=_parse_kind(kind),
        axis=axis,
        limits=LimitConfig(max_items=max_items),
        progress_callback=progress_callback,
        progress_interval=progress_interval,
    )
    plan = ExecutionPlan(config, array)
    return plan.execute()


def collect_flat(array: StridedArray) -> List[Any]:
    """Return all elements of ``array`` in row-major order."""
    return list(flat(array))


def count_elements(array: StridedArray) -> int:
    """Count elements by walking the flat traversal."""
    count = 0
    for _ in flat(array):
        count += 1
    return count


def iter_rows(array: StridedArray) -> AxisViewIterator:
    """Iterate over the slabs along axis 0."""
    return axis_view(array, 0)


def iter_columns(array: StridedArray) -> AxisViewIterator:
    """Iterate over the slabs along axis 1.

    Raises:
        AxisOutOfBoundsError: If the array has fewer than two axes
    """
    return axis_view(array, 1)


def iter_indexed(array: StridedArray) -> Iterator[Tuple[Tuple[int, ...], Any]]:
    """Iterate over (index, element) pairs in row-major order.

    Example:
        >>> list(iter_indexed(BufferArray.from_values([7, 8], (2,))))
        [((0,), 7), ((1,), 8)]
    """
    iterator = flat(array)
    while True:
        index = iterator.indices
        try:
            element = next(iterator)
        except StopIteration:
            return
        yield index, element


def get_array_stats(array: StridedArray) -> Dict[str, Any]:
    """Get layout statistics for an array.

    Returns:
        Dictionary with ndim, shape, strides, size and contiguity
    """
    pairs = list(array.axes())
    return {
        'ndim': len(pairs),
        'shape': tuple(extent for extent, _ in pairs),
        'strides': tuple(stride for _, stride in pairs),
        'size': array.size,
        'contiguous': array.is_contiguous(),
    }


def _parse_kind(kind: Union[TraversalKind, str]) -> TraversalKind:
    """Parse traversal kind from string or enum."""
    if isinstance(kind, TraversalKind):
        return kind

    kind_map = {
        'flat': TraversalKind.FLAT,
        'elements': TraversalKind.FLAT,
        'axes': TraversalKind.AXES,
        'axis_view': TraversalKind.AXIS_VIEW,
        'slabs': TraversalKind.AXIS_VIEW,
    }

    kind_lower = kind.lower()
    if kind_lower in kind_map:
        return kind_map[kind_lower]

    raise ValueError(
        f"Unknown traversal kind: {kind}. "
        f"Choose from: {', '.join(kind_map.keys())}"
    )
