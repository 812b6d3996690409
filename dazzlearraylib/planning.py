"""Execution planning for DazzleArrayLib.

The ExecutionPlan validates that a TraversalConfig can be applied to a
StridedArray and drives the selected traversal.
"""

import logging
from typing import Any, Dict, Iterator, Union

from .core.array import StridedArray
from .core.axes import AxisIterator
from .core.flat import FlatIterator
from .core.axis_view import AxisViewIterator, AxisOutOfBoundsError
from .config import TraversalConfig, TraversalKind

logger = logging.getLogger(__name__)


class TraversalConfigError(ValueError):
    """Raised when a traversal configuration is inconsistent."""
    pass


class ExecutionPlan:
    """Validated execution plan for an array traversal.

    All checks happen in the constructor, before the first item is
    produced: an invalid configuration or an axis outside the array's
    dimensionality never yields a partial traversal.
    """

    def __init__(self, config: TraversalConfig, array: StridedArray):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            array: Array to traverse

        Raises:
            TraversalConfigError: If the configuration is invalid
            AxisOutOfBoundsError: If the configured axis is not below ndim
        """
        self.config = config
        self.array = array

        config_errors = config.validate()
        if config_errors:
            raise TraversalConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        ndim = array.ndim
        if config.kind == TraversalKind.AXIS_VIEW and config.axis >= ndim:
            raise AxisOutOfBoundsError(f"Axis out of bound: {config.axis} >= {ndim}")

        self.items_processed = 0

        logger.debug(
            f"Planned {config.kind.value} traversal over {array!r}"
            + (f" along axis {config.axis}" if config.axis is not None else "")
        )

    def _select_iterator(self) -> Union[FlatIterator, AxisIterator, AxisViewIterator]:
        """Build a fresh iterator for the configured traversal kind."""
        if self.config.kind == TraversalKind.AXES:
            return self.array.axes()
        if self.config.kind == TraversalKind.AXIS_VIEW:
            return self.array.axis_view(self.config.axis)
        return self.array.flat()

    def expected_items(self) -> int:
        """Exact number of items a complete traversal yields.

        Returns:
            Element count for FLAT, ndim for AXES, slab count for AXIS_VIEW
        """
        if self.config.kind == TraversalKind.AXES:
            return self.array.ndim
        if self.config.kind == TraversalKind.AXIS_VIEW:
            return len(self.array.axis_view(self.config.axis))
        return self.array.size

    def _report_progress(self) -> None:
        """Report progress if callback configured."""
        if self.config.progress_callback:
            if self.items_processed % self.config.progress_interval == 0:
                self.config.progress_callback(self.items_processed, self.expected_items())

    def execute(self) -> Iterator[Any]:
        """Execute the traversal plan.

        Yields:
            Elements, (extent, stride) pairs or slab views, depending on
            the configured kind
        """
        self.items_processed = 0

        for item in self._select_iterator():
            self.items_processed += 1

            if not self.config.limits.check_item_limit(self.items_processed):
                self.items_processed -= 1
                logger.debug(f"Item limit of {self.config.limits.max_items} reached")
                break

            self._report_progress()

            yield item

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        iterator_types = {
            TraversalKind.FLAT: FlatIterator,
            TraversalKind.AXES: AxisIterator,
            TraversalKind.AXIS_VIEW: AxisViewIterator,
        }
        return {
            'kind': self.config.kind.value,
            'axis': self.config.axis,
            'shape': tuple(self.array.shape()),
            'strides': tuple(self.array.strides()),
            'ndim': self.array.ndim,
            'max_items': self.config.limits.max_items,
            'array': self.array.__class__.__name__,
            'iterator': iterator_types[self.config.kind].__name__,
        }
